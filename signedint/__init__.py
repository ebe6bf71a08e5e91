from importlib import metadata

from signedint.aliases import (
    I0, I1, I8, I16, I24, I32, I40, I48, I56, I64, I72, I80, I88, I96, I104,
    I112, I120, I128, I136, I144, I152, I160, I168, I176, I184, I192, I200,
    I208, I216, I224, I232, I240, I248, I256,
    U0, U1, U8, U16, U24, U32, U40, U48, U56, U64, U72, U80, U88, U96, U104,
    U112, U120, U128, U136, U144, U152, U160, U168, U176, U184, U192, U200,
    U208, U216, U224, U232, U240, U248, U256,
)
from signedint.exceptions import (
    BigIntConversionError,
    DigitOrBaseError,
    IntegerOverflowError,
    LossyConversionError,
    ParseSignedError,
    SignedIntError,
    SignedOverflowError,
    UintParseError,
)
from signedint.sign import Sign
from signedint.signed import Signed
from signedint.uint import Uint

try:
    __version__ = metadata.version("signedint")
except metadata.PackageNotFoundError:
    # package is not installed
    __version__ = "unknown"

__all__ = [
    "Signed",
    "Uint",
    "Sign",
    "SignedIntError",
    "ParseSignedError",
    "DigitOrBaseError",
    "IntegerOverflowError",
    "LossyConversionError",
    "BigIntConversionError",
    "SignedOverflowError",
    "UintParseError",
    "I0", "I1", "I8", "I16", "I24", "I32", "I40", "I48", "I56", "I64",
    "I72", "I80", "I88", "I96", "I104", "I112", "I120", "I128", "I136",
    "I144", "I152", "I160", "I168", "I176", "I184", "I192", "I200", "I208",
    "I216", "I224", "I232", "I240", "I248", "I256",
    "U0", "U1", "U8", "U16", "U24", "U32", "U40", "U48", "U56", "U64",
    "U72", "U80", "U88", "U96", "U104", "U112", "U120", "U128", "U136",
    "U144", "U152", "U160", "U168", "U176", "U184", "U192", "U200", "U208",
    "U216", "U224", "U232", "U240", "U248", "U256",
]
