"""
Signed fixed-width integers
"""
import logging
import operator
import re
from typing import Callable, Dict, Iterable, Optional, Tuple, Type, Union

from .exceptions import (
    DigitOrBaseError,
    IntegerOverflowError,
    LossyConversionError,
    ParseSignedError,
    SignedOverflowError,
    UintOverflowError,
    UintParseError,
)
from .sign import Sign
from .uint import LIMB_BITS, Uint, _exponent, _shift_amount

logger = logging.getLogger(__name__)

#: Hex digit strings longer than this are rejected before parsing,
#: unless the type is wider than 256 bits
MAX_HEX_DIGITS = 64

_FORMAT_SPEC = re.compile(r"(?P<plus>\+)?(?P<alternate>#)?(?P<type>[dxX]?)\Z")

TOperand = Union["Signed", int]


def _checked(operation: Callable, *args):
    try:
        value, overflow = operation(*args)
    except ZeroDivisionError:
        return None
    return None if overflow else value


def _saturating(operation: Callable, bound: Callable, *args):
    value, overflow = operation(*args)
    if overflow:
        return bound(*args)
    return value


def _strict(operation: Callable, *args):
    value, overflow = operation(*args)
    if overflow:
        name = operation.__name__[len("overflowing_"):]
        raise SignedOverflowError(name, operation.__self__.BITS)
    return value


class Signed:
    """Signed integer of ``BITS`` bits in two's complement.

    The value is kept in a single :class:`~signedint.uint.Uint` of the same
    width whose most significant bit is the sign bit. Specialise by
    subscripting, or use the aliases in :mod:`signedint.aliases`::

        >>> from signedint import I256
        >>> I256(-3) * 7
        I256(-21)
        >>> I256.from_str("-0x138f")
        I256(-5007)
        >>> I256.from_str("1_000_000")
        I256(1000000)

    :meth:`from_str` tries decimal first and then hexadecimal, so an
    unprefixed string such as ``"1113"`` is read as decimal. Always write
    the ``0x`` prefix, after the sign if there is one.

    Every arithmetic operation comes in five forms:

    +-----------------------+----------------------------------------------+
    | Method                | On overflow                                  |
    +=======================+==============================================+
    | ``checked_<op>``      | returns ``None``                             |
    +-----------------------+----------------------------------------------+
    | ``overflowing_<op>``  | returns ``(wrapped result, True)``           |
    +-----------------------+----------------------------------------------+
    | ``wrapping_<op>``     | returns the wrapped result                   |
    +-----------------------+----------------------------------------------+
    | ``saturating_<op>``   | returns :attr:`MAX` or :attr:`MIN`           |
    +-----------------------+----------------------------------------------+
    | ``<op>`` / operator   | raises :class:`SignedOverflowError`          |
    +-----------------------+----------------------------------------------+

    Division by zero raises :class:`ZeroDivisionError` in all forms except
    ``checked_<op>``, which returns ``None``.
    """

    __slots__ = ("_raw",)

    #: Number of bits, None for the unspecialised class
    BITS: Optional[int] = None
    #: The unsigned word type holding the bits
    Word: Optional[Type[Uint]] = None
    #: Sign bit mask within the most significant limb
    SIGN_BIT = 0

    _classes: Dict[int, Type["Signed"]] = {}

    def __class_getitem__(cls, bits: int) -> Type["Signed"]:
        if cls.BITS is not None:
            raise TypeError("%s already has a width" % cls.__name__)
        bits = operator.index(bits)
        try:
            return Signed._classes[bits]
        except KeyError:
            pass
        word = Uint[bits]
        name = "I%d" % bits
        new = type(name, (cls,), {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "BITS": bits,
            "LIMBS": word.LIMBS,
            "BYTES": word.BYTES,
            "Word": word,
            "SIGN_BIT": 1 << ((bits - 1) % LIMB_BITS) if bits else 0,
        })
        top = 1 << (bits - 1) if bits else 0
        new.ZERO = new._new(word.ZERO)
        new.ONE = new._new(word.wrapping_from(1))
        new.MINUS_ONE = new._new(word.MAX)
        new.MIN = new._new(word.wrapping_from(top))
        new.MAX = new._new(word.wrapping_from(max(top - 1, 0)))
        Signed._classes[bits] = new
        return new

    def __new__(cls, value: Union[int, str, "Signed", Uint] = 0):
        if cls.BITS is None:
            raise TypeError("Signed needs a width, use Signed[BITS]")
        if isinstance(value, str):
            return cls.from_str(value)
        return cls.try_from(value)

    @classmethod
    def _new(cls, raw: Uint) -> "Signed":
        obj = object.__new__(cls)
        obj._raw = raw
        return obj

    # Conversion

    @classmethod
    def try_from(cls, value) -> "Signed":
        """Convert an integer of any type and width.

        Accepts :class:`int`, :class:`bool`, :class:`Uint` and
        :class:`Signed` of any width.

        :raises LossyConversionError: If the value does not fit
        """
        if type(value) is cls:
            return value
        try:
            number = operator.index(value)
        except TypeError:
            raise TypeError("Can not convert %r to %s" % (value, cls.__name__))
        if cls.BITS == 0:
            low = high = 0
        else:
            high = (1 << (cls.BITS - 1)) - 1
            low = -high - 1
        if not low <= number <= high:
            raise LossyConversionError()
        return cls._new(cls.Word.wrapping_from(number))

    def try_into_int(self, bits: int, signed: bool = True) -> int:
        """Convert to a Python integer that must fit a native integer type.

        :param bits: Width of the native type, e.g. 64
        :param signed: True for a signed native type

        :raises LossyConversionError: If the value is out of range
        """
        value = int(self)
        if signed:
            high = (1 << (bits - 1)) - 1 if bits else 0
            low = -high - 1 if bits else 0
        else:
            low, high = 0, (1 << bits) - 1
        if not low <= value <= high:
            raise LossyConversionError()
        return value

    @classmethod
    def from_raw(cls, raw: Uint) -> "Signed":
        """Reinterpret an unsigned word as two's complement.

        Words with the top bit set become negative.
        """
        return cls._new(cls.Word.try_from(raw))

    def into_raw(self) -> Uint:
        return self._raw

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "Signed":
        return cls._new(cls.Word.from_limbs(limbs))

    @property
    def limbs(self) -> Tuple[int, ...]:
        """64-bit limbs of the bit pattern, least significant first."""
        return self._raw.limbs

    def __int__(self):
        if self.is_negative():
            return int(self._raw) - (1 << self.BITS)
        return int(self._raw)

    __index__ = __int__

    def __bool__(self):
        return not self.is_zero()

    # Sign and magnitude

    def sign(self) -> Sign:
        # Bits above the sign bit are always zero, so comparing the top limb
        # against the mask is enough
        limbs = self._raw.limbs
        if limbs and limbs[-1] >= self.SIGN_BIT:
            return Sign.NEGATIVE
        return Sign.POSITIVE

    def is_zero(self) -> bool:
        return self._raw == self.Word.ZERO

    def is_positive(self) -> bool:
        """True if greater than zero."""
        return not self.is_zero() and self.sign() is Sign.POSITIVE

    def is_negative(self) -> bool:
        """True if less than zero."""
        return self.sign() is Sign.NEGATIVE

    def is_odd(self) -> bool:
        if not self.BITS:
            return False
        return self._raw.limbs[0] % 2 == 1

    @classmethod
    def _twos_complement(cls, word: Uint) -> Uint:
        return (~word).wrapping_add(cls.Word.wrapping_from(1))

    def into_sign_and_abs(self) -> Tuple[Sign, Uint]:
        """Split into a sign and an unsigned magnitude."""
        sign = self.sign()
        if sign is Sign.POSITIVE:
            return sign, self._raw
        return sign, self._twos_complement(self._raw)

    def unsigned_abs(self) -> Uint:
        """Absolute value as an unsigned word. Never overflows."""
        return self.into_sign_and_abs()[1]

    #: The magnitude of a negative number is its two's complement
    twos_complement = unsigned_abs

    @classmethod
    def overflowing_from_sign_and_abs(cls, sign: Sign, abs: Uint) -> Tuple["Signed", bool]:
        """Combine a sign and a magnitude.

        :returns:
            The value, and True if the magnitude did not fit. A zero
            magnitude never overflows, whatever the sign.
        """
        abs = cls.Word.try_from(abs)
        if sign is Sign.POSITIVE:
            value = cls._new(abs)
        else:
            value = cls._new(cls._twos_complement(abs))
        return value, value.sign() is not sign and not value.is_zero()

    @classmethod
    def checked_from_sign_and_abs(cls, sign: Sign, abs: Uint) -> Optional["Signed"]:
        value, overflow = cls.overflowing_from_sign_and_abs(sign, abs)
        return None if overflow else value

    def _extreme(self, sign: Sign) -> "Signed":
        return self.MAX if sign is Sign.POSITIVE else self.MIN

    # Bits, bytes and limbs

    def count_ones(self) -> int:
        return self._raw.count_ones()

    def count_zeros(self) -> int:
        return self._raw.count_zeros()

    def leading_zeros(self) -> int:
        return self._raw.leading_zeros()

    def leading_ones(self) -> int:
        return self._raw.leading_ones()

    def trailing_zeros(self) -> int:
        return self._raw.trailing_zeros()

    def trailing_ones(self) -> int:
        return self._raw.trailing_ones()

    def bit(self, index: int) -> bool:
        """Test a single bit.

        :raises IndexError: If index is not below ``BITS``
        """
        return self._raw.bit(index)

    def byte(self, index: int) -> int:
        """Get one byte, counting from the most significant byte.

        :raises IndexError: If index is not below ``BYTES``
        """
        if not 0 <= index < self.BYTES:
            raise IndexError("Byte %d out of range for %d bytes" % (index, self.BYTES))
        return self._raw.to_be_bytes()[index]

    def bits(self) -> int:
        """Least number of bits needed to represent the number."""
        unsigned_bits = self.unsigned_abs().bit_len()
        # Zero and negative powers of two (0b11..1100..00) need no extra
        # bit for the sign; -128 fits in 8 bits while 128 needs 9
        if self.count_zeros() == self.trailing_zeros():
            return unsigned_bits
        return unsigned_bits + 1

    def to_be_bytes(self) -> bytes:
        """Two's complement bytes, big endian, ``BYTES`` long."""
        return self._raw.to_be_bytes()

    def to_le_bytes(self) -> bytes:
        """Two's complement bytes, little endian, ``BYTES`` long."""
        return self._raw.to_le_bytes()

    @classmethod
    def from_be_bytes(cls, data: bytes) -> "Signed":
        return cls._new(cls.Word.from_be_bytes(data))

    @classmethod
    def from_le_bytes(cls, data: bytes) -> "Signed":
        return cls._new(cls.Word.from_le_bytes(data))

    @classmethod
    def try_from_be_slice(cls, data: bytes) -> Optional["Signed"]:
        raw = cls.Word.try_from_be_slice(data)
        if raw is None:
            return None
        return cls._new(raw)

    @classmethod
    def try_from_le_slice(cls, data: bytes) -> Optional["Signed"]:
        raw = cls.Word.try_from_le_slice(data)
        if raw is None:
            return None
        return cls._new(raw)

    # Text

    @staticmethod
    def _split_sign(text: str) -> Tuple[Sign, str]:
        if text[:1] == "+":
            return Sign.POSITIVE, text[1:]
        if text[:1] == "-":
            return Sign.NEGATIVE, text[1:]
        return Sign.POSITIVE, text

    @classmethod
    def _from_digits(cls, sign: Sign, digits: str, radix: int) -> "Signed":
        try:
            abs = cls.Word.from_str_radix(digits, radix)
        except UintOverflowError as e:
            raise IntegerOverflowError() from e
        except UintParseError as e:
            raise DigitOrBaseError(e) from e
        value = cls.checked_from_sign_and_abs(sign, abs)
        if value is None:
            raise IntegerOverflowError()
        return value

    @classmethod
    def from_dec_str(cls, text: str) -> "Signed":
        """Parse ``[+-]?[0-9_]+``.

        :raises DigitOrBaseError: On malformed input
        :raises IntegerOverflowError: If the number does not fit
        """
        sign, digits = cls._split_sign(text)
        return cls._from_digits(sign, digits, 10)

    @classmethod
    def from_hex_str(cls, text: str) -> "Signed":
        """Parse ``[+-]?(0x)?[0-9a-fA-F_]+``. The sign comes before the prefix.

        :raises DigitOrBaseError: On malformed input
        :raises IntegerOverflowError: If the number does not fit
        """
        sign, digits = cls._split_sign(text)
        if digits.startswith("0x"):
            digits = digits[2:]
        if len(digits) > max(MAX_HEX_DIGITS, (cls.BITS + 3) // 4):
            raise IntegerOverflowError()
        return cls._from_digits(sign, digits, 16)

    @classmethod
    def from_str(cls, text: str) -> "Signed":
        """Parse a decimal string, or a hex string if that fails."""
        try:
            return cls.from_dec_str(text)
        except ParseSignedError as e:
            logger.debug("%r is not a decimal %s (%s), trying hex",
                         text, cls.__name__, e)
        return cls.from_hex_str(text)

    def to_dec_string(self) -> str:
        sign, abs = self.into_sign_and_abs()
        return "%s%s" % (sign, abs)

    def to_hex_string(self) -> str:
        sign, abs = self.into_sign_and_abs()
        return "%s0x%s" % (sign, format(abs, "x"))

    def __str__(self):
        return self.to_dec_string()

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.to_dec_string())

    def __format__(self, format_spec: str) -> str:
        match = _FORMAT_SPEC.match(format_spec)
        if match is None:
            raise ValueError("Invalid format specifier %r for %s" % (
                format_spec, type(self).__name__))
        sign, abs = self.into_sign_and_abs()
        text = format(sign, "+" if match.group("plus") else "")
        kind = match.group("type")
        if kind == "x":
            text += format(abs, "#x" if match.group("alternate") else "x")
        elif kind == "X":
            # The word has no upper case hex rendering; the prefix stays "0x"
            digits = format(abs, "x").upper()
            text += "0x" + digits if match.group("alternate") else digits
        else:
            text += str(abs)
        return text

    # Comparison

    def _ordering_key(self) -> Uint:
        # Flipping the sign bit maps MIN..MAX onto 0..2**BITS-1 in order
        return self._raw ^ self.MIN._raw

    def _compare(self, other) -> Optional[int]:
        if type(other) is type(self):
            a, b = self._ordering_key(), other._ordering_key()
        elif isinstance(other, int):
            a, b = int(self), other
        else:
            return None
        return (a > b) - (a < b)

    def __eq__(self, other):
        if type(other) is type(self):
            return self._raw == other._raw
        if isinstance(other, int):
            return int(self) == other
        return NotImplemented

    def __lt__(self, other):
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other):
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other):
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other):
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    def __hash__(self):
        return hash(int(self))

    # Arithmetic

    def _coerce(self, other) -> Optional["Signed"]:
        if type(other) is type(self):
            return other
        if isinstance(other, int):
            return self.try_from(other)
        return None

    def _operand(self, other) -> "Signed":
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError("Unsupported operand %r for %s" % (other, type(self).__name__))
        return rhs

    def overflowing_add(self, rhs: TOperand) -> Tuple["Signed", bool]:
        rhs = self._operand(rhs)
        result = self._new(self._raw.wrapping_add(rhs._raw))
        sign = self.sign()
        # Overflow iff both operands have the same sign and the result has not
        return result, sign is rhs.sign() and result.sign() is not sign

    def checked_add(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_add, rhs)

    def wrapping_add(self, rhs: TOperand) -> "Signed":
        return self.overflowing_add(rhs)[0]

    def saturating_add(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_add, self._same_sign_bound, rhs)

    def add(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_add, rhs)

    def overflowing_sub(self, rhs: TOperand) -> Tuple["Signed", bool]:
        rhs = self._operand(rhs)
        result = self._new(self._raw.wrapping_sub(rhs._raw))
        sign = self.sign()
        return result, sign is not rhs.sign() and result.sign() is not sign

    def checked_sub(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_sub, rhs)

    def wrapping_sub(self, rhs: TOperand) -> "Signed":
        return self.overflowing_sub(rhs)[0]

    def saturating_sub(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_sub, self._same_sign_bound, rhs)

    def sub(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_sub, rhs)

    def _same_sign_bound(self, rhs=None) -> "Signed":
        # Sums and differences can only leave the range in the direction
        # of the left operand's sign
        return self._extreme(self.sign())

    def _product_bound(self, rhs: TOperand) -> "Signed":
        return self._extreme(self.sign() * self._operand(rhs).sign())

    def _zero_bound(self, rhs=None) -> "Signed":
        return self.ZERO

    def overflowing_mul(self, rhs: TOperand) -> Tuple["Signed", bool]:
        rhs = self._operand(rhs)
        if self.is_zero() or rhs.is_zero():
            return self.ZERO, False
        lhs_sign, lhs_abs = self.into_sign_and_abs()
        rhs_sign, rhs_abs = rhs.into_sign_and_abs()
        magnitude, overflow = lhs_abs.overflowing_mul(rhs_abs)
        # The magnitude of MIN has no positive counterpart, which the sign
        # check catches
        result, mismatch = self.overflowing_from_sign_and_abs(lhs_sign * rhs_sign, magnitude)
        return result, overflow or mismatch

    def checked_mul(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_mul, rhs)

    def wrapping_mul(self, rhs: TOperand) -> "Signed":
        return self.overflowing_mul(rhs)[0]

    def saturating_mul(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_mul, self._product_bound, rhs)

    def mul(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_mul, rhs)

    def _divisor(self, rhs: TOperand) -> "Signed":
        rhs = self._operand(rhs)
        if rhs.is_zero():
            raise ZeroDivisionError("attempt to divide by zero")
        return rhs

    def _is_min_by_minus_one(self, rhs: "Signed") -> bool:
        return self._raw == self.MIN._raw and rhs._raw == self.MINUS_ONE._raw

    def overflowing_div(self, rhs: TOperand) -> Tuple["Signed", bool]:
        """Division rounding towards zero.

        :raises ZeroDivisionError: If rhs is zero
        """
        rhs = self._divisor(rhs)
        if self._is_min_by_minus_one(rhs):
            return self.MIN, True
        lhs_sign, lhs_abs = self.into_sign_and_abs()
        rhs_sign, rhs_abs = rhs.into_sign_and_abs()
        result, _ = self.overflowing_from_sign_and_abs(lhs_sign * rhs_sign, lhs_abs // rhs_abs)
        return result, False

    def checked_div(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_div, rhs)

    def wrapping_div(self, rhs: TOperand) -> "Signed":
        return self.overflowing_div(rhs)[0]

    def saturating_div(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_div, self._product_bound, rhs)

    def div(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_div, rhs)

    def overflowing_rem(self, rhs: TOperand) -> Tuple["Signed", bool]:
        """Remainder of :meth:`div`, with the sign of the dividend.

        :raises ZeroDivisionError: If rhs is zero
        """
        rhs = self._divisor(rhs)
        if self._is_min_by_minus_one(rhs):
            return self.ZERO, True
        lhs_sign, lhs_abs = self.into_sign_and_abs()
        result, _ = self.overflowing_from_sign_and_abs(lhs_sign, lhs_abs % rhs.unsigned_abs())
        return result, False

    def checked_rem(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_rem, rhs)

    def wrapping_rem(self, rhs: TOperand) -> "Signed":
        return self.overflowing_rem(rhs)[0]

    def saturating_rem(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_rem, self._zero_bound, rhs)

    def rem(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_rem, rhs)

    def overflowing_div_euclid(self, rhs: TOperand) -> Tuple["Signed", bool]:
        """Euclidean division, so that ``rem_euclid`` is never negative.

        :raises ZeroDivisionError: If rhs is zero
        """
        rhs = self._divisor(rhs)
        quotient, overflow = self.overflowing_div(rhs)
        if overflow:
            return quotient, True
        if self.wrapping_rem(rhs).is_negative():
            if rhs.is_positive():
                quotient = quotient.wrapping_sub(self.ONE)
            else:
                quotient = quotient.wrapping_add(self.ONE)
        return quotient, False

    def checked_div_euclid(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_div_euclid, rhs)

    def wrapping_div_euclid(self, rhs: TOperand) -> "Signed":
        return self.overflowing_div_euclid(rhs)[0]

    def saturating_div_euclid(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_div_euclid, self._product_bound, rhs)

    def div_euclid(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_div_euclid, rhs)

    def overflowing_rem_euclid(self, rhs: TOperand) -> Tuple["Signed", bool]:
        """Remainder of :meth:`div_euclid`, always in ``0 <= r < abs(rhs)``.

        :raises ZeroDivisionError: If rhs is zero
        """
        rhs = self._divisor(rhs)
        remainder, overflow = self.overflowing_rem(rhs)
        if overflow:
            return remainder, True
        if remainder.is_negative():
            if rhs.is_negative():
                remainder = remainder.wrapping_sub(rhs)
            else:
                remainder = remainder.wrapping_add(rhs)
        return remainder, False

    def checked_rem_euclid(self, rhs: TOperand) -> Optional["Signed"]:
        return _checked(self.overflowing_rem_euclid, rhs)

    def wrapping_rem_euclid(self, rhs: TOperand) -> "Signed":
        return self.overflowing_rem_euclid(rhs)[0]

    def saturating_rem_euclid(self, rhs: TOperand) -> "Signed":
        return _saturating(self.overflowing_rem_euclid, self._zero_bound, rhs)

    def rem_euclid(self, rhs: TOperand) -> "Signed":
        return _strict(self.overflowing_rem_euclid, rhs)

    def _pow_sign(self, exp: int) -> Sign:
        if self.is_negative() and exp % 2:
            return Sign.NEGATIVE
        return Sign.POSITIVE

    def overflowing_pow(self, exp: Union[int, Uint]) -> Tuple["Signed", bool]:
        """Raise to a non-negative power.

        ``x ** 0`` is :attr:`ONE`, which overflows for one-bit types.
        """
        exp = _exponent(exp)
        if not self.BITS:
            return self, False
        magnitude, overflow = self.unsigned_abs().overflowing_pow(exp)
        result, mismatch = self.overflowing_from_sign_and_abs(self._pow_sign(exp), magnitude)
        return result, overflow or mismatch

    def checked_pow(self, exp: Union[int, Uint]) -> Optional["Signed"]:
        return _checked(self.overflowing_pow, exp)

    def wrapping_pow(self, exp: Union[int, Uint]) -> "Signed":
        return self.overflowing_pow(exp)[0]

    def saturating_pow(self, exp: Union[int, Uint]) -> "Signed":
        """Raise to a power, clamping to :attr:`MIN` or :attr:`MAX`.

        Stops at the first intermediate product that does not fit.
        """
        exp = _exponent(exp)
        if not self.BITS:
            return self
        sign = self._pow_sign(exp)
        magnitude = self.unsigned_abs().checked_pow(exp)
        if magnitude is not None:
            value = self.checked_from_sign_and_abs(sign, magnitude)
            if value is not None:
                return value
        return self._extreme(sign)

    def pow(self, exp: Union[int, Uint]) -> "Signed":
        return _strict(self.overflowing_pow, exp)

    @classmethod
    def exp10(cls, n: int) -> "Signed":
        """Ten to the power of n.

        :raises SignedOverflowError: If the result does not fit
        """
        n = _exponent(n)
        word = cls.Word
        if 10 <= word.MASK:
            magnitude = word.wrapping_from(10).checked_pow(n)
        else:
            # Ten does not fit in the word, only 10 ** 0 can
            magnitude = None if n or not word.MASK else word.wrapping_from(1)
        value = None
        if magnitude is not None:
            value = cls.checked_from_sign_and_abs(Sign.POSITIVE, magnitude)
        if value is None:
            raise SignedOverflowError("exp10", cls.BITS)
        return value

    def overflowing_neg(self) -> Tuple["Signed", bool]:
        return self.ZERO.overflowing_sub(self)

    def checked_neg(self) -> Optional["Signed"]:
        return _checked(self.overflowing_neg)

    def wrapping_neg(self) -> "Signed":
        return self.overflowing_neg()[0]

    def saturating_neg(self) -> "Signed":
        return _saturating(self.overflowing_neg, lambda: self.MAX)

    def neg(self) -> "Signed":
        return _strict(self.overflowing_neg)

    def overflowing_abs(self) -> Tuple["Signed", bool]:
        """Absolute value. MIN stays MIN, with the overflow flag set."""
        if self.is_negative():
            return self.overflowing_neg()
        return self, False

    def checked_abs(self) -> Optional["Signed"]:
        return _checked(self.overflowing_abs)

    def wrapping_abs(self) -> "Signed":
        return self.overflowing_abs()[0]

    def saturating_abs(self) -> "Signed":
        return _saturating(self.overflowing_abs, lambda: self.MAX)

    def abs(self) -> "Signed":
        return _strict(self.overflowing_abs)

    @classmethod
    def sum(cls, values: Iterable[TOperand]) -> "Signed":
        """Add up values, raising on overflow."""
        total = cls.ZERO
        for value in values:
            total = total.add(value)
        return total

    @classmethod
    def product(cls, values: Iterable[TOperand]) -> "Signed":
        """Multiply values, raising on overflow."""
        total = cls.ONE
        for value in values:
            total = total.mul(value)
        return total

    # Shifts

    def overflowing_shl(self, rhs: int) -> Tuple["Signed", bool]:
        """Logical shift left, flagging any set bit that is shifted out."""
        raw, overflow = self._raw.overflowing_shl(rhs)
        return self._new(raw), overflow

    def checked_shl(self, rhs: int) -> Optional["Signed"]:
        return _checked(self.overflowing_shl, rhs)

    def wrapping_shl(self, rhs: int) -> "Signed":
        return self.overflowing_shl(rhs)[0]

    def overflowing_shr(self, rhs: int) -> Tuple["Signed", bool]:
        """Logical shift right.

        The flag is set if a set bit is shifted out, or if the value is
        negative and the zero fill changes it from the arithmetic shift.
        This fills with zeros, use :meth:`asr` to keep the sign.
        """
        rhs = _shift_amount(rhs)
        raw, overflow = self._raw.overflowing_shr(rhs)
        if self.is_negative() and rhs > 0:
            overflow = True
        return self._new(raw), overflow

    def checked_shr(self, rhs: int) -> Optional["Signed"]:
        return _checked(self.overflowing_shr, rhs)

    def wrapping_shr(self, rhs: int) -> "Signed":
        return self.overflowing_shr(rhs)[0]

    def asr(self, rhs: int) -> "Signed":
        """Arithmetic shift right, filling with the sign bit."""
        rhs = _shift_amount(rhs)
        if rhs == 0 or not self.BITS:
            return self
        if not self.is_negative():
            return self.wrapping_shr(rhs)
        if rhs >= self.BITS - 1:
            return self.MINUS_ONE
        fill = self.Word.MAX.wrapping_shl(self.BITS - rhs)
        return self._new(self._raw.wrapping_shr(rhs) | fill)

    def asl(self, rhs: int) -> Optional["Signed"]:
        """Arithmetic shift left, or None if the result does not fit."""
        rhs = _shift_amount(rhs)
        if rhs == 0 or not self.BITS:
            return self
        if rhs >= self.BITS:
            return self if self.is_zero() else None
        result = self.wrapping_shl(rhs)
        if result.asr(rhs) != self:
            return None
        return result

    # Operators

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        # Fixed-width semantics: rounds towards zero, not towards -inf
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __mod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.rem(other)

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.rem(self)

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other), self.rem(other)

    def __pow__(self, exp, modulo=None):
        if modulo is not None:
            return NotImplemented
        return self.pow(exp)

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __lshift__(self, rhs):
        return self.wrapping_shl(rhs)

    def __rshift__(self, rhs):
        return self.wrapping_shr(rhs)

    def __and__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._new(self._raw & other._raw)

    __rand__ = __and__

    def __or__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._new(self._raw | other._raw)

    __ror__ = __or__

    def __xor__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._new(self._raw ^ other._raw)

    __rxor__ = __xor__

    def __invert__(self):
        return self._new(~self._raw)

    def __reduce__(self):
        # The decimal string is the serialized form
        return _restore, (self.BITS, self.to_dec_string())


def _restore(bits: int, text: str) -> Signed:
    return Signed[bits].from_dec_str(text)
