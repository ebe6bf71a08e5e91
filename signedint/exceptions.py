class SignedIntError(Exception):
    pass


class UintError(SignedIntError):
    pass


class UintParseError(UintError, ValueError):
    """Raised if a digit string can not be read as an unsigned word"""
    pass


class InvalidDigitError(UintParseError):
    """Raised if a character is not a digit of the requested base."""

    def __init__(self, char: str, position: int, base: int):
        #: Offending character
        self.char = char
        #: Index of the character in the digit string (underscores included)
        self.position = position
        #: Radix the string was parsed with
        self.base = base

    @property
    def digit(self):
        """Value of the character as a base 36 digit, or None."""
        if self.char.isascii() and self.char.isalnum():
            return int(self.char, 36)
        return None

    def __str__(self):
        return "Invalid digit %r at position %d for base %d" % (
            self.char, self.position, self.base)


class EmptyDigitsError(UintParseError):
    """Raised if there are no digits to parse."""

    def __str__(self):
        return "No digits to parse"


class UintOverflowError(UintParseError):
    """Raised if the parsed value does not fit in the word."""

    def __init__(self, bits: int):
        self.bits = bits

    def __str__(self):
        return "Value does not fit in %d bits" % self.bits


class UintConversionError(UintError, ValueError):
    """Raised if a value can not be represented as an unsigned word"""
    pass


class ParseSignedError(SignedIntError, ValueError):
    pass


class DigitOrBaseError(ParseSignedError):
    """Malformed digit string. The word parser error is kept in ``error``."""

    def __init__(self, error: UintParseError):
        #: The underlying :class:`UintParseError`
        self.error = error

    def __str__(self):
        return str(self.error)


class IntegerOverflowError(ParseSignedError):
    """Raised if the parsed number does not fit in the signed type."""

    def __str__(self):
        return "Number does not fit in the integer size"


class LossyConversionError(SignedIntError, ValueError):
    """Raised if a conversion between integer types would not preserve the value"""

    def __str__(self):
        return "Conversion would lose information"


#: Name used by older releases
BigIntConversionError = LossyConversionError


class SignedOverflowError(SignedIntError, OverflowError):
    """Raised by the strict arithmetic forms when the result does not fit."""

    def __init__(self, operation: str, bits: int):
        #: Name of the operation, e.g. ``"add"``
        self.operation = operation
        #: Width of the operands
        self.bits = bits

    def __str__(self):
        return "attempt to %s with overflow (%d bits)" % (self.operation, self.bits)
