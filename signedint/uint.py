"""
Fixed-width unsigned words
"""
import operator
from typing import Dict, Iterable, Optional, Tuple, Type

from .exceptions import (
    EmptyDigitsError,
    InvalidDigitError,
    UintConversionError,
    UintOverflowError,
)

LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1


def _digit_value(char: str) -> Optional[int]:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return None


def _shift_amount(rhs) -> int:
    rhs = operator.index(rhs)
    if rhs < 0:
        raise ValueError("negative shift count")
    return rhs


def _exponent(exp) -> int:
    exp = operator.index(exp)
    if exp < 0:
        raise ValueError("negative exponent")
    return exp


class Uint:
    """Unsigned integer of ``BITS`` bits.

    The width is chosen by subscripting, which returns a specialised class
    that is created once per width::

        U256 = Uint[256]
        U256(42) + U256(1)

    Values are stored as 64-bit limbs, least significant first (see
    :attr:`limbs`). The ``+``, ``-``, ``*`` and ``**`` operators wrap around;
    use the ``overflowing_*`` and ``checked_*`` methods to detect overflow.
    """

    __slots__ = ("_value",)

    #: Number of bits, None for the unspecialised class
    BITS: Optional[int] = None
    LIMBS = 0
    BYTES = 0
    MASK = 0

    _classes: Dict[int, Type["Uint"]] = {}

    def __class_getitem__(cls, bits: int) -> Type["Uint"]:
        if cls.BITS is not None:
            raise TypeError("%s already has a width" % cls.__name__)
        bits = operator.index(bits)
        if bits < 0:
            raise ValueError("Width must not be negative")
        try:
            return Uint._classes[bits]
        except KeyError:
            pass
        name = "U%d" % bits
        new = type(name, (cls,), {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "BITS": bits,
            "LIMBS": (bits + LIMB_BITS - 1) // LIMB_BITS,
            "BYTES": (bits + 7) // 8,
            "MASK": (1 << bits) - 1,
        })
        new.ZERO = new._new(0)
        new.MAX = new._new(new.MASK)
        Uint._classes[bits] = new
        return new

    def __new__(cls, value=0):
        if cls.BITS is None:
            raise TypeError("Uint needs a width, use Uint[BITS]")
        return cls.try_from(value)

    @classmethod
    def _new(cls, value: int) -> "Uint":
        obj = object.__new__(cls)
        obj._value = value
        return obj

    @classmethod
    def try_from(cls, value) -> "Uint":
        """Convert any integer-like value, failing if it does not fit.

        :raises UintConversionError:
            If the value is negative or wider than ``BITS`` bits.
        """
        if type(value) is cls:
            return value
        try:
            number = operator.index(value)
        except TypeError:
            raise TypeError("Can not convert %r to %s" % (value, cls.__name__))
        if number < 0 or number > cls.MASK:
            raise UintConversionError(
                "%d does not fit in %s" % (number, cls.__name__))
        return cls._new(number)

    @classmethod
    def wrapping_from(cls, value) -> "Uint":
        """Convert a Python integer keeping only the low ``BITS`` bits."""
        return cls._new(operator.index(value) & cls.MASK)

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "Uint":
        limbs = tuple(limbs)
        if len(limbs) != cls.LIMBS:
            raise ValueError("Expected %d limbs, got %d" % (cls.LIMBS, len(limbs)))
        value = 0
        for i, limb in enumerate(limbs):
            if not 0 <= limb <= LIMB_MASK:
                raise ValueError("Limb %d is not a 64-bit unsigned value" % i)
            value |= limb << (LIMB_BITS * i)
        if value > cls.MASK:
            raise ValueError("Limbs have bits set above bit %d" % cls.BITS)
        return cls._new(value)

    @property
    def limbs(self) -> Tuple[int, ...]:
        """64-bit limbs, least significant first."""
        value = self._value
        return tuple((value >> (LIMB_BITS * i)) & LIMB_MASK
                     for i in range(self.LIMBS))

    # Radix conversion

    @classmethod
    def from_str_radix(cls, text: str, radix: int) -> "Uint":
        """Parse a string of digits in the given radix.

        Underscores are ignored. No sign or prefix is accepted.

        :param text: Digits to parse
        :param radix: Base between 2 and 36

        :raises InvalidDigitError: On a character that is not a digit
        :raises EmptyDigitsError: If there are no digits at all
        :raises UintOverflowError: If the value does not fit
        """
        if not 2 <= radix <= 36:
            raise ValueError("Radix must be between 2 and 36")
        value = 0
        digits = 0
        for position, char in enumerate(text):
            if char == "_":
                continue
            digit = _digit_value(char)
            if digit is None or digit >= radix:
                raise InvalidDigitError(char, position, radix)
            value = value * radix + digit
            if value > cls.MASK:
                raise UintOverflowError(cls.BITS)
            digits += 1
        if not digits:
            raise EmptyDigitsError()
        return cls._new(value)

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return "%s(%d)" % (type(self).__name__, self._value)

    def __format__(self, format_spec: str) -> str:
        # Only lower case hex, binary and decimal are provided
        if format_spec in ("", "d"):
            return str(self._value)
        if format_spec in ("x", "#x", "b", "#b"):
            return format(self._value, format_spec)
        raise ValueError("Invalid format specifier %r for %s" % (
            format_spec, type(self).__name__))

    # Byte conversion

    def to_be_bytes(self) -> bytes:
        return self._value.to_bytes(self.BYTES, "big")

    def to_le_bytes(self) -> bytes:
        return self._value.to_bytes(self.BYTES, "little")

    @classmethod
    def _from_bytes(cls, data: bytes, byteorder: str) -> "Uint":
        if len(data) != cls.BYTES:
            raise ValueError("Expected %d bytes, got %d" % (cls.BYTES, len(data)))
        value = int.from_bytes(data, byteorder)
        if value > cls.MASK:
            raise ValueError("Value does not fit in %d bits" % cls.BITS)
        return cls._new(value)

    @classmethod
    def from_be_bytes(cls, data: bytes) -> "Uint":
        return cls._from_bytes(data, "big")

    @classmethod
    def from_le_bytes(cls, data: bytes) -> "Uint":
        return cls._from_bytes(data, "little")

    @classmethod
    def try_from_be_slice(cls, data: bytes) -> Optional["Uint"]:
        """Big endian bytes of any length, or None if the value is too wide."""
        value = int.from_bytes(data, "big")
        if value > cls.MASK:
            return None
        return cls._new(value)

    @classmethod
    def try_from_le_slice(cls, data: bytes) -> Optional["Uint"]:
        """Little endian bytes of any length, or None if the value is too wide."""
        value = int.from_bytes(data, "little")
        if value > cls.MASK:
            return None
        return cls._new(value)

    # Bits and bytes

    def bit(self, index: int) -> bool:
        if not 0 <= index < self.BITS:
            raise IndexError("Bit %d out of range for %d bits" % (index, self.BITS))
        return bool(self._value >> index & 1)

    def byte(self, index: int) -> int:
        """Byte ``index``, counting from the least significant byte."""
        if not 0 <= index < self.BYTES:
            raise IndexError("Byte %d out of range for %d bytes" % (index, self.BYTES))
        return self._value >> (8 * index) & 0xFF

    def bit_len(self) -> int:
        return self._value.bit_length()

    def count_ones(self) -> int:
        return bin(self._value).count("1")

    def count_zeros(self) -> int:
        return self.BITS - self.count_ones()

    def leading_zeros(self) -> int:
        return self.BITS - self._value.bit_length()

    def leading_ones(self) -> int:
        return (~self).leading_zeros()

    def trailing_zeros(self) -> int:
        if self._value == 0:
            return self.BITS
        return (self._value & -self._value).bit_length() - 1

    def trailing_ones(self) -> int:
        return (~self).trailing_zeros()

    # Arithmetic

    def _operand(self, other) -> "Uint":
        if type(other) is type(self):
            return other
        if isinstance(other, int):
            return self.try_from(other)
        raise TypeError("Unsupported operand %r for %s" % (other, type(self).__name__))

    def overflowing_add(self, rhs) -> Tuple["Uint", bool]:
        total = self._value + self._operand(rhs)._value
        return self._new(total & self.MASK), total > self.MASK

    def overflowing_sub(self, rhs) -> Tuple["Uint", bool]:
        difference = self._value - self._operand(rhs)._value
        return self._new(difference & self.MASK), difference < 0

    def overflowing_mul(self, rhs) -> Tuple["Uint", bool]:
        product = self._value * self._operand(rhs)._value
        return self._new(product & self.MASK), product > self.MASK

    def overflowing_pow(self, exp) -> Tuple["Uint", bool]:
        """Exponentiation by repeated squaring, wrapping at every step."""
        exp = _exponent(exp)
        mask = self.MASK
        base = self._value
        result = 1
        overflow = False
        while exp:
            if exp & 1:
                result *= base
                if result > mask:
                    overflow = True
                    result &= mask
            exp >>= 1
            if exp:
                base *= base
                if base > mask:
                    overflow = True
                    base &= mask
        if result > mask:
            overflow = True
            result &= mask
        return self._new(result), overflow

    def checked_pow(self, exp) -> Optional["Uint"]:
        """Like :meth:`overflowing_pow` but gives up on the first overflow."""
        exp = _exponent(exp)
        mask = self.MASK
        base = self._value
        result = 1
        while exp:
            if exp & 1:
                result *= base
                if result > mask:
                    return None
            exp >>= 1
            if exp:
                base *= base
                if base > mask:
                    return None
        if result > mask:
            return None
        return self._new(result)

    def checked_add(self, rhs) -> Optional["Uint"]:
        value, overflow = self.overflowing_add(rhs)
        return None if overflow else value

    def checked_sub(self, rhs) -> Optional["Uint"]:
        value, overflow = self.overflowing_sub(rhs)
        return None if overflow else value

    def checked_mul(self, rhs) -> Optional["Uint"]:
        value, overflow = self.overflowing_mul(rhs)
        return None if overflow else value

    def checked_div(self, rhs) -> Optional["Uint"]:
        rhs = self._operand(rhs)
        if not rhs._value:
            return None
        return self._new(self._value // rhs._value)

    def checked_rem(self, rhs) -> Optional["Uint"]:
        rhs = self._operand(rhs)
        if not rhs._value:
            return None
        return self._new(self._value % rhs._value)

    def wrapping_add(self, rhs) -> "Uint":
        return self.overflowing_add(rhs)[0]

    def wrapping_sub(self, rhs) -> "Uint":
        return self.overflowing_sub(rhs)[0]

    def wrapping_mul(self, rhs) -> "Uint":
        return self.overflowing_mul(rhs)[0]

    def wrapping_pow(self, exp) -> "Uint":
        return self.overflowing_pow(exp)[0]

    def div_rem(self, rhs) -> Tuple["Uint", "Uint"]:
        rhs = self._operand(rhs)
        if not rhs._value:
            raise ZeroDivisionError("attempt to divide by zero")
        quotient, remainder = divmod(self._value, rhs._value)
        return self._new(quotient), self._new(remainder)

    # Shifts

    def overflowing_shl(self, rhs) -> Tuple["Uint", bool]:
        """Shift left, reporting whether any set bit was shifted out."""
        rhs = _shift_amount(rhs)
        if rhs >= self.BITS:
            return self.ZERO, self._value != 0
        shifted = self._value << rhs
        return self._new(shifted & self.MASK), shifted > self.MASK

    def overflowing_shr(self, rhs) -> Tuple["Uint", bool]:
        """Shift right, reporting whether any set bit was shifted out."""
        rhs = _shift_amount(rhs)
        if rhs >= self.BITS:
            return self.ZERO, self._value != 0
        lost = self._value & ((1 << rhs) - 1)
        return self._new(self._value >> rhs), lost != 0

    def checked_shl(self, rhs) -> Optional["Uint"]:
        value, overflow = self.overflowing_shl(rhs)
        return None if overflow else value

    def checked_shr(self, rhs) -> Optional["Uint"]:
        value, overflow = self.overflowing_shr(rhs)
        return None if overflow else value

    def wrapping_shl(self, rhs) -> "Uint":
        return self.overflowing_shl(rhs)[0]

    def wrapping_shr(self, rhs) -> "Uint":
        return self.overflowing_shr(rhs)[0]

    # Operators

    def _coerce(self, other) -> Optional["Uint"]:
        if type(other) is type(self):
            return other
        if isinstance(other, int):
            return self.try_from(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.wrapping_add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.wrapping_sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.wrapping_sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.wrapping_mul(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div_rem(other)[0]

    def __mod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div_rem(other)[1]

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.div_rem(other)

    def __pow__(self, exp, modulo=None):
        if modulo is not None:
            return NotImplemented
        return self.wrapping_pow(exp)

    def __lshift__(self, rhs):
        return self.wrapping_shl(rhs)

    def __rshift__(self, rhs):
        return self.wrapping_shr(rhs)

    def __and__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._new(self._value & other._value)

    __rand__ = __and__

    def __or__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._new(self._value | other._value)

    __ror__ = __or__

    def __xor__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._new(self._value ^ other._value)

    __rxor__ = __xor__

    def __invert__(self):
        return self._new(self._value ^ self.MASK)

    # Comparison

    def __eq__(self, other):
        if type(other) is type(self):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def _ordering_value(self, other) -> Optional[int]:
        if type(other) is type(self):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __lt__(self, other):
        other = self._ordering_value(other)
        if other is None:
            return NotImplemented
        return self._value < other

    def __le__(self, other):
        other = self._ordering_value(other)
        if other is None:
            return NotImplemented
        return self._value <= other

    def __gt__(self, other):
        other = self._ordering_value(other)
        if other is None:
            return NotImplemented
        return self._value > other

    def __ge__(self, other):
        other = self._ordering_value(other)
        if other is None:
            return NotImplemented
        return self._value >= other

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return self._value != 0

    def __int__(self):
        return self._value

    __index__ = __int__

    def __reduce__(self):
        return _restore, (self.BITS, self._value)


def _restore(bits: int, value: int) -> Uint:
    return Uint[bits]._new(value)
