import enum


class Sign(enum.Enum):
    """Direction of a signed number.

    The two members form a multiplicative group: :attr:`POSITIVE` is the
    identity and :attr:`NEGATIVE` is its own inverse.

    >>> Sign.NEGATIVE * Sign.NEGATIVE
    <Sign.POSITIVE: 1>
    """

    POSITIVE = 1
    NEGATIVE = -1

    @classmethod
    def from_bool(cls, is_negative: bool) -> "Sign":
        return cls.NEGATIVE if is_negative else cls.POSITIVE

    def is_positive(self) -> bool:
        return self is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self is Sign.NEGATIVE

    def __mul__(self, other):
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign(self.value * other.value)

    def __neg__(self):
        return Sign(-self.value)

    def __int__(self):
        return self.value

    def __str__(self):
        return "-" if self is Sign.NEGATIVE else ""

    def __format__(self, format_spec: str) -> str:
        # "+" shows the plus sign, anything else is the plain rendering
        if format_spec == "+" and self is Sign.POSITIVE:
            return "+"
        if format_spec not in ("", "+"):
            raise ValueError("Invalid format specifier %r for Sign" % format_spec)
        return str(self)
