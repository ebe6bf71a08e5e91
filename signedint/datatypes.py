import logging
from typing import Tuple, Type

from .aliases import I256, U256
from .exceptions import LossyConversionError, UintConversionError
from .signed import Signed
from .uint import Uint

logger = logging.getLogger(__name__)

BYTEORDERS = ("little", "big")


class _FieldN:

    def __init__(self, width: int, container, byteorder: str):
        self.width = width
        if width % 8 != 0:
            raise ValueError("Width must be a multiple of 8")
        if width <= 0 or width > container.BITS:
            raise ValueError("Invalid width for %s" % type(self).__name__)
        if byteorder not in BYTEORDERS:
            raise ValueError("Byte order must be 'little' or 'big'")
        self.container = container
        self.byteorder = byteorder

    def _check_size(self, __buffer: bytes):
        if len(__buffer) != self.size:
            raise ValueError("Expected %d bytes, got %d" % (self.size, len(__buffer)))

    def _truncate(self, data: bytes) -> bytes:
        # data is the container's full width in self.byteorder
        if self.byteorder == "little":
            return data[:self.size]
        return data[-self.size:]

    def _encode(self, data: bytes):
        if self.byteorder == "little":
            return data
        return data[::-1]

    @property
    def size(self):
        return self.width // 8


class UnsignedN(_FieldN):
    """ struct-like class for packing and unpacking unsigned integers of arbitrary width.
    The width must be a multiple of 8 and must be between 8 and the width of
    the container type.
    """
    def __init__(self, width: int, container: Type[Uint] = U256, byteorder: str = "little"):
        super().__init__(width, container, byteorder)

    def unpack(self, __buffer: bytes) -> Tuple[Uint]:
        self._check_size(__buffer)
        return (self.container.try_from_le_slice(self._encode(__buffer)),)

    def pack(self, *v) -> bytes:
        value, = v
        value = self.container.try_from(value)
        if value.bit_len() > self.width:
            logger.debug("%s does not fit in %d unsigned bits", value, self.width)
            raise UintConversionError("Value does not fit in specified type")
        return self._truncate(self._encode(value.to_le_bytes()))


class IntegerN(_FieldN):
    """ struct-like class for packing and unpacking two's complement integers of
    arbitrary width. The width must be a multiple of 8 and must be between 8
    and the width of the container type.

    Unpacking sign-extends the field into the container type.
    """
    def __init__(self, width: int, container: Type[Signed] = I256, byteorder: str = "little"):
        super().__init__(width, container, byteorder)

    def unpack(self, __buffer: bytes) -> Tuple[Signed]:
        self._check_size(__buffer)
        value = self.container.try_from_le_slice(self._encode(__buffer))
        shift = self.container.BITS - self.width
        return (value.wrapping_shl(shift).asr(shift),)

    def pack(self, *v) -> bytes:
        value, = v
        value = self.container.try_from(value)
        if value.bits() > self.width:
            logger.debug("%s does not fit in %d signed bits", value, self.width)
            raise LossyConversionError()
        return self._truncate(self._encode(value.to_le_bytes()))


INTEGER8 = IntegerN(8)
INTEGER16 = IntegerN(16)
INTEGER24 = IntegerN(24)
INTEGER32 = IntegerN(32)
INTEGER40 = IntegerN(40)
INTEGER48 = IntegerN(48)
INTEGER56 = IntegerN(56)
INTEGER64 = IntegerN(64)
INTEGER128 = IntegerN(128)
INTEGER256 = IntegerN(256)

UNSIGNED8 = UnsignedN(8)
UNSIGNED16 = UnsignedN(16)
UNSIGNED24 = UnsignedN(24)
UNSIGNED32 = UnsignedN(32)
UNSIGNED40 = UnsignedN(40)
UNSIGNED48 = UnsignedN(48)
UNSIGNED56 = UnsignedN(56)
UNSIGNED64 = UnsignedN(64)
UNSIGNED128 = UnsignedN(128)
UNSIGNED256 = UnsignedN(256)
