'''
# Chunk type

Four bytes restricted to the ASCII letters A-Z and a-z. The case of each letter
(bit 5 of the byte) encodes a property of the chunk:

 1. first byte: ancillary bit, uppercase means *critical*
 2. second byte: private bit, uppercase means *public*
 3. third byte: reserved bit, must be uppercase in files conforming to this version of PNG
 4. fourth byte: safe-to-copy bit, lowercase means *safe to copy*

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
import logging

from bitstring import Bits

from .exceptions import InvalidTypeException


logger = logging.getLogger(__name__)

# offset of bit 5 inside a byte, counting from the most significant bit
CASE_BIT = 2


def is_ascii_alphabetic(byte: int) -> bool:
    return 0x41 <= byte <= 0x5a or 0x61 <= byte <= 0x7a


class ChunkType(object):

    def __init__(self, raw: bytes):
        raw = bytes(raw)

        if len(raw) != 4:
            raise InvalidTypeException(raw, message=f'chunk type must be 4 bytes, got {len(raw)}')

        for byte in raw:
            if not is_ascii_alphabetic(byte):
                raise InvalidTypeException(raw, message=f'invalid chunk type byte 0x{byte:02x} in {raw!r}')

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_str(cls, value: str) -> 'ChunkType':
        if len(value) != 4:
            raise InvalidTypeException(value, message=f'chunk type must be 4 characters, got {value!r}')

        try:
            raw = value.encode('ascii')
        except UnicodeEncodeError:
            raise InvalidTypeException(value, message=f'chunk type must be ASCII, got {value!r}')

        return cls(raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def _is_lowercase(self, idx):
        return self._bits[idx * 8 + CASE_BIT]

    def is_critical(self):
        return not self._is_lowercase(0)

    def is_public(self):
        return not self._is_lowercase(1)

    def is_reserved_bit_valid(self):
        return not self._is_lowercase(2)

    def is_safe_to_copy(self):
        return self._is_lowercase(3)

    def is_valid(self):
        return all(is_ascii_alphabetic(_) for _ in self._raw) and self.is_reserved_bit_valid()

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)
