import logging
import struct

from .chunk_type import ChunkType
from .common import crc
from .enum import Compliant
from .exceptions import (
    MalformedInputException,
    CRCException,
    EncodingException,
)


logger = logging.getLogger(__name__)

LENGTH_FORMAT = '>I'  # big endian
CRC_FORMAT    = '>I'  # network byte order

# length + type + crc
MIN_SIZE = 12


class PNGChunk(object):
    '''
    This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

        length | type | data | crc

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    Only type and data are stored, length and crc are always derived from them
    so a chunk is consistent by construction.
    '''

    def __init__(self, chunk_type: ChunkType, data: bytes = b''):
        self.chunk_type = chunk_type
        self.data = bytes(data)

    @classmethod
    def unpack(cls, raw: bytes, compliant=Compliant.NONE) -> 'PNGChunk':
        '''Build a chunk from its binary representation.

        The data are what is between the type and the last 4 bytes: the declared
        length is checked against it only when Compliant.LENGTH is requested.'''
        if len(raw) < MIN_SIZE:
            raise MalformedInputException(message=f'chunk too short: {len(raw)} bytes, at least {MIN_SIZE} needed')

        length, = struct.unpack(LENGTH_FORMAT, raw[:4])
        type_raw = raw[4:8]
        data = raw[8:-4]
        stored_crc, = struct.unpack(CRC_FORMAT, raw[-4:])

        if length != len(data):
            logger.warning(f'declared length {length} doesn\'t correspond to data size {len(data)}')
            if compliant & Compliant.LENGTH:
                raise MalformedInputException(
                    message=f'declared length {length} but {len(data)} bytes of data')

        computed_crc = crc.calculate(type_raw, data)
        if computed_crc != stored_crc:
            raise CRCException(stored_crc, computed_crc)

        chunk = cls(ChunkType(type_raw), data)
        logger.debug('unpacked %r' % chunk)

        return chunk

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def crc(self) -> int:
        return crc.calculate(self.chunk_type.raw, self.data)

    @property
    def size(self) -> int:
        return MIN_SIZE + self.length

    def pack(self) -> bytes:
        return b''.join([
            struct.pack(LENGTH_FORMAT, self.length),
            self.chunk_type.raw,
            self.data,
            struct.pack(CRC_FORMAT, self.crc),
        ])

    @property
    def raw(self):
        return self.pack()

    def data_as_string(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingException(e, chain=[str(self.chunk_type)])

    def __eq__(self, other):
        if not isinstance(other, PNGChunk):
            return NotImplemented

        return self.chunk_type == other.chunk_type and self.data == other.data

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=%08x)>' % (
            self.__class__.__name__,
            self.chunk_type,
            self.length,
            self.crc,
        )

    def __str__(self):
        try:
            return self.data_as_string()
        except EncodingException:
            return 'Invalid UTF-8'
