'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A PNG file is a fixed signature followed by a sequence of chunks, here
we don't care about the content of the chunks nor their order: the end of the
file is where the data end, the IEND chunk is not treated specially.
'''
import logging
import struct
from typing import Iterable, List, Optional, Tuple

from .chunk import PNGChunk, LENGTH_FORMAT, MIN_SIZE
from .chunk_type import ChunkType
from .enum import Compliant
from .exceptions import (
    PngmeException,
    MagicException,
    NotFoundException,
)
from .streams import Stream


logger = logging.getLogger(__name__)

SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGFile(object):
    '''Ordered container of chunks.

    You can pass raw bytes or a path to unpack an existing file, otherwise you
    obtain an empty container to fill with append_chunk().'''

    def __init__(self, source=None, compliant=Compliant.NONE):
        self.compliant = compliant
        self._chunks: List[PNGChunk] = []

        if source is not None:
            stream = Stream(source)
            logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, stream._type.__name__))
            self.unpack(stream)

    @classmethod
    def from_chunks(cls, chunks: Iterable[PNGChunk]) -> 'PNGFile':
        png = cls()
        for chunk in chunks:
            png.append_chunk(chunk)

        return png

    def unpack(self, stream: Stream):
        '''Read the signature and then one chunk after the other until the stream
        is exhausted. Each chunk takes 12 bytes plus the length declared in its
        first field.

        Nothing is kept if a chunk fails: the exception is raised with the position
        of the chunk added to its chain.'''
        magic = stream.read(len(SIGNATURE))
        if magic != SIGNATURE:
            raise MagicException(chain=['header'], message=f'invalid PNG signature {magic!r}')

        chunks = []
        while stream.remaining() > 0:
            idx = len(chunks)
            logger.debug('unpacking chunks[%d] at offset 0x%08x' % (idx, stream.tell()))

            stream.save()
            length_raw = stream.read(4)
            stream.restore()

            length = struct.unpack(LENGTH_FORMAT, length_raw)[0] if len(length_raw) == 4 else 0

            try:
                chunk = PNGChunk.unpack(stream.read(MIN_SIZE + length), compliant=self.compliant)
            except PngmeException as e:
                e.chain.insert(0, f'chunks[{idx}]')
                raise

            chunks.append(chunk)

        self._chunks = chunks

    @property
    def chunks(self) -> Tuple[PNGChunk, ...]:
        return tuple(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __getitem__(self, item):
        return self._chunks[item]

    def append_chunk(self, chunk: PNGChunk):
        if not chunk.chunk_type.is_valid():
            logger.warning(f'appending chunk with type {chunk.chunk_type} that has the reserved bit not valid')

        self._chunks.append(chunk)

    def _index_by_type(self, chunk_type: str) -> Optional[int]:
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return idx

        return None

    def remove_first_chunk(self, chunk_type: str) -> PNGChunk:
        ChunkType.from_str(chunk_type)

        idx = self._index_by_type(chunk_type)
        if idx is None:
            raise NotFoundException(chunk_type)

        logger.debug(f'removing chunks[{idx}] with type {chunk_type}')

        return self._chunks.pop(idx)

    def chunk_by_type(self, chunk_type: str) -> Optional[PNGChunk]:
        idx = self._index_by_type(chunk_type)

        return self._chunks[idx] if idx is not None else None

    @property
    def size(self) -> int:
        return len(SIGNATURE) + sum(_.size for _ in self._chunks)

    def pack(self) -> bytes:
        return SIGNATURE + b''.join(_.pack() for _ in self._chunks)

    @property
    def raw(self):
        return self.pack()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))
