'''
Operations on PNG files: each one reads the whole file, works on the
in-memory PNGFile and, if needed, writes it back.
'''
import logging
import os
import shutil
import tempfile
from typing import List, Tuple

from .chunk import PNGChunk
from .chunk_type import ChunkType
from .exceptions import NotFoundException
from .png import PNGFile


logger = logging.getLogger(__name__)


def current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)

    return umask


def write_atomically(path, data: bytes):
    '''The data go in a temporary file in the same directory that then replaces
    the destination, so a failure never leaves a half-written file.

    The destination keeps its permissions, a new file gets the default ones.'''
    path = os.fspath(path)
    directory = os.path.dirname(os.path.abspath(path))

    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.pngme-')
    try:
        try:
            f = os.fdopen(fd, 'wb')
        except BaseException:
            os.close(fd)
            raise

        with f:
            f.write(data)

        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~current_umask())

        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError as e:
            logger.warning(f'cannot remove temporary file \'{tmp_path}\': {e}')
        raise

    logger.debug(f'written {len(data)} bytes to \'{path}\'')


def hide_message(chunk_type: str, message: str, file_path, output_file=None):
    png = PNGFile(file_path)
    chunk = PNGChunk(ChunkType.from_str(chunk_type), message.encode('utf-8'))

    png.append_chunk(chunk)

    write_atomically(output_file if output_file is not None else file_path, png.pack())


def extract_message(file_path, chunk_type: str) -> str:
    png = PNGFile(file_path)

    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise NotFoundException(chunk_type)

    return chunk.data_as_string()


def remove_chunk(file_path, chunk_type: str) -> PNGChunk:
    png = PNGFile(file_path)

    chunk = png.remove_first_chunk(chunk_type)

    write_atomically(file_path, png.pack())

    return chunk


def list_chunks(file_path) -> List[Tuple[str, int]]:
    png = PNGFile(file_path)

    return [(str(_.chunk_type), _.length) for _ in png]
