import io
import struct
import zlib

import pytest
from PIL import Image


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def raw_chunk(chunk_type: bytes, data: bytes, length=None, crc=None) -> bytes:
    '''Build the binary representation of a chunk by hand, length and crc can be forced.'''
    length = len(data) if length is None else length
    crc = zlib.crc32(chunk_type + data) if crc is None else crc

    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def red_png() -> bytes:
    """A 5x5 red image as saved by Pillow"""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, red_png):
    path = tmp_path / 'red.png'
    path.write_bytes(red_png)

    return path


@pytest.fixture
def rust_chunk_raw() -> bytes:
    return raw_chunk(b'RuSt', MESSAGE, crc=MESSAGE_CRC)
