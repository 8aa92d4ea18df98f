"""
# pngme: messages hidden in PNG chunks.

A PNG file is a signature followed by a list of chunks; a chunk with a
private, ancillary type is ignored by the decoders so it's a nice place
where to put some data without breaking the image.

Two basic main operations are defined for the components:

 1. unpack(): reading the binary data and build a high-level representation of that,
    checking the CRC of each chunk.

 2. pack(): encode the high-level representation into binary data,
    recomputing lengths and CRCs.

On top of these the module pngme.commands implements hide/extract/remove/list
working directly on files.
"""
from .chunk_type import ChunkType
from .chunk import PNGChunk
from .png import PNGFile, SIGNATURE
from .commands import (
    hide_message,
    extract_message,
    remove_chunk,
    list_chunks,
)
