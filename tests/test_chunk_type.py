import pytest

from pngme.chunk_type import ChunkType
from pngme.exceptions import InvalidTypeException


def test_chunk_type_from_bytes():
    chunk_type = ChunkType(bytes([82, 117, 83, 116]))

    assert chunk_type.raw == b'RuSt'


def test_chunk_type_from_str():
    assert ChunkType.from_str('RuSt') == ChunkType(bytes([82, 117, 83, 116]))


def test_chunk_type_properties():
    """Check the property bits for a conforming type"""
    chunk_type = ChunkType.from_str('RuSt')

    assert chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()
    assert chunk_type.is_valid()


@pytest.mark.parametrize('value,method,expected', [
    ('ruSt', 'is_critical', False),
    ('RUSt', 'is_public', True),
    ('RuST', 'is_safe_to_copy', False),
    ('IEND', 'is_critical', True),
    ('tEXt', 'is_safe_to_copy', True),
])
def test_chunk_type_single_property(value, method, expected):
    assert getattr(ChunkType.from_str(value), method)() == expected


def test_chunk_type_reserved_bit_invalid():
    """A lowercase third letter is still a type but not a valid one"""
    chunk_type = ChunkType.from_str('Rust')

    assert not chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_valid()


@pytest.mark.parametrize('value', [
    'Ru1t',
    'Ru t',
    'Ru',
    '',
    'RuStX',
    'Rüst',
])
def test_chunk_type_invalid_str(value):
    with pytest.raises(InvalidTypeException):
        ChunkType.from_str(value)


@pytest.mark.parametrize('raw', [
    b'Ru1t',
    b'Ru\x00t',
    b'RuS',
    b'RuStR',
])
def test_chunk_type_invalid_bytes(raw):
    with pytest.raises(InvalidTypeException):
        ChunkType(raw)


@pytest.mark.parametrize('value', ['RuSt', 'IHDR', 'tEXt', 'abcd', 'ZZZZ'])
def test_chunk_type_string(value):
    assert str(ChunkType.from_str(value)) == value


def test_chunk_type_equality():
    assert ChunkType.from_str('RuSt') == ChunkType.from_str('RuSt')
    assert ChunkType.from_str('RuSt') != ChunkType.from_str('Rust')
    assert len({ChunkType.from_str('RuSt'), ChunkType(b'RuSt')}) == 1


@pytest.mark.parametrize('letter', [chr(_) for _ in range(ord('A'), ord('Z') + 1)])
def test_chunk_type_property_bits(letter):
    """Every position follows the case of its own letter"""
    upper = ChunkType.from_str(letter * 4)
    lower = ChunkType.from_str(letter.lower() * 4)

    assert (upper.is_critical(), upper.is_public(), upper.is_reserved_bit_valid(), upper.is_safe_to_copy()) == \
        (True, True, True, False)
    assert (lower.is_critical(), lower.is_public(), lower.is_reserved_bit_valid(), lower.is_safe_to_copy()) == \
        (False, False, False, True)

    mixed = ChunkType.from_str(letter + letter.lower() + letter + letter.lower())
    assert mixed.is_critical()
    assert not mixed.is_public()
    assert mixed.is_reserved_bit_valid()
    assert mixed.is_safe_to_copy()
