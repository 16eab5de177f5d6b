"""
Tests for header and chunk table decoding
"""

import struct

import pytest

from dw2level import (
    STRICT_POLICY,
    ByteCursor,
    ChunkDescriptor,
    ChunkOutOfBounds,
    ChunkOverlap,
    FileHeader,
    InvalidMagic,
    InvalidTableOffset,
    LayoutPolicy,
    MisalignedChunk,
    OutOfBounds,
    TruncatedChunkTable,
    UnsupportedVersion,
)
from dw2level.parser import decode_chunk_table, decode_header, encode_chunk_table, encode_header
from dw2level.parser.chunk_table import check_disjoint

from builders import create_header


def table_file(entries, buffer_size):
    """Header plus a chunk table of (kind, offset, length) entries, zero filled to size"""
    data = create_header(1, len(entries), 16)
    for entry in entries:
        data += struct.pack('<III', *entry)
    return data.ljust(buffer_size, b'\0')


def read_table(data, policy=LayoutPolicy()):
    cursor = ByteCursor(data)
    header = decode_header(cursor)
    return decode_chunk_table(cursor, header, policy)


class TestHeader:
    """File header decoding"""

    def test_decode_header(self):
        cursor = ByteCursor(create_header(1, 3, 0x40) + b'\0' * 0x40)
        header = decode_header(cursor)
        assert header == FileHeader(b'DW2L', 1, 3, 0x40)
        assert cursor.position == 16

    def test_invalid_magic(self):
        with pytest.raises(InvalidMagic) as exc_info:
            decode_header(ByteCursor(create_header(magic=b'DW2X')))
        assert exc_info.value.found == b'DW2X'
        assert exc_info.value.expected == b'DW2L'

    def test_unsupported_version(self):
        with pytest.raises(UnsupportedVersion) as exc_info:
            decode_header(ByteCursor(create_header(version=2)))
        assert exc_info.value.version == 2
        assert exc_info.value.supported == (1,)

    def test_truncated_header(self):
        with pytest.raises(OutOfBounds):
            decode_header(ByteCursor(create_header()[:15]))

    def test_encode_header(self):
        cursor = ByteCursor.allocate(16)
        encode_header(cursor, FileHeader(b'DW2L', 1, 2, 0x20))
        assert cursor.getvalue() == create_header(1, 2, 0x20)


class TestChunkTable:
    """Chunk table decoding"""

    def test_decode_descriptors(self):
        data = table_file([(1, 40, 8), (7, 48, 0)], 48)
        descriptors = read_table(data)
        assert descriptors == [ChunkDescriptor(1, 40, 8), ChunkDescriptor(7, 48, 0)]
        assert descriptors[0].end == 48

    def test_table_offset_past_end(self):
        data = create_header(1, 1, 1000)
        with pytest.raises(TruncatedChunkTable) as exc_info:
            read_table(data)
        assert exc_info.value.table_offset == 1000
        assert exc_info.value.buffer_size == 16

    def test_table_inside_header(self):
        with pytest.raises(InvalidTableOffset) as exc_info:
            read_table(create_header(1, 1, 4) + b'\0' * 16)
        assert exc_info.value.table_offset == 4

    def test_empty_table_past_end(self):
        with pytest.raises(TruncatedChunkTable):
            read_table(create_header(1, 0, 17))

    def test_table_runs_out_mid_way(self):
        data = table_file([(1, 0, 0)], 28)[:27]
        with pytest.raises(TruncatedChunkTable):
            read_table(data)

    def test_huge_chunk_count(self):
        with pytest.raises(TruncatedChunkTable) as exc_info:
            read_table(create_header(1, 0xFFFFFFFF, 16))
        assert exc_info.value.chunk_count == 0xFFFFFFFF

    def test_chunk_out_of_bounds_names_index(self):
        data = table_file([(1, 40, 4), (1, 44, 4), (1, 48, 100)], 60)
        with pytest.raises(ChunkOutOfBounds) as exc_info:
            read_table(data)
        assert exc_info.value.index == 2
        assert exc_info.value.offset == 48
        assert exc_info.value.length == 100

    def test_overlap_allowed_by_default(self):
        data = table_file([(1, 40, 8), (1, 44, 8)], 52)
        assert len(read_table(data)) == 2

    def test_overlap_rejected_by_strict_policy(self):
        data = table_file([(1, 40, 8), (1, 44, 8)], 52)
        with pytest.raises(ChunkOverlap) as exc_info:
            read_table(data, STRICT_POLICY)
        assert exc_info.value.index == 1
        assert exc_info.value.other == 0

    def test_misaligned_rejected_by_strict_policy(self):
        data = table_file([(1, 41, 4)], 48)
        with pytest.raises(MisalignedChunk) as exc_info:
            read_table(data, STRICT_POLICY)
        assert exc_info.value.offset == 41
        assert exc_info.value.alignment == 4

    def test_empty_chunks_never_overlap(self):
        check_disjoint([ChunkDescriptor(1, 40, 8), ChunkDescriptor(1, 44, 0)])

    def test_encode_chunk_table(self):
        cursor = ByteCursor.allocate(24)
        encode_chunk_table(cursor, [ChunkDescriptor(1, 40, 8), ChunkDescriptor(2, 48, 4)])
        assert cursor.getvalue() == struct.pack('<6I', 1, 40, 8, 2, 48, 4)
