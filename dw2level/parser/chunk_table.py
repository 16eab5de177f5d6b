"""Chunk table decoding and encoding."""
from dataclasses import dataclass
from typing import List, Sequence
import logging

from construct import Int32ul, Struct

from ..config import DEFAULT_POLICY, LayoutPolicy
from ..errors import (
    ChunkOutOfBounds,
    ChunkOverlap,
    InvalidTableOffset,
    MisalignedChunk,
    TruncatedChunkTable,
)
from .constants import DESCRIPTOR_SIZE, HEADER_SIZE
from .cursor import ByteCursor
from .header import FileHeader

logger = logging.getLogger(__name__)

ChunkDescriptorStruct = Struct(
    "kind" / Int32ul,
    "offset" / Int32ul,
    "length" / Int32ul,
)

assert ChunkDescriptorStruct.sizeof() == DESCRIPTOR_SIZE


@dataclass(frozen=True)
class ChunkDescriptor:
    """Location and kind of one chunk"""
    kind: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


def decode_chunk_table(cursor: ByteCursor,
                       header: FileHeader,
                       policy: LayoutPolicy = DEFAULT_POLICY) -> List[ChunkDescriptor]:
    """Read ``header.chunk_count`` descriptors from the chunk table.

    Args:
        cursor: Cursor over the whole file
        header: Decoded file header
        policy: Overlap and alignment rules to enforce

    Returns:
        Descriptors in on-disk order

    Raises:
        TruncatedChunkTable: If the table does not fit in the buffer
        InvalidTableOffset: If the table starts inside the header
        ChunkOutOfBounds: If a descriptor's range runs past the buffer end
        ChunkOverlap: If ranges overlap and the policy forbids it
        MisalignedChunk: If an offset is misaligned and the policy forbids it
    """
    buffer_size = cursor.end
    table_offset = header.chunk_table_offset
    table_size = header.chunk_count * DESCRIPTOR_SIZE

    if table_offset < HEADER_SIZE:
        raise InvalidTableOffset(table_offset, HEADER_SIZE)

    # Checked up front so a bogus count never drives the read loop
    if table_offset > buffer_size or table_offset + table_size > buffer_size:
        raise TruncatedChunkTable(table_offset, header.chunk_count, buffer_size)

    cursor.seek(table_offset)
    descriptors = []
    for index in range(header.chunk_count):
        raw = cursor.read_struct(ChunkDescriptorStruct)
        descriptor = ChunkDescriptor(kind=raw.kind, offset=raw.offset, length=raw.length)
        if descriptor.end > buffer_size:
            raise ChunkOutOfBounds(index, descriptor.offset, descriptor.length, buffer_size)
        if policy.require_alignment and descriptor.offset % policy.alignment:
            raise MisalignedChunk(index, descriptor.offset, policy.alignment)
        descriptors.append(descriptor)

    if not policy.allow_overlap:
        check_disjoint(descriptors)

    logger.debug(f"Read {len(descriptors)} chunk descriptors at 0x{table_offset:X}")
    return descriptors


def check_disjoint(descriptors: Sequence[ChunkDescriptor]) -> None:
    """Raise ChunkOverlap for the first pair of overlapping non-empty ranges."""
    ordered = sorted(
        (d.offset, d.end, index) for index, d in enumerate(descriptors) if d.length
    )
    for (_, prev_end, prev_index), (offset, _, index) in zip(ordered, ordered[1:]):
        if offset < prev_end:
            raise ChunkOverlap(max(index, prev_index), min(index, prev_index))


def encode_chunk_table(cursor: ByteCursor, descriptors: Sequence[ChunkDescriptor]) -> None:
    for descriptor in descriptors:
        cursor.write_struct(ChunkDescriptorStruct, dict(
            kind=descriptor.kind,
            offset=descriptor.offset,
            length=descriptor.length,
        ))
