"""Level file encoder."""
from typing import List, Optional, Tuple
import logging

from .config import DEFAULT_POLICY, LayoutPolicy
from .errors import FieldOverflow, PayloadSizeMismatch
from .model import LevelModel
from .parser.chunk_table import ChunkDescriptor, encode_chunk_table
from .parser.constants import DESCRIPTOR_SIZE, HEADER_SIZE, MAGIC
from .parser.cursor import ByteCursor
from .parser.header import FileHeader, check_version, encode_header

logger = logging.getLogger(__name__)

MAX_OFFSET = 0xFFFFFFFF


def layout_chunks(model: LevelModel,
                  policy: LayoutPolicy) -> Tuple[int, List[ChunkDescriptor], List[bytes], int]:
    """Compute the on-disk position of the table and every chunk.

    Preserved padding is reused when the chunk it precedes still lands on
    an aligned offset; otherwise zero padding up to the alignment is used.

    Returns:
        Tuple of (table_offset, descriptors, paddings, end of last chunk)
    """
    table_padding = model.table_padding if policy.preserve_padding else b''
    table_offset = HEADER_SIZE + len(table_padding)
    pos = table_offset + model.chunk_count * DESCRIPTOR_SIZE

    descriptors = []
    paddings = []
    for payload, padding in zip(model.payloads, model.paddings):
        if not policy.preserve_padding:
            padding = b''
        start = pos + len(padding)
        if start % policy.alignment:
            start = policy.align(pos)
            padding = b'\0' * (start - pos)
        size = payload.size
        descriptors.append(ChunkDescriptor(payload.chunk_kind, start, size))
        paddings.append(padding)
        pos = start + size

    return table_offset, descriptors, paddings, pos


def encode(model: LevelModel, policy: Optional[LayoutPolicy] = None) -> bytes:
    """Serialize a level model.

    Offsets and lengths are recomputed from the payloads; the model itself
    is not modified.

    Args:
        model: Level to encode
        policy: Layout rules; defaults to :data:`DEFAULT_POLICY`

    Returns:
        Complete file contents

    Raises:
        EncodeError: On the first problem found. No partial output is
            returned.
    """
    policy = policy or DEFAULT_POLICY
    model.check_invariants()
    check_version(model.version)

    table_offset, descriptors, paddings, chunks_end = layout_chunks(model, policy)
    table_padding = model.table_padding if policy.preserve_padding else b''
    trailing = model.trailing if policy.preserve_padding else b''
    total = chunks_end + len(trailing)
    if total > MAX_OFFSET:
        raise FieldOverflow('file size', total)

    header = FileHeader(
        magic=MAGIC,
        version=model.version,
        chunk_count=len(descriptors),
        chunk_table_offset=table_offset,
    )

    cursor = ByteCursor.allocate(total)
    encode_header(cursor, header)
    cursor.write_bytes(table_padding)
    encode_chunk_table(cursor, descriptors)

    for index, (payload, descriptor, padding) in enumerate(zip(model.payloads, descriptors, paddings)):
        cursor.write_bytes(padding)
        chunk_cursor = cursor.slice(descriptor.offset, descriptor.length)
        try:
            payload.encode(chunk_cursor, index)
        except FieldOverflow as e:
            if e.index is not None:
                raise
            raise FieldOverflow(e.field, e.value, index) from e
        if chunk_cursor.consumed != descriptor.length:
            raise PayloadSizeMismatch(index, descriptor.length, chunk_cursor.consumed)
        cursor.seek(descriptor.end)

    cursor.write_bytes(trailing)
    logger.debug(f"Encoded {len(descriptors)} chunks into {total} bytes")
    return cursor.getvalue()
