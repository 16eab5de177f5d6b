"""Level file decoder."""
from typing import List, Optional, Sequence, Tuple, Union
import logging

from ..chunks.base import ChunkPayload
from ..chunks.opaque import OpaquePayload
from ..chunks.registry import ChunkRegistry, chunk_registry
from ..config import DEFAULT_POLICY, LayoutPolicy
from ..errors import ChunkLengthMismatch
from ..model import LevelModel
from .chunk_table import ChunkDescriptor, decode_chunk_table
from .constants import DESCRIPTOR_SIZE, HEADER_SIZE
from .cursor import ByteCursor
from .header import FileHeader, decode_header

logger = logging.getLogger(__name__)


def decode_payload(cursor: ByteCursor,
                   descriptor: ChunkDescriptor,
                   index: int,
                   registry: ChunkRegistry) -> ChunkPayload:
    """Decode one chunk from the bytes its descriptor points at.

    The payload decoder only sees a cursor bounded to the descriptor's
    range and must consume all of it.
    """
    chunk_cursor = cursor.slice(descriptor.offset, descriptor.length)
    payload_class = registry.get_payload_class(descriptor.kind)
    if payload_class is None:
        logger.debug(
            f"Chunk {index}: unknown kind 0x{descriptor.kind:X}, "
            f"preserving {descriptor.length} bytes"
        )
        return OpaquePayload.decode(chunk_cursor, index, kind=descriptor.kind)

    payload = payload_class.decode(chunk_cursor, index)
    if chunk_cursor.consumed != descriptor.length:
        raise ChunkLengthMismatch(index, descriptor.length, chunk_cursor.consumed)
    return payload


def collect_padding(data: bytes,
                    header: FileHeader,
                    descriptors: Sequence[ChunkDescriptor]) -> Tuple[bytes, List[bytes], bytes, bool]:
    """Find the bytes not covered by the header, table or any chunk.

    Returns:
        Tuple of (table_padding, per-chunk paddings, trailing, canonical).
        ``canonical`` is False when a chunk starts before the end of the
        region before it. Such files are re-laid-out on encode and only
        their trailing bytes are kept.
    """
    table_start = header.chunk_table_offset
    table_end = table_start + len(descriptors) * DESCRIPTOR_SIZE
    canonical = True
    pos = table_end

    paddings = []
    for descriptor in descriptors:
        if descriptor.offset < pos:
            canonical = False
        paddings.append(data[pos:descriptor.offset])
        pos = max(pos, descriptor.end)
    trailing = data[pos:]

    if not canonical:
        return b'', [b''] * len(descriptors), trailing, False
    return data[HEADER_SIZE:table_start], paddings, trailing, True


def decode(buffer: Union[bytes, bytearray, memoryview],
           policy: Optional[LayoutPolicy] = None,
           registry: Optional[ChunkRegistry] = None) -> LevelModel:
    """Decode a level file.

    Args:
        buffer: Complete file contents
        policy: Layout rules; defaults to :data:`DEFAULT_POLICY`
        registry: Chunk kinds to decode; defaults to the built-in registry

    Returns:
        Fully populated LevelModel

    Raises:
        DecodeError: On the first structural problem found. No partial
            model is returned.
    """
    policy = policy or DEFAULT_POLICY
    registry = registry or chunk_registry

    data = bytes(buffer)
    cursor = ByteCursor(data)
    logger.debug(f"Decoding {len(data)} byte level file")

    header = decode_header(cursor)
    descriptors = decode_chunk_table(cursor, header, policy)
    payloads = [
        decode_payload(cursor, descriptor, index, registry)
        for index, descriptor in enumerate(descriptors)
    ]

    if policy.preserve_padding:
        table_padding, paddings, trailing, canonical = collect_padding(data, header, descriptors)
        if not canonical:
            logger.info("Chunks are out of file order; encoding will re-lay them out")
    else:
        table_padding, paddings, trailing = b'', [b''] * len(descriptors), b''

    opaque = sum(1 for p in payloads if p.is_opaque)
    logger.debug(f"Decoded {len(payloads)} chunks ({opaque} opaque)")
    return LevelModel(
        header,
        descriptors,
        payloads,
        paddings=paddings,
        table_padding=table_padding,
        trailing=trailing,
    )
