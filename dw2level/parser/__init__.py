"""Level file parser module."""
from .constants import ChunkKind, EntityKind
from .cursor import ByteCursor
from .header import FileHeader, decode_header, encode_header
from .chunk_table import ChunkDescriptor, decode_chunk_table, encode_chunk_table

__all__ = [
    'ChunkKind',
    'EntityKind',
    'ByteCursor',
    'FileHeader',
    'decode_header',
    'encode_header',
    'ChunkDescriptor',
    'decode_chunk_table',
    'encode_chunk_table',
]
