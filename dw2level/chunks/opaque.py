"""Payload for chunks whose structure is not decoded."""
from ..parser.cursor import ByteCursor
from .base import ChunkPayload


class OpaquePayload(ChunkPayload):
    """Verbatim copy of a chunk's bytes, written back unchanged."""

    def __init__(self, kind: int, data: bytes):
        self._kind = kind
        self.data = bytes(data)

    @classmethod
    def decode(cls, cursor: ByteCursor, index: int, kind: int = 0) -> 'OpaquePayload':
        return cls(kind, cursor.read_bytes(cursor.remaining))

    def encode(self, cursor: ByteCursor, index: int) -> None:
        cursor.write_bytes(self.data)

    @property
    def chunk_kind(self) -> int:
        return self._kind

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_opaque(self) -> bool:
        return True

    def __eq__(self, other):
        if not isinstance(other, OpaquePayload):
            return NotImplemented
        return self._kind == other._kind and self.data == other.data

    def __repr__(self) -> str:
        return f"OpaquePayload(kind=0x{self._kind:X}, {len(self.data)} bytes)"
