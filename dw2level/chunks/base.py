"""Base chunk payload."""
from typing import ClassVar

from ..parser.cursor import ByteCursor


class ChunkPayload:
    """Base class for chunk payloads.

    A payload class is both the decoded record and its codec: ``decode``
    builds an instance from a cursor bounded to the chunk's bytes and
    ``encode`` writes it back field by field. ``size`` must report exactly
    the number of bytes ``encode`` will write.
    """

    kind: ClassVar[int]

    @classmethod
    def decode(cls, cursor: ByteCursor, index: int) -> 'ChunkPayload':
        """Decode a payload.

        Args:
            cursor: Cursor bounded to the chunk's byte range
            index: Chunk index, for error reporting

        Returns:
            Decoded payload

        Raises:
            ChunkStructureError: If the chunk's sub-structure is inconsistent
        """
        raise NotImplementedError("Subclasses must implement decode()")

    def encode(self, cursor: ByteCursor, index: int) -> None:
        """Write the payload at the cursor position."""
        raise NotImplementedError("Subclasses must implement encode()")

    @property
    def chunk_kind(self) -> int:
        return self.kind

    @property
    def size(self) -> int:
        raise NotImplementedError("Subclasses must implement size")

    @property
    def is_opaque(self) -> bool:
        return False

    def to_bytes(self, index: int = 0) -> bytes:
        """Serialize this payload on its own."""
        cursor = ByteCursor.allocate(self.size)
        self.encode(cursor, index)
        return cursor.getvalue()
