"""Exceptions raised while decoding or encoding level files."""
from typing import Iterable, Optional


class LevelFormatError(Exception):
    """Base class for every error raised by dw2level."""
    pass


class DecodeError(LevelFormatError):
    """Raised when a buffer cannot be decoded into a level model."""
    pass


class EncodeError(LevelFormatError):
    """Raised when a level model cannot be serialized."""
    pass


class OutOfBounds(DecodeError, EncodeError):
    """A cursor access would run past the end of its window."""

    def __init__(self, start: int, size: int, limit: int):
        self.start = start
        self.size = size
        self.limit = limit
        super().__init__(
            f"access of {size} bytes at 0x{start:X}..0x{start + size:X} "
            f"exceeds boundary at 0x{limit:X}"
        )


class InvalidMagic(DecodeError):
    def __init__(self, found: bytes, expected: bytes):
        self.found = found
        self.expected = expected
        super().__init__(f"invalid magic {found!r}, expected {expected!r}")


class UnsupportedVersion(DecodeError, EncodeError):
    def __init__(self, version: int, supported: Iterable[int]):
        self.version = version
        self.supported = tuple(sorted(supported))
        super().__init__(
            f"unsupported format version {version} "
            f"(supported: {', '.join(str(v) for v in self.supported)})"
        )


class TruncatedChunkTable(DecodeError):
    def __init__(self, table_offset: int, chunk_count: int, buffer_size: int):
        self.table_offset = table_offset
        self.chunk_count = chunk_count
        self.buffer_size = buffer_size
        super().__init__(
            f"chunk table of {chunk_count} entries at 0x{table_offset:X} "
            f"does not fit in a {buffer_size} byte buffer"
        )


class InvalidTableOffset(DecodeError):
    """The chunk table starts inside the file header."""

    def __init__(self, table_offset: int, header_size: int):
        self.table_offset = table_offset
        self.header_size = header_size
        super().__init__(
            f"chunk table at 0x{table_offset:X} overlaps the {header_size} byte header"
        )


class ChunkOutOfBounds(DecodeError):
    def __init__(self, index: int, offset: int, length: int, buffer_size: int):
        self.index = index
        self.offset = offset
        self.length = length
        self.buffer_size = buffer_size
        super().__init__(
            f"chunk {index} at 0x{offset:X} with length {length} "
            f"extends beyond buffer end 0x{buffer_size:X}"
        )


class ChunkOverlap(DecodeError):
    def __init__(self, index: int, other: int):
        self.index = index
        self.other = other
        super().__init__(f"chunk {index} overlaps chunk {other}")


class MisalignedChunk(DecodeError):
    def __init__(self, index: int, offset: int, alignment: int):
        self.index = index
        self.offset = offset
        self.alignment = alignment
        super().__init__(
            f"chunk {index} at 0x{offset:X} is not aligned to {alignment} bytes"
        )


class ChunkLengthMismatch(DecodeError):
    """A chunk decoder did not consume exactly its declared length."""

    def __init__(self, index: int, expected: int, consumed: int):
        self.index = index
        self.expected = expected
        self.consumed = consumed
        super().__init__(
            f"chunk {index} declares {expected} bytes but its decoder "
            f"consumed {consumed}"
        )


class ChunkStructureError(DecodeError):
    """Base class for kind-specific structural errors inside one chunk."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"chunk {index}: {message}")


class InvalidGeometry(ChunkStructureError):
    def __init__(self, index: int, width: int, height: int, length: int):
        self.width = width
        self.height = height
        self.length = length
        super().__init__(
            index,
            f"{width}x{height} tile grid does not fit in {length} bytes",
        )


class InvalidEntityCount(ChunkStructureError):
    def __init__(self, index: int, count: int, length: int):
        self.count = count
        self.length = length
        super().__init__(
            index, f"entity count {count} does not fit in {length} bytes"
        )


class InvalidStringTable(ChunkStructureError):
    def __init__(self, index: int, string_index: int, offset: int):
        self.string_index = string_index
        self.offset = offset
        super().__init__(
            index,
            f"string {string_index} at 0x{offset:X} runs past the chunk "
            f"end without a terminator",
        )


class InvalidCharacter(ChunkStructureError):
    def __init__(self, index: int, offset: int, code: int):
        self.offset = offset
        self.code = code
        super().__init__(
            index, f"illegal character 0x{code:02X} at 0x{offset:X}"
        )


class ModelInvariantError(EncodeError):
    """The level model was mutated into an inconsistent state."""
    pass


class FieldOverflow(EncodeError):
    def __init__(self, field: str, value, index: Optional[int] = None):
        self.field = field
        self.value = value
        self.index = index
        where = f"chunk {index}: " if index is not None else ""
        super().__init__(f"{where}value {value!r} does not fit field {field}")


class PayloadSizeMismatch(EncodeError):
    def __init__(self, index: int, expected: int, written: int):
        self.index = index
        self.expected = expected
        self.written = written
        super().__init__(
            f"chunk {index} reported {expected} bytes but wrote {written}"
        )
