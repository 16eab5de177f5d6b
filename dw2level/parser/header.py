"""File header record."""
from dataclasses import dataclass
import logging

from construct import Bytes, Int32ul, Struct

from ..errors import InvalidMagic, UnsupportedVersion
from .constants import HEADER_SIZE, MAGIC, SUPPORTED_VERSIONS
from .cursor import ByteCursor

logger = logging.getLogger(__name__)

FileHeaderStruct = Struct(
    "magic" / Bytes(4),
    "version" / Int32ul,
    "chunk_count" / Int32ul,
    "chunk_table_offset" / Int32ul,
)

assert FileHeaderStruct.sizeof() == HEADER_SIZE


@dataclass(frozen=True)
class FileHeader:
    magic: bytes
    version: int
    chunk_count: int
    chunk_table_offset: int


def check_version(version: int) -> None:
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersion(version, SUPPORTED_VERSIONS)


def decode_header(cursor: ByteCursor) -> FileHeader:
    """Read the file header at the cursor position.

    Raises:
        OutOfBounds: If the buffer is shorter than a header
        InvalidMagic: If the tag is not ``DW2L``
        UnsupportedVersion: If the version is not in the supported set
    """
    raw = cursor.read_struct(FileHeaderStruct)
    if raw.magic != MAGIC:
        raise InvalidMagic(raw.magic, MAGIC)
    check_version(raw.version)

    header = FileHeader(
        magic=raw.magic,
        version=raw.version,
        chunk_count=raw.chunk_count,
        chunk_table_offset=raw.chunk_table_offset,
    )
    logger.debug(
        f"Header: version {header.version}, {header.chunk_count} chunks, "
        f"table at 0x{header.chunk_table_offset:X}"
    )
    return header


def encode_header(cursor: ByteCursor, header: FileHeader) -> None:
    cursor.write_struct(FileHeaderStruct, dict(
        magic=header.magic,
        version=header.version,
        chunk_count=header.chunk_count,
        chunk_table_offset=header.chunk_table_offset,
    ))
