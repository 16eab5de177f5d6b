"""Digimon World 2 level file decoder and encoder."""
from .errors import (
    LevelFormatError,
    DecodeError,
    EncodeError,
    OutOfBounds,
    InvalidMagic,
    UnsupportedVersion,
    TruncatedChunkTable,
    InvalidTableOffset,
    ChunkOutOfBounds,
    ChunkOverlap,
    MisalignedChunk,
    ChunkLengthMismatch,
    ChunkStructureError,
    InvalidGeometry,
    InvalidEntityCount,
    InvalidStringTable,
    InvalidCharacter,
    ModelInvariantError,
    FieldOverflow,
    PayloadSizeMismatch,
)
from .config import LayoutPolicy, DEFAULT_POLICY, STRICT_POLICY
from .parser.level_parser import decode
from .parser import ByteCursor, ChunkDescriptor, ChunkKind, EntityKind, FileHeader
from .chunks import (
    ChunkPayload,
    ChunkRegistry,
    DungeonString,
    Entity,
    EntityTablePayload,
    GeometryPayload,
    OpaquePayload,
    StringTablePayload,
)
from .model import LevelModel
from .writer import encode

__version__ = '0.1.0'

__all__ = [
    'decode',
    'encode',
    'LevelModel',
    'LayoutPolicy',
    'DEFAULT_POLICY',
    'STRICT_POLICY',
    'ByteCursor',
    'FileHeader',
    'ChunkDescriptor',
    'ChunkKind',
    'EntityKind',
    'ChunkPayload',
    'ChunkRegistry',
    'OpaquePayload',
    'GeometryPayload',
    'Entity',
    'EntityTablePayload',
    'DungeonString',
    'StringTablePayload',
    'LevelFormatError',
    'DecodeError',
    'EncodeError',
    'OutOfBounds',
    'InvalidMagic',
    'UnsupportedVersion',
    'TruncatedChunkTable',
    'InvalidTableOffset',
    'ChunkOutOfBounds',
    'ChunkOverlap',
    'MisalignedChunk',
    'ChunkLengthMismatch',
    'ChunkStructureError',
    'InvalidGeometry',
    'InvalidEntityCount',
    'InvalidStringTable',
    'InvalidCharacter',
    'ModelInvariantError',
    'FieldOverflow',
    'PayloadSizeMismatch',
]
