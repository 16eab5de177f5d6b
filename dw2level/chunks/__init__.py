"""Chunk payload decoders package."""
from .base import ChunkPayload
from .opaque import OpaquePayload
from .geometry import GeometryPayload
from .entities import Entity, EntityTablePayload
from .strings import DungeonString, StringTablePayload
from .registry import ChunkRegistry, chunk_registry

__all__ = [
    'ChunkPayload',
    'OpaquePayload',
    'GeometryPayload',
    'Entity',
    'EntityTablePayload',
    'DungeonString',
    'StringTablePayload',
    'ChunkRegistry',
    'chunk_registry',
]
