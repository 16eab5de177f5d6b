"""String table chunk."""
from .parser import DungeonString, StringTablePayload

__all__ = ['DungeonString', 'StringTablePayload']
