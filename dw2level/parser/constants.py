# dw2level/parser/constants.py
from enum import IntEnum

MAGIC = b'DW2L'
SUPPORTED_VERSIONS = frozenset({1})
CURRENT_VERSION = 1

HEADER_SIZE = 16
DESCRIPTOR_SIZE = 12

# Standard dungeon floor plan
FLOOR_PLAN_WIDTH = 32
FLOOR_PLAN_HEIGHT = 48

GEOMETRY_HEADER_SIZE = 4
ENTITY_TABLE_HEADER_SIZE = 8
ENTITY_RECORD_SIZE = 8
STRING_TABLE_HEADER_SIZE = 2


class ChunkKind(IntEnum):
    """Chunk kinds with a dedicated payload decoder."""
    GEOMETRY = 1   # Floor plan tile grid
    ENTITIES = 2   # Warps, chests, traps, digimon
    STRINGS = 3    # Names in the game text encoding


class EntityKind(IntEnum):
    """Entity categories of a layout's placement lists."""
    WARP = 0
    CHEST = 1
    TRAP = 2
    DIGIMON = 3
