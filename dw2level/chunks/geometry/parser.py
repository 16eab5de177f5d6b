"""Floor plan (geometry) chunk parser."""
import logging

import numpy as np

from ...errors import FieldOverflow, InvalidGeometry
from ...parser.constants import (
    FLOOR_PLAN_HEIGHT,
    FLOOR_PLAN_WIDTH,
    GEOMETRY_HEADER_SIZE,
    ChunkKind,
)
from ...parser.cursor import ByteCursor
from ..base import ChunkPayload

logger = logging.getLogger(__name__)

MAX_DIMENSION = 0xFFFF


class GeometryPayload(ChunkPayload):
    """Tile grid of one dungeon floor layout.

    Layout:
        width   u16
        height  u16
        tiles   width * height bytes, row-major

    ``tiles`` is a uint8 array of shape (height, width), indexed
    ``tiles[y, x]``.
    """

    kind = ChunkKind.GEOMETRY

    def __init__(self, tiles: np.ndarray):
        tiles = np.asarray(tiles)
        if tiles.ndim != 2:
            raise ValueError(f"Tile grid must be 2-dimensional, got shape {tiles.shape}")
        self.tiles = tiles

    @classmethod
    def blank(cls,
              width: int = FLOOR_PLAN_WIDTH,
              height: int = FLOOR_PLAN_HEIGHT,
              fill: int = 0) -> 'GeometryPayload':
        """Create a grid filled with a single tile value."""
        return cls(np.full((height, width), fill, dtype=np.uint8))

    @classmethod
    def decode(cls, cursor: ByteCursor, index: int) -> 'GeometryPayload':
        length = cursor.remaining
        if length < GEOMETRY_HEADER_SIZE:
            raise InvalidGeometry(index, 0, 0, length)
        width = cursor.read_u16()
        height = cursor.read_u16()
        if GEOMETRY_HEADER_SIZE + width * height > length:
            raise InvalidGeometry(index, width, height, length)

        data = cursor.read_bytes(width * height)
        tiles = np.frombuffer(data, dtype=np.uint8).reshape(height, width).copy()
        logger.debug(f"Chunk {index}: {width}x{height} floor plan")
        return cls(tiles)

    def encode(self, cursor: ByteCursor, index: int) -> None:
        height, width = self.tiles.shape
        if width > MAX_DIMENSION:
            raise FieldOverflow('width', width, index)
        if height > MAX_DIMENSION:
            raise FieldOverflow('height', height, index)
        if self.tiles.size and (self.tiles.min() < 0 or self.tiles.max() > 0xFF):
            bad = self.tiles[(self.tiles < 0) | (self.tiles > 0xFF)][0]
            raise FieldOverflow('tile', int(bad), index)

        cursor.write_u16(width)
        cursor.write_u16(height)
        cursor.write_bytes(self.tiles.astype(np.uint8).tobytes(order='C'))

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    @property
    def height(self) -> int:
        return self.tiles.shape[0]

    @property
    def size(self) -> int:
        return GEOMETRY_HEADER_SIZE + self.tiles.size

    def tile(self, x: int, y: int) -> int:
        return int(self.tiles[y, x])

    def set_tile(self, x: int, y: int, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Tile value must be 0..255, got {value}")
        self.tiles[y, x] = value

    def find_tiles(self, value: int) -> list:
        """Return (x, y) positions of every tile with the given value."""
        ys, xs = np.nonzero(self.tiles == value)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def __eq__(self, other):
        if not isinstance(other, GeometryPayload):
            return NotImplemented
        return np.array_equal(self.tiles, other.tiles)

    def __repr__(self) -> str:
        return f"GeometryPayload({self.width}x{self.height})"
