"""Entity table chunk parser."""
from typing import Iterable, List, Optional
import logging

from ...errors import FieldOverflow, InvalidEntityCount
from ...parser.constants import (
    ENTITY_RECORD_SIZE,
    ENTITY_TABLE_HEADER_SIZE,
    ChunkKind,
    EntityKind,
)
from ...parser.cursor import ByteCursor
from ..base import ChunkPayload
from .entry import Entity, EntityRecordStruct

logger = logging.getLogger(__name__)


class EntityTablePayload(ChunkPayload):
    """Entity placements of one floor layout.

    Layout:
        count     u32
        reserved  u32
        records   count * 8 bytes
    """

    kind = ChunkKind.ENTITIES

    def __init__(self, entities: Optional[Iterable[Entity]] = None, reserved: int = 0):
        self.entities: List[Entity] = list(entities or [])
        self.reserved = reserved

    @classmethod
    def decode(cls, cursor: ByteCursor, index: int) -> 'EntityTablePayload':
        length = cursor.remaining
        if length < ENTITY_TABLE_HEADER_SIZE:
            raise InvalidEntityCount(index, 0, length)
        count = cursor.read_u32()
        reserved = cursor.read_u32()
        if ENTITY_TABLE_HEADER_SIZE + count * ENTITY_RECORD_SIZE > length:
            raise InvalidEntityCount(index, count, length)

        entities = [
            Entity.from_record(cursor.read_struct(EntityRecordStruct))
            for _ in range(count)
        ]
        logger.debug(f"Chunk {index}: {count} entities")
        return cls(entities, reserved)

    def encode(self, cursor: ByteCursor, index: int) -> None:
        try:
            cursor.write_u32(len(self.entities))
            cursor.write_u32(self.reserved)
            for entity in self.entities:
                cursor.write_struct(EntityRecordStruct, entity.to_record())
        except FieldOverflow as e:
            raise FieldOverflow(e.field, e.value, index) from e

    @property
    def size(self) -> int:
        return ENTITY_TABLE_HEADER_SIZE + len(self.entities) * ENTITY_RECORD_SIZE

    def of_kind(self, kind: int) -> List[Entity]:
        return [e for e in self.entities if e.kind == kind]

    @property
    def warps(self) -> List[Entity]:
        return self.of_kind(EntityKind.WARP)

    @property
    def chests(self) -> List[Entity]:
        return self.of_kind(EntityKind.CHEST)

    @property
    def traps(self) -> List[Entity]:
        return self.of_kind(EntityKind.TRAP)

    @property
    def digimon(self) -> List[Entity]:
        return self.of_kind(EntityKind.DIGIMON)

    def __len__(self) -> int:
        return len(self.entities)

    def __eq__(self, other):
        if not isinstance(other, EntityTablePayload):
            return NotImplemented
        return self.entities == other.entities and self.reserved == other.reserved

    def __repr__(self) -> str:
        return f"EntityTablePayload({len(self.entities)} entities)"
