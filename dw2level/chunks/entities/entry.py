"""Entity placement record."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from construct import Int8ul, Int16ul, Struct

from ...parser.constants import ENTITY_RECORD_SIZE, EntityKind

EntityRecordStruct = Struct(
    "kind" / Int8ul,
    "x" / Int8ul,
    "y" / Int8ul,
    "flags" / Int8ul,
    "value" / Int16ul,
    "param" / Int16ul,
)

assert EntityRecordStruct.sizeof() == ENTITY_RECORD_SIZE


@dataclass
class Entity:
    """One placed warp, chest, trap or digimon.

    ``kind`` is kept as a plain integer so values outside
    :class:`EntityKind` survive a round trip.
    """
    kind: int
    x: int
    y: int
    flags: int = 0
    value: int = 0
    param: int = 0

    @property
    def entity_kind(self) -> Optional[EntityKind]:
        try:
            return EntityKind(self.kind)
        except ValueError:
            return None

    @classmethod
    def from_record(cls, record: Any) -> 'Entity':
        return cls(
            kind=record.kind,
            x=record.x,
            y=record.y,
            flags=record.flags,
            value=record.value,
            param=record.param,
        )

    def to_record(self) -> Dict[str, int]:
        return asdict(self)
