"""
Chunk payload registry
"""

from typing import Dict, Optional, Type

from .base import ChunkPayload
from .entities import EntityTablePayload
from .geometry import GeometryPayload
from .strings import StringTablePayload


class ChunkRegistry:
    """
    Maps chunk kinds to payload classes.
    Kinds without an entry are preserved as opaque payloads.
    """

    def __init__(self, register_defaults: bool = True):
        self._payloads: Dict[int, Type[ChunkPayload]] = {}
        if register_defaults:
            self.register_default_chunks()

    def register(self, payload_class: Type[ChunkPayload]) -> None:
        """
        Register a payload class under its ``kind``

        Args:
            payload_class: ChunkPayload subclass with a ``kind`` attribute
        """
        self._payloads[int(payload_class.kind)] = payload_class

    def register_default_chunks(self) -> None:
        for payload_class in (GeometryPayload, EntityTablePayload, StringTablePayload):
            self.register(payload_class)

    def get_payload_class(self, kind: int) -> Optional[Type[ChunkPayload]]:
        return self._payloads.get(kind)

    def supports(self, kind: int) -> bool:
        return kind in self._payloads

    def list_supported_chunks(self) -> Dict[int, str]:
        """Kind -> payload class name"""
        return {kind: cls.__name__ for kind, cls in sorted(self._payloads.items())}

    def copy(self) -> 'ChunkRegistry':
        clone = ChunkRegistry(register_defaults=False)
        clone._payloads = dict(self._payloads)
        return clone


# Read-only default used when a decode call passes no registry
chunk_registry = ChunkRegistry()
