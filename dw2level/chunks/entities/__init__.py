"""Entity placement chunk."""
from .entry import Entity
from .parser import EntityTablePayload

__all__ = ['Entity', 'EntityTablePayload']
