"""Floor plan chunk."""
from .parser import GeometryPayload

__all__ = ['GeometryPayload']
