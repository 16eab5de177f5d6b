"""Layout policy for decoding and encoding level files."""
from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutPolicy:
    """Rules for chunk placement that are not fixed by the format itself.

    Attributes:
        alignment: Encoder places every chunk payload at a multiple of this
        allow_overlap: If False, decoding rejects overlapping chunk ranges
        require_alignment: If True, decoding rejects chunks whose offset is
            not a multiple of ``alignment``
        preserve_padding: Keep bytes between and after chunks on decode and
            write them back on encode
    """
    alignment: int = 1
    allow_overlap: bool = True
    require_alignment: bool = False
    preserve_padding: bool = True

    def __post_init__(self):
        if self.alignment < 1:
            raise ValueError(f"alignment must be positive, got {self.alignment}")

    def align(self, offset: int) -> int:
        """Round offset up to the next multiple of the alignment."""
        remainder = offset % self.alignment
        if remainder:
            return offset + self.alignment - remainder
        return offset


DEFAULT_POLICY = LayoutPolicy()

STRICT_POLICY = LayoutPolicy(
    alignment=4,
    allow_overlap=False,
    require_alignment=True,
)
