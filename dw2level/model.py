"""In-memory level model."""
from dataclasses import replace
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

from .chunks.base import ChunkPayload
from .errors import ModelInvariantError
from .parser.chunk_table import ChunkDescriptor
from .parser.constants import CURRENT_VERSION, HEADER_SIZE, MAGIC
from .parser.header import FileHeader, check_version

logger = logging.getLogger(__name__)


class LevelModel:
    """Header, chunk table and chunk payloads of one level file.

    Descriptors and payloads are index-aligned and kept in on-disk order.
    Descriptors are informational between mutations: offsets and lengths
    become authoritative again only when the model is encoded.

    Bytes on disk that belong to no chunk are kept so an unmodified
    model re-encodes to the same file:

    - ``table_padding``: bytes between the header and the chunk table
    - ``paddings[i]``: bytes between the previous region and chunk ``i``
    - ``trailing``: bytes after the last region
    """

    def __init__(self,
                 header: FileHeader,
                 descriptors: Sequence[ChunkDescriptor],
                 payloads: Sequence[ChunkPayload],
                 paddings: Optional[Sequence[bytes]] = None,
                 table_padding: bytes = b'',
                 trailing: bytes = b''):
        if paddings is None:
            paddings = [b''] * len(payloads)
        if not (len(descriptors) == len(payloads) == len(paddings) == header.chunk_count):
            raise ValueError(
                f"Header declares {header.chunk_count} chunks but got "
                f"{len(descriptors)} descriptors, {len(payloads)} payloads "
                f"and {len(paddings)} paddings"
            )
        self._header = header
        self._descriptors: List[ChunkDescriptor] = list(descriptors)
        self._payloads: List[ChunkPayload] = list(payloads)
        self._paddings: List[bytes] = [bytes(p) for p in paddings]
        self.table_padding = bytes(table_padding)
        self.trailing = bytes(trailing)

    @classmethod
    def create(cls, version: int = CURRENT_VERSION) -> 'LevelModel':
        """Create an empty level with no chunks."""
        check_version(version)
        header = FileHeader(
            magic=MAGIC,
            version=version,
            chunk_count=0,
            chunk_table_offset=HEADER_SIZE,
        )
        return cls(header, [], [])

    # Header

    @property
    def header(self) -> FileHeader:
        """Decoded file header.

        Only ``version`` is settable. The magic is fixed, and ``chunk_count``
        follows the chunk list. ``chunk_table_offset`` is the decoded value
        until the next encode, which computes a fresh one.
        """
        return self._header

    @property
    def version(self) -> int:
        return self._header.version

    @version.setter
    def version(self, value: int) -> None:
        check_version(value)
        self._header = replace(self._header, version=value)

    @property
    def chunk_count(self) -> int:
        return self._header.chunk_count

    def __len__(self) -> int:
        return self.chunk_count

    # Chunks

    def descriptor(self, index: int) -> ChunkDescriptor:
        return self._descriptors[index]

    @property
    def descriptors(self) -> Tuple[ChunkDescriptor, ...]:
        return tuple(self._descriptors)

    def payload(self, index: int) -> ChunkPayload:
        return self._payloads[index]

    @property
    def payloads(self) -> Tuple[ChunkPayload, ...]:
        return tuple(self._payloads)

    @property
    def paddings(self) -> Tuple[bytes, ...]:
        return tuple(self._paddings)

    def __iter__(self) -> Iterator[ChunkPayload]:
        return iter(self._payloads)

    def set_payload(self, index: int, payload: ChunkPayload) -> None:
        """Replace the payload at ``index``.

        The descriptor takes the new payload's kind and size; its offset is
        left as decoded until the next encode.
        """
        if not isinstance(payload, ChunkPayload):
            raise TypeError(f"Expected a ChunkPayload, got {type(payload).__name__}")
        old = self._descriptors[index]
        self._payloads[index] = payload
        self._descriptors[index] = ChunkDescriptor(
            kind=payload.chunk_kind,
            offset=old.offset,
            length=payload.size,
        )
        logger.debug(f"Replaced chunk {index} with {payload!r}")

    def append_chunk(self, payload: ChunkPayload, padding: bytes = b'') -> int:
        """Add a chunk after the last one and return its index."""
        if not isinstance(payload, ChunkPayload):
            raise TypeError(f"Expected a ChunkPayload, got {type(payload).__name__}")
        self._payloads.append(payload)
        self._descriptors.append(ChunkDescriptor(payload.chunk_kind, 0, payload.size))
        self._paddings.append(bytes(padding))
        self._header = replace(self._header, chunk_count=len(self._payloads))
        return len(self._payloads) - 1

    def remove_chunk(self, index: int) -> ChunkPayload:
        """Remove the chunk at ``index`` and return its payload."""
        payload = self._payloads.pop(index)
        del self._descriptors[index]
        del self._paddings[index]
        self._header = replace(self._header, chunk_count=len(self._payloads))
        return payload

    def chunks_of_kind(self, kind: int) -> List[ChunkPayload]:
        return [p for p in self._payloads if p.chunk_kind == kind]

    def chunk_bytes(self, index: int) -> bytes:
        """Serialized bytes of one chunk payload."""
        return self._payloads[index].to_bytes(index)

    def check_invariants(self) -> None:
        """Raise ModelInvariantError if the model is inconsistent."""
        counts = (len(self._descriptors), len(self._payloads), len(self._paddings))
        if any(count != self._header.chunk_count for count in counts):
            raise ModelInvariantError(
                f"Header declares {self._header.chunk_count} chunks but model "
                f"holds {counts[0]} descriptors, {counts[1]} payloads and "
                f"{counts[2]} paddings"
            )
        for index, payload in enumerate(self._payloads):
            if not isinstance(payload, ChunkPayload):
                raise ModelInvariantError(
                    f"Chunk {index} holds {type(payload).__name__}, not a ChunkPayload"
                )

    def __eq__(self, other):
        # Offsets are assigned by the encoder and take no part in equality
        if not isinstance(other, LevelModel):
            return NotImplemented
        return (
            self._header.magic == other._header.magic
            and self._header.version == other._header.version
            and self._header.chunk_count == other._header.chunk_count
            and self._chunk_shapes() == other._chunk_shapes()
            and self._payloads == other._payloads
            and self._paddings == other._paddings
            and self.table_padding == other.table_padding
            and self.trailing == other.trailing
        )

    def _chunk_shapes(self) -> List[Tuple[int, int]]:
        return [(d.kind, d.length) for d in self._descriptors]

    def __repr__(self) -> str:
        return (
            f"LevelModel(version={self.version}, "
            f"chunks={self._payloads!r})"
        )
