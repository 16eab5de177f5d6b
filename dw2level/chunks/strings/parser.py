"""String table chunk parser."""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import logging

from ...errors import FieldOverflow, InvalidCharacter, InvalidStringTable
from ...parser.constants import STRING_TABLE_HEADER_SIZE, ChunkKind
from ...parser.cursor import ByteCursor
from ..base import ChunkPayload
from . import charmap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DungeonString:
    """A string in the game text encoding.

    The exact code sequence is kept so that strings using word codes
    are written back byte for byte.
    """
    codes: Tuple[int, ...]

    @classmethod
    def from_text(cls, text: str) -> 'DungeonString':
        return cls(tuple(charmap.encode_text(text)))

    @property
    def text(self) -> str:
        return charmap.render(self.codes)

    @property
    def size(self) -> int:
        """Encoded size including the terminator."""
        return sum(charmap.code_width(code) for code in self.codes) + 1

    def __str__(self) -> str:
        return self.text


def read_string(cursor: ByteCursor, index: int, string_index: int) -> DungeonString:
    """Read one terminated string, validating every code."""
    start = cursor.position
    codes = []
    while True:
        if not cursor.remaining:
            raise InvalidStringTable(index, string_index, start)
        offset = cursor.position
        code = cursor.read_u8()
        if code == charmap.TERMINATOR:
            break
        if code == charmap.WORD_PREFIX:
            if not cursor.remaining:
                raise InvalidStringTable(index, string_index, start)
            code = (code << 8) | cursor.read_u8()
        if not charmap.is_known(code):
            raise InvalidCharacter(index, offset, code)
        codes.append(code)
    return DungeonString(tuple(codes))


def write_string(cursor: ByteCursor, value: DungeonString, index: int) -> None:
    for code in value.codes:
        if not charmap.is_known(code):
            raise FieldOverflow('character', code, index)
        if code > 0xFF:
            cursor.write_u8(code >> 8)
            cursor.write_u8(code & 0xFF)
        else:
            cursor.write_u8(code)
    cursor.write_u8(charmap.TERMINATOR)


class StringTablePayload(ChunkPayload):
    """Names used by a dungeon floor.

    Layout:
        count    u16
        strings  count terminated strings
    """

    kind = ChunkKind.STRINGS

    def __init__(self, strings: Optional[Iterable[DungeonString]] = None):
        self.strings: List[DungeonString] = list(strings or [])

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> 'StringTablePayload':
        return cls(DungeonString.from_text(text) for text in texts)

    @classmethod
    def decode(cls, cursor: ByteCursor, index: int) -> 'StringTablePayload':
        if cursor.remaining < STRING_TABLE_HEADER_SIZE:
            raise InvalidStringTable(index, 0, cursor.position)
        count = cursor.read_u16()
        strings = [read_string(cursor, index, i) for i in range(count)]
        logger.debug(f"Chunk {index}: {count} strings")
        return cls(strings)

    def encode(self, cursor: ByteCursor, index: int) -> None:
        if len(self.strings) > 0xFFFF:
            raise FieldOverflow('count', len(self.strings), index)
        cursor.write_u16(len(self.strings))
        for value in self.strings:
            write_string(cursor, value, index)

    @property
    def size(self) -> int:
        return STRING_TABLE_HEADER_SIZE + sum(s.size for s in self.strings)

    @property
    def texts(self) -> List[str]:
        return [s.text for s in self.strings]

    def __len__(self) -> int:
        return len(self.strings)

    def __eq__(self, other):
        if not isinstance(other, StringTablePayload):
            return NotImplemented
        return self.strings == other.strings

    def __repr__(self) -> str:
        return f"StringTablePayload({self.texts!r})"
