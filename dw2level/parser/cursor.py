"""Bounds-checked reader/writer over a fixed-size byte buffer."""
import struct
from typing import Any, Optional, Union

from construct import Construct, ConstructError

from ..errors import FieldOverflow, OutOfBounds

Buffer = Union[bytes, bytearray]


class ByteCursor:
    """Typed reads and writes with a moving cursor.

    Positions are absolute offsets into the underlying buffer. The cursor
    may only touch bytes inside its ``[start, end)`` window; :meth:`slice`
    hands out a sub-cursor confined to one chunk so a chunk decoder can
    never stray into its neighbours.

    Every access checks bounds before touching the buffer and raises
    :class:`OutOfBounds` without moving the position.
    """

    __slots__ = ('_buffer', '_pos', '_start', '_end', '_order')

    def __init__(self,
                 buffer: Buffer,
                 start: int = 0,
                 end: Optional[int] = None,
                 byteorder: str = '<'):
        if byteorder not in ('<', '>'):
            raise ValueError(f"byteorder must be '<' or '>', got {byteorder!r}")
        if end is None:
            end = len(buffer)
        if not 0 <= start <= end <= len(buffer):
            raise OutOfBounds(start, max(end - start, 0), len(buffer))
        self._buffer = buffer
        self._pos = start
        self._start = start
        self._end = end
        self._order = byteorder

    @classmethod
    def allocate(cls, size: int, byteorder: str = '<') -> 'ByteCursor':
        """Create a write-mode cursor over a zeroed buffer of ``size`` bytes."""
        return cls(bytearray(size), byteorder=byteorder)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    @property
    def consumed(self) -> int:
        """Bytes between the window start and the current position."""
        return self._pos - self._start

    @property
    def writable(self) -> bool:
        return isinstance(self._buffer, bytearray)

    def getvalue(self) -> bytes:
        """Return a copy of the bytes in this cursor's window."""
        return bytes(self._buffer[self._start:self._end])

    def _check(self, size: int) -> int:
        if size < 0 or self._pos + size > self._end:
            raise OutOfBounds(self._pos, size, self._end)
        return self._pos

    def seek(self, offset: int) -> None:
        """Move to an absolute offset inside the window (end is allowed)."""
        if offset < self._start or offset > self._end:
            raise OutOfBounds(offset, 0, self._end)
        self._pos = offset

    def skip(self, size: int) -> None:
        self._pos = self._check(size) + size

    def slice(self, offset: int, length: int) -> 'ByteCursor':
        """Return a cursor bounded to ``[offset, offset + length)``.

        Does not move this cursor.
        """
        if offset < self._start or length < 0 or offset + length > self._end:
            raise OutOfBounds(offset, length, self._end)
        return ByteCursor(self._buffer, offset, offset + length, self._order)

    # Reading

    def _unpack(self, fmt: str, size: int) -> int:
        pos = self._check(size)
        value = struct.unpack_from(self._order + fmt, self._buffer, pos)[0]
        self._pos = pos + size
        return value

    def read_u8(self) -> int:
        return self._unpack('B', 1)

    def read_u16(self) -> int:
        return self._unpack('H', 2)

    def read_u32(self) -> int:
        return self._unpack('I', 4)

    def read_bytes(self, size: int) -> bytes:
        pos = self._check(size)
        self._pos = pos + size
        return bytes(self._buffer[pos:pos + size])

    def read_fixed_string(self, size: int, encoding: str = 'ascii') -> str:
        """Read a fixed-size string, trimming null termination"""
        return self.read_bytes(size).split(b'\0', 1)[0].decode(encoding, 'replace')

    def read_struct(self, record: Construct) -> Any:
        """Read one fixed-size ``construct`` record."""
        size = record.sizeof()
        pos = self._check(size)
        data = bytes(self._buffer[pos:pos + size])
        try:
            value = record.parse(data)
        except ConstructError as e:
            raise OutOfBounds(pos, size, self._end) from e
        self._pos = pos + size
        return value

    def peek_u8(self) -> int:
        pos = self._check(1)
        return self._buffer[pos]

    # Writing

    def _require_writable(self) -> None:
        if not self.writable:
            raise TypeError("cursor buffer is read-only")

    def _put(self, data: bytes) -> None:
        self._require_writable()
        pos = self._check(len(data))
        self._buffer[pos:pos + len(data)] = data
        self._pos = pos + len(data)

    def _pack(self, fmt: str, value: int, field: str) -> None:
        try:
            data = struct.pack(self._order + fmt, value)
        except struct.error as e:
            raise FieldOverflow(field, value) from e
        self._put(data)

    def write_u8(self, value: int) -> None:
        self._pack('B', value, 'u8')

    def write_u16(self, value: int) -> None:
        self._pack('H', value, 'u16')

    def write_u32(self, value: int) -> None:
        self._pack('I', value, 'u32')

    def write_bytes(self, data: bytes) -> None:
        self._put(bytes(data))

    def write_fixed_string(self, value: str, size: int, encoding: str = 'ascii') -> None:
        """Write a string NUL-padded to exactly ``size`` bytes."""
        try:
            encoded = value.encode(encoding)
        except UnicodeEncodeError as e:
            raise FieldOverflow(f'string[{size}]', value) from e
        if len(encoded) > size:
            raise FieldOverflow(f'string[{size}]', value)
        self._put(encoded.ljust(size, b'\0'))

    def write_struct(self, record: Construct, value: Any) -> None:
        """Write one fixed-size ``construct`` record."""
        try:
            data = record.build(value)
        except ConstructError as e:
            raise FieldOverflow(getattr(e, 'path', None) or 'record', value) from e
        self._put(data)

    def __repr__(self) -> str:
        return (
            f"ByteCursor(position=0x{self._pos:X}, "
            f"window=0x{self._start:X}..0x{self._end:X})"
        )
