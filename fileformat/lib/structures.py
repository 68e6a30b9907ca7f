"""
Interfaces and classes to read structured data from seekable binary streams. Unlike an in-memory
parser, a `fileformat.lib.structures.StructReader` never assumes that the whole input is buffered;
every read is bounded and every short read raises `fileformat.lib.structures.EOF`.
"""
from __future__ import annotations

import contextlib
import functools
import io

from typing import TYPE_CHECKING, BinaryIO, Generic, TypeVar, cast
from uuid import UUID

if TYPE_CHECKING:
    from typing import Self

    from fileformat.lib.types import buf

R = TypeVar('R', bound=io.IOBase)


class EOF(EOFError):
    """
    While reading from a `fileformat.lib.structures.StructReader`, less bytes were available than
    requested. The exception contains the data from the incomplete read.
    """
    def __init__(self, size: int, rest: buf = B''):
        super().__init__(F'Unexpected end of stream; attempted to read {size} bytes, but got only {len(rest)}.')
        self.rest = rest
        self.size = size

    def __bytes__(self):
        return bytes(self.rest)


class Malformed(ValueError):
    """
    The data read from the stream violates the structure of the format that is being parsed. This
    covers invalid magic values, pointers that leave the stream, cyclic chains, and sizes that do
    not fit into their parent structure.
    """


class StreamDetour(Generic[R]):
    """
    A stream detour is used as a context manager to temporarily read from a different location
    in the stream and then return to the original offset when the context ends.
    """
    def __init__(self, stream: R, offset: int | None = None, whence: int = io.SEEK_SET):
        self.stream = stream
        self.offset = offset
        self.whence = whence

    def __enter__(self):
        self.cursor = self.stream.tell()
        if self.offset is not None:
            self.stream.seek(self.offset, self.whence)
        return self

    def __exit__(self, *args):
        self.stream.seek(self.cursor, io.SEEK_SET)


class MemoryFile(io.RawIOBase):
    """
    A thin, read-only wrapper around byte sequences which gives it the features of a seekable
    file-like object without copying the data.
    """
    def __init__(self, data: buf, name: str = ''):
        super().__init__()
        self._data = memoryview(data).cast('B') if isinstance(data, memoryview) else data
        self._cursor = 0
        self._name = name

    @property
    def name(self):
        return self._name

    def __len__(self):
        return len(self._data)

    def readable(self) -> bool:
        return not self.closed

    def seekable(self) -> bool:
        return not self.closed

    def writable(self) -> bool:
        return False

    @property
    def eof(self) -> bool:
        return self.closed or self._cursor >= len(self._data)

    @property
    def remaining_bytes(self) -> int:
        return len(self._data) - self.tell()

    def read(self, size: int | None = -1) -> bytes:
        beginning = self._cursor
        if size is None or size < 0:
            end = len(self._data)
        else:
            end = min(self._cursor + size, len(self._data))
        self._cursor = max(end, beginning)
        return bytes(self._data[beginning:end])

    def readall(self) -> bytes:
        return self.read()

    def readinto(self, b) -> int:
        data = self.read(len(b))
        size = len(data)
        b[:size] = data
        return size

    def tell(self) -> int:
        return self._cursor

    def seek(self, offset: int, whence=io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            if offset < 0:
                raise ValueError('no negative offsets allowed for SEEK_SET.')
            self._cursor = offset
        elif whence == io.SEEK_CUR:
            self._cursor += offset
        elif whence == io.SEEK_END:
            self._cursor = len(self._data) + offset
        else:
            raise ValueError(F'invalid whence value: {whence}')
        self._cursor = max(self._cursor, 0)
        return self._cursor


class StructReader:
    """
    Provides methods to read structured data from a seekable binary stream. All offsets are
    relative to the stream position at the time the reader was created, so a reader can be
    placed on a stream that contains the data of interest after some other content. Reads that
    would go beyond the end of the stream raise `fileformat.lib.structures.EOF`; errors of the
    underlying stream are never caught.
    """
    __slots__ = 'stream', 'base', 'bigendian', '_size'

    def __init__(self, stream: BinaryIO | StructReader, bigendian: bool = False):
        if isinstance(stream, StructReader):
            self.stream = stream.stream
            self.base = stream.base
            self._size = stream._size
        else:
            self.stream = stream
            self.base = stream.tell()
            self._size = None
        self.bigendian = bigendian

    @property
    @contextlib.contextmanager
    def be(self):
        bigendian = self.bigendian
        self.bigendian = True
        try:
            yield self
        finally:
            self.bigendian = bigendian

    @property
    def byteorder_name(self):
        return 'big' if self.bigendian else 'little'

    @property
    def size(self) -> int:
        """
        The number of bytes available in the stream, measured from the base offset. The value is
        computed once by seeking to the end of the stream.
        """
        if (size := self._size) is None:
            with StreamDetour(self.stream, 0, io.SEEK_END) as detour:
                size = max(self.stream.tell() - self.base, 0)
            self._size = size
            del detour
        return size

    def __len__(self):
        return self.size

    @property
    def eof(self) -> bool:
        return self.tell() >= self.size

    @property
    def remaining_bytes(self) -> int:
        return max(self.size - self.tell(), 0)

    def tell(self) -> int:
        return self.stream.tell() - self.base

    def seek(self, offset: int, whence=io.SEEK_SET) -> int:
        if whence == io.SEEK_CUR:
            offset += self.tell()
        elif whence == io.SEEK_END:
            offset += self.size
        if offset < 0:
            raise EOF(-offset)
        self.stream.seek(self.base + offset, io.SEEK_SET)
        return offset

    def seekset(self, offset: int) -> int:
        if offset < 0:
            return self.seek(offset, io.SEEK_END)
        else:
            return self.seek(offset, io.SEEK_SET)

    def seekrel(self, offset: int) -> int:
        return self.seek(offset, io.SEEK_CUR)

    def skip(self, n: int):
        """
        Move the cursor forward by `n` bytes. Raises `fileformat.lib.structures.EOF` if this would
        move the cursor past the end of the stream.
        """
        if n > (rest := self.remaining_bytes):
            raise EOF(n, self.peek(rest))
        self.seekrel(n)

    def detour(self, offset: int | None = None, whence: int = io.SEEK_SET):
        if offset is not None and whence == io.SEEK_SET:
            offset += self.base
        return StreamDetour(cast(io.IOBase, self.stream), offset, whence=whence)

    def read(self, size: int | None = None, peek: bool = False) -> bytes:
        """
        Read up to `size` bytes from the stream. Streams that deliver fewer bytes than requested
        are read repeatedly until either enough data was collected or the stream is exhausted.
        """
        cursor = self.tell()
        if size is None or size < 0:
            data = self.stream.read()
        else:
            data = self.stream.read(size)
            if data and len(data) < size:
                chunks = [data]
                total = len(data)
                while total < size:
                    chunk = self.stream.read(size - total)
                    if not chunk:
                        break
                    chunks.append(chunk)
                    total += len(chunk)
                data = B''.join(chunks)
        data = bytes(data or B'')
        if peek:
            self.seek(cursor)
        return data

    def peek(self, size: int) -> bytes:
        return self.read(size, peek=True)

    def readif(self, value: bytes) -> bool:
        if match := self.peek(len(value)) == value:
            self.seekrel(len(value))
        return match

    def read_exactly(self, size: int, peek: bool = False) -> bytes:
        """
        Read bytes from the underlying stream. Raises an exception of type
        `fileformat.lib.structures.EOF` when fewer data is available in the stream than requested
        via the `size` parameter. The remaining data can be extracted from the exception.
        """
        if size < 0:
            raise Malformed(F'attempted to read a negative number of bytes: {size}')
        data = self.read(size, peek)
        if len(data) < size:
            raise EOF(size, data)
        return data

    def read_integer(self, size: int, peek: bool = False) -> int:
        """
        Read an integer of the given size (in bits) from the stream.
        """
        nbytes, rest = divmod(size, 8)
        if rest > 0:
            raise ValueError(
                F'A {self.__class__.__name__} cannot read {size} bit{"s" * (size > 1)}, only multiples of 8 are possible.')
        data = self.read_exactly(nbytes, peek)
        return int.from_bytes(data, self.byteorder_name)

    def read_byte(self, peek: bool = False) -> int:
        return self.read_exactly(1, peek)[0]

    u8 = read_byte

    def u16(self, peek: bool = False) -> int:
        return self.read_integer(16, peek)

    def u32(self, peek: bool = False) -> int:
        return self.read_integer(32, peek)

    def u64(self, peek: bool = False) -> int:
        return self.read_integer(64, peek)

    def read_guid(self) -> UUID:
        return UUID(bytes_le=self.read_exactly(16))


class StructMeta(type):
    """
    A metaclass to facilitate the behavior outlined for `fileformat.lib.structures.Struct`.
    """
    def __init__(cls, name, bases, nmspc, **_):
        super().__init__(name, bases, nmspc)
        original__init__ = cls.__init__

        @functools.wraps(original__init__)
        def wrapped__init__(self: Struct, reader: StructReader, *args, **kwargs):
            start = reader.tell()
            original__init__(self, reader, *args, **kwargs)
            self._offset = start
            self._length = reader.tell() - start

        setattr(cls, '__init__', wrapped__init__)


class Struct(metaclass=StructMeta):
    """
    A class to parse structured data. A `fileformat.lib.structures.Struct` subclass implements its
    `__init__` method to consume its fields from a `fileformat.lib.structures.StructReader`:

        header = Header.Parse(stream)

    The offset at which parsing started and the number of bytes consumed are recorded and
    available via `offset` and `len`. Additional arguments are passed through.
    """
    _offset: int
    _length: int

    @classmethod
    def Parse(cls, reader: BinaryIO | StructReader, *args, **kwargs) -> Self:
        if not isinstance(reader, StructReader):
            reader = StructReader(reader)
        return cls(reader, *args, **kwargs)

    @property
    def offset(self) -> int:
        return self._offset

    def __len__(self):
        return self._length

    def __init__(self, reader: StructReader, *args, **kwargs):
        pass
