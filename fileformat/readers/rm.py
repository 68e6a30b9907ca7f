"""
Chunk reader for RealMedia files. The file is a sequence of chunks with a four-character tag, a
size, and a version. The media properties chunks declare the MIME type of each stream.
"""
from __future__ import annotations

from typing import Iterator

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader

__all__ = [
    'RealMediaChunk',
    'get_rm_format',
]

MAX_CHUNKS = 256


class RealMediaChunk(Struct):
    def __init__(self, reader: StructReader):
        start = reader.tell()
        self.id = reader.read_exactly(4)
        self.size = reader.u32()
        self.version = reader.u16()
        if self.size < 10:
            raise Malformed(F'chunk {self.id!r} at offset {start:#x} is smaller than its header')
        self.end = start + self.size


class MediaProperties(Struct):
    def __init__(self, reader: StructReader):
        self.stream_number = reader.u16()
        self.max_bit_rate = reader.u32()
        self.avg_bit_rate = reader.u32()
        self.max_packet_size = reader.u32()
        self.avg_packet_size = reader.u32()
        self.start_time = reader.u32()
        self.preroll = reader.u32()
        self.duration = reader.u32()
        self.stream_name = reader.read_exactly(reader.u8())
        self.mime_type = reader.read_exactly(reader.u8()).decode('latin1')


def chunks(reader: StructReader) -> Iterator[RealMediaChunk]:
    position = 0
    for _ in range(MAX_CHUNKS):
        if reader.size - position < 10:
            break
        reader.seekset(position)
        chunk = RealMediaChunk(reader)
        if chunk.end > reader.size:
            raise Malformed(F'chunk {chunk.id!r} exceeds the file')
        position = chunk.end
        yield chunk


def get_rm_format(reader: StructReader) -> FileFormat | None:
    """
    Identify RealVideo and RealAudio files from the MIME types of their streams. The walk stops at
    the first data chunk since all header chunks precede it.
    """
    with reader.be:
        mime_types = []
        for k, chunk in enumerate(chunks(reader)):
            if k == 0 and chunk.id != B'.RMF':
                raise Malformed('file does not start with a RealMedia header chunk')
            if chunk.id in (B'DATA', B'INDX'):
                break
            if chunk.id == B'MDPR':
                mime_types.append(MediaProperties(reader).mime_type)
    if any('video/' in mime for mime in mime_types):
        return FileFormat.RV
    if any('audio/' in mime for mime in mime_types):
        return FileFormat.RA
    return FileFormat.RM
