"""
Object stream reader for the Advanced Systems Format. The header object contains a sequence of
GUID-tagged objects; the stream properties objects among them declare the media type of each
stream, which distinguishes audio, video and recorded television files.
"""
from __future__ import annotations

from typing import Iterator
from uuid import UUID

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader

__all__ = [
    'AsfObject',
    'get_asf_format',
]

MAX_OBJECTS = 1024


class GUID:
    HEADER            = UUID('75B22630-668E-11CF-A6D9-00AA0062CE6C')  # noqa
    STREAM_PROPERTIES = UUID('B7DC0791-A9B7-11CF-8EE6-00C00C205365')  # noqa
    AUDIO_MEDIA       = UUID('F8699E40-5B4D-11CF-A8FD-00805F5C442B')  # noqa
    VIDEO_MEDIA       = UUID('BC19EFC0-5B4D-11CF-A8FD-00805F5C442B')  # noqa
    BINARY_MEDIA      = UUID('3AFB65E2-47EF-40F2-AC2C-70A90D71D343')  # noqa


class AsfObject(Struct):
    def __init__(self, reader: StructReader, end: int):
        start = reader.tell()
        self.guid = reader.read_guid()
        self.size = reader.u64()
        self.data_offset = reader.tell()
        if self.size < 24:
            raise Malformed(F'object at offset {start:#x} is smaller than its header')
        self.end = start + self.size
        if self.end > end:
            raise Malformed(F'object at offset {start:#x} exceeds the header object')


class AsfHeader(Struct):
    def __init__(self, reader: StructReader):
        self.guid = reader.read_guid()
        if self.guid != GUID.HEADER:
            raise Malformed('invalid ASF header object GUID')
        self.size = reader.u64()
        self.count = reader.u32()
        reader.skip(2)
        self.data_offset = reader.tell()
        self.end = min(self.size, reader.size)
        if self.end < self.data_offset:
            raise Malformed('ASF header object is smaller than its header')

    def objects(self, reader: StructReader) -> Iterator[AsfObject]:
        position = self.data_offset
        for _ in range(min(self.count, MAX_OBJECTS)):
            if self.end - position < 24:
                break
            reader.seekset(position)
            obj = AsfObject(reader, self.end)
            position = obj.end
            yield obj


def get_asf_format(reader: StructReader) -> FileFormat | None:
    """
    Identify the type of an ASF file from the media types of its streams. Files with a video
    stream and a binary stream are recorded television, other files with video streams are
    video files, and files with only audio streams are audio files.
    """
    reader.seekset(0)
    header = AsfHeader(reader)
    types = set()
    for obj in header.objects(reader):
        if obj.guid != GUID.STREAM_PROPERTIES:
            continue
        reader.seekset(obj.data_offset)
        types.add(reader.read_guid())
    if GUID.VIDEO_MEDIA in types:
        if GUID.BINARY_MEDIA in types:
            return FileFormat.DVR_MS
        return FileFormat.WMV
    if GUID.AUDIO_MEDIA in types:
        return FileFormat.WMA
    return FileFormat.ASF
