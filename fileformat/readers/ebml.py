"""
Structural reader for EBML documents such as Matroska and WebM. The reader parses the EBML header
to obtain the document type and, for Matroska documents, descends into the segment to inspect the
track entries. The walk is bounded both in depth and in the total number of elements visited.
"""
from __future__ import annotations

from typing import Iterator

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader

__all__ = [
    'EbmlElement',
    'get_ebml_format',
]

MAX_DEPTH = 4
MAX_ELEMENTS = 4096
MAX_DOCTYPE = 64


class ID:
    HEADER      = 0x1A45DFA3  # noqa
    DOCTYPE     = 0x4282      # noqa
    SEGMENT     = 0x18538067  # noqa
    TRACKS      = 0x1654AE6B  # noqa
    TRACK_ENTRY = 0xAE        # noqa
    TRACK_TYPE  = 0x83        # noqa
    VIDEO       = 0xE0        # noqa
    STEREO_MODE = 0x53B8      # noqa
    CLUSTER     = 0x1F43B675  # noqa


class TrackType:
    VIDEO = 0x01
    AUDIO = 0x02
    SUBTITLE = 0x11


def read_vint(reader: StructReader, keep_marker: bool = False) -> tuple[int, int]:
    """
    Read a variable-length integer as used by EBML. The number of leading zero bits in the first
    byte determines the total length of the integer. Element IDs retain their length marker,
    element sizes do not. Returns the value and its length in bytes.
    """
    head = reader.u8()
    if not head:
        raise Malformed('invalid variable-length integer with leading zero byte')
    length = 8 - head.bit_length() + 1
    value = head if keep_marker else head & (0xFF >> length)
    for byte in reader.read_exactly(length - 1):
        value = value << 8 | byte
    return value, length


class EbmlElement(Struct):
    """
    The header of an EBML element. The `end` attribute is `None` for elements of unknown size.
    """
    def __init__(self, reader: StructReader):
        self.id, _ = read_vint(reader, keep_marker=True)
        size, length = read_vint(reader)
        self.data_offset = reader.tell()
        if size == (1 << 7 * length) - 1:
            self.size = None
            self.end = None
        else:
            self.size = size
            self.end = self.data_offset + size

    def read_uint(self, reader: StructReader) -> int:
        if self.size is None or self.size > 8:
            raise Malformed(F'invalid size for integer element {self.id:#x}')
        reader.seekset(self.data_offset)
        return int.from_bytes(reader.read_exactly(self.size), 'big')

    def read_string(self, reader: StructReader) -> str:
        if self.size is None:
            raise Malformed(F'invalid size for string element {self.id:#x}')
        reader.seekset(self.data_offset)
        data = reader.read_exactly(min(self.size, MAX_DOCTYPE))
        return data.rstrip(B'\0').decode('latin1')


class EbmlWalker:
    """
    Iterates the children of master elements while enforcing the global element budget and the
    maximum nesting depth. Children must lie within the extent of their parent; the extent of a
    parent is clipped to the size of the stream so that truncated files can be inspected up to the
    point where they end.
    """
    def __init__(self, reader: StructReader):
        self.reader = reader
        self.budget = MAX_ELEMENTS

    def children(self, start: int, end: int | None, depth: int) -> Iterator[EbmlElement]:
        if depth > MAX_DEPTH:
            raise Malformed(F'element nesting exceeds the maximum depth of {MAX_DEPTH}')
        reader = self.reader
        limit = reader.size if end is None else min(end, reader.size)
        position = start
        while position < limit:
            if self.budget <= 0:
                raise Malformed(F'document contains more than {MAX_ELEMENTS} elements')
            self.budget -= 1
            reader.seekset(position)
            element = EbmlElement(reader)
            if element.end is None:
                position = limit
            elif end is not None and element.end > end:
                raise Malformed(F'element {element.id:#x} exceeds its parent')
            else:
                position = element.end
            yield element

    def tracks(self, segment: EbmlElement) -> list[tuple[int, bool]]:
        """
        Return the type of each track entry along with a flag that indicates whether a video
        track specifies a stereo mode.
        """
        for element in self.children(segment.data_offset, segment.end, 1):
            if element.id == ID.TRACKS:
                break
            if element.id == ID.CLUSTER and element.end is None:
                return []
        else:
            return []
        tracks = []
        for entry in self.children(element.data_offset, element.end, 2):
            if entry.id != ID.TRACK_ENTRY:
                continue
            kind = None
            stereo = False
            for field in self.children(entry.data_offset, entry.end, 3):
                if field.id == ID.TRACK_TYPE:
                    kind = field.read_uint(self.reader)
                elif field.id == ID.VIDEO:
                    stereo = any(
                        setting.id == ID.STEREO_MODE
                        for setting in self.children(field.data_offset, field.end, 4))
            if kind is not None:
                tracks.append((kind, stereo))
        return tracks


def get_ebml_format(reader: StructReader) -> FileFormat | None:
    """
    Identify WebM and the Matroska family from the document type and the track entries. Matroska
    documents without any track of a known type remain unresolved.
    """
    walker = EbmlWalker(reader)
    reader.seekset(0)
    header = EbmlElement(reader)
    if header.id != ID.HEADER:
        raise Malformed('document does not start with an EBML header')
    if header.end is None:
        raise Malformed('EBML header has unknown size')
    doctype = 'matroska'
    for element in walker.children(header.data_offset, header.end, 1):
        if element.id == ID.DOCTYPE:
            doctype = element.read_string(reader)
            break
    if doctype == 'webm':
        return FileFormat.WEBM
    if doctype != 'matroska':
        return FileFormat.EBML
    for element in walker.children(header.end, None, 0):
        if element.id == ID.SEGMENT:
            break
    else:
        return None
    tracks = walker.tracks(element)
    kinds = {kind for kind, _ in tracks}
    if TrackType.VIDEO in kinds:
        if any(stereo for kind, stereo in tracks if kind == TrackType.VIDEO):
            return FileFormat.MK3D
        return FileFormat.MKV
    if TrackType.AUDIO in kinds:
        return FileFormat.MKA
    if TrackType.SUBTITLE in kinds:
        return FileFormat.MKS
    return None
