"""
Structural reader for the ISO base media file format. The brands of the file type box determine
the format family. Generic MPEG-4 files are further classified by the handler types of their
tracks, which are found in the `moov/trak/mdia/hdlr` boxes.
"""
from __future__ import annotations

from typing import Iterator

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader
from fileformat.signatures import FTYP_BRANDS

__all__ = [
    'Box',
    'get_mp4_format',
]

MAX_BOXES = 1024
MAX_BRANDS = 64

HANDLERS: dict[bytes, FileFormat] = {
    B'vide': FileFormat.MP4_VIDEO,
    B'soun': FileFormat.MP4_AUDIO,
    B'sbtl': FileFormat.MP4_SUBTITLES,
    B'subt': FileFormat.MP4_SUBTITLES,
    B'text': FileFormat.MP4_SUBTITLES,
}
"""
Maps the handler type of a track to the refined format. When several tracks are present, the
order of precedence is video, audio, and then subtitles.
"""


class Box(Struct):
    """
    The header of a box. Boxes of size zero would extend to the end of the file; they are rejected
    along with all boxes that exceed their parent.
    """
    def __init__(self, reader: StructReader, end: int):
        start = reader.tell()
        size = reader.u32()
        self.type = reader.read_exactly(4)
        if size == 1:
            size = reader.u64()
        elif size == 0:
            raise Malformed(F'box {self.type!r} at offset {start:#x} has size zero')
        self.data_offset = reader.tell()
        if size < self.data_offset - start:
            raise Malformed(F'box {self.type!r} at offset {start:#x} is smaller than its header')
        self.end = start + size
        if self.end > end:
            raise Malformed(F'box {self.type!r} at offset {start:#x} exceeds its parent')


class BoxWalker:
    def __init__(self, reader: StructReader):
        self.reader = StructReader(reader, bigendian=True)
        self.budget = MAX_BOXES

    def boxes(self, start: int, end: int) -> Iterator[Box]:
        reader = self.reader
        position = start
        while end - position >= 8:
            if self.budget <= 0:
                raise Malformed(F'file contains more than {MAX_BOXES} boxes')
            self.budget -= 1
            reader.seekset(position)
            box = Box(reader, end)
            position = box.end
            yield box

    def find(self, parent: Box, kind: bytes) -> Iterator[Box]:
        for box in self.boxes(parent.data_offset, parent.end):
            if box.type == kind:
                yield box

    def brands(self, ftyp: Box) -> list[bytes]:
        if ftyp.end - ftyp.data_offset < 8:
            raise Malformed('file type box is too small')
        reader = self.reader
        reader.seekset(ftyp.data_offset)
        major = reader.read_exactly(4)
        reader.skip(4)
        count = min((ftyp.end - reader.tell()) // 4, MAX_BRANDS)
        return [major] + [reader.read_exactly(4) for _ in range(count)]

    def handlers(self, moov: Box) -> set[bytes]:
        handlers = set()
        reader = self.reader
        for trak in self.find(moov, B'trak'):
            for mdia in self.find(trak, B'mdia'):
                for hdlr in self.find(mdia, B'hdlr'):
                    if hdlr.end - hdlr.data_offset < 12:
                        raise Malformed('handler reference box is too small')
                    reader.seekset(hdlr.data_offset + 8)
                    handlers.add(reader.read_exactly(4))
        return handlers


def get_mp4_format(reader: StructReader) -> FileFormat | None:
    """
    Identify the format family from the brands of the file type box. If the brands belong to the
    generic MPEG-4 family, the result depends on the handler types of the tracks. A file without a
    file type box is not an ISO base media file.
    """
    walker = BoxWalker(reader)
    ftyp = moov = None
    for box in walker.boxes(0, reader.size):
        if box.type == B'ftyp' and ftyp is None:
            ftyp = box
        elif box.type == B'moov' and moov is None:
            moov = box
        if ftyp is not None and moov is not None:
            break
    if ftyp is None:
        return None
    major, *compatible = walker.brands(ftyp)
    if (family := FTYP_BRANDS.get(major)) is None:
        family = next((f for f in map(FTYP_BRANDS.get, compatible) if f is not None), FileFormat.MP4)
    if family is not FileFormat.MP4:
        return family
    if moov is None:
        return FileFormat.MP4
    handlers = walker.handlers(moov)
    for handler, format in HANDLERS.items():
        if handler in handlers:
            return format
    return FileFormat.MP4
