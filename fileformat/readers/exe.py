"""
Structural reader for MZ executables. The pointer at offset 0x3C of the DOS header locates the
extended header, whose signature distinguishes the Windows NE, OS/2 LE/LX, and PE formats.
"""
from __future__ import annotations

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader

__all__ = [
    'DosHeader',
    'get_exe_format',
]

IMAGE_FILE_DLL = 0x2000


class DosHeader(Struct):
    Signature = B'MZ'

    def __init__(self, reader: StructReader):
        if reader.read(2) != self.Signature:
            raise Malformed('invalid DOS header signature')
        reader.seekset(0x3C)
        self.e_lfanew = reader.u32()


def get_exe_format(reader: StructReader) -> FileFormat | None:
    """
    Identify the type of an MZ executable from its extended header. Returns `None` if there is no
    recognizable extended header, in which case the input remains a plain DOS executable.
    """
    reader.seekset(0)
    header = DosHeader(reader)
    if not 0x40 <= (offset := header.e_lfanew) <= reader.size - 2:
        raise Malformed(F'extended header offset {offset:#x} lies outside the file')
    reader.seekset(offset)
    signature = reader.read_exactly(2)
    if signature == B'NE':
        return FileFormat.NE
    if signature in (B'LE', B'LX'):
        return FileFormat.LE
    if signature != B'PE' or reader.read_exactly(2) != B'\0\0':
        return None
    reader.seekset(offset + 0x16)
    characteristics = reader.u16()
    if characteristics & IMAGE_FILE_DLL:
        return FileFormat.DLL
    return FileFormat.PE
