"""
Structural reader for Compound File Binary documents, also known as OLE2 or structured storage.
The reader follows the directory sector chain through the file allocation table and collects the
CLSID of the root storage and the names of the top-level entries; stream contents are never read.
Allocation table sectors are resolved on demand, so only those sectors that are needed to follow
the directory chain are read from the stream.
"""
from __future__ import annotations

from uuid import UUID

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader

__all__ = [
    'CompoundFile',
    'get_cfb_format',
]

MAXREGSECT = 0xFFFFFFFA
ENDOFCHAIN = 0xFFFFFFFE
NOSTREAM = 0xFFFFFFFF

MAX_DIRECTORY_ENTRIES = 0x10000


class CfbHeader(Struct):
    Signature = B'\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1'

    def __init__(self, reader: StructReader):
        if reader.read(8) != self.Signature:
            raise Malformed('invalid compound file signature')
        self.clsid = reader.read_guid()
        self.minor_version = reader.u16()
        self.major_version = reader.u16()
        if reader.u16() != 0xFFFE:
            raise Malformed('invalid byte order mark in compound file header')
        self.sector_shift = reader.u16()
        if self.sector_shift not in (9, 12):
            raise Malformed(F'invalid sector shift {self.sector_shift}')
        self.mini_sector_shift = reader.u16()
        reader.skip(6)
        self.directory_sectors = reader.u32()
        self.fat_sectors = reader.u32()
        self.first_directory_sector = reader.u32()
        self.transaction_signature = reader.u32()
        self.mini_stream_cutoff = reader.u32()
        self.first_minifat_sector = reader.u32()
        self.minifat_sectors = reader.u32()
        self.first_difat_sector = reader.u32()
        self.difat_sectors = reader.u32()
        self.difat = [reader.u32() for _ in range(109)]


class CfbDirEntry(Struct):
    def __init__(self, reader: StructReader):
        name = reader.read_exactly(64)
        size = min(reader.u16(), 64)
        self.name = name[:max(size - 2, 0)].decode('utf-16le', errors='replace')
        self.type = reader.u8()
        self.color = reader.u8()
        self.left = reader.u32()
        self.right = reader.u32()
        self.child = reader.u32()
        self.clsid = reader.read_guid()
        self.state = reader.u32()
        reader.skip(16)
        self.start = reader.u32()
        self.size = reader.u64()

    @property
    def is_root(self):
        return self.type == 5


class CompoundFile:
    """
    Parses the header and the directory of a compound file. Every sector number is validated
    against the number of sectors in the stream, and each chain is walked at most once per sector,
    which detects cyclic chains.
    """
    def __init__(self, reader: StructReader):
        self.reader = reader
        reader.seekset(0)
        self.header = header = CfbHeader(reader)
        self.sector_size = sector_size = 1 << header.sector_shift
        self.sector_count = max((reader.size + sector_size - 1 >> header.sector_shift) - 1, 0)
        self._difat_chain: list[int] | None = None
        self.entries = self._read_directory()

    def _sector_offset(self, sector: int) -> int:
        if sector >= self.sector_count:
            raise Malformed(F'sector {sector:#x} lies outside the stream')
        return sector + 1 << self.header.sector_shift

    def _difat_sector(self, index: int) -> int:
        per_sector = (self.sector_size >> 2) - 1
        if (chain := self._difat_chain) is None:
            chain = self._difat_chain = []
            sector = self.header.first_difat_sector
            visited = set()
            while sector <= MAXREGSECT and len(chain) < self.header.difat_sectors:
                if sector in visited:
                    raise Malformed('cyclic chain of DIFAT sectors')
                visited.add(sector)
                chain.append(sector)
                self.reader.seekset(self._sector_offset(sector) + per_sector * 4)
                sector = self.reader.u32()
        block, index = divmod(index, per_sector)
        if block >= len(chain):
            raise Malformed(F'allocation table index {index} exceeds the DIFAT')
        self.reader.seekset(self._sector_offset(chain[block]) + index * 4)
        return self.reader.u32()

    def next_sector(self, sector: int) -> int:
        """
        Look up the successor of the given sector in the file allocation table.
        """
        per_sector = self.sector_size >> 2
        block, index = divmod(sector, per_sector)
        if block < 109:
            fat_sector = self.header.difat[block]
        else:
            fat_sector = self._difat_sector(block - 109)
        if fat_sector > MAXREGSECT:
            raise Malformed(F'sector {sector:#x} is not covered by the allocation table')
        self.reader.seekset(self._sector_offset(fat_sector) + index * 4)
        return self.reader.u32()

    def chain(self, sector: int):
        visited = set()
        while sector != ENDOFCHAIN:
            if sector > MAXREGSECT or sector >= self.sector_count:
                raise Malformed(F'invalid sector {sector:#x} in chain')
            if sector in visited:
                raise Malformed(F'cyclic sector chain at sector {sector:#x}')
            visited.add(sector)
            yield sector
            sector = self.next_sector(sector)

    def _read_directory(self) -> list[CfbDirEntry]:
        reader = self.reader
        entries: list[CfbDirEntry] = []
        per_sector = self.sector_size // 128
        for sector in self.chain(self.header.first_directory_sector):
            offset = self._sector_offset(sector)
            for k in range(per_sector):
                reader.seekset(offset + k * 128)
                entries.append(CfbDirEntry(reader))
            if len(entries) >= MAX_DIRECTORY_ENTRIES:
                break
        if not entries or not entries[0].is_root:
            raise Malformed('compound file has no root storage entry')
        return entries

    @property
    def root(self) -> CfbDirEntry:
        return self.entries[0]

    def children(self, storage: CfbDirEntry) -> list[CfbDirEntry]:
        """
        Collect the direct children of a storage entry by walking its red-black tree.
        """
        children = []
        visited = set()
        stack = [storage.child]
        while stack:
            index = stack.pop()
            if index == NOSTREAM:
                continue
            if index >= len(self.entries):
                raise Malformed(F'directory entry index {index} is out of range')
            if index in visited:
                raise Malformed(F'cyclic directory tree at entry {index}')
            visited.add(index)
            entry = self.entries[index]
            children.append(entry)
            stack.append(entry.right)
            stack.append(entry.left)
        return children


def _guids(*pairs: tuple[str, FileFormat]) -> dict[UUID, FileFormat]:
    return {UUID(guid): format for guid, format in pairs}


CLSIDS = _guids(
    ('00020906-0000-0000-C000-000000000046', FileFormat.DOC),
    ('00020900-0000-0000-C000-000000000046', FileFormat.DOC),
    ('00020810-0000-0000-C000-000000000046', FileFormat.XLS),
    ('00020820-0000-0000-C000-000000000046', FileFormat.XLS),
    ('64818D10-4F9B-11CF-86EA-00AA00B929E8', FileFormat.PPT),
    ('EA7BAE70-FB3B-11CD-A903-00AA00510EA3', FileFormat.PPT),
    ('000C1084-0000-0000-C000-000000000046', FileFormat.MSI),
    ('0006F046-0000-0000-C000-000000000046', FileFormat.MSG),
    ('00021201-0000-0000-00C0-000000000046', FileFormat.PUB),
    ('00021A14-0000-0000-C000-000000000046', FileFormat.VSD),
    ('74B78F3A-C8C8-11D1-BE11-00C04FB6FAF1', FileFormat.MPP),
    ('4D29B490-49B2-11D0-93C3-7E0706000000', FileFormat.IPT),
    ('E60F81E1-49B3-11D0-93C3-7E0706000000', FileFormat.IAM),
    ('BBF9FDF1-52DC-11D0-8C04-0800090BE8EC', FileFormat.IDW),
    ('76283A80-50DD-11D3-A7E3-00C04F79D7BC', FileFormat.IPN),
    ('83A33D31-27C5-11CE-BFD4-00400513BB57', FileFormat.SLDPRT),
    ('83A33D32-27C5-11CE-BFD4-00400513BB57', FileFormat.SLDASM),
    ('83A33D34-27C5-11CE-BFD4-00400513BB57', FileFormat.SLDDRW),
)
"""
Maps the CLSID of the root storage to the application that created the compound file.
"""

STREAM_NAMES: dict[str, FileFormat] = {
    'WordDocument'          : FileFormat.DOC,  # noqa
    'Workbook'              : FileFormat.XLS,  # noqa
    'Book'                  : FileFormat.XLS,  # noqa
    'PowerPoint Document'   : FileFormat.PPT,  # noqa
    'VisioDocument'         : FileFormat.VSD,  # noqa
    'Quill'                 : FileFormat.PUB,  # noqa
    'MatOST'                : FileFormat.WPS,  # noqa
    'WksSSWorkBook'         : FileFormat.XLR,  # noqa
    'WksDBDocument'         : FileFormat.WDB,  # noqa
    'StarWriterDocument'    : FileFormat.SDW,  # noqa
    'StarCalcDocument'      : FileFormat.SDC,  # noqa
    'StarDrawDocument3'     : FileFormat.SDA,  # noqa
    'StarImpressDocument'   : FileFormat.SDD,  # noqa
    'StarMathDocument'      : FileFormat.SMF,  # noqa
    'StarChartDocument'     : FileFormat.SDS,  # noqa
    'PerfectOffice_MAIN'    : FileFormat.WPD,  # noqa
    'RSeStorage'            : FileFormat.IPT,  # noqa
}
"""
Maps the names of characteristic top-level streams and storages to the format they indicate.
Names are matched in the order of this table.
"""


def get_cfb_format(reader: StructReader) -> FileFormat | None:
    """
    Identify the application that created a compound file, first by the CLSID of the root
    storage and then by the names of its top-level entries.
    """
    document = CompoundFile(reader)
    if format := CLSIDS.get(document.root.clsid):
        return format
    names = {entry.name for entry in document.children(document.root)}
    for name, format in STREAM_NAMES.items():
        if name in names:
            return format
    if any(name.startswith('__substg1.0_') for name in names):
        return FileFormat.MSG
    if 'VideoPostQueue' in names and 'ClassDirectory3' in names:
        return FileFormat.MAX
    return FileFormat.CFB
