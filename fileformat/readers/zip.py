"""
Structural reader for ZIP archives. The central directory is located via the end of central
directory record, which is searched backwards from the end of the stream. Archives that were
prepended with other data are supported by computing the shift between the recorded and the
actual offset of the central directory. Only entry names are read; the single exception is the
`mimetype` entry of document packages, which is read verbatim if it is stored uncompressed.
"""
from __future__ import annotations

import codecs
import re

from typing import Iterable

from fileformat.formats import FileFormat
from fileformat.lib.structures import Malformed, Struct, StructReader
from fileformat.signatures import ZIP_MIMETYPES

__all__ = [
    'ZipDirectory',
    'get_zip_format',
]

MAX_ENTRIES = 0x10000
MAX_MIMETYPE = 0x100


class ZipEndOfCentralDirectory(Struct):
    Signature = B'PK\x05\x06'

    def __init__(self, reader: StructReader):
        if reader.read(4) != self.Signature:
            raise Malformed('invalid end of central directory signature')
        self.disk_number = reader.u16()
        self.start_disk_number = reader.u16()
        self.entries_on_disk = reader.u16()
        self.entries_in_directory = reader.u16()
        self.directory_size = reader.u32()
        self.directory_offset = reader.u32()
        self.comment_length = reader.u16()


class ZipEocdLocator64(Struct):
    Signature = B'PK\x06\x07'

    def __init__(self, reader: StructReader):
        if reader.read(4) != self.Signature:
            raise Malformed('invalid zip64 locator signature')
        self.disk = reader.u32()
        self.eocd64_offset = reader.u64()
        self.total_disks = reader.u32()


class ZipEndOfCentralDirectory64(Struct):
    Signature = B'PK\x06\x06'

    def __init__(self, reader: StructReader):
        if reader.read(4) != self.Signature:
            raise Malformed('invalid zip64 end of central directory signature')
        self.size = reader.u64()
        self.version_made_by = reader.u16()
        self.version_to_extract = reader.u16()
        self.disk = reader.u32()
        self.start_disk = reader.u32()
        self.entries_on_disk = reader.u64()
        self.entries_in_directory = reader.u64()
        self.directory_size = reader.u64()
        self.directory_offset = reader.u64()


class ZipDirEntry(Struct):
    Signature = B'PK\x01\x02'

    def __init__(self, reader: StructReader):
        if reader.read(4) != self.Signature:
            raise Malformed('invalid central directory entry signature')
        self.version_made_by = reader.u16()
        self.version_to_extract = reader.u16()
        self.flags = reader.u16()
        self.compression = reader.u16()
        self.mtime = reader.u16()
        self.mdate = reader.u16()
        self.crc32 = reader.u32()
        self.csize = reader.u32()
        self.usize = reader.u32()
        nl = reader.u16()
        xl = reader.u16()
        cl = reader.u16()
        self.disk_nr_start = reader.u16()
        self.internal_attributes = reader.u16()
        self.external_attributes = reader.u32()
        self.header_offset = reader.u32()
        codec = 'utf8' if self.flags & 0x800 else 'latin1'
        self.name = codecs.decode(reader.read_exactly(nl), codec, errors='replace')
        reader.skip(xl)
        reader.skip(cl)


class ZipLocalHeader(Struct):
    Signature = B'PK\x03\x04'

    def __init__(self, reader: StructReader):
        if reader.read(4) != self.Signature:
            raise Malformed('invalid local file header signature')
        self.version = reader.u16()
        self.flags = reader.u16()
        self.compression = reader.u16()
        self.mtime = reader.u16()
        self.mdate = reader.u16()
        self.crc32 = reader.u32()
        self.csize = reader.u32()
        self.usize = reader.u32()
        nl = reader.u16()
        xl = reader.u16()
        reader.skip(nl)
        reader.skip(xl)
        self.data_offset = reader.tell()


class ZipDirectory:
    """
    The central directory of a ZIP archive. The constructor locates and parses the directory;
    the `entries` attribute contains at most `fileformat.readers.zip.MAX_ENTRIES` entries.
    """
    def __init__(self, reader: StructReader):
        self.reader = reader
        end = self._find_eocd(reader)
        reader.seekset(end)
        eocd = ZipEndOfCentralDirectory(reader)
        count = eocd.entries_in_directory
        size = eocd.directory_size
        offset = eocd.directory_offset
        if (zip64 := self._find_eocd64(reader, end)) is not None:
            end = zip64.offset
            count = zip64.entries_in_directory
            size = zip64.directory_size
            offset = zip64.directory_offset
        self.shift = shift = end - size - offset
        start = offset + shift
        if start < 0:
            raise Malformed(F'central directory offset {offset:#x} lies before the start of the stream')
        reader.seekset(start)
        entries: list[ZipDirEntry] = []
        while len(entries) < min(count, MAX_ENTRIES) and reader.tell() < end:
            entries.append(entry := ZipDirEntry(reader))
            if entry.offset + len(entry) > end:
                raise Malformed('central directory entry exceeds the directory')
        self.entries = entries

    @staticmethod
    def _find_eocd(reader: StructReader) -> int:
        size = reader.size
        window = min(size, 22 + 0xFFFF)
        if window < 22:
            raise Malformed(F'stream of size {size} is too small for a ZIP archive')
        reader.seekset(size - window)
        data = reader.read_exactly(window)
        signature = ZipEndOfCentralDirectory.Signature
        position = data.rfind(signature, 0, window - 18)
        if position < 0:
            raise Malformed('no end of central directory record was found')
        return size - window + position

    @staticmethod
    def _find_eocd64(reader: StructReader, end: int) -> ZipEndOfCentralDirectory64 | None:
        if end < 20:
            return None
        reader.seekset(end - 20)
        if reader.peek(4) != ZipEocdLocator64.Signature:
            return None
        locator = ZipEocdLocator64(reader)
        for position in (locator.eocd64_offset, end - 20 - 56):
            if not 0 <= position <= end - 56:
                continue
            reader.seekset(position)
            if reader.peek(4) == ZipEndOfCentralDirectory64.Signature:
                return ZipEndOfCentralDirectory64(reader)
        raise Malformed('zip64 locator points to an invalid record')

    @property
    def names(self) -> Iterable[str]:
        return (entry.name for entry in self.entries)

    def mimetype(self) -> bytes | None:
        """
        Read the content of the `mimetype` entry if the archive has one and it is stored without
        compression. Only the first `fileformat.readers.zip.MAX_MIMETYPE` bytes are read.
        """
        for entry in self.entries:
            if entry.name == 'mimetype':
                break
        else:
            return None
        if entry.compression != 0:
            return None
        reader = self.reader
        if (position := entry.header_offset + self.shift) < 0:
            raise Malformed(F'local header offset {entry.header_offset:#x} lies before the start of the stream')
        reader.seekset(position)
        header = ZipLocalHeader(reader)
        reader.seekset(header.data_offset)
        size = min(entry.csize, MAX_MIMETYPE)
        return reader.read_exactly(size).strip()


_IPA_BUNDLE = re.compile(r'^Payload/[^/]+\.app/')


def _get_ooxml_format(names: list[str], package: bool) -> FileFormat | None:
    for name in names:
        if name.startswith('word/'):
            return FileFormat.DOCX
        if name.startswith('xl/'):
            return FileFormat.XLSX
        if name.startswith('ppt/'):
            return FileFormat.PPTX
        if name.startswith('visio/'):
            return FileFormat.VSDX
        if not package:
            continue
        if name == '3D/3dmodel.model':
            return FileFormat.THREE_MF
        if name == 'AppxManifest.xml':
            return FileFormat.APPX
        if name == 'extension.vsixmanifest':
            return FileFormat.VSIX
        if name.startswith('dwf/'):
            return FileFormat.DWFX
        if name.startswith('circuitdiagram/'):
            return FileFormat.CDDX
        if name.startswith('SpaceClaim/'):
            return FileFormat.SCDOC
    return None


def get_zip_format(reader: StructReader) -> FileFormat | None:
    """
    Identify the type of a ZIP archive based on its `mimetype` entry and the names of its entries.
    Archives without distinguishing entries are identified as plain ZIP archives.
    """
    directory = ZipDirectory(reader)
    if (mimetype := directory.mimetype()) and (format := ZIP_MIMETYPES.get(mimetype)):
        return format
    names = list(directory.names)
    found = set(names)
    if format := _get_ooxml_format(names, '[Content_Types].xml' in found):
        return format
    if any(name.startswith('FusionAssetName[') for name in names):
        return FileFormat.F3D
    if 'Manifest.xml' in found and any(name.lower().endswith('.smb') for name in names):
        return FileFormat.AUTODESK_123D
    if 'AndroidManifest.xml' in found:
        return FileFormat.APK
    if 'META-INF/application.xml' in found:
        return FileFormat.EAR
    if any(name.startswith('WEB-INF/') for name in names):
        return FileFormat.WAR
    if any(_IPA_BUNDLE.match(name) for name in names):
        return FileFormat.IPA
    if 'AppManifest.xaml' in found:
        return FileFormat.XAP
    if 'install.rdf' in found or 'META-INF/mozilla.rsa' in found:
        return FileFormat.XPI
    if 'doc.kml' in found:
        return FileFormat.KMZ
    if names and names[0].lower().endswith(('.usdc', '.usda')):
        return FileFormat.USDZ
    if 'META-INF/MANIFEST.MF' in found:
        return FileFormat.JAR
    return FileFormat.ZIP
