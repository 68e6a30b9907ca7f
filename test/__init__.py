import io
import logging
import random
import string
import struct
import unittest
import zipfile

from uuid import UUID

import fileformat


__all__ = ['fileformat', 'TestBase']


def ebml_size(size: int) -> bytes:
    if size < 0x7F:
        return bytes((0x80 | size,))
    return B'\x01' + size.to_bytes(7, 'big')


def ebml_element(eid: int, payload: bytes) -> bytes:
    width = (eid.bit_length() + 7) // 8
    return eid.to_bytes(width, 'big') + ebml_size(len(payload)) + payload


def mp4_box(kind: bytes, payload: bytes = B'') -> bytes:
    return struct.pack('>I', 8 + len(payload)) + kind + payload


class TestBase(unittest.TestCase):

    ASF_HEADER = UUID('75B22630-668E-11CF-A6D9-00AA0062CE6C')
    ASF_STREAM_PROPERTIES = UUID('B7DC0791-A9B7-11CF-8EE6-00C00C205365')
    ASF_FILE_PROPERTIES = UUID('8CABDCA1-A947-11CF-8EE4-00C00C205365')
    ASF_AUDIO = UUID('F8699E40-5B4D-11CF-A8FD-00805F5C442B')
    ASF_VIDEO = UUID('BC19EFC0-5B4D-11CF-A8FD-00805F5C442B')
    ASF_BINARY = UUID('3AFB65E2-47EF-40F2-AC2C-70A90D71D343')

    def generate_random_buffer(self, size):
        return bytes(random.randrange(0, 0x100) for _ in range(size))

    def generate_random_text(self, size):
        return ''.join(string.printable[
            random.randrange(0, len(string.printable))] for _ in range(size)).encode('UTF8')

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' buffers
        logging.disable(logging.CRITICAL)

    def assertContains(self, container, member, msg=None):
        self.assertIn(member, container, msg)

    def build_zip(self, entries: dict, mimetype: bytes = None, prefix: bytes = B'') -> bytes:
        """
        Create a ZIP archive with the given entries. A `mimetype` entry is stored uncompressed as
        the first member if requested. The optional prefix is prepended to the finished archive, so
        the offsets recorded in the archive do not account for it.
        """
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            if mimetype is not None:
                archive.writestr('mimetype', mimetype, compress_type=zipfile.ZIP_STORED)
            for name, data in entries.items():
                archive.writestr(name, data)
        return prefix + buffer.getvalue()

    def build_cfb(self, names=(), clsid: UUID = None) -> bytes:
        """
        Create a version 3 compound file with a single allocation table sector, followed by the
        directory sectors. The root storage contains one empty stream for each given name.
        """
        NOSTREAM = 0xFFFFFFFF
        ENDOFCHAIN = 0xFFFFFFFE
        count = len(names) + 1
        directory_sectors = (count + 3) // 4

        def entry(name: str, kind: int, child: int, right: int, guid: UUID = None):
            encoded = (name + '\0').encode('utf-16le')
            return b''.join((
                encoded.ljust(64, B'\0'),
                struct.pack('<HBB', len(encoded), kind, 1),
                struct.pack('<III', NOSTREAM, right, child),
                (guid or UUID(int=0)).bytes_le,
                bytes(20),
                struct.pack('<IQ', ENDOFCHAIN, 0),
            ))

        entries = [entry('Root Entry', 5, 1 if names else NOSTREAM, NOSTREAM, clsid)]
        for k, name in enumerate(names, 1):
            entries.append(entry(name, 2, NOSTREAM, k + 1 if k < len(names) else NOSTREAM))
        directory = B''.join(entries).ljust(directory_sectors * 512, B'\0')

        fat = [0xFFFFFFFD]
        fat.extend(range(2, directory_sectors + 1))
        fat.append(ENDOFCHAIN)
        fat.extend([NOSTREAM] * (128 - len(fat)))

        header = b''.join((
            B'\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1',
            bytes(16),
            struct.pack('<HHHHH', 0x3E, 3, 0xFFFE, 9, 6),
            bytes(6),
            struct.pack('<IIIIIIIII', 0, 1, 1, 0, 0x1000, ENDOFCHAIN, 0, ENDOFCHAIN, 0),
            struct.pack('<109I', 0, *([NOSTREAM] * 108)),
        ))
        return header + struct.pack('<128I', *fat) + directory

    def build_ebml(self, doctype: str = 'matroska', tracks=()) -> bytes:
        """
        Create a minimal EBML document. The DocType element is omitted when `doctype` is `None`.
        The `tracks` argument is a sequence of pairs of a track type and a flag that indicates
        whether a stereo mode should be specified.
        """
        fields = ebml_element(0x4286, B'\x01') + ebml_element(0x42F7, B'\x01')
        if doctype is not None:
            fields += ebml_element(0x4282, doctype.encode('latin1'))
        header = ebml_element(0x1A45DFA3, fields + ebml_element(0x4287, B'\x04'))
        entries = B''
        for number, (kind, stereo) in enumerate(tracks, 1):
            fields = ebml_element(0xD7, bytes((number,))) + ebml_element(0x83, bytes((kind,)))
            if kind == 1:
                video = ebml_element(0xB0, B'\x02\x80') + ebml_element(0xBA, B'\x01\xE0')
                if stereo:
                    video += ebml_element(0x53B8, B'\x01')
                fields += ebml_element(0xE0, video)
            entries += ebml_element(0xAE, fields)
        info = ebml_element(0x1549A966, ebml_element(0x2AD7B1, B'\x0F\x42\x40'))
        segment = ebml_element(0x18538067, info + ebml_element(0x1654AE6B, entries))
        return header + segment

    def build_mp4(self, major: bytes = B'isom', compatible=(B'isom', B'mp41'), handlers=()) -> bytes:
        """
        Create a minimal ISO base media file with a file type box, a movie box with one track
        for each given handler type, and an empty media data box.
        """
        ftyp = mp4_box(B'ftyp', major + bytes(4) + B''.join(compatible))
        traks = B''.join(
            mp4_box(B'trak', mp4_box(B'tkhd', bytes(84)) + mp4_box(B'mdia', (
                mp4_box(B'mdhd', bytes(24)) + mp4_box(B'hdlr', bytes(8) + handler + bytes(13))
            ))) for handler in handlers
        )
        moov = mp4_box(B'moov', mp4_box(B'mvhd', bytes(100)) + traks)
        return ftyp + moov + mp4_box(B'mdat', bytes(16))

    def build_asf(self, stream_types=()) -> bytes:
        """
        Create an ASF header object with a file properties object and one stream properties
        object per given stream type, followed by an empty data object.
        """
        objects = [self.ASF_FILE_PROPERTIES.bytes_le + struct.pack('<Q', 104) + bytes(80)]
        for number, stream_type in enumerate(stream_types, 1):
            body = stream_type.bytes_le + bytes(16) + bytes(8) + struct.pack('<IIH', 0, 0, number) + bytes(4)
            objects.append(self.ASF_STREAM_PROPERTIES.bytes_le + struct.pack('<Q', 24 + len(body)) + body)
        body = B''.join(objects)
        header = self.ASF_HEADER.bytes_le + struct.pack('<QIBB', 30 + len(body), len(objects), 1, 2)
        data = UUID('75B22636-668E-11CF-A6D9-00AA0062CE6C').bytes_le + struct.pack('<Q', 50) + bytes(26)
        return header + body + data

    def build_rm(self, mime_types=()) -> bytes:
        """
        Create a RealMedia file with a media properties chunk for each given MIME type, followed
        by an empty data chunk.
        """
        def chunk(tag: bytes, payload: bytes) -> bytes:
            return tag + struct.pack('>IH', 10 + len(payload), 0) + payload

        chunks = [
            chunk(B'.RMF', struct.pack('>II', 0, 2 + len(mime_types))),
            chunk(B'PROP', bytes(40)),
        ]
        for number, mime in enumerate(mime_types):
            name = B'Stream %d' % number
            payload = struct.pack('>H7I', number, 0, 0, 0, 0, 0, 0, 0)
            payload += bytes((len(name),)) + name + bytes((len(mime),)) + mime + struct.pack('>I', 0)
            chunks.append(chunk(B'MDPR', payload))
        chunks.append(chunk(B'DATA', struct.pack('>II', 0, 0)))
        return B''.join(chunks)

    def build_pe(self, dll: bool = False, signature: bytes = B'PE\0\0', e_lfanew: int = 0x80) -> bytes:
        """
        Create the headers of an MZ executable with an extended header of the given signature.
        """
        dos = bytearray(0x40)
        dos[:2] = B'MZ'
        dos[0x3C:0x40] = struct.pack('<I', e_lfanew)
        stub = B'\x0E\x1F\xBA\x0E\x00\xB4\x09\xCD\x21\xB8\x01\x4C\xCD\x21This program cannot be run in DOS mode.\r\r\n$'
        image = bytearray(dos + stub)
        image = image.ljust(0x80, B'\0')
        characteristics = 0x0102 | (0x2000 if dll else 0)
        coff = struct.pack('<HHIIIHH', 0x14C, 0, 0, 0, 0, 0xE0, characteristics)
        image = image[:0x80] + signature + coff
        return bytes(image.ljust(0x200, B'\0'))
