import io
import os
import tempfile

from unittest.mock import patch
from uuid import UUID

import fileformat

from fileformat.detector import PREFIX_SIZE, detect, from_bytes, from_file, prefix_size
from fileformat.formats import FileFormat
from fileformat.lib.environment import environment
from fileformat.lib.structures import MemoryFile

from test import TestBase


class TestDetector(TestBase):

    PNG = B'\x89PNG\r\n\x1A\n\x00\x00\x00\x0DIHDR' + bytes(17)

    def test_empty_input(self):
        self.assertIs(from_bytes(B''), FileFormat.EMPTY)
        self.assertIs(from_bytes(B'', text=False), FileFormat.EMPTY)

    def test_unknown_binary(self):
        self.assertIs(from_bytes(bytes(0x100)), FileFormat.BIN)
        self.assertIs(from_bytes(B'\x00\x01\x02\xFFbinary\x00data'), FileFormat.BIN)

    def test_plain_text(self):
        data = B'The quick brown fox jumps over the lazy dog.\r\n\tand then some\n' * 0x100
        self.assertIs(from_bytes(data), FileFormat.TXT)
        self.assertIs(from_bytes(data, text=False), FileFormat.BIN)
        self.assertIs(from_bytes('Grüße aus Köln\n'.encode('utf8')), FileFormat.TXT)

    def test_plain_text_can_be_disabled_by_environment(self):
        with patch.object(environment.disable_plain_text, 'value', True):
            self.assertIs(from_bytes(B'hello world\n'), FileFormat.BIN)
            self.assertIs(from_bytes(B'hello world\n', text=True), FileFormat.TXT)

    def test_signature_without_reader(self):
        self.assertIs(from_bytes(self.PNG), FileFormat.PNG)
        self.assertIs(fileformat.from_bytes(self.PNG), FileFormat.PNG)

    def test_zip_refinement(self):
        data = self.build_zip({
            '[Content_Types].xml': B'<Types/>',
            'word/document.xml': B'<document/>',
        })
        self.assertIs(from_bytes(data), FileFormat.DOCX)

    def test_zip_rejected(self):
        self.assertIs(from_bytes(B'PK\x03\x04' + bytes(0x40)), FileFormat.BIN)

    def test_compound_file_refinement(self):
        self.assertIs(from_bytes(self.build_cfb(['WordDocument', '1Table'])), FileFormat.DOC)
        clsid = UUID('00020820-0000-0000-C000-000000000046')
        self.assertIs(from_bytes(self.build_cfb(['Workbook'], clsid)), FileFormat.XLS)
        self.assertIs(from_bytes(self.build_cfb(['Contents'])), FileFormat.CFB)

    def test_truncated_compound_file(self):
        self.assertIs(from_bytes(self.build_cfb(['WordDocument'])[:0x200]), FileFormat.BIN)

    def test_executables(self):
        self.assertIs(from_bytes(self.build_pe()), FileFormat.PE)
        self.assertIs(from_bytes(self.build_pe(dll=True)), FileFormat.DLL)

    def test_executable_kept_when_malformed(self):
        self.assertIs(from_bytes(self.build_pe(e_lfanew=0x10)), FileFormat.EXE)
        self.assertIs(from_bytes(self.build_pe(e_lfanew=0x10000)), FileFormat.EXE)

    def test_xml_refinement(self):
        data = B'<?xml version="1.0"?>\n<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"/>'
        self.assertIs(from_bytes(data), FileFormat.SVG)
        self.assertIs(from_bytes(B'<?xml version="1.0"?>\n<root/>'), FileFormat.XML)

    def test_matroska_without_tracks(self):
        self.assertIs(from_bytes(self.build_ebml('matroska', [(1, False)])), FileFormat.MKV)
        self.assertIs(from_bytes(self.build_ebml('matroska')), FileFormat.BIN)

    def test_detection_is_idempotent(self):
        data = self.build_mp4(handlers=[B'soun'])
        stream = MemoryFile(data)
        self.assertIs(detect(stream), FileFormat.MP4_AUDIO)
        self.assertIs(detect(stream), FileFormat.MP4_AUDIO)
        self.assertEqual(stream.tell(), 0)

    def test_position_is_restored(self):
        stream = io.BytesIO(B'garbage!' + self.PNG)
        stream.seek(8)
        self.assertIs(detect(stream), FileFormat.PNG)
        self.assertEqual(stream.tell(), 8)

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as root:
            path = os.path.join(root, 'sample')
            with open(path, 'wb') as stream:
                stream.write(self.build_asf([self.ASF_VIDEO, self.ASF_AUDIO]))
            self.assertIs(from_file(path), FileFormat.WMV)

    def test_from_file_missing(self):
        with tempfile.TemporaryDirectory() as root:
            with self.assertRaises(OSError):
                from_file(os.path.join(root, 'missing'))

    def test_prefix_size(self):
        self.assertEqual(prefix_size(), max(PREFIX_SIZE, environment.prefix_size.value or 0))
        with patch.object(environment.prefix_size, 'value', 0x10):
            self.assertEqual(prefix_size(), PREFIX_SIZE)
        with patch.object(environment.prefix_size, 'value', 0x100000):
            self.assertEqual(prefix_size(), 0x100000)

    def test_iso_image_within_prefix(self):
        data = bytes(0x9001) + B'CD001\x01' + bytes(0x800)
        self.assertIs(from_bytes(data), FileFormat.ISO)
