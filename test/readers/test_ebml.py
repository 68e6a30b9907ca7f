from fileformat.formats import FileFormat
from fileformat.lib.structures import EOF, Malformed, MemoryFile, StructReader
from fileformat.readers.ebml import read_vint, get_ebml_format

from .. import TestBase, ebml_element


class TestEbmlReader(TestBase):

    def identify(self, data: bytes):
        return get_ebml_format(StructReader(MemoryFile(data)))

    def test_variable_length_integers(self):
        for encoded, keep, expected in [
            (B'\x81', False, (1, 1)),
            (B'\x40\x02', False, (2, 2)),
            (B'\x1A\x45\xDF\xA3', True, (0x1A45DFA3, 4)),
            (B'\x01\x00\x00\x00\x00\x00\x01\x00', False, (0x100, 8)),
        ]:
            self.assertEqual(read_vint(StructReader(MemoryFile(encoded)), keep), expected)

    def test_zero_byte_is_not_a_valid_integer(self):
        with self.assertRaises(Malformed):
            read_vint(StructReader(MemoryFile(B'\x00\x81')))

    def test_webm_by_doctype(self):
        self.assertEqual(self.identify(self.build_ebml('webm', [(1, False)])), FileFormat.WEBM)
        self.assertEqual(self.identify(self.build_ebml('webm')), FileFormat.WEBM)

    def test_matroska_by_tracks(self):
        for tracks, expected in [
            ([(1, False), (2, False)], FileFormat.MKV),
            ([(2, False), (1, True)], FileFormat.MK3D),
            ([(2, False), (2, False)], FileFormat.MKA),
            ([(0x11, False)], FileFormat.MKS),
            ([(2, False), (0x11, False)], FileFormat.MKA),
        ]:
            self.assertEqual(self.identify(self.build_ebml('matroska', tracks)), expected, msg=tracks)

    def test_matroska_without_tracks_is_unresolved(self):
        self.assertIsNone(self.identify(self.build_ebml('matroska')))
        self.assertIsNone(self.identify(self.build_ebml('matroska', [(0x20, False)])))

    def test_other_doctype(self):
        self.assertEqual(self.identify(self.build_ebml('dvdsubs')), FileFormat.EBML)

    def test_missing_doctype_defaults_to_matroska(self):
        self.assertEqual(self.identify(self.build_ebml(None, [(2, False)])), FileFormat.MKA)
        self.assertIsNone(self.identify(self.build_ebml(None)))

    def test_truncated_document(self):
        data = self.build_ebml('matroska', [(1, False)])
        with self.assertRaises((EOF, Malformed)):
            self.identify(data[:20])

    def test_child_exceeding_parent(self):
        header = ebml_element(0x1A45DFA3, ebml_element(0x4282, B'matroska'))
        tracks = ebml_element(0x1654AE6B, B'')
        segment = B'\x18\x53\x80\x67\x82' + tracks
        with self.assertRaises(Malformed):
            self.identify(header + segment)

    def test_element_budget(self):
        header = ebml_element(0x1A45DFA3, ebml_element(0x4282, B'matroska'))
        voids = ebml_element(0xEC, B'') * 5000
        segment = ebml_element(0x18538067, voids)
        with self.assertRaises(Malformed):
            self.identify(header + segment)
