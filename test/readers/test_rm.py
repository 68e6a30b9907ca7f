import struct

from fileformat.formats import FileFormat
from fileformat.lib.structures import EOF, Malformed, MemoryFile, StructReader
from fileformat.readers.rm import get_rm_format

from .. import TestBase


class TestRealMediaReader(TestBase):

    def identify(self, data: bytes):
        return get_rm_format(StructReader(MemoryFile(data)))

    def test_media_types(self):
        for mime_types, expected in [
            ([B'audio/x-pn-realaudio', B'video/x-pn-realvideo'], FileFormat.RV),
            ([B'audio/x-pn-realaudio'], FileFormat.RA),
            ([B'logical-audio/x-pn-multirate-realaudio'], FileFormat.RA),
            ([B'logical-fileinfo'], FileFormat.RM),
            ([], FileFormat.RM),
        ]:
            self.assertEqual(self.identify(self.build_rm(mime_types)), expected)

    def test_invalid_first_chunk(self):
        data = B'PROP' + self.build_rm()[4:]
        with self.assertRaises(Malformed):
            self.identify(data)

    def test_chunk_exceeding_file(self):
        data = bytearray(self.build_rm([B'video/x-pn-realvideo']))
        data[22:26] = struct.pack('>I', 0x10000)
        with self.assertRaises(Malformed):
            self.identify(bytes(data))

    def test_chunk_smaller_than_header(self):
        data = bytearray(self.build_rm([B'video/x-pn-realvideo']))
        data[22:26] = struct.pack('>I', 4)
        with self.assertRaises(Malformed):
            self.identify(bytes(data))

    def test_truncated_media_properties(self):
        data = self.build_rm([B'video/x-pn-realvideo'])
        self.assertEqual(self.identify(data), FileFormat.RV)
        with self.assertRaises((EOF, Malformed)):
            self.identify(data[:90])
