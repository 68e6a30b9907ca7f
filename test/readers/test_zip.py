import struct

from fileformat.formats import FileFormat
from fileformat.lib.structures import EOF, Malformed, MemoryFile, StructReader
from fileformat.readers.zip import ZipDirectory, get_zip_format

from .. import TestBase


class TestZipReader(TestBase):

    def identify(self, data: bytes):
        return get_zip_format(StructReader(MemoryFile(data)))

    def test_office_open_xml_documents(self):
        for folder, expected in [
            ('word', FileFormat.DOCX),
            ('xl', FileFormat.XLSX),
            ('ppt', FileFormat.PPTX),
            ('visio', FileFormat.VSDX),
        ]:
            data = self.build_zip({
                '[Content_Types].xml': B'<Types/>',
                '_rels/.rels': B'<Relationships/>',
                F'{folder}/document.xml': B'<document/>',
            })
            self.assertEqual(self.identify(data), expected, msg=folder)

    def test_other_packages_with_content_types(self):
        for name, expected in [
            ('3D/3dmodel.model', FileFormat.THREE_MF),
            ('AppxManifest.xml', FileFormat.APPX),
            ('extension.vsixmanifest', FileFormat.VSIX),
            ('dwf/documents/page.xml', FileFormat.DWFX),
            ('circuitdiagram/Document.xml', FileFormat.CDDX),
        ]:
            data = self.build_zip({'[Content_Types].xml': B'<Types/>', name: B'<x/>'})
            self.assertEqual(self.identify(data), expected, msg=name)

    def test_content_types_without_marker_is_zip(self):
        data = self.build_zip({'[Content_Types].xml': B'<Types/>', 'data.bin': B'x'})
        self.assertEqual(self.identify(data), FileFormat.ZIP)

    def test_office_folders_without_content_types(self):
        data = self.build_zip({'word/document.xml': B'<document/>'})
        self.assertEqual(self.identify(data), FileFormat.DOCX)
        data = self.build_zip({'xl/workbook.xml': B'<workbook/>'})
        self.assertEqual(self.identify(data), FileFormat.XLSX)

    def test_package_markers_require_content_types(self):
        data = self.build_zip({'3D/3dmodel.model': B'<model/>'})
        self.assertEqual(self.identify(data), FileFormat.ZIP)
        data = self.build_zip({'SpaceClaim/document.xml': B'<x/>'})
        self.assertEqual(self.identify(data), FileFormat.ZIP)

    def test_modeling_archives(self):
        for entries, expected in [
            (['[Content_Types].xml', 'SpaceClaim/document.xml'], FileFormat.SCDOC),
            (['Manifest.xml', 'FusionAssetName[Active]/Properties.dat'], FileFormat.F3D),
            (['Manifest.xml', 'Thumbnail.png', 'Part1.smb'], FileFormat.AUTODESK_123D),
            (['Manifest.xml', 'readme.txt'], FileFormat.ZIP),
        ]:
            data = self.build_zip({name: B'content' for name in entries})
            self.assertEqual(self.identify(data), expected, msg=entries[1])

    def test_mimetype_entry(self):
        data = self.build_zip({'META-INF/container.xml': B'<container/>'}, mimetype=B'application/epub+zip')
        self.assertEqual(self.identify(data), FileFormat.EPUB)
        data = self.build_zip({'content.xml': B'<x/>'}, mimetype=B'application/vnd.oasis.opendocument.spreadsheet')
        self.assertEqual(self.identify(data), FileFormat.ODS)

    def test_unknown_mimetype_falls_through_to_names(self):
        data = self.build_zip({'META-INF/MANIFEST.MF': B'Manifest-Version: 1.0'}, mimetype=B'application/x-unknown')
        self.assertEqual(self.identify(data), FileFormat.JAR)

    def test_application_packages(self):
        for entries, expected in [
            (['AndroidManifest.xml', 'classes.dex', 'META-INF/MANIFEST.MF'], FileFormat.APK),
            (['META-INF/application.xml', 'META-INF/MANIFEST.MF'], FileFormat.EAR),
            (['WEB-INF/web.xml', 'index.jsp'], FileFormat.WAR),
            (['Payload/Example.app/Info.plist'], FileFormat.IPA),
            (['AppManifest.xaml', 'Example.dll'], FileFormat.XAP),
            (['install.rdf', 'chrome.manifest'], FileFormat.XPI),
            (['META-INF/mozilla.rsa', 'manifest.json'], FileFormat.XPI),
            (['doc.kml', 'files/icon.png'], FileFormat.KMZ),
            (['scene.usdc', 'textures/wood.png'], FileFormat.USDZ),
            (['META-INF/MANIFEST.MF', 'org/example/Main.class'], FileFormat.JAR),
            (['readme.txt', 'data.bin'], FileFormat.ZIP),
        ]:
            data = self.build_zip({name: B'content' for name in entries})
            self.assertEqual(self.identify(data), expected, msg=entries[0])

    def test_usdz_requires_scene_as_first_entry(self):
        data = self.build_zip({'textures/wood.png': B'x', 'scene.usdc': B'x'})
        self.assertEqual(self.identify(data), FileFormat.ZIP)

    def test_empty_archive(self):
        self.assertEqual(self.identify(B'PK\x05\x06' + bytes(18)), FileFormat.ZIP)

    def test_prepended_data_is_tolerated(self):
        prefix = self.generate_random_buffer(0x400)
        data = self.build_zip({'word/document.xml': B'x', '[Content_Types].xml': B'x'}, prefix=prefix)
        directory = ZipDirectory(StructReader(MemoryFile(data)))
        self.assertEqual(directory.shift, 0x400)
        self.assertEqual(self.identify(data), FileFormat.DOCX)

    def test_archive_comment(self):
        data = bytearray(self.build_zip({'doc.kml': B'<kml/>'}))
        data[-2:] = struct.pack('<H', 5)
        data.extend(B'hello')
        self.assertEqual(self.identify(bytes(data)), FileFormat.KMZ)

    def test_missing_directory_is_malformed(self):
        data = self.build_zip({'doc.kml': B'<kml/>'})
        with self.assertRaises(Malformed):
            self.identify(data[:-22])

    def test_directory_larger_than_stream(self):
        data = bytearray(self.build_zip({'doc.kml': B'<kml/>'}))
        data[-10:-6] = struct.pack('<I', 0xFFFFFF)
        with self.assertRaises(Malformed):
            self.identify(bytes(data))

    def test_truncated_stream(self):
        data = self.build_zip({'a.txt': B'a' * 100, 'b.txt': B'b' * 100})
        for size in (0, 3, 21, 40, 100):
            with self.assertRaises((EOF, Malformed)):
                self.identify(data[:size])
