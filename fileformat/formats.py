"""
The closed enumeration of all file formats that can be returned by `fileformat.detect`. Every
member carries its catalog data: the `fileformat.formats.Kind` of the format, its conventional
file extension, a display name, an optional short name, and the media type. The catalog is only
consulted after detection has produced its answer.
"""
from __future__ import annotations

import enum


class Kind(enum.IntEnum):
    """
    The broad category of a `fileformat.formats.FileFormat`.
    """
    Application = enum.auto()
    Archive = enum.auto()
    Audio = enum.auto()
    Book = enum.auto()
    Certificate = enum.auto()
    Compression = enum.auto()
    Database = enum.auto()
    Disk = enum.auto()
    Document = enum.auto()
    Executable = enum.auto()
    Font = enum.auto()
    Geospatial = enum.auto()
    Image = enum.auto()
    Model = enum.auto()
    Package = enum.auto()
    Playlist = enum.auto()
    Rom = enum.auto()
    Subtitle = enum.auto()
    Syndication = enum.auto()
    Text = enum.auto()
    Video = enum.auto()


class Format:
    __slots__ = 'kind', 'extension', 'long_name', 'short_name', 'media_type'

    def __hash__(self):
        return hash(tuple(self))

    def __eq__(self, other):
        if not isinstance(other, Format):
            return False
        return all(a == b for a, b in zip(self, other))

    def __iter__(self):
        yield self.kind
        yield self.extension
        yield self.long_name
        yield self.short_name
        yield self.media_type

    def __init__(
        self,
        kind: Kind,
        extension: str,
        long_name: str,
        short_name: str | None = None,
        media_type: str | None = None,
    ) -> None:
        self.kind = kind
        self.extension = extension
        self.long_name = long_name
        self.short_name = short_name
        if media_type is None:
            if kind == Kind.Text:
                media_type = 'text/plain'
            else:
                media_type = 'application/octet-stream'
        self.media_type = media_type


K = Kind


class FileFormat(Format, enum.Enum):
    """
    An enumeration of all known file formats. The members `EMPTY`, `BIN` and `TXT` are sentinels:
    they stand for an empty input, for data of unknown format, and for text without a more specific
    format, respectively. The string representation of a member is its display name.
    """

    EMPTY = (K.Application, 'empty', 'Empty', None, 'application/x-empty')
    BIN = (K.Application, 'bin', 'Arbitrary Binary Data', 'BIN', 'application/octet-stream')
    TXT = (K.Text, 'txt', 'Plain Text', 'TXT', 'text/plain')

    AXML = (K.Application, 'xml', 'Android Binary XML', 'AXML', 'application/vnd.android.axml')
    ARSC = (K.Application, 'arsc', 'Android Compiled Resources', 'ARSC', 'application/vnd.android.arsc')
    ALIAS = (K.Application, 'alias', 'macOS Alias', None, 'application/x-apple-alias')
    ICC = (K.Application, 'icc', 'ICC Profile', 'ICC', 'application/vnd.iccprofile')
    LNK = (K.Application, 'lnk', 'Windows Shortcut', 'LNK', 'application/x-ms-shortcut')
    PCAP = (K.Application, 'pcap', 'PCAP Dump', 'PCAP', 'application/vnd.tcpdump.pcap')
    PCAPNG = (K.Application, 'pcapng', 'PCAP Next Generation Dump', 'PCAPNG', 'application/x-pcapng')
    SWF = (K.Application, 'swf', 'Small Web Format', 'SWF', 'application/x-shockwave-flash')
    TORRENT = (K.Application, 'torrent', 'BitTorrent File', 'TORRENT', 'application/x-bittorrent')
    EBML = (K.Application, 'ebml', 'Extensible Binary Meta Language', 'EBML', 'application/x-ebml')
    TMX = (K.Application, 'tmx', 'Tiled Map XML', 'TMX', 'application/x-tmx+xml')
    TSX = (K.Application, 'tsx', 'Tiled Tileset XML', 'TSX', 'application/x-tsx+xml')

    SEVEN_ZIP = (K.Archive, '7z', '7-Zip', '7Z', 'application/x-7z-compressed')
    ACE = (K.Archive, 'ace', 'ACE', None, 'application/x-ace-compressed')
    ALZ = (K.Archive, 'alz', 'ALZ', None, 'application/x-alz-compressed')
    AR = (K.Archive, 'a', 'Unix Archiver', 'AR', 'application/x-archive')
    ARJ = (K.Archive, 'arj', 'Archived by Robert Jung', 'ARJ', 'application/x-arj')
    CAB = (K.Archive, 'cab', 'Cabinet', 'CAB', 'application/vnd.ms-cab-compressed')
    CFB = (K.Archive, 'cfb', 'Compound File Binary', 'CFB', 'application/x-cfb')
    CPIO = (K.Archive, 'cpio', 'cpio', None, 'application/x-cpio')
    LZH = (K.Archive, 'lzh', 'LHA', None, 'application/x-lzh-compressed')
    RAR = (K.Archive, 'rar', 'Roshal Archive', 'RAR', 'application/vnd.rar')
    SBX = (K.Archive, 'sbx', 'SeqBox', 'SBX', 'application/x-sbx')
    SIT = (K.Archive, 'sit', 'StuffIt', 'SIT', 'application/x-stuffit')
    SITX = (K.Archive, 'sitx', 'StuffIt X', 'SITX', 'application/x-stuffitx')
    TAR = (K.Archive, 'tar', 'Tape Archive', 'TAR', 'application/x-tar')
    WIM = (K.Archive, 'wim', 'Windows Imaging Format', 'WIM', 'application/x-ms-wim')
    XAR = (K.Archive, 'xar', 'Extensible Archive', 'XAR', 'application/x-xar')
    ZIP = (K.Archive, 'zip', 'ZIP', None, 'application/zip')
    ZOO = (K.Archive, 'zoo', 'Zoo', None, 'application/x-zoo')

    AAC = (K.Audio, 'aac', 'Advanced Audio Coding', 'AAC', 'audio/aac')
    AC3 = (K.Audio, 'ac3', 'Audio Codec 3', 'AC-3', 'audio/vnd.dolby.dd-raw')
    AIFF = (K.Audio, 'aiff', 'Audio Interchange File Format', 'AIFF', 'audio/aiff')
    AIFC = (K.Audio, 'aifc', 'Audio Interchange File Format Compressed', 'AIFC', 'audio/x-aifc')
    AMR = (K.Audio, 'amr', 'Adaptive Multi-Rate', 'AMR', 'audio/amr')
    APE = (K.Audio, 'ape', 'Monkey\'s Audio', 'APE', 'audio/x-ape')
    AU = (K.Audio, 'au', 'Au', None, 'audio/basic')
    CAF = (K.Audio, 'caf', 'Core Audio Format', 'CAF', 'audio/x-caf')
    DFF = (K.Audio, 'dff', 'DSD Interchange File Format', 'DSDIFF', 'audio/x-dff')
    DSF = (K.Audio, 'dsf', 'DSD Stream File', 'DSF', 'audio/x-dsf')
    F4A = (K.Audio, 'f4a', 'Adobe Flash Player Audio', 'F4A', 'audio/mp4')
    F4B = (K.Audio, 'f4b', 'Adobe Flash Player Audiobook', 'F4B', 'audio/mp4')
    FLAC = (K.Audio, 'flac', 'Free Lossless Audio Codec', 'FLAC', 'audio/x-flac')
    IT = (K.Audio, 'it', 'Impulse Tracker Module', 'IT', 'audio/x-it')
    M4A = (K.Audio, 'm4a', 'Apple iTunes Audio', 'M4A', 'audio/x-m4a')
    M4B = (K.Audio, 'm4b', 'Apple iTunes Audiobook', 'M4B', 'audio/mp4')
    M4P = (K.Audio, 'm4p', 'Apple iTunes Protected Audio', 'M4P', 'audio/mp4')
    MIDI = (K.Audio, 'mid', 'Musical Instrument Digital Interface', 'MIDI', 'audio/midi')
    MKA = (K.Audio, 'mka', 'Matroska Audio', 'MKA', 'audio/x-matroska')
    MOD = (K.Audio, 'mod', 'ProTracker Module', 'MOD', 'audio/x-mod')
    MP3 = (K.Audio, 'mp3', 'MPEG-1/2 Audio Layer III', 'MP3', 'audio/mpeg')
    MP4_AUDIO = (K.Audio, 'mp4', 'MPEG-4 Part 14 Audio', 'MP4', 'audio/mp4')
    MPC = (K.Audio, 'mpc', 'Musepack', 'MPC', 'audio/x-musepack')
    OGA = (K.Audio, 'oga', 'Ogg FLAC', None, 'audio/ogg')
    OGG = (K.Audio, 'ogg', 'Ogg Vorbis', None, 'audio/ogg')
    OPUS = (K.Audio, 'opus', 'Ogg Opus', None, 'audio/opus')
    QCP = (K.Audio, 'qcp', 'Qualcomm PureVoice', 'QCP', 'audio/qcelp')
    RA = (K.Audio, 'ra', 'RealAudio', 'RA', 'audio/vnd.rn-realaudio')
    S3M = (K.Audio, 's3m', 'ScreamTracker 3 Module', 'S3M', 'audio/x-s3m')
    SPX = (K.Audio, 'spx', 'Ogg Speex', None, 'audio/ogg')
    VOC = (K.Audio, 'voc', 'Creative Voice', 'VOC', 'audio/x-voc')
    WAV = (K.Audio, 'wav', 'Waveform Audio', 'WAV', 'audio/vnd.wave')
    WMA = (K.Audio, 'wma', 'Windows Media Audio', 'WMA', 'audio/x-ms-wma')
    WV = (K.Audio, 'wv', 'WavPack', None, 'audio/wavpack')
    XM = (K.Audio, 'xm', 'FastTracker 2 Extended Module', 'XM', 'audio/x-xm')

    EPUB = (K.Book, 'epub', 'Electronic Publication', 'EPUB', 'application/epub+zip')
    FB2 = (K.Book, 'fb2', 'FictionBook', 'FB2', 'application/x-fictionbook+xml')
    FBZ = (K.Book, 'fbz', 'FictionBook Zipped', 'FBZ', 'application/x-fbz')
    LIT = (K.Book, 'lit', 'Microsoft Reader eBook', 'LIT', 'application/x-ms-reader')
    MOBI = (K.Book, 'mobi', 'Mobipocket', 'MOBI', 'application/x-mobipocket-ebook')

    JKS = (K.Certificate, 'jks', 'Java KeyStore', 'JKS', 'application/x-java-keystore')
    PEM_CERTIFICATE = (K.Certificate, 'crt', 'PEM Certificate', 'PEM', 'application/x-pem-file')
    PEM_REQUEST = (K.Certificate, 'csr', 'PEM Certificate Signing Request', 'PEM', 'application/pkcs10')
    PEM_PRIVATE_KEY = (K.Certificate, 'key', 'PEM Private Key', 'PEM', 'application/x-pem-file')
    OPENSSH_PRIVATE_KEY = (K.Certificate, 'key', 'OpenSSH Private Key', None, 'application/x-pem-file')
    PGP_PUBLIC_KEY = (K.Certificate, 'asc', 'OpenPGP Public Key', None, 'application/pgp-keys')
    PGP_MESSAGE = (K.Certificate, 'asc', 'OpenPGP Message', None, 'application/pgp-encrypted')

    BZ2 = (K.Compression, 'bz2', 'bzip2', 'BZ2', 'application/x-bzip2')
    BZ3 = (K.Compression, 'bz3', 'bzip3', 'BZ3', 'application/x-bzip3')
    GZ = (K.Compression, 'gz', 'Gzip', 'GZ', 'application/gzip')
    LRZ = (K.Compression, 'lrz', 'Long Range ZIP', 'LRZ', 'application/x-lrzip')
    LZ = (K.Compression, 'lz', 'Lzip', 'LZ', 'application/x-lzip')
    LZ4 = (K.Compression, 'lz4', 'LZ4', None, 'application/x-lz4')
    LZFSE = (K.Compression, 'lzfse', 'Lempel-Ziv Finite State Entropy', 'LZFSE', 'application/x-lzfse')
    LZO = (K.Compression, 'lzo', 'Lzop', 'LZO', 'application/x-lzop')
    SNAPPY = (K.Compression, 'sz', 'Snappy', None, 'application/x-snappy-framed')
    XZ = (K.Compression, 'xz', 'XZ', None, 'application/x-xz')
    Z = (K.Compression, 'Z', 'UNIX compress', None, 'application/x-compress')
    ZST = (K.Compression, 'zst', 'Zstandard', 'ZST', 'application/zstd')

    ACCDB = (K.Database, 'accdb', 'Microsoft Access 2007 Database', 'ACCDB', 'application/x-msaccess')
    ARROW = (K.Database, 'arrow', 'Apache Arrow Columnar', None, 'application/vnd.apache.arrow.file')
    AVRO = (K.Database, 'avro', 'Apache Avro', None, 'application/avro')
    MDB = (K.Database, 'mdb', 'Microsoft Access Database', 'MDB', 'application/x-msaccess')
    PARQUET = (K.Database, 'parquet', 'Apache Parquet', None, 'application/vnd.apache.parquet')
    SQLITE = (K.Database, 'sqlite', 'SQLite 3', None, 'application/vnd.sqlite3')
    WDB = (K.Database, 'wdb', 'Microsoft Works Database', 'WDB', 'application/vnd.ms-works')
    ODB = (K.Database, 'odb', 'OpenDocument Database', 'ODB', 'application/vnd.oasis.opendocument.database')

    DMG = (K.Disk, 'dmg', 'Apple Disk Image', 'DMG', 'application/x-apple-diskimage')
    ISO = (K.Disk, 'iso', 'ISO 9660', 'ISO', 'application/x-iso9660-image')
    QCOW = (K.Disk, 'qcow', 'QEMU Copy On Write', 'QCOW', 'application/x-qemu-disk')
    VDI = (K.Disk, 'vdi', 'VirtualBox Virtual Disk Image', 'VDI', 'application/x-virtualbox-vdi')
    VHD = (K.Disk, 'vhd', 'Microsoft Virtual Hard Disk', 'VHD', 'application/x-vhd')
    VHDX = (K.Disk, 'vhdx', 'Microsoft Virtual Hard Disk 2', 'VHDX', 'application/x-vhdx')
    VMDK = (K.Disk, 'vmdk', 'VMware Virtual Disk', 'VMDK', 'application/x-vmdk')

    ABW = (K.Document, 'abw', 'AbiWord', 'ABW', 'application/x-abiword')
    AWT = (K.Document, 'awt', 'AbiWord Template', 'AWT', 'application/x-abiword-template')
    CDDX = (K.Document, 'cddx', 'Circuit Diagram Document', 'CDDX', 'application/vnd.circuitdiagram.document.main+xml')
    CHM = (K.Document, 'chm', 'Microsoft Compiled HTML Help', 'CHM', 'application/vnd.ms-htmlhelp')
    DJVU = (K.Document, 'djvu', 'DjVu', None, 'image/vnd.djvu')
    DOC = (K.Document, 'doc', 'Microsoft Word Document', 'DOC', 'application/msword')
    DOCX = (
        K.Document, 'docx', 'Office Open XML Document', 'DOCX',
        'application/vnd.openxmlformats-officedocument.wordprocessingml.document')
    EPS = (K.Document, 'eps', 'Encapsulated PostScript', 'EPS', 'application/eps')
    IDML = (K.Document, 'idml', 'InDesign Markup Language', 'IDML', 'application/vnd.adobe.indesign-idml-package')
    INDD = (K.Document, 'indd', 'Adobe InDesign Document', 'INDD', 'application/x-indesign')
    MPP = (K.Document, 'mpp', 'Microsoft Project Plan', 'MPP', 'application/vnd.ms-project')
    MSG = (K.Document, 'msg', 'Microsoft Outlook Message', 'MSG', 'application/vnd.ms-outlook')
    MUSICXML = (K.Document, 'musicxml', 'MusicXML', None, 'application/vnd.recordare.musicxml+xml')
    MXL = (K.Document, 'mxl', 'MusicXML Zipped', 'MXL', 'application/vnd.recordare.musicxml')
    ODF = (K.Document, 'odf', 'OpenDocument Formula', 'ODF', 'application/vnd.oasis.opendocument.formula')
    ODG = (K.Document, 'odg', 'OpenDocument Graphics', 'ODG', 'application/vnd.oasis.opendocument.graphics')
    ODM = (K.Document, 'odm', 'OpenDocument Text Master', 'ODM', 'application/vnd.oasis.opendocument.text-master')
    ODP = (K.Document, 'odp', 'OpenDocument Presentation', 'ODP', 'application/vnd.oasis.opendocument.presentation')
    ODS = (K.Document, 'ods', 'OpenDocument Spreadsheet', 'ODS', 'application/vnd.oasis.opendocument.spreadsheet')
    ODT = (K.Document, 'odt', 'OpenDocument Text', 'ODT', 'application/vnd.oasis.opendocument.text')
    OTF = (K.Document, 'otf', 'OpenDocument Formula Template', 'OTF', 'application/vnd.oasis.opendocument.formula-template')
    OTG = (K.Document, 'otg', 'OpenDocument Graphics Template', 'OTG', 'application/vnd.oasis.opendocument.graphics-template')
    OTM = (K.Document, 'otm', 'OpenDocument Text Master Template', 'OTM', 'application/vnd.oasis.opendocument.text-master-template')
    OTP = (K.Document, 'otp', 'OpenDocument Presentation Template', 'OTP', 'application/vnd.oasis.opendocument.presentation-template')
    OTS = (K.Document, 'ots', 'OpenDocument Spreadsheet Template', 'OTS', 'application/vnd.oasis.opendocument.spreadsheet-template')
    OTT = (K.Document, 'ott', 'OpenDocument Text Template', 'OTT', 'application/vnd.oasis.opendocument.text-template')
    PDF = (K.Document, 'pdf', 'Portable Document Format', 'PDF', 'application/pdf')
    PPT = (K.Document, 'ppt', 'Microsoft PowerPoint Presentation', 'PPT', 'application/vnd.ms-powerpoint')
    PPTX = (
        K.Document, 'pptx', 'Office Open XML Presentation', 'PPTX',
        'application/vnd.openxmlformats-officedocument.presentationml.presentation')
    PS = (K.Document, 'ps', 'PostScript', 'PS', 'application/postscript')
    PUB = (K.Document, 'pub', 'Microsoft Publisher Document', 'PUB', 'application/vnd.ms-publisher')
    RTF = (K.Document, 'rtf', 'Rich Text Format', 'RTF', 'application/rtf')
    SDA = (K.Document, 'sda', 'StarDraw', 'SDA', 'application/vnd.stardivision.draw')
    SDC = (K.Document, 'sdc', 'StarCalc', 'SDC', 'application/vnd.stardivision.calc')
    SDD = (K.Document, 'sdd', 'StarImpress', 'SDD', 'application/vnd.stardivision.impress')
    SDS = (K.Document, 'sds', 'StarChart', 'SDS', 'application/vnd.stardivision.chart')
    SDW = (K.Document, 'sdw', 'StarWriter', 'SDW', 'application/vnd.stardivision.writer')
    SMF = (K.Document, 'smf', 'StarMath', 'SMF', 'application/vnd.stardivision.math')
    STC = (K.Document, 'stc', 'Sun XML Calc Template', 'STC', 'application/vnd.sun.xml.calc.template')
    STD = (K.Document, 'std', 'Sun XML Draw Template', 'STD', 'application/vnd.sun.xml.draw.template')
    STI = (K.Document, 'sti', 'Sun XML Impress Template', 'STI', 'application/vnd.sun.xml.impress.template')
    STW = (K.Document, 'stw', 'Sun XML Writer Template', 'STW', 'application/vnd.sun.xml.writer.template')
    SXC = (K.Document, 'sxc', 'Sun XML Calc', 'SXC', 'application/vnd.sun.xml.calc')
    SXD = (K.Document, 'sxd', 'Sun XML Draw', 'SXD', 'application/vnd.sun.xml.draw')
    SXG = (K.Document, 'sxg', 'Sun XML Writer Global', 'SXG', 'application/vnd.sun.xml.writer.global')
    SXI = (K.Document, 'sxi', 'Sun XML Impress', 'SXI', 'application/vnd.sun.xml.impress')
    SXM = (K.Document, 'sxm', 'Sun XML Math', 'SXM', 'application/vnd.sun.xml.math')
    SXW = (K.Document, 'sxw', 'Sun XML Writer', 'SXW', 'application/vnd.sun.xml.writer')
    VSD = (K.Document, 'vsd', 'Microsoft Visio Drawing', 'VSD', 'application/vnd.visio')
    VSDX = (K.Document, 'vsdx', 'Office Open XML Drawing', 'VSDX', 'application/vnd.ms-visio.drawing.main+xml')
    WPD = (K.Document, 'wpd', 'WordPerfect Document', 'WPD', 'application/vnd.wordperfect')
    WPS = (K.Document, 'wps', 'Microsoft Works Word Processor', 'WPS', 'application/vnd.ms-works')
    XLR = (K.Document, 'xlr', 'Microsoft Works 6 Spreadsheet', 'XLR', 'application/vnd.ms-works')
    XLS = (K.Document, 'xls', 'Microsoft Excel Spreadsheet', 'XLS', 'application/vnd.ms-excel')
    XLSX = (K.Document, 'xlsx', 'Office Open XML Spreadsheet', 'XLSX', 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')

    ANDROID_DEX = (K.Executable, 'dex', 'Dalvik Executable', 'DEX', 'application/vnd.android.dex')
    ANDROID_DEY = (K.Executable, 'dey', 'Optimized Dalvik Executable', 'DEY', 'application/vnd.android.dey')
    BITCODE = (K.Executable, 'bc', 'LLVM Bitcode', None, 'application/x-llvm')
    CLASS = (K.Executable, 'class', 'Java Class', None, 'application/java-vm')
    DLL = (K.Executable, 'dll', 'Dynamic Link Library', 'DLL', 'application/x-msdownload')
    ELF = (K.Executable, 'elf', 'Executable and Linkable Format', 'ELF', 'application/x-executable')
    EXE = (K.Executable, 'exe', 'MS-DOS Executable', 'EXE', 'application/x-dosexec')
    LE = (K.Executable, 'exe', 'Linear Executable', 'LE', 'application/x-ms-le-executable')
    LUAC = (K.Executable, 'luac', 'Lua Bytecode', None, 'application/x-lua-bytecode')
    MACHO = (K.Executable, 'macho', 'Mach-O', None, 'application/x-mach-binary')
    NE = (K.Executable, 'exe', 'New Executable', 'NE', 'application/x-ms-ne-executable')
    PE = (K.Executable, 'exe', 'Portable Executable', 'PE', 'application/vnd.microsoft.portable-executable')
    SH = (K.Executable, 'sh', 'Shell Script', 'SH', 'text/x-shellscript')
    WASM = (K.Executable, 'wasm', 'WebAssembly Binary', 'WASM', 'application/wasm')

    EOT = (K.Font, 'eot', 'Embedded OpenType', 'EOT', 'application/vnd.ms-fontobject')
    OPENTYPE = (K.Font, 'otf', 'OpenType', 'OTF', 'font/otf')
    TTC = (K.Font, 'ttc', 'TrueType Collection', 'TTC', 'font/collection')
    TTF = (K.Font, 'ttf', 'TrueType', 'TTF', 'font/ttf')
    WOFF = (K.Font, 'woff', 'Web Open Font Format', 'WOFF', 'font/woff')
    WOFF2 = (K.Font, 'woff2', 'Web Open Font Format 2', 'WOFF2', 'font/woff2')

    FGB = (K.Geospatial, 'fgb', 'FlatGeobuf', None, 'application/vnd.flatgeobuf')
    GML = (K.Geospatial, 'gml', 'Geography Markup Language', 'GML', 'application/gml+xml')
    GPX = (K.Geospatial, 'gpx', 'GPS Exchange Format', 'GPX', 'application/gpx+xml')
    KML = (K.Geospatial, 'kml', 'Keyhole Markup Language', 'KML', 'application/vnd.google-earth.kml+xml')
    KMZ = (K.Geospatial, 'kmz', 'Keyhole Markup Language Zipped', 'KMZ', 'application/vnd.google-earth.kmz')
    SHP = (K.Geospatial, 'shp', 'Shapefile', 'SHP', 'application/x-esri-shape')
    TCX = (K.Geospatial, 'tcx', 'Training Center XML', 'TCX', 'application/vnd.garmin.tcx+xml')

    AI = (K.Image, 'ai', 'Adobe Illustrator Artwork', 'AI', 'application/postscript')
    ANI = (K.Image, 'ani', 'Windows Animated Cursor', 'ANI', 'application/x-navi-animation')
    AVIF = (K.Image, 'avif', 'AV1 Image File Format', 'AVIF', 'image/avif')
    BMP = (K.Image, 'bmp', 'Windows Bitmap', 'BMP', 'image/bmp')
    BPG = (K.Image, 'bpg', 'Better Portable Graphics', 'BPG', 'image/bpg')
    CR2 = (K.Image, 'cr2', 'Canon Raw 2', 'CR2', 'image/x-canon-cr2')
    CR3 = (K.Image, 'cr3', 'Canon Raw 3', 'CR3', 'image/x-canon-cr3')
    CUR = (K.Image, 'cur', 'Windows Cursor', 'CUR', 'image/x-icon')
    DDS = (K.Image, 'dds', 'DirectDraw Surface', 'DDS', 'image/vnd-ms.dds')
    DICOM = (K.Image, 'dcm', 'Digital Imaging and Communications in Medicine', 'DICOM', 'application/dicom')
    DRAWIO = (K.Image, 'drawio', 'draw.io', 'DRAWIO', 'application/vnd.jgraph.mxfile')
    EXR = (K.Image, 'exr', 'OpenEXR', 'EXR', 'image/x-exr')
    FLIF = (K.Image, 'flif', 'Free Lossless Image Format', 'FLIF', 'image/flif')
    GIF = (K.Image, 'gif', 'Graphics Interchange Format', 'GIF', 'image/gif')
    HDR = (K.Image, 'hdr', 'Radiance HDR', 'HDR', 'image/vnd.radiance')
    HEIC = (K.Image, 'heic', 'High Efficiency Image Coding', 'HEIC', 'image/heic')
    HEICS = (K.Image, 'heics', 'High Efficiency Image Coding Sequence', 'HEICS', 'image/heic-sequence')
    HEIF = (K.Image, 'heif', 'High Efficiency Image File Format', 'HEIF', 'image/heif')
    ICO = (K.Image, 'ico', 'Windows Icon', 'ICO', 'image/x-icon')
    ILBM = (K.Image, 'iff', 'Interleaved Bitmap', 'ILBM', 'image/x-ilbm')
    JNG = (K.Image, 'jng', 'JPEG Network Graphics', 'JNG', 'image/x-jng')
    JP2 = (K.Image, 'jp2', 'JPEG 2000 Part 1', 'JP2', 'image/jp2')
    JPEG = (K.Image, 'jpg', 'Joint Photographic Experts Group', 'JPEG', 'image/jpeg')
    JPM = (K.Image, 'jpm', 'JPEG 2000 Part 6', 'JPM', 'image/jpm')
    JPX = (K.Image, 'jpx', 'JPEG 2000 Part 2', 'JPX', 'image/jpx')
    JXL = (K.Image, 'jxl', 'JPEG XL', 'JXL', 'image/jxl')
    JXR = (K.Image, 'jxr', 'JPEG XR', 'JXR', 'image/jxr')
    KTX = (K.Image, 'ktx', 'Khronos Texture', 'KTX', 'image/ktx')
    KTX2 = (K.Image, 'ktx2', 'Khronos Texture 2', 'KTX2', 'image/ktx2')
    MNG = (K.Image, 'mng', 'Multiple-image Network Graphics', 'MNG', 'video/x-mng')
    ORA = (K.Image, 'ora', 'OpenRaster', 'ORA', 'image/openraster')
    ORF = (K.Image, 'orf', 'Olympus Raw Format', 'ORF', 'image/x-olympus-orf')
    PNG = (K.Image, 'png', 'Portable Network Graphics', 'PNG', 'image/png')
    PSD = (K.Image, 'psd', 'Adobe Photoshop Document', 'PSD', 'image/vnd.adobe.photoshop')
    QOI = (K.Image, 'qoi', 'Quite OK Image', 'QOI', 'image/qoi')
    RAF = (K.Image, 'raf', 'Fujifilm Raw', 'RAF', 'image/x-fuji-raf')
    RW2 = (K.Image, 'rw2', 'Panasonic Raw', 'RW2', 'image/x-panasonic-rw2')
    SVG = (K.Image, 'svg', 'Scalable Vector Graphics', 'SVG', 'image/svg+xml')
    TIFF = (K.Image, 'tiff', 'Tag Image File Format', 'TIFF', 'image/tiff')
    WEBP = (K.Image, 'webp', 'WebP', None, 'image/webp')
    WPG = (K.Image, 'wpg', 'WordPerfect Graphics', 'WPG', 'image/x-wpg')
    XCF = (K.Image, 'xcf', 'GIMP Image', 'XCF', 'image/x-xcf')

    AUTODESK_123D = (K.Model, '123dx', 'Autodesk 123D', '123DX', 'model/x-123dx')
    AMF = (K.Model, 'amf', 'Additive Manufacturing Format', 'AMF', 'application/x-amf')
    BLEND = (K.Model, 'blend', 'Blender', None, 'application/x-blender')
    DAE = (K.Model, 'dae', 'Digital Asset Exchange', 'DAE', 'model/vnd.collada+xml')
    DRC = (K.Model, 'drc', 'Google Draco', 'DRC', 'model/x-draco')
    DWFX = (K.Model, 'dwfx', 'Design Web Format XPS', 'DWFX', 'model/vnd.dwfx+xps')
    DWG = (K.Model, 'dwg', 'AutoCAD Drawing', 'DWG', 'image/vnd.dwg')
    FBX = (K.Model, 'fbx', 'Filmbox', 'FBX', 'application/vnd.autodesk.fbx')
    F3D = (K.Model, 'f3d', 'Fusion 360', 'F3D', 'model/x-f3d')
    GLB = (K.Model, 'glb', 'GL Transmission Format Binary', 'GLB', 'model/gltf-binary')
    IAM = (K.Model, 'iam', 'Autodesk Inventor Assembly', 'IAM', 'application/x-inventor-assembly')
    IDW = (K.Model, 'idw', 'Autodesk Inventor Drawing', 'IDW', 'application/x-inventor-drawing')
    IPN = (K.Model, 'ipn', 'Autodesk Inventor Presentation', 'IPN', 'application/x-inventor-presentation')
    IPT = (K.Model, 'ipt', 'Autodesk Inventor Part', 'IPT', 'application/x-inventor-part')
    MAX = (K.Model, 'max', '3D Studio Max', 'MAX', 'application/x-max')
    PLY = (K.Model, 'ply', 'Polygon', 'PLY', 'model/x-ply')
    SCDOC = (K.Model, 'scdoc', 'SpaceClaim Document', 'SCDOC', 'model/x-scdoc')
    SKP = (K.Model, 'skp', 'SketchUp', 'SKP', 'application/vnd.sketchup.skp')
    SLDASM = (K.Model, 'sldasm', 'SolidWorks Assembly', 'SLDASM', 'application/sldworks')
    SLDDRW = (K.Model, 'slddrw', 'SolidWorks Drawing', 'SLDDRW', 'application/sldworks')
    SLDPRT = (K.Model, 'sldprt', 'SolidWorks Part', 'SLDPRT', 'application/sldworks')
    THREE_MF = (K.Model, '3mf', '3D Manufacturing Format', '3MF', 'application/vnd.ms-package.3dmanufacturing-3dmodel+xml')
    USDC = (K.Model, 'usdc', 'Universal Scene Description Crate', 'USDC', 'model/x-usd')
    USDZ = (K.Model, 'usdz', 'Universal Scene Description Zipped', 'USDZ', 'model/vnd.usdz+zip')
    X3D = (K.Model, 'x3d', 'Extensible 3D', 'X3D', 'model/x3d+xml')

    AIR = (K.Package, 'air', 'Adobe Integrated Runtime', 'AIR', 'application/vnd.adobe.air-application-installer-package+zip')
    APK = (K.Package, 'apk', 'Android Package', 'APK', 'application/vnd.android.package-archive')
    APPX = (K.Package, 'appx', 'Windows App Package', 'APPX', 'application/vnd.ms-appx')
    CRX = (K.Package, 'crx', 'Google Chrome Extension', 'CRX', 'application/x-chrome-extension')
    DEB = (K.Package, 'deb', 'Debian Binary Package', 'DEB', 'application/vnd.debian.binary-package')
    EAR = (K.Package, 'ear', 'Enterprise Application Archive', 'EAR', 'application/java-archive')
    IPA = (K.Package, 'ipa', 'iOS App Store Package', 'IPA', 'application/x-ios-app')
    JAR = (K.Package, 'jar', 'Java Archive', 'JAR', 'application/java-archive')
    MSI = (K.Package, 'msi', 'Microsoft Software Installer', 'MSI', 'application/x-msi')
    RPM = (K.Package, 'rpm', 'Red Hat Package Manager', 'RPM', 'application/x-rpm')
    VSIX = (K.Package, 'vsix', 'Microsoft Visual Studio Extension', 'VSIX', 'application/vsix')
    WAR = (K.Package, 'war', 'Web Application Archive', 'WAR', 'application/java-archive')
    XAP = (K.Package, 'xap', 'XAP', None, 'application/x-silverlight-app')
    XPI = (K.Package, 'xpi', 'XPInstall', 'XPI', 'application/x-xpinstall')

    ASX = (K.Playlist, 'asx', 'Advanced Stream Redirector', 'ASX', 'video/x-ms-asf')
    M3U = (K.Playlist, 'm3u', 'Multimedia Playlist', 'M3U', 'audio/x-mpegurl')
    PLS = (K.Playlist, 'pls', 'PLS', None, 'audio/x-scpls')
    WPL = (K.Playlist, 'wpl', 'Windows Media Playlist', 'WPL', 'application/vnd.ms-wpl')
    XSPF = (K.Playlist, 'xspf', 'XML Shareable Playlist Format', 'XSPF', 'application/xspf+xml')

    GB = (K.Rom, 'gb', 'Game Boy ROM', None, 'application/x-gameboy-rom')
    GBA = (K.Rom, 'gba', 'Game Boy Advance ROM', None, 'application/x-gba-rom')
    GBC = (K.Rom, 'gbc', 'Game Boy Color ROM', None, 'application/x-gameboy-color-rom')
    N64 = (K.Rom, 'z64', 'Nintendo 64 ROM', None, 'application/x-n64-rom')
    NDS = (K.Rom, 'nds', 'Nintendo DS ROM', None, 'application/x-nintendo-ds-rom')
    NES = (K.Rom, 'nes', 'Nintendo Entertainment System ROM', 'NES', 'application/x-nintendo-nes-rom')

    MKS = (K.Subtitle, 'mks', 'Matroska Subtitles', 'MKS', 'application/x-matroska')
    MP4_SUBTITLES = (K.Subtitle, 'mp4', 'MPEG-4 Part 14 Subtitles', 'MP4', 'application/mp4')
    TTML = (K.Subtitle, 'ttml', 'Timed Text Markup Language', 'TTML', 'application/ttml+xml')
    USF = (K.Subtitle, 'usf', 'Universal Subtitle Format', 'USF', 'application/x-usf')
    VTT = (K.Subtitle, 'vtt', 'Web Video Text Tracks', 'WebVTT', 'text/vtt')

    ATOM = (K.Syndication, 'atom', 'Atom', None, 'application/atom+xml')
    RSS = (K.Syndication, 'rss', 'Really Simple Syndication', 'RSS', 'application/rss+xml')

    HTML = (K.Text, 'html', 'HyperText Markup Language', 'HTML', 'text/html')
    MATHML = (K.Text, 'mathml', 'Mathematical Markup Language', 'MathML', 'application/mathml+xml')
    MPD = (K.Text, 'mpd', 'MPEG-DASH Manifest', 'MPD', 'application/dash+xml')
    SOAP = (K.Text, 'soap', 'Simple Object Access Protocol', 'SOAP', 'application/soap+xml')
    XLIFF = (K.Text, 'xlf', 'XML Localization Interchange File Format', 'XLIFF', 'application/x-xliff+xml')
    XML = (K.Text, 'xml', 'Extensible Markup Language', 'XML', 'text/xml')
    XSLT = (K.Text, 'xsl', 'Extensible Stylesheet Language Transformations', 'XSLT', 'application/xslt+xml')

    ASF = (K.Video, 'asf', 'Advanced Systems Format', 'ASF', 'application/vnd.ms-asf')
    AVI = (K.Video, 'avi', 'Audio Video Interleave', 'AVI', 'video/avi')
    BIK = (K.Video, 'bik', 'Bink Video', None, 'video/vnd.radgamettools.bink')
    DVR_MS = (K.Video, 'dvr-ms', 'Microsoft Digital Video Recording', 'DVR-MS', 'video/x-ms-dvr')
    F4P = (K.Video, 'f4p', 'Adobe Flash Player Protected Video', 'F4P', 'video/mp4')
    F4V = (K.Video, 'f4v', 'Adobe Flash Player Video', 'F4V', 'video/mp4')
    FLV = (K.Video, 'flv', 'Flash Video', 'FLV', 'video/x-flv')
    M4V = (K.Video, 'm4v', 'Apple iTunes Video', 'M4V', 'video/x-m4v')
    MJ2 = (K.Video, 'mj2', 'Motion JPEG 2000', 'MJ2', 'video/mj2')
    MK3D = (K.Video, 'mk3d', 'Matroska 3D Video', 'MK3D', 'video/x-matroska')
    MKV = (K.Video, 'mkv', 'Matroska Video', 'MKV', 'video/x-matroska')
    MOV = (K.Video, 'mov', 'QuickTime File Format', 'MOV', 'video/quicktime')
    MP4 = (K.Video, 'mp4', 'MPEG-4 Part 14', 'MP4', 'video/mp4')
    MP4_VIDEO = (K.Video, 'mp4', 'MPEG-4 Part 14 Video', 'MP4', 'video/mp4')
    MPG = (K.Video, 'mpg', 'MPEG Program Stream', 'MPG', 'video/mpeg')
    MXF = (K.Video, 'mxf', 'Material Exchange Format', 'MXF', 'application/mxf')
    OGV = (K.Video, 'ogv', 'Ogg Theora', None, 'video/ogg')
    OGX = (K.Video, 'ogx', 'Ogg Multiplexed Media', None, 'application/ogg')
    RM = (K.Video, 'rm', 'RealMedia', 'RM', 'application/vnd.rn-realmedia')
    RV = (K.Video, 'rv', 'RealVideo', 'RV', 'video/vnd.rn-realvideo')
    SMK = (K.Video, 'smk', 'Smacker', None, 'video/vnd.radgamettools.smacker')
    THREE_GPP = (K.Video, '3gp', '3rd Generation Partnership Project', '3GPP', 'video/3gpp')
    THREE_GPP2 = (K.Video, '3g2', '3rd Generation Partnership Project 2', '3GPP2', 'video/3gpp2')
    TS = (K.Video, 'ts', 'MPEG-2 Transport Stream', 'MPEG2-TS', 'video/mp2t')
    WEBM = (K.Video, 'webm', 'WebM', None, 'video/webm')
    WMV = (K.Video, 'wmv', 'Windows Media Video', 'WMV', 'video/x-ms-wmv')

    def __str__(self):
        return self.long_name

    @classmethod
    def default(cls) -> FileFormat:
        """
        The format that is reported for data of unknown format.
        """
        return cls.BIN

