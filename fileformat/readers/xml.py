"""
Document marker reader for XML. The initial part of the document is fed to a hardened parser
which records the first element; its local name, namespace, and attributes identify the XML
application. Internal entities may be declared in the document type, as Adobe Illustrator does
for its SVG namespaces; external references are rejected by the parser. Parsing stops at the root
element, so the document is not required to be complete or well-formed beyond it.
"""
from __future__ import annotations

from typing import NamedTuple

import defusedxml.ElementTree as et

from defusedxml import DefusedXmlException

from fileformat.formats import FileFormat
from fileformat.lib.structures import StructReader

__all__ = [
    'RootElement',
    'get_xml_format',
]

WINDOW_SIZE = 0x10000


class RootElement(NamedTuple):
    namespace: str
    name: str
    attributes: dict[str, str]
    namespaces: frozenset[str]


class RootFound(Exception):
    pass


class RootCatcher:
    """
    A parser target that records the namespaces declared before the root element and the root
    element itself. Parsing is aborted by raising `fileformat.readers.xml.RootFound` as soon as
    the root element has been recorded, so the content of the document is never expanded.
    """
    def __init__(self):
        self.root: RootElement | None = None
        self.namespaces: set[str] = set()

    def start_ns(self, prefix, uri):
        if self.root is None:
            self.namespaces.add(uri)

    def start(self, tag: str, attrib):
        if tag.startswith('{'):
            namespace, _, name = tag[1:].partition('}')
        else:
            namespace, name = '', tag
        self.root = RootElement(namespace, name, dict(attrib), frozenset(self.namespaces))
        raise RootFound

    def end(self, tag):
        pass

    def data(self, data):
        pass

    def close(self):
        return self.root


def parse_root(data: bytes) -> RootElement | None:
    """
    Return the root element of the given XML fragment, or `None` if the parser could not reach it.
    """
    catcher = RootCatcher()
    parser = et.XMLParser(target=catcher, forbid_entities=False, forbid_external=True)
    try:
        parser.feed(data)
    except (RootFound, et.ParseError, DefusedXmlException):
        pass
    return catcher.root


NAMESPACED: dict[tuple[str, str], FileFormat] = {
    ('http://www.w3.org/2000/svg', 'svg')                          : FileFormat.SVG,      # noqa
    ('http://www.w3.org/2005/Atom', 'feed')                        : FileFormat.ATOM,     # noqa
    ('http://www.w3.org/1998/Math/MathML', 'math')                 : FileFormat.MATHML,   # noqa
    ('http://www.w3.org/1999/XSL/Transform', 'stylesheet')         : FileFormat.XSLT,     # noqa
    ('http://www.w3.org/1999/XSL/Transform', 'transform')          : FileFormat.XSLT,     # noqa
    ('http://xspf.org/ns/0/', 'playlist')                          : FileFormat.XSPF,     # noqa
    ('http://www.w3.org/ns/ttml', 'tt')                            : FileFormat.TTML,     # noqa
    ('http://schemas.xmlsoap.org/soap/envelope/', 'Envelope')      : FileFormat.SOAP,     # noqa
    ('http://www.w3.org/2003/05/soap-envelope', 'Envelope')        : FileFormat.SOAP,     # noqa
    ('urn:oasis:names:tc:xliff:document:1.2', 'xliff')             : FileFormat.XLIFF,    # noqa
    ('urn:oasis:names:tc:xliff:document:2.0', 'xliff')             : FileFormat.XLIFF,    # noqa
    ('urn:mpeg:dash:schema:mpd:2011', 'MPD')                       : FileFormat.MPD,      # noqa
}
"""
Root elements that are only meaningful within their namespace.
"""

LOCAL_NAMES: dict[str, FileFormat] = {
    'svg'                       : FileFormat.SVG,       # noqa
    'rss'                       : FileFormat.RSS,       # noqa
    'gpx'                       : FileFormat.GPX,       # noqa
    'kml'                       : FileFormat.KML,       # noqa
    'TrainingCenterDatabase'    : FileFormat.TCX,       # noqa
    'math'                      : FileFormat.MATHML,    # noqa
    'score-partwise'            : FileFormat.MUSICXML,  # noqa
    'score-timewise'            : FileFormat.MUSICXML,  # noqa
    'X3D'                       : FileFormat.X3D,       # noqa
    'COLLADA'                   : FileFormat.DAE,       # noqa
    'amf'                       : FileFormat.AMF,       # noqa
    'USFSubtitles'              : FileFormat.USF,       # noqa
    'xliff'                     : FileFormat.XLIFF,     # noqa
    'MPD'                       : FileFormat.MPD,       # noqa
    'FictionBook'               : FileFormat.FB2,       # noqa
    'tileset'                   : FileFormat.TSX,       # noqa
    'mxfile'                    : FileFormat.DRAWIO,    # noqa
}
"""
Root elements that identify the format by their local name regardless of the namespace.
"""


def identify_root(root: RootElement) -> FileFormat | None:
    if 'opengis.net/gml' in root.namespace:
        return FileFormat.GML
    if format := NAMESPACED.get((root.namespace, root.name)):
        return format
    if root.name == 'RDF' and 'http://purl.org/rss/1.0/' in root.namespaces:
        return FileFormat.RSS
    if root.name.lower() == 'asx':
        return FileFormat.ASX
    if root.name == 'abiword':
        if root.attributes.get('template') == 'true':
            return FileFormat.AWT
        return FileFormat.ABW
    if root.name == 'map' and ('tiledversion' in root.attributes or 'orientation' in root.attributes):
        return FileFormat.TMX
    return LOCAL_NAMES.get(root.name)


def get_xml_format(reader: StructReader) -> FileFormat | None:
    """
    Identify the XML application from the root element within the first
    `fileformat.readers.xml.WINDOW_SIZE` bytes of the document.
    """
    reader.seekset(0)
    if (root := parse_root(reader.read(WINDOW_SIZE))) is None:
        return FileFormat.XML
    if (format := identify_root(root)) is None:
        return FileFormat.XML
    return format
