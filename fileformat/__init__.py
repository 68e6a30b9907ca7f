R"""
The fileformat package identifies the format of binary data. Detection works in two stages: a
bounded prefix of the input is matched against an ordered catalog of signatures, and container
formats such as ZIP archives, compound files, Matroska documents, or MPEG-4 files are refined by
reading just enough of their internal structure to identify the specific format they contain.
Inputs that are not identified are classified as plain text or arbitrary binary data.

    >>> import fileformat
    >>> print(fileformat.from_bytes(B'\x89PNG\r\n\x1a\n' + bytes(24)))
    Portable Network Graphics

The module `fileformat.formats` documents the catalog of known formats, the module
`fileformat.signatures` documents the signature catalog, and `fileformat.readers` documents the
structural readers.
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'fileformat'

from fileformat.detector import detect, from_bytes, from_file
from fileformat.formats import FileFormat, Kind

__all__ = [
    'detect',
    'from_bytes',
    'from_file',
    'FileFormat',
    'Kind',
]
