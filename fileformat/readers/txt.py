"""
The generic classifier for inputs that were not identified by a signature or whose structural
refinement failed. An input is plain text if it is valid UTF-8 and contains no control characters
other than tab, line feed, form feed and carriage return.
"""
from __future__ import annotations

import codecs
import re

from fileformat.formats import FileFormat
from fileformat.lib.structures import StructReader

__all__ = [
    'is_text',
    'get_generic_format',
]

CHUNK_SIZE = 0x2000

_CONTROL_CHARACTERS = re.compile('[\\x00-\\x08\\x0B\\x0E-\\x1F\\x7F]')


def is_text(reader: StructReader) -> bool:
    """
    Decode the entire stream in chunks of `fileformat.readers.txt.CHUNK_SIZE` bytes with an
    incremental decoder, so that multibyte sequences which straddle a chunk boundary are handled
    correctly. A leading byte order mark is permitted.
    """
    reader.seekset(0)
    decoder = codecs.getincrementaldecoder('utf-8-sig')('strict')
    try:
        while chunk := reader.read(CHUNK_SIZE):
            if _CONTROL_CHARACTERS.search(decoder.decode(chunk)):
                return False
        decoder.decode(B'', final=True)
    except UnicodeDecodeError:
        return False
    return True


def get_generic_format(reader: StructReader, text: bool = True) -> FileFormat:
    """
    Classify the input as plain text or arbitrary binary data. If `text` is false, the input is
    not examined and always classified as binary data.
    """
    if text and is_text(reader):
        return FileFormat.TXT
    return FileFormat.BIN
