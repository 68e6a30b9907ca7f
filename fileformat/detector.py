"""
The detection pipeline. A bounded prefix of the input is matched against the signature catalog,
the result is refined by the structural reader of its container family where there is one, and
inputs that remain unidentified are classified as plain text or binary data.
"""
from __future__ import annotations

import os

from typing import BinaryIO, Optional

from fileformat.formats import FileFormat
from fileformat.lib.environment import environment, logger
from fileformat.lib.structures import MemoryFile, StructReader
from fileformat.lib.types import buf
from fileformat.readers import refine
from fileformat.readers.txt import get_generic_format
from fileformat.signatures import match

__all__ = [
    'PREFIX_SIZE',
    'detect',
    'from_bytes',
    'from_file',
]

PREFIX_SIZE = 36870
"""
The number of bytes that are read from the start of the input for signature matching. The size
covers the volume descriptor of ISO 9660 images at offset 0x9001.
"""


def prefix_size() -> int:
    """
    The effective prefix size. The environment variable `FILEFORMAT_PREFIX_SIZE` can increase the
    value, but never decrease it below `fileformat.detector.PREFIX_SIZE`.
    """
    return max(PREFIX_SIZE, environment.prefix_size.value or 0)


def detect(stream: BinaryIO, text: Optional[bool] = None) -> FileFormat:
    """
    Detect the format of the data in the given seekable binary stream, starting at its current
    position. The position of the stream is restored when detection completes. The `text`
    argument controls whether unidentified inputs may be classified as plain text; by default,
    this is the case unless `FILEFORMAT_DISABLE_PLAIN_TEXT` is set. Errors of the underlying
    stream are propagated to the caller.
    """
    if text is None:
        text = not environment.disable_plain_text.value
    log = logger(__name__)
    reader = StructReader(stream)
    try:
        if not (prefix := reader.read(prefix_size())):
            return FileFormat.EMPTY
        if (coarse := match(prefix)) is None:
            log.debug('no signature matched the input')
        elif (result := refine(coarse, reader)) is not None:
            log.debug(F'identified format {result.name} from signature {coarse.name}')
            return result
        else:
            log.info(F'refinement rejected signature {coarse.name}; classifying as generic data')
        return get_generic_format(reader, text)
    finally:
        reader.seek(0)


def from_bytes(data: buf, text: Optional[bool] = None) -> FileFormat:
    """
    Detect the format of the given in-memory data.
    """
    return detect(MemoryFile(data), text)


def from_file(path: str | os.PathLike, text: Optional[bool] = None) -> FileFormat:
    """
    Detect the format of the file at the given path.
    """
    with open(path, 'rb') as stream:
        return detect(stream, text)
