"""
Document marker reader for PDF files. Adobe Illustrator saves its documents as PDF files with
embedded private data, which is identified by a set of markers in the initial part of the file.
"""
from __future__ import annotations

from fileformat.formats import FileFormat
from fileformat.lib.structures import StructReader

__all__ = ['get_pdf_format']

SCAN_LIMIT = 0x100000
CHUNK_SIZE = 0x10000

ILLUSTRATOR_MARKERS = (
    B'AIPrivateData',
    B'Adobe Illustrator',
    B'%AI',
)


def get_pdf_format(reader: StructReader) -> FileFormat | None:
    """
    Scan the first `fileformat.readers.pdf.SCAN_LIMIT` bytes for Illustrator markers. Markers that
    span two chunks are found because the tail of each chunk is retained.
    """
    overlap = max(len(marker) for marker in ILLUSTRATOR_MARKERS) - 1
    reader.seekset(0)
    tail = B''
    remaining = SCAN_LIMIT
    while remaining > 0 and (chunk := reader.read(min(CHUNK_SIZE, remaining))):
        remaining -= len(chunk)
        window = tail + chunk
        if any(marker in window for marker in ILLUSTRATOR_MARKERS):
            return FileFormat.AI
        tail = window[-overlap:]
    return FileFormat.PDF
