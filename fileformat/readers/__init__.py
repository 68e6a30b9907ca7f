"""
Format readers that refine a coarse container format into a more specific one by inspecting the
internal structure of the input. Each reader module exposes a single function that receives a
`fileformat.lib.structures.StructReader` positioned on the input and returns the refined format,
or `None` if the structure did not allow a more specific verdict.

Readers raise `fileformat.lib.structures.EOF` for truncated input and
`fileformat.lib.structures.Malformed` for structurally invalid input. The function
`fileformat.readers.refine` converts both into the fallback policy of the respective container:
some containers are confirmed by their signature alone and keep their coarse format, others are
discarded in favor of the generic classification.
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from fileformat.formats import FileFormat
from fileformat.lib.environment import logger
from fileformat.lib.structures import EOF, Malformed, StructReader
from fileformat.readers.asf import get_asf_format
from fileformat.readers.cfb import get_cfb_format
from fileformat.readers.ebml import get_ebml_format
from fileformat.readers.exe import get_exe_format
from fileformat.readers.mp4 import get_mp4_format
from fileformat.readers.pdf import get_pdf_format
from fileformat.readers.rm import get_rm_format
from fileformat.readers.xml import get_xml_format
from fileformat.readers.zip import get_zip_format

__all__ = [
    'Refinement',
    'REFINEMENTS',
    'refine',
]


class Refinement(NamedTuple):
    reader: Callable[[StructReader], Optional[FileFormat]]
    keep: bool


REFINEMENTS: dict[FileFormat, Refinement] = {
    FileFormat.ZIP  : Refinement(get_zip_format,  keep=False),  # noqa
    FileFormat.CFB  : Refinement(get_cfb_format,  keep=False),  # noqa
    FileFormat.EBML : Refinement(get_ebml_format, keep=False),  # noqa
    FileFormat.MP4  : Refinement(get_mp4_format,  keep=False),  # noqa
    FileFormat.ASF  : Refinement(get_asf_format,  keep=False),  # noqa
    FileFormat.RM   : Refinement(get_rm_format,   keep=False),  # noqa
    FileFormat.EXE  : Refinement(get_exe_format,  keep=True),   # noqa
    FileFormat.PDF  : Refinement(get_pdf_format,  keep=True),   # noqa
    FileFormat.XML  : Refinement(get_xml_format,  keep=True),   # noqa
}
"""
Maps each container format that has a structural reader to that reader and the fallback policy.
When `keep` is set, a failing reader leaves the coarse format in place; otherwise, the verdict of
the signature is discarded.
"""


def refine(format: FileFormat, reader: StructReader) -> FileFormat | None:
    """
    Refine the given coarse format by running its structural reader. The return value is `None`
    when the format could not be confirmed and the caller should fall back to the generic
    classification. Formats without a reader are returned unchanged. Errors of the underlying
    stream are not handled.
    """
    try:
        refinement = REFINEMENTS[format]
    except KeyError:
        return format
    log = logger(__name__)
    try:
        refined = refinement.reader(reader)
    except (EOF, Malformed) as E:
        log.debug(F'reader for {format.name} failed: {E!s}')
        refined = None
    if refined is not None:
        return refined
    if refinement.keep:
        return format
    log.debug(F'the structure of the input does not confirm the format {format.name}')
    return None
