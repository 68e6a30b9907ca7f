"""
A cross-platform interface to libmagic, used by the command line to show the libmagic description
of an input next to the detected format. The interface is optional; when neither `python-magic`
nor `winmagic` is installed, `fileformat.lib.magic.magic` is `None`.
"""
from __future__ import annotations

try:
    from winmagic import magic
except ModuleNotFoundError:
    import os
    if os.name == 'nt':
        # Attempting to import magic on Windows without winmagic being
        # installed may result in an uncontrolled crash.
        magic = None
    else:
        try:
            import magic
        except ImportError:
            magic = None


def available() -> bool:
    return magic is not None


def magicparse(data, *args, **kwargs) -> str | None:
    """
    Return the libmagic description of the given data, or `None` if libmagic is not available or
    failed to process the input. Arguments are forwarded to `magic.Magic`.
    """
    if magic is None:
        return None
    if not isinstance(data, bytes):
        data = bytes(data)
    try:
        return magic.Magic(*args, **kwargs).from_buffer(data)
    except magic.MagicException:
        return None
