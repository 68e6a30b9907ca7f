"""
A commandline script to detect the format of files.
"""
from __future__ import annotations

import argparse
import json
import sys

from typing import Optional

import fileformat

from fileformat.detector import prefix_size
from fileformat.formats import FileFormat
from fileformat.lib.environment import LogLevel, environment, logger
from fileformat.lib.magic import available as magic_available, magicparse


def highlight(text: str, color: str):
    """
    Uses ANSI color codes to highlight the given `text`.
    """
    return '\033[' + color + 'm' + text + '\033[0m'


def describe(name: str, format: FileFormat, description: Optional[str] = None) -> dict:
    """
    Compile the catalog data of a detected format into a dictionary.
    """
    info = {
        'path'      : name,                 # noqa
        'format'    : format.name,          # noqa
        'name'      : format.long_name,     # noqa
        'short_name': format.short_name,    # noqa
        'media_type': format.media_type,    # noqa
        'extension' : format.extension,     # noqa
        'kind'      : format.kind.name,     # noqa
    }
    if description is not None:
        info['magic'] = description
    return info


def main(argv: Optional[list[str]] = None, name_color: str = '93') -> int:
    """
    Main routine of the file format detection command line.
    """
    try:
        import colorama
        colorama.init()
    except ModuleNotFoundError:
        pass

    argp = argparse.ArgumentParser(
        prog='fileformat',
        description='Detect the format of files based on their content.')

    argp.add_argument(
        'files',
        metavar='file',
        nargs='*',
        help='Paths of the files to be identified. If no path is given, the data is read from '
             'standard input.'
    )
    argp.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print one JSON document per input.'
    )
    argp.add_argument(
        '-t', '--no-text',
        dest='text',
        action='store_false',
        default=None,
        help='Never classify unidentified inputs as plain text.'
    )
    argp.add_argument(
        '-m', '--magic',
        action='store_true',
        help='Also show the description of libmagic for each input; requires python-magic.'
    )
    argp.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase the verbosity; can be specified multiple times.'
    )
    argp.add_argument(
        '-V', '--version',
        action='store_true',
        help='Only show the currently installed version of fileformat and exit.'
    )

    args = argp.parse_args(argv)

    if args.version:
        print(fileformat.__version__)
        return 0

    if args.verbose:
        level = LogLevel.FromVerbosity(args.verbose)
        environment.verbosity.value = level
        for name in ('fileformat.detector', 'fileformat.readers', __name__):
            logger(name).setLevel(level)

    log = logger(__name__)

    if args.magic and not magic_available():
        log.warning('libmagic descriptions are unavailable because python-magic is not installed')
        args.magic = False

    colored = sys.stdout.isatty() and not args.json
    failed = False
    inputs = args.files or ['-']

    for path in inputs:
        try:
            if path == '-':
                data = sys.stdin.buffer.read()
                format = fileformat.from_bytes(data, args.text)
            else:
                format = fileformat.from_file(path, args.text)
                if args.magic:
                    with open(path, 'rb') as stream:
                        data = stream.read(prefix_size())
        except OSError as error:
            log.error(F'unable to read {path}: {error!s}')
            failed = True
            continue
        description = magicparse(data) if args.magic else None
        if args.json:
            print(json.dumps(describe(path, format, description)))
            continue
        name = format.long_name
        if colored:
            name = highlight(name, name_color)
        short = F' [{format.short_name}]' if format.short_name else ''
        print(F'{path}: {name}{short} {format.media_type} .{format.extension} ({format.kind.name})')
        if description is not None:
            print(F'{path}: magic: {description}')

    return 1 if failed else 0
