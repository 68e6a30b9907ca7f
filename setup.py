#!/usr/bin/env python3
from __future__ import annotations

import re
import os
import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__github__ = 'https://github.com/binref/fileformat/'
__gitraw__ = 'https://raw.githubusercontent.com/binref/fileformat/'
__author__ = 'Jesko Huettenhain'
__slogan__ = 'Identify file formats from their content, down to the document inside the container.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Security',
    'Topic :: System :: Filesystems',
    'Topic :: Utilities',
]


class DeployCommand(setuptools.Command):
    description = 'Tag and push new release.'
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    @staticmethod
    def main():
        import subprocess
        import shlex
        import fileformat
        import os

        from pathlib import Path

        DEVNULL = open(os.devnull, 'wb')

        def run(cmd):
            print(F'run: {cmd}')
            return subprocess.check_call(
                shlex.split(cmd),
                stdout=DEVNULL,
                stderr=DEVNULL,
                cwd=os.getcwd(),
            )

        root = Path(fileformat.__file__).parent.parent
        os.chdir(root)

        try:
            run(F'git tag {fileformat.__version__}')
            run(R'git push')
            run(R'git push --tags')
        except subprocess.CalledProcessError as E:
            print(F'error: {E!s}')
            return 1
        else:
            return 0

    def run(self):
        sys.exit(self.main())


def get_config():
    sys.path.insert(0, str(pathlib.Path(__file__).parent.absolute()))

    import fileformat

    def get_setup_extras() -> dict[str, list[str]]:
        magic = 'python-magic'
        if os.name == 'nt':
            magic = F'{magic}-win64'
        extras = {
            'color': ['colorama'],
            'magic': [magic],
        }
        extras['all'] = sorted({dep for deps in extras.values() for dep in deps})
        extras['test'] = ['pytest', 'flake8']
        return extras

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = pathlib.Path(__file__).parent.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            def complete_link(match):
                link: str = match[1]
                if any(link.lower().endswith(xt) for xt in ('jpg', 'gif', 'png', 'svg')):
                    return F'({__gitraw__}master/{link})'
                else:
                    return F'({__github__}blob/master/{link})'
            readme = README.read()
            return re.sub(R'(?<=\])\((?!\w+://)(.*?)\)', complete_link, readme)

    def get_setup_common() -> dict:
        return dict(
            version=fileformat.__version__,
            long_description=get_setup_readme(),
            author=__author__,
            description=__slogan__,
            long_description_content_type='text/markdown',
            url=__github__,
            python_requires=F'>={__minver__}',
            classifiers=__topics__,
        )

    ppcfg: dict[str, dict[str, list[str]]] = toml.load('pyproject.toml')
    requirements = [
        requirement for requirement in ppcfg['build-system']['requires']
        if requirement != 'setuptools'
    ]

    config = get_setup_common()
    config.update(
        name=fileformat.__distribution__,
        packages=setuptools.find_packages(include=('fileformat*',)),
        install_requires=requirements,
        extras_require=get_setup_extras(),
        include_package_data=True,
        entry_points={'console_scripts': ['fileformat=fileformat.explore:main']},
        cmdclass={'deploy': DeployCommand},
    )

    return config


if __name__ == '__main__':
    setuptools.setup(**get_config())
