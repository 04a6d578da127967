"""
Build script for textops.
"""

# std
import os
import re
import glob
import fnmatch
import subprocess as sub
from pathlib import Path

# third-party
from setuptools.command.build_py import build_py
from setuptools import Command, find_packages, setup


# Git ignore
# ---------------------------------------------------------------------------- #

def _git_status():
    # empty outside of a repo
    status = sub.getoutput('git status --porcelain')
    return '' if status.startswith('fatal:') else status


UNTRACKED = re.findall(r'\?\? (.+)', _git_status())
IGNORE_IMPLICIT = ('.git', )


# ---------------------------------------------------------------------------- #

def read(path):
    # read glob patterns from file
    path = Path(path)
    if not path.exists():
        return []

    return list(_read(path))


def _read(path):
    return filter(None, (line.strip(' ')
                         for line in path.read_text().splitlines()
                         if not line.startswith('#')))


class GitIgnore:
    """
    Class to read `.gitignore` files and filter source trees.
    """

    __slots__ = ('root', 'names', 'patterns')

    def __init__(self, filename='.gitignore'):
        path = Path(filename)
        self.root = path.parent
        self.names = list(IGNORE_IMPLICIT)
        self.patterns = []
        for pattern in read(path):
            items = (self.names, self.patterns)
            items[glob.has_magic(pattern)].append(pattern.rstrip('/'))

    def match(self, filename):
        filename = str(filename)
        for pattern in self.patterns:
            if fnmatch.fnmatchcase(filename, pattern):
                return True

        return filename.endswith(tuple(self.names))


# Setuptools
# ---------------------------------------------------------------------------- #

class Builder(build_py):
    # need this to exclude ignored files from the build archive

    def find_package_modules(self, package, package_dir):
        # filter folders
        if gitignore.match(package_dir) or gitignore.match(Path(package_dir).name):
            return

        # package, module, files
        info = super().find_package_modules(package, package_dir)

        for package, module, path in info:
            # filter files
            if path in UNTRACKED or gitignore.match(path):
                continue

            yield package, module, path


class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #
gitignore = GitIgnore()

setup(
    name='textops',
    version='0.1.0',
    description='Friendly descriptions, version parsing, truncation, tag '
                'stripping and case-insensitive sorting for strings.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'textops': ['config.yaml']},
    install_requires=['loguru', 'more-itertools', 'platformdirs', 'pyyaml'],
    extras_require={'test': ['pytest']},
    cmdclass={'build_py': Builder,
              'clean': CleanCommand}
)
