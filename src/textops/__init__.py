"""
Small, dependable string utilities: friendly descriptions, version parsing,
truncation, tag stripping and case-insensitive sorting.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('textops')

# relative
from . import string
from .string import (friendly_description, insertion_index, is_blank, sort,
                     remove_areas, remove_html_comments, remove_tags,
                     tokenize_version, truncate)


# ---------------------------------------------------------------------------- #

# version
try:
    __version__ = version('textops')
except PackageNotFoundError:
    __version__ = '0.0.0'


# aliases
strings = string
