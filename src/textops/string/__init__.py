"""
Utilities for working with strings.
"""

from . import delimited
from .version import tokenize_version
from .utils import is_blank, truncate
from .describe import friendly_description
from .sorting import insertion_index, insort, sort
from .delimited import remove_areas, remove_html_comments, remove_tags


# alias
delim = delimited
