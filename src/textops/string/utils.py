"""
Utilities for operations on strings.
"""

# relative
from ..config import ConfigNode


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load_module(__file__)

# `str.isspace` accepts these, but they are kept as content
NON_BREAKING = {'\xa0', '\u2007', '\u202f', '\x85'}


# ---------------------------------------------------------------------------- #

def is_blank(string):
    """
    Check whether `string` would be empty after stripping leading and trailing
    whitespace. None counts as blank. Non-breaking spaces (and the next-line
    control character) are content, not whitespace, so `'\xa0'` is not
    blank.

    Examples
    --------
    >>> is_blank(' \t\n')
    True
    >>> is_blank(' . ')
    False
    """
    return string is None or all(char.isspace() and char not in NON_BREAKING
                                  for char in string)


def truncate(string, size, dots=CONFIG.dots,
             annotate_above=CONFIG.annotate_above,
             annotation=CONFIG.annotation):
    """
    Truncate a long string that cannot be shown to the user in full. When the
    allowed `size` is large enough, the total length of the original string is
    shown at the end.

    Parameters
    ----------
    string : str or None
        String to truncate if necessary.
    size : int
        Maximal length of the result, including any markers added.
    dots : str
        Ellipsis used to mark truncation when there is no room for the
        length annotation.
    annotate_above : int
        Sizes larger than this get the length `annotation` appended.
    annotation : str
        Template for the length annotation. The `total` field is replaced by
        the length of the original string.

    Examples
    --------
    >>> truncate('hello world', 8)
    'hello...'
    >>> truncate('hello world', 2)
    '..'

    Returns
    -------
    str or None
        A string no longer than `size`, or None if `string` is None. Negative
        sizes yield an empty string.
    """
    if string is None:
        return None

    n = len(string)
    if n <= size:
        return string

    if size > annotate_above:
        # suffix length depends on the number of digits in `n`
        suffix = annotation.format(total=n)
        return string[:size - len(suffix)] + suffix

    if size > len(dots):
        return string[:size - len(dots)] + dots

    if size >= 0:
        return dots[:size]

    return ''
