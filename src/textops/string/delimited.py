"""
Remove substrings delimited by a pair of start and end markers, like markup
tags or comments.
"""

# third-party
from loguru import logger

# relative
from ..config import ConfigNode


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load_module(__file__)


# ---------------------------------------------------------------------------- #

def _fuses(head, area, tail):
    # Removing `area` would join two words that it used to separate
    return (head and tail
            and not head[-1].isspace()
            and not tail[0].isspace()
            and any(char.isspace() for char in area))


def _iter_parts(string, start, end):
    # yield the pieces of `string` that are kept
    n = len(string)
    offset = 0
    last = ''
    removed = False
    while (i := string.find(start, offset)) != -1:
        # area directly follows the previous one
        if removed and i == offset and last and not last[-1].isspace():
            yield ' '
            last = ' '

        if keep := string[offset:i]:
            yield keep
            last = keep

        j = string.find(end, i + len(start))
        if j == -1:
            logger.debug('Unterminated area starting with {!r} at position {}.'
                         ' Dropping the remaining {} characters.',
                         start, i, n - i)
            return

        removed = True
        area = string[i:(offset := j + len(end))]
        if _fuses(last, area, string[offset:offset + 1]):
            yield ' '
            last = ' '

    yield string[offset:]


def remove_areas(string, start, end):
    """
    Remove all areas from `string` that start and end with the `start` and
    `end` markers respectively. Areas are matched left to right and do not
    nest. An area that is never closed consumes the rest of the string.

    Where an area containing whitespace separated two words, it is replaced
    by a single space so that the words do not run together. A single space
    is also inserted between back-to-back areas that follow a word.

    Parameters
    ----------
    string : str or None
        String to manipulate.
    start, end : str
        Area start and end markers. May not be empty.

    Examples
    --------
    >>> remove_areas('keep [drop] this', '[', ']')
    'keep  this'
    >>> remove_areas('one/* two */three', '/*', '*/')
    'one three'
    >>> remove_areas('a<b', '<', '>')
    'a'
    >>> remove_areas('x[1][2]y', '[', ']')
    'x y'

    Returns
    -------
    str or None
        String without the delimited areas, or None if `string` is None.
    """
    if not (start and end):
        raise ValueError(f'Area markers may not be empty: {start = !r}, '
                         f'{end = !r}.')

    if string is None:
        return None

    return ''.join(_iter_parts(string, start, end))


def remove_tags(string):
    """
    Remove all tag structures from `string`. A tag here is any text enclosed
    in '<' and '>'.

    Examples
    --------
    >>> remove_tags('<b>bold</b> move')
    'bold move'
    """
    return remove_areas(string, *CONFIG.tags)


def remove_html_comments(string):
    """
    Remove all HTML comments ('<!-- ... -->') from `string`.

    Examples
    --------
    >>> remove_html_comments('foo<!-- x -->bar')
    'foo bar'
    """
    return remove_areas(string, *CONFIG.html_comments)
