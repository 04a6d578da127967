"""
Friendly, human readable descriptions.
"""

# relative
from ..config import ConfigNode


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load_module(__file__)


# ---------------------------------------------------------------------------- #

def _should_capitalize(text):
    # Don't touch if length is <= 2 or the first "word" is only 1 or 2
    # characters long (usually a variable like x, y, dx). Letters like 'ß'
    # that upper case to several characters are left alone
    return (len(text) > 2 and text[0].islower() and ' ' not in text[1:3]
            and len(text[0].upper()) == 1)


def friendly_description(text, punctuate=False,
                         terminals=CONFIG.terminals, mark=CONFIG.mark):
    """
    Generate a friendly and easily readable description from `text`.

    Surrounding whitespace is stripped, and the first letter is capitalized
    unless the first word looks like a short variable name. Optionally a
    full stop is appended when the text does not already end in terminal
    punctuation.

    Parameters
    ----------
    text : str or None
        A description of something.
    punctuate : bool
        Whether to append `mark` if `text` does not end in any of the
        `terminals` characters.
    terminals : str
        Characters counted as sentence endings, by default '.!?'.
    mark : str
        The punctuation to append, by default '.'.

    Examples
    --------
    >>> friendly_description('  the quick brown fox  ')
    'The quick brown fox'
    >>> friendly_description('x is unknown', True)
    'x is unknown.'
    >>> friendly_description('done!', True)
    'done!'

    Returns
    -------
    str
        The friendly description. Empty when `text` is None.
    """
    if text is None:
        return ''

    text = text.strip()
    if _should_capitalize(text):
        text = text[0].upper() + text[1:]

    if punctuate and len(text) > 1 and text[-1] not in terminals:
        text += mark

    return text
