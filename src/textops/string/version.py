"""
Parse version strings like '2.5.1' into a sequence of integers.
"""

# third-party
import more_itertools as mit
from loguru import logger

# relative
from ..flow import Emit
from ..config import ConfigNode


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load_module(__file__)

# parts are signed 32 bit integers
INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1


# ---------------------------------------------------------------------------- #

def _split(string, delimiters):
    # Each delimiter character separates tokens individually, and runs of
    # delimiters do not produce empty tokens
    tokens = map(''.join, mit.split_at(string, delimiters.__contains__))
    return list(filter(None, tokens))


def _parse_int(token):
    # int() is more lenient than we want regarding whitespace and underscores
    if token != token.strip() or '_' in token:
        raise ValueError(f'invalid literal for int() with base 10: {token!r}')

    number = int(token, 10)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f'Version part {token!r} does not fit in 32 bits.')

    return number


def tokenize_version(version, emit='ignore',
                     delimiters=CONFIG.delimiters, default=CONFIG.default):
    """
    Split up a version string into its integer parts.

    Parameters
    ----------
    version : str or None
        A version string, eg: '1.2.3'.
    emit : str or callable
        What to do about tokens that are not integers. The default, 'ignore',
        silently skips them. Any action accepted by `Emit` is valid, with
        'raise' raising `ValueError`.
    delimiters : str
        Characters that separate the parts, by default '.,'.
    default : list of int
        The version assumed when `version` is None, by default [1, 0].

    Examples
    --------
    >>> tokenize_version('2.5.1')
    [2, 5, 1]
    >>> tokenize_version('3,1..4')
    [3, 1, 4]
    >>> tokenize_version('2.x.1')
    [2, 1]

    Returns
    -------
    list of int
        The numeric parts of the version. Parts that are not integers, or do
        not fit in a signed 32 bit integer, are skipped, so the result may be
        shorter than the number of fields.
    """
    if version is None:
        return list(default)

    emit = Emit(emit, ValueError)
    parts = []
    for token in _split(version, delimiters):
        try:
            parts.append(_parse_int(token))
        except ValueError:
            logger.debug('Skipping non-numeric token {!r} in version {!r}.',
                         token, version)
            emit('Non-numeric token {!r} in version string {!r}.',
                 token, version)

    return parts
