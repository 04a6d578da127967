# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest

# local
from textops.testing import ECHO, Expected, mock
from textops.string import is_blank, truncate


test_truncate = Expected(truncate)({
    mock.truncate(None, 10):                None,
    mock.truncate(None, -1):                None,
    mock.truncate('hello', 10):             ECHO,
    mock.truncate('hello', 5):              ECHO,
    mock.truncate('', 0):                   ECHO,
    mock.truncate('hello world', 8):        'hello...',
    mock.truncate('hello world', 4):        'h...',
    mock.truncate('hello world', 3):        '...',
    mock.truncate('hello world', 2):        '..',
    mock.truncate('hello world', 1):        '.',
    mock.truncate('hello world', 0):        '',
    mock.truncate('hello world', -1):       '',
    mock.truncate('hello', -5):             '',
    mock.truncate('hello world', 5, '~'):   'hell~',
    mock.truncate('hello world', 1, '~'):   '~',
})


def test_truncate_annotates_total_length():
    result = truncate('x' * 1000, 60)
    assert len(result) == 60
    assert result.endswith('... (total length of 1000 characters)')
    assert '(total length of 1000 characters)' in result
    assert result.startswith('x' * 23)


def test_truncate_annotation_threshold():
    text = 'y' * 100
    # 50 is still in ellipsis territory
    assert truncate(text, 50) == 'y' * 47 + '...'
    assert truncate(text, 51).endswith('(total length of 100 characters)')
    assert len(truncate(text, 51)) == 51


@pytest.mark.parametrize('n', [81, 99, 100, 999, 1000, 12345])
def test_truncate_cut_depends_on_digits(n):
    suffix = f'... (total length of {n} characters)'
    result = truncate('z' * n, 80)
    assert result == 'z' * (80 - len(suffix)) + suffix


@pytest.mark.parametrize('size', range(-3, 120, 7))
@pytest.mark.parametrize('text', ['', 'short', 'a' * 49, 'b' * 51, 'c' * 500])
def test_truncate_bounded(text, size):
    result = truncate(text, size)
    assert len(result) <= max(size, 0)
    if len(text) <= size:
        assert result == text


test_is_blank = Expected(is_blank)({
    None:           True,
    '':             True,
    '   ':          True,
    ' \t\r\n ':     True,
    '\x0b\x0c\x1c': True,
    # non-breaking spaces are not whitespace
    '\xa0':         False,
    ' \u202f ':     False,
    '\u2007':       False,
    '\x85':         False,
    '.':            False,
    '  x  ':        False,
})
