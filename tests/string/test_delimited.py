# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest

# local
from textops.testing import ECHO, Expected, mock
from textops.string import remove_areas, remove_html_comments, remove_tags


test_remove_tags = Expected(remove_tags)({
    None:                                   None,
    '':                                     '',
    'no tags here':                         ECHO,
    'a<b>c</b>d':                           'acd',
    '<p>Hello</p>':                         'Hello',
    '<b>bold</b> move':                     'bold move',
    'x < y':                                'x ',
    'x > y':                                ECHO,
    'a<b':                                  'a',
    '<<b>>':                                '>',
    'click<a href="x">here</a>now':         'click herenow',
    '<br><br>':                             '',
    'a<b><i>c':                             'a c',
    'a<b><i> c':                            'a  c',
    'a <b><i>c':                            'a c',
    'a<b><c':                               'a ',
})


test_remove_html_comments = Expected(remove_html_comments)({
    None:                                   None,
    'foo<!-- x -->bar':                     'foo bar',
    'foo <!-- x -->bar':                    'foo bar',
    'foo<!-- x --> bar':                    'foo bar',
    'foo<!--x-->bar':                       'foobar',
    '<!-- x -->bar':                        'bar',
    'foo<!-- x -->':                        'foo',
    'foo<!-- x -->\nbar':                   'foo\nbar',
    'a<!-- 1 --><!-- 2 -->b':               'a b',
    'a<!-- open':                           'a',
    'a<!-- x ->b':                          'a',
    '<!-->-->':                             '',
    'keep <b>tags</b>':                     ECHO,
})


test_remove_areas = Expected(remove_areas)({
    mock.remove_areas(None, '[', ']'):                  None,
    mock.remove_areas('a<b', '<', '>'):                 'a',
    mock.remove_areas('keep [drop] this', '[', ']'):    'keep  this',
    mock.remove_areas('one/* two */three', '/*', '*/'): 'one three',
    mock.remove_areas('a[[b]]c', '[', ']'):             'a]c',
    mock.remove_areas('x--y--z', '--', '--'):           'xz',
    mock.remove_areas('$a$b$c$', '$', '$'):             'b',
    mock.remove_areas('x[1][2]y', '[', ']'):            'x y',
    mock.remove_areas('[1][2]y', '[', ']'):             'y',
})


@pytest.mark.parametrize('start, end', [('', '>'), ('<', ''), ('', '')])
def test_remove_areas_empty_markers(start, end):
    with pytest.raises(ValueError):
        remove_areas('text', start, end)
