# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest
import yaml

# local
from textops import config
from textops.config import ConfigNode, get_module_name, merge
from textops.testing import Expected, Throws, mock


test_get_module_name = Expected(get_module_name)({
    '/src/textops/string/utils.py':         'textops.string.utils',
    '/src/textops/__init__.py':             'textops',
    '/a/textops/b/textops/string/x.py':     'textops.string.x',
    '/src/other/module.py':                 Throws(ValueError),
})


test_merge = Expected(merge)({
    mock.merge({'a': 1}, {'b': 2}):                     {'a': 1, 'b': 2},
    mock.merge({'a': {'x': 1, 'y': 2}}, {'a': {'y': 3}}): {'a': {'x': 1, 'y': 3}},
    mock.merge({'a': {'x': 1}}, {'a': 5}):              {'a': 5},
})


def test_packaged_defaults():
    node = ConfigNode.load_module(config.SOURCE.parent / 'string' / 'utils.py',
                                  user=False)
    assert node.annotate_above == 50
    assert node.dots == '...'
    assert node.annotation.format(total=7) == '... (total length of 7 characters)'


def test_nested_attribute_access():
    node = ConfigNode({'string': {'version': {'default': [1, 0]}}})
    assert isinstance(node.string, ConfigNode)
    assert node.string.version.default == [1, 0]
    with pytest.raises(AttributeError):
        node.missing


def test_user_override(tmp_path, monkeypatch):
    user = tmp_path / 'config.yaml'
    user.write_text(yaml.safe_dump({'string': {'utils': {'dots': '~'}}}))
    monkeypatch.setattr(config, 'user_file', lambda: user)

    node = ConfigNode.load_module(config.SOURCE.parent / 'string' / 'utils.py')
    assert node.dots == '~'
    # untouched defaults survive the merge
    assert node.annotate_above == 50


def test_missing_section():
    with pytest.raises(ValueError, match='textops.nope'):
        ConfigNode.load_module(config.SOURCE.parent / 'nope.py', user=False)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load(tmp_path / 'absent.yaml')


def test_nothing_to_load():
    with pytest.raises(ValueError):
        ConfigNode.load(None, None)
