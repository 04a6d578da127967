"""
Package configuration: packaged defaults in `config.yaml`, optionally
overridden by a user file of the same name in the user config directory.
"""

# std
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'textops'
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME
CACHE = {}


# ---------------------------------------------------------------------------- #

def user_file(pkg=PACKAGE, filename=FILENAME):
    """Location of the (optional) user config file for package `pkg`."""
    return user_config_path(pkg) / filename


def get_module_name(filename, pkg=PACKAGE):
    """
    Get the dotted module name for a source file inside package `pkg`.

    Examples
    --------
    >>> get_module_name('/src/textops/string/utils.py')
    'textops.string.utils'
    """
    path = Path(filename)
    parts = path.with_suffix('').parts
    if pkg not in parts:
        raise ValueError(f'File {filename!s} is not part of package {pkg!r}.')

    parts = parts[len(parts) - parts[::-1].index(pkg) - 1:]
    if parts[-1] == '__init__':
        parts = parts[:-1]
    return '.'.join(parts)


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    filename = Path(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if filename.exists():
        logger.debug('Loading config file: {!s}.', filename)
        return load_yaml(filename)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def merge(defaults, overrides):
    """Recursively update nested mapping `defaults` with `overrides`."""
    merged = dict(defaults)
    for key, val in overrides.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            val = merge(merged[key], val)
        merged[key] = val
    return merged


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Nested config mapping with attribute read access.
    """

    @classmethod
    def load(cls, filename=None, defaults=SOURCE):
        if not (filename or defaults):
            raise ValueError('Need a config `filename`, `defaults`, or both.')

        config = load(defaults) if defaults else {}
        if filename and Path(filename).exists():
            logger.info("Found user config file for package {!r} at '{!s}'.",
                        PACKAGE, filename)
            config = merge(config, load(filename))
        return cls(config)

    @classmethod
    def load_module(cls, filename, user=True):
        """
        Load the config section for the module at `filename`. Sections are
        nested by the dotted module name below the package root.
        """
        node = cls.load(user_file() if user else None)

        # step into sections matching the module name
        candidates = get_module_name(filename).split('.')
        for parent in candidates[1:]:  # skip root package
            if parent not in node:
                nl = '\n    '
                raise ValueError(
                    f'Config does not contain a section for module '
                    f'{".".join(candidates)!r}. The following config sections '
                    f'are available:{nl}{nl.join(map(repr, node.keys()))}'
                )
            node = node[parent]

        return node

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, val in self.items():
            if isinstance(val, dict) and not isinstance(val, ConfigNode):
                super().__setitem__(key, type(self)(val))

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)
