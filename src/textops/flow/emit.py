"""
Emit messages or warnings, or raise exceptions depending on a requested action.
"""

# std
import warnings
from enum import IntEnum

# third-party
from loguru import logger

# relative
from ..functionals import noop, raises


# ---------------------------------------------------------------------------- #

def is_exception(obj):
    return isinstance(obj, Exception) \
        or (type(obj) is type and issubclass(obj, Exception))


def _warn(message, *args, **kws):
    warnings.warn(message.format(*args, **kws), stacklevel=3)


class Action(IntEnum):

    NONE = IGNORE = SILENT = 0   # silently ignore
    INFO = NOTE = 1
    DEBUG = 2
    WARN = WARNING = 3
    ERROR = RAISE = 4
    CUSTOM = 5

    @classmethod
    def _missing_(cls, action):

        if action is None:
            return cls.NONE

        if isinstance(action, str):
            action = action.upper().rstrip('S')
            return getattr(cls, action, None)


class Emit:
    """
    Emit messages or warnings, or raise exceptions depending on requested
    action. Custom actions are also supported.

    Examples
    --------
    >>> Emit('ignore')('Nobody will hear this.')
    >>> Emit('raise', KeyError)('Missing key {!r}.', 'x')
    Traceback (most recent call last):
    ...
    KeyError: "Missing key 'x'."
    """

    __slots__ = ('_action', 'emit', 'exception')

    def __init__(self, action='ignore', exception=Exception):

        self.exception = exception
        # resolve action
        self.action = action or 'ignore'

    def __call__(self, message, *args, **kws):
        self.emit(message, *args, **kws)

    def __repr__(self):
        return f'{type(self).__name__}({self._action.name.lower()})'

    @property
    def action(self):
        """set message action"""
        return self._action

    @action.setter
    def action(self, obj):
        self._action, self.emit = self._resolve_action_emitter(obj)

    def _resolve_action_emitter(self, action):
        if is_exception(action):
            # handle case: >>> ValueError('Bad dog!') and ValueError
            kind = action if isinstance(action, type) else type(action)
            return Action.ERROR, raises(kind)

        if callable(action):
            # custom action (emit function)
            return Action.CUSTOM, action

        try:
            action = Action(action)
        except ValueError:
            raise ValueError(f'Invalid action: {action!r}.') from None

        emitters = {
            Action.NONE:  noop,
            Action.INFO:  logger.info,
            Action.DEBUG: logger.debug,
            Action.WARN:  _warn,
            Action.ERROR: raises(self.exception)
        }
        if action not in emitters:
            raise ValueError(f'Action {action.name!r} requires a callable.')

        return action, emitters[action]
