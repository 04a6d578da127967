"""
Tiny functional building blocks shared across the package.
"""


def noop(*_, **__):
    """Do nothing."""


# ---------------------------------------------------------------------------- #

def raises(exception):
    """Raises an exception of type `exception`."""

    assert issubclass(exception, BaseException)

    def _raises(msg, *args, **kws):
        raise exception(msg.format(*args, **kws))

    return _raises
