"""
Table-driven pytest tests for the string functions.

Examples
--------
>>> from textops.testing import Expected, mock
>>> test_truncate = Expected(truncate)({
...     mock.truncate('hello', 10):             'hello',
...     mock.truncate('hello world', 8):        'hello...',
...     mock.truncate('hello world', 8, '~'):   'hello w~',
...     mock.truncate(None, 3):                 None
... })

Each call pattern is bound to the signature of `truncate`, so every parameter
(defaults included) becomes a column of the parametrized test, next to the
`expected` result.
"""

# std
from contextlib import nullcontext
from collections import abc, defaultdict
from inspect import Parameter, Signature, signature

# third-party
import pytest

# relative
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #

class Call:
    """Captured positional and keyword arguments of a mock call."""

    def __init__(self, *args, **kws):
        self.args = args
        self.kws = kws

    def __repr__(self):
        params = (*map(repr, self.args),
                  *(f'{key}={val!r}' for key, val in self.kws.items()))
        return f'mock({", ".join(params)})'


class Mock:
    """
    Record call patterns, eg: ``mock.truncate('text', 3)``. The attribute name
    is only there to make the tables read like the calls they stand for.
    """

    def __getattr__(self, _):
        return Call

    def __call__(self, *args, **kws):
        return Call(*args, **kws)


mock = Mock()


class Throws:
    def __init__(self, error=Exception):
        self.error = error


class Warns:
    def __init__(self, warning=UserWarning):
        self.warning = warning


class ECHO:
    """Expect the first argument back, unchanged."""


# ---------------------------------------------------------------------------- #

class Expected(LoggingMixin):
    """
    Build a parametrized test checking the return value of `func` for a table
    of call patterns. Assign the result to a name starting with 'test_' so
    that pytest collects it.

    Call patterns may be `mock` calls, tuples of positional arguments, or a
    single positional argument. Expected results may be `ECHO`, `Throws` or
    `Warns` instead of a value.
    """

    def __init__(self, func):
        self.func = func
        self.sig = signature(func)

        # arguments are passed to `func` by keyword
        named = {Parameter.POSITIONAL_OR_KEYWORD, Parameter.KEYWORD_ONLY}
        if any(par.kind not in named for par in self.sig.parameters.values()):
            raise TypeError(f'Cannot build tests for {func.__name__!r}: only '
                            'parameters that accept keywords are supported.')

    def __call__(self, cases):
        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        columns = self.get_args(cases)
        rows = [list(row) for row in zip(*columns.values())]

        self.logger.debug('Parametrizing test for {!r} with {} cases.',
                          self.func.__name__, len(rows))

        return pytest.mark.parametrize(list(columns), rows)(self.make_test())

    def get_args(self, cases):
        # bind each call pattern to the function signature, and collect the
        # values per parameter name
        columns = defaultdict(list)
        for call, expected in cases:
            if not isinstance(call, Call):
                call = Call(*(call if isinstance(call, tuple) else (call, )))

            bound = self.sig.bind(*call.args, **call.kws)
            bound.apply_defaults()
            if expected is ECHO:
                expected = next(iter(bound.arguments.values()))

            for name, val in bound.arguments.items():
                columns[name].append(val)
            columns['expected'].append(expected)

        return columns

    def make_test(self):

        def test(expected, **kws):
            ctx = nullcontext()
            if isinstance(expected, Throws):
                ctx = pytest.raises(expected.error)
            elif isinstance(expected, Warns):
                ctx = pytest.warns(expected.warning)

            with ctx:
                answer = self.func(**kws)

            if isinstance(ctx, nullcontext):
                assert answer == expected, (
                    f'{self.func.__name__}({", ".join(map(repr, kws.values()))})'
                    f' returned {answer!r}, expected {expected!r}.'
                )

        # pytest reads the parameter names from the signature
        params = [par.replace(default=Parameter.empty)
                  for par in self.sig.parameters.values()]
        params.append(Parameter('expected', Parameter.KEYWORD_ONLY))
        test.__signature__ = Signature(params)
        return test
