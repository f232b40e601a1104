# topmark:header:start
#
#   project      : CFormat
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CFormat test suite.

Sets logging to TRACE for the whole run (so every parser and engine log call
is exercised) and provides typed wrappers around pytest decorators plus a few
helpers for building specifiers.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from cformat.config import logging
from cformat.core.parser import parse
from cformat.core.specifier import ConversionSpecifier, Specifier

F = TypeVar("F", bound=Callable[..., object])

# A decorator that returns the callable it wraps, type intact.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_cformat_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``CFORMAT_LOG_LEVEL``.
    """
    monkeypatch.delenv("CFORMAT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE for the whole test run.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def spec_of(template: str) -> ConversionSpecifier:
    """Return the only conversion specifier in ``template``.

    Args:
        template (str): A template holding exactly one specifier (e.g. ``"%-5d"``).

    Returns:
        ConversionSpecifier: The parsed specifier.
    """
    specs: list[ConversionSpecifier] = [
        element.spec for element in parse(template) if isinstance(element, Specifier)
    ]
    assert len(specs) == 1, specs
    return specs[0]
