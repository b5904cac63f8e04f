# topmark:header:start
#
#   project      : InlineDiag
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the InlineDiag test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Pipeline tests render against an in-memory editor: the
    `editor` fixture is an `InMemoryEditor` and `controller` wires all four
    collaborator roles to it. Use `make_diag` for terse diagnostic literals.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from inlinediag.config import logging
from inlinediag.diagnostic.model import Diagnostic
from inlinediag.diagnostic.severity import Severity
from inlinediag.editor.memory import InMemoryEditor
from inlinediag.pipeline.controller import RenderController

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


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


def make_diag(
    line: int,
    message: str | None = "msg",
    severity: int = Severity.ERROR,
    **kwargs: Any,
) -> Diagnostic:
    """Return a `Diagnostic` with short positional defaults for tests."""
    return Diagnostic(line=line, message=message, severity=severity, **kwargs)


@pytest.fixture(autouse=True)
def silence_inlinediag_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure InlineDiag's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    INLINEDIAG_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("INLINEDIAG_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def editor() -> InMemoryEditor:
    """Return a fresh editor with the cursor on line 0."""
    return InMemoryEditor()


@pytest.fixture
def controller(editor: InMemoryEditor) -> RenderController:
    """Return a controller whose collaborators are all backed by ``editor``."""
    return RenderController(buffers=editor, cursor=editor, registry=editor, sink=editor)
