# topmark:header:start
#
#   project      : svfmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the svfmt test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Renderer tests run on in-memory trees from `tests.trees`; only tests marked
    ``integration`` need the tree-sitter grammar wheels.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from svfmt.config import MutableConfig, logging
from svfmt.rendering.api import format_tree
from tests.trees import TreeBuilder

if TYPE_CHECKING:
    from svfmt.config import Config
    from tests.trees import Spec

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_rendering: DecoratorType[Any] = as_typed_mark(pytest.mark.rendering)
mark_grammar: DecoratorType[Any] = as_typed_mark(pytest.mark.grammar)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_svfmt_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure svfmt's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SVFMT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for all tests so failures come with the full render walk.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def builder() -> TreeBuilder:
    """Fresh tree builder classified through the packaged SystemVerilog table."""
    return TreeBuilder()


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field values (``line_width``, ``indent_width``,
            ``error_nodes``, ``language``).

    Returns:
        Config: The frozen configuration.
    """
    return MutableConfig.from_defaults().apply_args(overrides).freeze()


def render(builder: TreeBuilder, spec: Spec, **overrides: Any) -> str:
    """Build ``spec``, format it with ``overrides`` and return the output text."""
    sink = io.StringIO()
    format_tree(builder.build(spec), builder.classifier, sink, config=make_config(**overrides))
    return sink.getvalue()
