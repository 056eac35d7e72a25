# topmark:header:start
#
#   project      : DialScript
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Pytest configuration for the DialScript test suite.

Sets up typed wrappers around pytest decorators, shared sample scripts, and
logging at TRACE level so that failures come with the full compile trace.

Notes:
    Build configs with `dialscript.config.MutableConfig` and ``freeze()`` them
    (see `make_config`); never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from dialscript.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from dialscript.compiler.result import CompileResult
    from dialscript.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

MINIMAL_SCRIPT: tuple[str, ...] = (
    "[Scene.1]",
    "Level: 1",
    "Location: Forest",
    "Characters: Alan, Beth",
    "[Dialog.1]",
    "Alan: Hello there! {Emotion: happy}",
    "Beth: Hi Alan, nice to see you.",
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_dialscript_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``DIALSCRIPT_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the DialScript log level to TRACE for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory (no config files to discover).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and builder overrides.

    Args:
        **overrides (Any): `MutableConfig` fields to set before freezing.
    """
    m = MutableConfig()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def codes(result: CompileResult) -> list[str]:
    """Return the diagnostic keys of a compile result, in emission order."""
    return [d.code.key for d in result.diagnostics]


def script(*lines: str) -> list[str]:
    """Return the minimal valid script with ``lines`` appended to its dialog block."""
    return [*MINIMAL_SCRIPT, *lines]
