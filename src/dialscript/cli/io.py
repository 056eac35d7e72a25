# topmark:header:start
#
#   project      : DialScript
#   file         : io.py
#   file_relpath : src/dialscript/cli/io.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Script file input/output for the CLI.

Reading and writing are the only places where filesystem errors can occur;
they are translated here into `DialscriptError` subclasses carrying the
matching exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dialscript.cli.errors import (
    DialscriptEncodingError,
    DialscriptFileNotFoundError,
    DialscriptIOError,
    DialscriptPermissionDeniedError,
    DialscriptUsageError,
)
from dialscript.compiler.pipeline import split_lines
from dialscript.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.model import Config

logger: DialscriptLogger = get_logger(__name__)

ENCODING: str = "utf-8"


@dataclass(frozen=True, slots=True)
class ScriptSource:
    """The lines of a script file and how they were terminated.

    Attributes:
        path (Path): File the lines were read from.
        lines (tuple[str, ...]): Lines without their terminators.
        newline (str): Line terminator to use when writing back.
        final_newline (bool): Whether the file ended with a terminator.
    """

    path: Path
    lines: tuple[str, ...]
    newline: str = "\n"
    final_newline: bool = True

    def render(self, lines: Sequence[str]) -> str:
        """Join ``lines`` the way this source was laid out."""
        text: str = self.newline.join(lines)
        if lines and self.final_newline:
            text += self.newline
        return text


def detect_newline(text: str) -> str:
    """Return the first line terminator found in ``text`` (``"\\n"`` if none)."""
    for idx, char in enumerate(text):
        if char == "\r":
            return "\r\n" if text[idx + 1 : idx + 2] == "\n" else "\r"
        if char == "\n":
            return "\n"
    return "\n"


def ensure_script_path(path: Path, config: Config) -> None:
    """Reject paths without one of the configured script extensions.

    Raises:
        DialscriptUsageError: If the extension is not accepted.
    """
    if not config.accepts(path):
        expected: str = ", ".join(config.extensions)
        raise DialscriptUsageError(f"{path}: file must have one of these extensions: {expected}")


def read_script(path: Path) -> ScriptSource:
    """Read a script file.

    Raises:
        DialscriptFileNotFoundError: If the file does not exist (or is a directory).
        DialscriptPermissionDeniedError: If the file cannot be read.
        DialscriptEncodingError: If the file is not valid UTF-8.
        DialscriptIOError: For any other OS-level read failure.
    """
    try:
        with path.open("r", encoding=ENCODING, newline="") as fh:
            text: str = fh.read()
    except (FileNotFoundError, IsADirectoryError) as e:
        logger.error("Cannot open %s: %s", path, e)
        raise DialscriptFileNotFoundError(f"cannot open file {path}. Does it exist?") from e
    except PermissionError as e:
        logger.error("Permission denied reading %s: %s", path, e)
        raise DialscriptPermissionDeniedError(f"permission denied: {path}") from e
    except UnicodeDecodeError as e:
        logger.error("Encoding error while reading %s: %s", path, e)
        raise DialscriptEncodingError(f"{path} is not valid {ENCODING}: {e.reason}") from e
    except OSError as e:
        logger.error("I/O error while reading %s: %s", path, e)
        raise DialscriptIOError(f"cannot read {path}: {e}") from e

    logger.debug("Read %d character(s) from %s", len(text), path)
    return ScriptSource(
        path=path,
        lines=tuple(split_lines(text)),
        newline=detect_newline(text),
        final_newline=text.endswith(("\n", "\r")),
    )


def write_script(source: ScriptSource, lines: Sequence[str]) -> None:
    """Write ``lines`` back to ``source.path``, keeping its line terminators.

    Raises:
        DialscriptPermissionDeniedError: If the file cannot be written.
        DialscriptIOError: For any other OS-level write failure.
    """
    try:
        with source.path.open("w", encoding=ENCODING, newline="") as fh:
            fh.write(source.render(lines))
    except PermissionError as e:
        logger.error("Permission denied writing %s: %s", source.path, e)
        raise DialscriptPermissionDeniedError(f"permission denied: {source.path}") from e
    except OSError as e:
        logger.error("I/O error while writing %s: %s", source.path, e)
        raise DialscriptIOError(f"cannot write {source.path}: {e}") from e
    logger.debug("Wrote %d line(s) to %s", len(lines), source.path)
