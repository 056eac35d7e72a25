# topmark:header:start
#
#   project      : DialScript
#   file         : errors.py
#   file_relpath : src/dialscript/cli/errors.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Exceptions for the DialScript CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. The compiler itself never raises them: problems in
    a script are diagnostics, not exceptions.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dialscript.cli.exit_codes import ExitCode


class DialscriptError(click.ClickException):
    """Base class for all DialScript CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                message: str = f"✗ Error: {self.format_message()}"
                console.error(console.styled(message, fg="bright_red"))
                return
        super().show(file)


class DialscriptUsageError(DialscriptError):
    """Error for command-line invocation errors (invalid flags/args/file names)."""

    exit_code = ExitCode.USAGE_ERROR


class DialscriptConfigError(DialscriptError):
    """Error for an explicitly given config file that cannot be read or parsed."""

    exit_code = ExitCode.CONFIG_ERROR


class DialscriptFileNotFoundError(DialscriptError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DialscriptPermissionDeniedError(DialscriptError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class DialscriptIOError(DialscriptError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DialscriptEncodingError(DialscriptError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
