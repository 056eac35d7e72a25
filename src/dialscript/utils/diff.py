# topmark:header:start
#
#   project      : DialScript
#   file         : diff.py
#   file_relpath : src/dialscript/utils/diff.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Unified diffs of rewritten scripts and their colorized preview."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_patch(
    before: Sequence[str],
    after: Sequence[str],
    *,
    path: str = "",
) -> list[str]:
    """Return a unified diff between two versions of a script.

    Args:
        before: Original lines, without terminators.
        after: Rewritten lines, without terminators.
        path: File name used in the ``---``/``+++`` headers.

    Returns:
        The diff lines (empty when both versions are equal).
    """
    return list(
        difflib.unified_diff(
            list(before),
            list(after),
            fromfile=f"{path} (original)",
            tofile=f"{path} (fixed)",
            lineterm="",
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
