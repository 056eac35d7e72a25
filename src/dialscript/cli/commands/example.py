# topmark:header:start
#
#   project      : DialScript
#   file         : example.py
#   file_relpath : src/dialscript/cli/commands/example.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""DialScript `example` command.

Prints the bundled example script, which compiles without diagnostics.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING

import click

from dialscript.cli.cmd_common import get_console
from dialscript.compiler.pipeline import split_lines
from dialscript.constants import EXAMPLE_NAME, EXAMPLE_PACKAGE
from dialscript.rendering.human import render_example

if TYPE_CHECKING:
    from dialscript.cli.console_api import ConsoleLike


def load_example() -> list[str]:
    """Return the lines of the bundled example script."""
    text: str = files(EXAMPLE_PACKAGE).joinpath(EXAMPLE_NAME).read_text(encoding="utf-8")
    return split_lines(text)


@click.command(name="example", help="Show an example .ds file.")
@click.option("--raw", is_flag=True, help="Print the file as-is, without the banner or colors.")
def example_command(*, raw: bool = False) -> None:
    """Print the example script.

    Args:
        raw (bool): Print the plain file contents, suitable for redirecting to a file.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    lines: list[str] = load_example()
    if raw:
        for line in lines:
            console.print(line)
        return
    for line in render_example(lines, console):
        console.print(line)
