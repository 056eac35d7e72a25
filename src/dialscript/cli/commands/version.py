# topmark:header:start
#
#   project      : DialScript
#   file         : version.py
#   file_relpath : src/dialscript/cli/commands/version.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""DialScript `version` command.

Prints the DialScript version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from dialscript.cli.cli_types import EnumChoiceParam, OutputFormat
from dialscript.cli.cmd_common import get_console, get_effective_verbosity
from dialscript.constants import DIALSCRIPT_VERSION

if TYPE_CHECKING:
    from dialscript.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DialScript.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DialScript.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": DIALSCRIPT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled(f"DialScript v{DIALSCRIPT_VERSION}", fg="cyan", bold=True))
    else:
        console.print(console.styled(DIALSCRIPT_VERSION, bold=True))
