# topmark:header:start
#
#   project      : DialScript
#   file         : check.py
#   file_relpath : src/dialscript/cli/commands/check.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""DialScript `check` command.

Compiles one or more ``.ds`` files and reports every diagnostic with its
source line, caret and hint.

Examples:
  Check a script:

    $ dialscript check scene1.ds

  List every classified line as well:

    $ dialscript check --list scene1.ds

  Emit a JSON report:

    $ dialscript check --format json scene1.ds scene2.ds

Exit status is the total number of diagnostics (capped at 63), or a
sysexits-style code when a file cannot be read.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dialscript.cli.cli_types import EnumChoiceParam, OutputFormat
from dialscript.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from dialscript.cli.errors import DialscriptError
from dialscript.cli.exit_codes import ExitCode, diagnostic_exit_code
from dialscript.cli.io import ensure_script_path, read_script
from dialscript.cli.options import common_config_options
from dialscript.compiler.pipeline import compile_lines
from dialscript.config.logging import get_logger
from dialscript.rendering.human import render_result
from dialscript.rendering.machine import build_check_payload, serialize_payload

if TYPE_CHECKING:
    from dialscript.cli.console_api import ConsoleLike
    from dialscript.compiler.result import CompileResult
    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.model import Config

logger: DialscriptLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Validate DialScript files and report diagnostics.",
    epilog="""\
Examples:

  # Validate a script
  dialscript check scene1.ds

  # Show every classified line
  dialscript check --list scene1.ds
""",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@common_config_options
@click.option(
    "--list",
    "list_events",
    is_flag=True,
    help="List every classified line before the diagnostics.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def check_command(
    *,
    files: tuple[Path, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    list_events: bool,
    output_format: OutputFormat | None,
) -> None:
    """Compile each file and report its diagnostics.

    Args:
        files (tuple[Path, ...]): Script files to check.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Skip config discovery in the current directory.
        list_events (bool): Also print the classified lines.
        output_format (OutputFormat | None): Output format; human text by default.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    config: Config = resolve_config(config_paths=config_paths, no_config=no_config, console=console)
    for path in files:
        ensure_script_path(path, config)

    results: list[tuple[Path, CompileResult]] = []
    encountered_error: ExitCode | None = None

    for path in files:
        try:
            source = read_script(path)
        except DialscriptError as e:
            console.error(f"✗ Error: {e.format_message()}")
            encountered_error = encountered_error or ExitCode(e.exit_code)
            continue
        result: CompileResult = compile_lines(source.lines, config=config)
        logger.info("%s: %d diagnostic(s)", path, result.error_count)
        results.append((path, result))

        if fmt is OutputFormat.DEFAULT:
            for line in render_result(
                path, result, console, list_events=list_events, verbosity=vlevel
            ):
                console.print(line)

    if fmt is OutputFormat.JSON:
        console.print(serialize_payload(build_check_payload(results, include_events=list_events)))

    if encountered_error is not None:
        ctx.exit(encountered_error)

    total: int = sum(result.error_count for _path, result in results)
    ctx.exit(diagnostic_exit_code(total))
