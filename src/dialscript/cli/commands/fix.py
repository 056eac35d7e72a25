# topmark:header:start
#
#   project      : DialScript
#   file         : fix.py
#   file_relpath : src/dialscript/cli/commands/fix.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""DialScript `fix` command.

Runs the auto-fixer over one or more ``.ds`` files. By default nothing is
written: the fixes are listed and the exit status tells whether files would
change. With ``--apply`` a file is rewritten only when the fixed version
compiles without diagnostics, unless ``--force`` is given (or the
``[fix] require_clean`` setting is false).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dialscript.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from dialscript.cli.errors import DialscriptError
from dialscript.cli.exit_codes import ExitCode, diagnostic_exit_code
from dialscript.cli.io import ensure_script_path, read_script, write_script
from dialscript.cli.options import common_config_options
from dialscript.config.logging import get_logger
from dialscript.fixer.engine import fix_lines
from dialscript.rendering.human import render_diagnostic, render_fix
from dialscript.utils.diff import render_patch, unified_patch

if TYPE_CHECKING:
    from dialscript.cli.console_api import ConsoleLike
    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.model import Config
    from dialscript.fixer.engine import FixResult

logger: DialscriptLogger = get_logger(__name__)


@click.command(
    name="fix",
    help="Auto-fix typos and simple formatting errors (dry-run unless --apply).",
    epilog="""\
Examples:

  # Preview fixes
  dialscript fix --diff scene1.ds

  # Rewrite the file if the fixes leave it clean
  dialscript fix --apply scene1.ds
""",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@common_config_options
@click.option("--apply", "apply_changes", is_flag=True, help="Write fixed files back to disk.")
@click.option("--diff", is_flag=True, help="Show a unified diff of each fixed file.")
@click.option(
    "--force",
    is_flag=True,
    help="With --apply, write files even if diagnostics remain after fixing.",
)
def fix_command(
    *,
    files: tuple[Path, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    apply_changes: bool,
    diff: bool,
    force: bool,
) -> None:
    """Fix each file and report what changed.

    Args:
        files (tuple[Path, ...]): Script files to fix.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Skip config discovery in the current directory.
        apply_changes (bool): Write the fixed files.
        diff (bool): Show unified diffs.
        force (bool): Write even when diagnostics remain.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = resolve_config(config_paths=config_paths, no_config=no_config, console=console)
    for path in files:
        ensure_script_path(path, config)

    encountered_error: ExitCode | None = None
    would_change: bool = False
    remaining: int = 0

    for path in files:
        try:
            source = read_script(path)
        except DialscriptError as e:
            console.error(f"✗ Error: {e.format_message()}")
            encountered_error = encountered_error or ExitCode(e.exit_code)
            continue

        result: FixResult = fix_lines(source.lines, config=config)
        if vlevel >= 0:
            console.print(f"{console.styled('Auto-fix:', fg='cyan', bold=True)} {path}")

        if not result.changed:
            if result.clean:
                if vlevel >= 0:
                    console.print(console.styled("No fixes needed", fg="green", bold=True))
            else:
                _print_diagnostics(result, console)
                message: str = "Auto-fix not possible, please fix manually"
                console.print(console.styled(message, fg="red", bold=True))
                remaining += result.after.error_count
            continue

        for fix in result.fixes:
            for line in render_fix(fix, console):
                console.print(line)
        if diff:
            patch: list[str] = unified_patch(
                result.original_lines, result.fixed_lines, path=str(path)
            )
            console.print(render_patch(patch) if console.enable_color else "\n".join(patch))

        _print_diagnostics(result, console)
        remaining += result.after.error_count

        if not apply_changes:
            would_change = True
            continue

        if not result.clean and config.require_clean_fix and not force:
            console.print(
                console.styled(
                    "✗ Script still has errors that need to be fixed manually; not written "
                    "(use --force to write anyway)",
                    fg="red",
                    bold=True,
                )
            )
            continue

        try:
            write_script(source, result.fixed_lines)
        except DialscriptError as e:
            console.error(f"✗ Error: {e.format_message()}")
            encountered_error = encountered_error or ExitCode(e.exit_code)
            continue
        logger.info("%s: applied %d fix(es)", path, len(result.fixes))
        console.print(
            console.styled(f"✓ Applied: {len(result.fixes)} fixes", fg="green", bold=True)
        )

    if encountered_error is not None:
        ctx.exit(encountered_error)
    if remaining:
        ctx.exit(diagnostic_exit_code(remaining))
    if would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)


def _print_diagnostics(result: FixResult, console: ConsoleLike) -> None:
    for diagnostic in result.after.diagnostics:
        for line in render_diagnostic(diagnostic, console):
            console.print(line)
