# topmark:header:start
#
#   project      : DialScript
#   file         : cmd_common.py
#   file_relpath : src/dialscript/cli/cmd_common.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Helpers shared by the CLI commands.

They only encapsulate plumbing (console lookup, verbosity, config resolution);
policy such as exit codes and messages stays in the commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from dialscript.cli.console import ClickConsole
from dialscript.cli.errors import DialscriptConfigError
from dialscript.config.logging import get_logger
from dialscript.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dialscript.cli.console_api import ConsoleLike
    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.model import Config

logger: DialscriptLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context (or a plain one)."""
    obj = ctx.ensure_object(dict)
    console: ConsoleLike | None = obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity chosen on the group (default 0)."""
    return int(ctx.ensure_object(dict).get("verbosity_level", 0))


def resolve_config(
    *,
    config_paths: Iterable[str],
    no_config: bool,
    console: ConsoleLike,
) -> Config:
    """Build the runtime config from discovered and explicit TOML files.

    Warnings about malformed values are shown on the console and otherwise
    ignored.

    Raises:
        DialscriptConfigError: If an explicit config file cannot be read or parsed.
    """
    extra: list[Path] = [Path(p) for p in config_paths]
    try:
        draft: MutableConfig = MutableConfig.load_merged(extra_files=extra, discover=not no_config)
    except (OSError, TomlkitParseError) as e:
        raise DialscriptConfigError(f"invalid config file: {e}") from e

    config: Config = draft.freeze()
    for warning in config.warnings:
        console.warn(f"config: {warning}")
    logger.debug("Effective config: %s", config)
    return config
