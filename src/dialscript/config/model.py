# topmark:header:start
#
#   project      : DialScript
#   file         : model.py
#   file_relpath : src/dialscript/config/model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the compiler, fixer and CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config`.

Layers are merged in increasing precedence: built-in defaults, discovered
project files (``pyproject.toml`` then ``dialscript.toml``), then files passed
explicitly on the command line. A value left unset (``None``) in a layer
inherits from the layers below it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from dialscript.config.getters import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_or_none_checked,
    get_table_value,
)
from dialscript.config.loaders import (
    discover_config_files,
    extract_dialscript_table,
    load_toml_dict,
)
from dialscript.config.logging import get_logger
from dialscript.config.types import DEFAULT_TYPO_POLICY, TypoPolicy
from dialscript.constants import DEFAULT_EXTENSIONS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.types import TomlTable

logger: DialscriptLogger = get_logger(__name__)

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DialScript.

    Attributes:
        typo_policy (TypoPolicy): Thresholds for the typo-correction heuristic.
        extensions (tuple[str, ...]): File suffixes the CLI accepts as scripts.
        require_clean_fix (bool): Only persist auto-fixed files that re-validate
            without diagnostics.
        config_files (tuple[Path, ...]): Config sources that were merged, in order.
        warnings (tuple[str, ...]): Problems found while reading config sources.
    """

    typo_policy: TypoPolicy = DEFAULT_TYPO_POLICY
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    require_clean_fix: bool = True
    config_files: tuple[Path, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in default configuration."""
        return cls()

    def accepts(self, path: Path) -> bool:
        """Return True if ``path`` has one of the configured script suffixes."""
        return any(path.name.endswith(ext) for ext in self.extensions)


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Every field is optional; ``None`` means "inherit from lower layers".
    """

    short_threshold: int | None = None
    long_threshold: int | None = None
    short_length: int | None = None
    max_length_delta: int | None = None
    extensions: list[str] | None = None
    require_clean_fix: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | None = None) -> MutableConfig:
        """Build a layer from a DialScript settings table.

        Args:
            data: The DialScript table (top level of ``dialscript.toml`` or
                ``[tool.dialscript]``).
            source: Where the table came from, recorded in ``config_files``.

        Returns:
            The config layer.
        """
        warnings: list[str] = []
        typos: TomlTable = get_table_value(data, "typos")
        files: TomlTable = get_table_value(data, "files")
        fix: TomlTable = get_table_value(data, "fix")

        layer = cls(
            short_threshold=get_int_value_or_none_checked(
                typos, "short_threshold", where="typos", warnings=warnings, minimum=0
            ),
            long_threshold=get_int_value_or_none_checked(
                typos, "long_threshold", where="typos", warnings=warnings, minimum=0
            ),
            short_length=get_int_value_or_none_checked(
                typos, "short_length", where="typos", warnings=warnings, minimum=0
            ),
            max_length_delta=get_int_value_or_none_checked(
                typos, "max_length_delta", where="typos", warnings=warnings, minimum=0
            ),
            extensions=get_string_list_or_none_checked(
                files, "extensions", where="files", warnings=warnings
            ),
            require_clean_fix=get_bool_value_or_none_checked(
                fix, "require_clean", where="fix", warnings=warnings
            ),
            warnings=warnings,
        )
        if source is not None:
            layer.config_files.append(source)
        return layer

    @classmethod
    def from_file(cls, path: Path, *, strict: bool = False) -> MutableConfig:
        """Load a config layer from a TOML file.

        With ``strict``, read and parse errors propagate (see `load_toml_dict`).
        """
        data: TomlTable = extract_dialscript_table(path, load_toml_dict(path, strict=strict))
        logger.debug("Loaded config layer from %s: %s", path, data)
        return cls.from_toml_dict(data, source=path)

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        extra_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Merge discovered and explicit config files over the defaults.

        Args:
            root: Directory to discover config files in (defaults to CWD).
            extra_files: Explicit config files, highest precedence, in order. Read
                and parse errors in these propagate.
            discover: Whether to look for project config files in ``root``.

        Returns:
            The merged builder.
        """
        merged = cls()
        if discover:
            for path in discover_config_files(root or Path.cwd()):
                merged = merged.merge_with(cls.from_file(path))
        for path in extra_files:
            merged = merged.merge_with(cls.from_file(path, strict=True))
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other``'s set values layered on top of ``self``."""
        return MutableConfig(
            short_threshold=_pick(other.short_threshold, self.short_threshold),
            long_threshold=_pick(other.long_threshold, self.long_threshold),
            short_length=_pick(other.short_length, self.short_length),
            max_length_delta=_pick(other.max_length_delta, self.max_length_delta),
            extensions=_pick(other.extensions, self.extensions),
            require_clean_fix=_pick(other.require_clean_fix, self.require_clean_fix),
            config_files=[*self.config_files, *other.config_files],
            warnings=[*self.warnings, *other.warnings],
        )

    def freeze(self) -> Config:
        """Resolve inherited values against the defaults and return a `Config`."""
        defaults = Config.from_defaults()
        policy = defaults.typo_policy
        typo_policy = TypoPolicy(
            short_threshold=_pick(self.short_threshold, policy.short_threshold),
            long_threshold=_pick(self.long_threshold, policy.long_threshold),
            short_length=_pick(self.short_length, policy.short_length),
            max_length_delta=_pick(self.max_length_delta, policy.max_length_delta),
        )
        extensions = tuple(self.extensions) if self.extensions else defaults.extensions
        return Config(
            typo_policy=typo_policy,
            extensions=extensions,
            require_clean_fix=_pick(self.require_clean_fix, defaults.require_clean_fix),
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )


def _pick(value: _T | None, fallback: _T) -> _T:
    return fallback if value is None else value
