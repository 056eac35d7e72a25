# topmark:header:start
#
#   project      : DialScript
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Tests for config loading, layering and freezing.

Config files are written into an isolated working directory so that discovery
only sees what the test puts there.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from tomlkit.exceptions import ParseError as TomlkitParseError

from dialscript.config import Config, MutableConfig
from dialscript.config.loaders import discover_config_files, load_toml_dict
from dialscript.config.types import DEFAULT_TYPO_POLICY


def test_defaults() -> None:
    cfg: Config = Config.from_defaults()
    assert cfg.typo_policy == DEFAULT_TYPO_POLICY
    assert cfg.extensions == (".ds",)
    assert cfg.require_clean_fix is True
    assert cfg.accepts(Path("scene.ds"))
    assert not cfg.accepts(Path("scene.txt"))


def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == Config.from_defaults()


def test_from_toml_dict_reads_all_tables() -> None:
    layer = MutableConfig.from_toml_dict(
        {
            "typos": {"short_threshold": 30, "long_threshold": 70, "max_length_delta": 1},
            "files": {"extensions": [".ds", ".dialog"]},
            "fix": {"require_clean": False},
        }
    )
    cfg: Config = layer.freeze()
    assert cfg.typo_policy.short_threshold == 30
    assert cfg.typo_policy.long_threshold == 70
    assert cfg.typo_policy.max_length_delta == 1
    assert cfg.typo_policy.short_length == DEFAULT_TYPO_POLICY.short_length
    assert cfg.extensions == (".ds", ".dialog")
    assert cfg.require_clean_fix is False
    assert cfg.warnings == ()


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"typos": {"short_threshold": "high"}}, "typos.short_threshold"),
        ({"typos": {"long_threshold": True}}, "typos.long_threshold"),
        ({"typos": {"max_length_delta": -1}}, "int >= 0"),
        ({"files": {"extensions": ".ds"}}, "files.extensions"),
        ({"fix": {"require_clean": "yes"}}, "fix.require_clean"),
    ],
)
def test_malformed_values_warn_and_fall_back(data: dict[str, object], fragment: str) -> None:
    cfg: Config = MutableConfig.from_toml_dict(data).freeze()
    assert len(cfg.warnings) == 1
    assert fragment in cfg.warnings[0]
    assert cfg.typo_policy == DEFAULT_TYPO_POLICY
    assert cfg.extensions == (".ds",)
    assert cfg.require_clean_fix is True


def test_non_string_extensions_are_dropped() -> None:
    cfg: Config = MutableConfig.from_toml_dict({"files": {"extensions": [".ds", 3]}}).freeze()
    assert cfg.extensions == (".ds",)
    assert len(cfg.warnings) == 1


def test_merge_later_layers_win() -> None:
    base = MutableConfig(short_threshold=10, long_threshold=50)
    top = MutableConfig(long_threshold=75)
    merged: MutableConfig = base.merge_with(top)
    assert merged.short_threshold == 10
    assert merged.long_threshold == 75


def test_discovery_prefers_dialscript_toml(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text(
        "[tool.dialscript.typos]\nshort_threshold = 25\nlong_threshold = 65\n",
        encoding="utf-8",
    )
    (isolation / "dialscript.toml").write_text(
        "[typos]\nlong_threshold = 80\n",
        encoding="utf-8",
    )
    assert [p.name for p in discover_config_files(isolation)] == [
        "pyproject.toml",
        "dialscript.toml",
    ]

    cfg: Config = MutableConfig.load_merged().freeze()
    assert cfg.typo_policy.short_threshold == 25
    assert cfg.typo_policy.long_threshold == 80
    assert [p.name for p in cfg.config_files] == ["pyproject.toml", "dialscript.toml"]


def test_pyproject_without_tool_table_is_ignored(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    assert discover_config_files(isolation) == []


def test_no_discovery(isolation: Path) -> None:
    (isolation / "dialscript.toml").write_text("[typos]\nlong_threshold = 80\n", encoding="utf-8")
    cfg: Config = MutableConfig.load_merged(discover=False).freeze()
    assert cfg.typo_policy.long_threshold == DEFAULT_TYPO_POLICY.long_threshold


def test_explicit_files_override_discovered(isolation: Path) -> None:
    (isolation / "dialscript.toml").write_text("[typos]\nlong_threshold = 80\n", encoding="utf-8")
    extra: Path = isolation / "ci.toml"
    extra.write_text("[typos]\nlong_threshold = 40\n", encoding="utf-8")
    cfg: Config = MutableConfig.load_merged(extra_files=[extra]).freeze()
    assert cfg.typo_policy.long_threshold == 40


def test_invalid_discovered_file_is_skipped(isolation: Path) -> None:
    (isolation / "dialscript.toml").write_text("[typos\n", encoding="utf-8")
    cfg: Config = MutableConfig.load_merged().freeze()
    assert cfg.typo_policy == DEFAULT_TYPO_POLICY


def test_invalid_explicit_file_raises(isolation: Path) -> None:
    bad: Path = isolation / "bad.toml"
    bad.write_text("[typos\n", encoding="utf-8")
    with pytest.raises(TomlkitParseError):
        MutableConfig.load_merged(extra_files=[bad])


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    missing: Path = tmp_path / "nope.toml"
    assert load_toml_dict(missing) == {}
    with pytest.raises(OSError):
        load_toml_dict(missing, strict=True)
