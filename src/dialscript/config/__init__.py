# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/config/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Configuration (TOML settings and logging) for DialScript.

Build a `MutableConfig` (usually via `MutableConfig.load_merged`), then
``freeze()`` it into the immutable `Config` consumed at runtime.
"""

from __future__ import annotations

from dialscript.config.model import Config, MutableConfig
from dialscript.config.types import DEFAULT_TYPO_POLICY, TypoPolicy

__all__ = [
    "DEFAULT_TYPO_POLICY",
    "Config",
    "MutableConfig",
    "TypoPolicy",
]
