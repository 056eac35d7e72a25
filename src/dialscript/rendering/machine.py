# topmark:header:start
#
#   project      : DialScript
#   file         : machine.py
#   file_relpath : src/dialscript/rendering/machine.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Machine-readable (JSON) rendering of compile results.

Machine output never contains ANSI color or diffs.

Shape:

    ```json
    {"files": [{"path": "...", "total_lines": 7, "success": true, "diagnostics": []}]}
    ```
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from dialscript.compiler.result import CompileResult


def file_payload(
    path: Path | str,
    result: CompileResult,
    *,
    include_events: bool = False,
) -> dict[str, Any]:
    """Return the JSON object for one compiled file."""
    return {"path": str(path), **result.to_dict(include_events=include_events)}


def build_check_payload(
    results: Iterable[tuple[Path | str, CompileResult]],
    *,
    include_events: bool = False,
) -> dict[str, Any]:
    """Return the JSON document for a ``check`` run."""
    return {
        "files": [
            file_payload(path, result, include_events=include_events) for path, result in results
        ]
    }


def serialize_payload(payload: dict[str, Any]) -> str:
    """Serialize a payload as indented JSON."""
    return json.dumps(payload, indent=2, ensure_ascii=False)
