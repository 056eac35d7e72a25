# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/rendering/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Renderers for CLI output: human-readable text and JSON."""

from __future__ import annotations

from dialscript.rendering.human import (
    render_diagnostic,
    render_event,
    render_example,
    render_fix,
    render_footer,
    render_header,
    render_result,
)
from dialscript.rendering.machine import build_check_payload, file_payload, serialize_payload

__all__ = [
    "build_check_payload",
    "file_payload",
    "render_diagnostic",
    "render_event",
    "render_example",
    "render_fix",
    "render_footer",
    "render_header",
    "render_result",
    "serialize_payload",
]
