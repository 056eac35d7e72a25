# topmark:header:start
#
#   project      : DialScript
#   file         : __main__.py
#   file_relpath : src/dialscript/__main__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Module entry point for running DialScript via ``python -m dialscript``.

Delegates to :func:`dialscript.cli.main.cli`, the same Click group that backs
the ``dialscript`` console script.

Examples:
    Validate a script using the module interface::

        python -m dialscript check scene.ds
"""

from __future__ import annotations

from dialscript.cli.main import cli

if __name__ == "__main__":
    cli()
