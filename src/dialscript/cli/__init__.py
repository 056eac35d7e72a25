# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/cli/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Click command-line interface for DialScript."""
