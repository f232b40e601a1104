# topmark:header:start
#
#   project      : CFormat
#   file         : __init__.py
#   file_relpath : src/cformat/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for CFormat (click)."""
