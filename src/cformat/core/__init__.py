# topmark:header:start
#
#   project      : CFormat
#   file         : __init__.py
#   file_relpath : src/cformat/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core of CFormat: the specifier model, the template parser and the engine."""

from __future__ import annotations
