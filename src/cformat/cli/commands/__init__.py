# topmark:header:start
#
#   project      : CFormat
#   file         : __init__.py
#   file_relpath : src/cformat/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat CLI subcommands."""
