# topmark:header:start
#
#   project      : CFormat
#   file         : __main__.py
#   file_relpath : src/cformat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for ``python -m cformat``.

Equivalent to running the ``cformat`` console script; it delegates to
:func:`cformat.cli.main.cli`.

Examples:
    Render a template from the shell::

        python -m cformat format -n '%-6s|%04d' id 7
"""

from __future__ import annotations

from cformat.cli.main import cli

if __name__ == "__main__":
    cli()
