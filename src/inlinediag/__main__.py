# topmark:header:start
#
#   project      : InlineDiag
#   file         : __main__.py
#   file_relpath : src/inlinediag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running InlineDiag via ``python -m inlinediag``.

It delegates directly to :func:`inlinediag.cli.main.cli`.

Examples:
    Preview the annotations for a file::

        python -m inlinediag render app.py --diagnostics diags.json
"""

from __future__ import annotations

from inlinediag.cli.main import cli

if __name__ == "__main__":
    cli()
