# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InlineDiag package.

InlineDiag arranges lint and compiler diagnostics as inline virtual text for
editor buffers: it filters, formats and groups diagnostics per line and places
the composed annotations through small editor-facing Protocols. A Click CLI
previews the result for a file on the terminal.
"""

from __future__ import annotations
