# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, dependency-free building blocks shared across InlineDiag."""

from __future__ import annotations

from inlinediag.core.errors import InlineDiagError, InvalidArgumentError, InvalidSeverityError

__all__ = [
    "InlineDiagError",
    "InvalidArgumentError",
    "InvalidSeverityError",
]
