# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic records and severity helpers.

Design:
    - Diagnostics are immutable `Diagnostic` instances supplied by producers.
    - Severities are `Severity` ordinals; names are normalized with
      `resolve_severity`, filters with `resolve_range`.
"""

from __future__ import annotations

from inlinediag.diagnostic.model import Diagnostic
from inlinediag.diagnostic.severity import (
    Severity,
    SeverityFilter,
    SeverityRange,
    resolve_range,
    resolve_severity,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "SeverityFilter",
    "SeverityRange",
    "resolve_range",
    "resolve_severity",
]
