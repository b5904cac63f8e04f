# topmark:header:start
#
#   project      : InlineDiag
#   file         : errors.py
#   file_relpath : src/inlinediag/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the InlineDiag library layer.

Usage:
    Library code raises these exceptions; the CLI converts them to
    `click`-aware errors with exit codes (see `inlinediag.cli.errors`).

Conditions that are *not* errors:
    - A buffer that is no longer loaded turns a render call into a no-op.
    - Diagnostics anchored beyond the end of the buffer are skipped per line.
"""

from __future__ import annotations


class InlineDiagError(Exception):
    """Base class for all InlineDiag library errors."""


class InvalidSeverityError(InlineDiagError, ValueError):
    """Raised when a severity name or ordinal cannot be resolved."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid severity: {value}")
        self.value = value


class InvalidArgumentError(InlineDiagError, TypeError):
    """Raised for malformed handles, diagnostics, formatters or option values.

    Always raised before any annotation is cleared or placed.
    """
