# topmark:header:start
#
#   project      : InlineDiag
#   file         : model.py
#   file_relpath : src/inlinediag/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic record consumed by the render pipeline.

Diagnostics are produced by external tools (linters, compilers, language servers)
and are read-only to InlineDiag. Formatting steps derive new instances with
`dataclasses.replace` instead of mutating the producer's objects.

Line and column numbers are 0-based. ``end_line`` is inclusive.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from inlinediag.core.errors import InvalidArgumentError
from inlinediag.diagnostic.severity import Severity, resolve_severity


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single issue reported for a buffer.

    Attributes:
        line (int): 0-based row the diagnostic is anchored at.
        message (str | None): Message text; may contain ``\\r``/``\\n``.
        severity (int): Severity ordinal (see `Severity`).
        column (int): 0-based column; only used to order diagnostics on the same line.
        end_line (int | None): Inclusive last row covered by the diagnostic.
        source (str | None): Origin label, e.g. the linter name.
        code (str | None): Short rule identifier.
    """

    line: int
    message: str | None = ""
    severity: int = Severity.ERROR
    column: int = 0
    end_line: int | None = None
    source: str | None = None
    code: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.line, bool) or not isinstance(self.line, int) or self.line < 0:
            raise InvalidArgumentError(f"Diagnostic line must be a non-negative int: {self.line!r}")
        if self.end_line is not None and self.end_line < self.line:
            raise InvalidArgumentError(
                f"Diagnostic end_line ({self.end_line}) precedes line ({self.line})"
            )

    def covers(self, line: int) -> bool:
        """Return True if the diagnostic spans ``line``.

        Diagnostics with an ``end_line`` cover ``[line, end_line]``; others only their own line.
        """
        if self.end_line is not None:
            return self.line <= line <= self.end_line
        return self.line == line

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Diagnostic:
        """Build a diagnostic from a plain mapping.

        Both InlineDiag field names (``line``, ``end_line``, ``column``) and editor-style
        names (``lnum``, ``end_lnum``, ``col``) are accepted. ``severity`` may be a name or
        an ordinal and defaults to ``ERROR``.

        Args:
            data (Mapping[str, Any]): Raw diagnostic fields, e.g. decoded from JSON.

        Returns:
            Diagnostic: The new diagnostic.

        Raises:
            InvalidArgumentError: If ``data`` is not a mapping or lacks a line number.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(f"Expected a diagnostic mapping, got {type(data).__name__}")

        line: Any = _first_present(data, "line", "lnum")
        if line is None:
            raise InvalidArgumentError(f"Diagnostic is missing a line number: {dict(data)!r}")

        severity: int | None = resolve_severity(data.get("severity"))
        code: Any = data.get("code")
        return cls(
            line=line,
            end_line=_first_present(data, "end_line", "end_lnum"),
            column=_first_present(data, "column", "col") or 0,
            severity=severity if severity is not None else Severity.ERROR,
            message=data.get("message", ""),
            source=data.get("source"),
            code=str(code) if code is not None else None,
        )
