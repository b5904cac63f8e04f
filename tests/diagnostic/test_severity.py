# topmark:header:start
#
#   project      : InlineDiag
#   file         : test_severity.py
#   file_relpath : tests/diagnostic/test_severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for severity name resolution and severity-range predicates."""

from __future__ import annotations

import pytest

from inlinediag.core.errors import InvalidSeverityError
from inlinediag.diagnostic.severity import (
    Severity,
    SeverityRange,
    resolve_range,
    resolve_severity,
)
from tests.conftest import make_diag, parametrize


@parametrize(
    "value, expected",
    [
        ("error", Severity.ERROR),
        ("ERROR", Severity.ERROR),
        ("warn", Severity.WARN),
        ("Warning", Severity.WARN),
        ("info", Severity.INFO),
        ("information", Severity.INFO),
        (" hint ", Severity.HINT),
    ],
)
def test_resolve_severity_names(value: str, expected: Severity) -> None:
    """Severity names resolve case-insensitively, including the long aliases."""
    assert resolve_severity(value) == expected


def test_resolve_severity_passes_ordinals_and_none_through() -> None:
    """Ordinals are returned unchanged (even unknown ones) and None stays None."""
    assert resolve_severity(2) == 2
    assert resolve_severity(7) == 7
    assert resolve_severity(None) is None


@parametrize("value", ["fatal", "", True, 1.5, [1]])
def test_resolve_severity_rejects_unknown(value: object) -> None:
    """Unknown names and non-name/ordinal values raise InvalidSeverityError."""
    with pytest.raises(InvalidSeverityError) as excinfo:
        resolve_severity(value)  # type: ignore[arg-type]
    assert excinfo.value.value == value
    assert str(excinfo.value).startswith("Invalid severity:")


def test_invalid_severity_error_is_a_value_error() -> None:
    """InvalidSeverityError can be caught as a plain ValueError."""
    with pytest.raises(ValueError, match="Invalid severity: fatal"):
        resolve_severity("fatal")


def test_scalar_filter_is_an_exact_match() -> None:
    """A scalar severity keeps only diagnostics of exactly that severity."""
    accept = resolve_range("warn")
    assert accept(make_diag(0, severity=Severity.WARN))
    assert not accept(make_diag(0, severity=Severity.ERROR))
    assert not accept(make_diag(0, severity=Severity.INFO))


def test_empty_range_accepts_everything() -> None:
    """A range without bounds defaults to HINT..ERROR and accepts all four severities."""
    accept = resolve_range(SeverityRange())
    assert all(accept(make_diag(0, severity=s)) for s in Severity)


def test_range_bounds_use_editor_reading() -> None:
    """``min`` bounds the least severe and ``max`` the most severe severity kept."""
    accept = resolve_range(SeverityRange(min="warn"))
    kept = [s for s in Severity if accept(make_diag(0, severity=s))]
    assert kept == [Severity.ERROR, Severity.WARN]

    accept = resolve_range(SeverityRange(max="info"))
    kept = [s for s in Severity if accept(make_diag(0, severity=s))]
    assert kept == [Severity.INFO, Severity.HINT]


def test_mapping_filter_is_read_as_range() -> None:
    """A plain mapping with min/max keys behaves like a SeverityRange."""
    accept = resolve_range({"min": "info", "max": "warn"})
    kept = [s for s in Severity if accept(make_diag(0, severity=s))]
    assert kept == [Severity.WARN, Severity.INFO]


def test_range_with_unknown_bound_raises() -> None:
    """Unknown bound names are rejected when the range is resolved."""
    with pytest.raises(InvalidSeverityError):
        resolve_range(SeverityRange(min="loud"))


def test_severity_colors_are_callables() -> None:
    """Each severity exposes a yachalk color function for previews."""
    for severity in Severity:
        assert "x" in severity.color("x")


def test_range_bound_zero_is_not_replaced_by_default() -> None:
    """An explicit ordinal bound of 0 is kept rather than falling back to the default."""
    accept = resolve_range(SeverityRange(min=0))
    assert not any(accept(make_diag(0, severity=s)) for s in Severity)
    assert accept(make_diag(0, severity=0)) is False

    accept = resolve_range(SeverityRange(max=0, min=Severity.WARN))
    assert accept(make_diag(0, severity=0))
    assert accept(make_diag(0, severity=Severity.WARN))
    assert not accept(make_diag(0, severity=Severity.INFO))
