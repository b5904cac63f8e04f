# topmark:header:start
#
#   project      : InlineDiag
#   file         : test_composer.py
#   file_relpath : tests/pipeline/test_composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for composing the virtual text segments of one line."""

from __future__ import annotations

import pytest

from inlinediag.config.options import RenderOptions
from inlinediag.core.errors import InvalidSeverityError
from inlinediag.diagnostic.severity import Severity
from inlinediag.pipeline.composer import (
    Segment,
    build_segments,
    format_message,
    segments_text,
    severity_style,
)
from tests.conftest import make_diag, mark_pipeline, parametrize


@parametrize(
    "severity, style",
    [
        (Severity.ERROR, "DiagnosticVirtualTextError"),
        (Severity.WARN, "DiagnosticVirtualTextWarn"),
        (Severity.INFO, "DiagnosticVirtualTextInfo"),
        (Severity.HINT, "DiagnosticVirtualTextHint"),
    ],
)
def test_severity_style(severity: Severity, style: str) -> None:
    """Each severity maps to its own style class."""
    assert severity_style(severity) == style


def test_severity_style_unknown_ordinal() -> None:
    """Ordinals outside 1..4 are rejected."""
    with pytest.raises(InvalidSeverityError):
        severity_style(9)


@mark_pipeline
def test_single_error_with_defaults() -> None:
    """One error renders as spacer, default marker and message."""
    segments = build_segments([make_diag(2, "x", Severity.ERROR)])
    assert segments == [
        Segment("    "),
        Segment("●", "DiagnosticVirtualTextError"),
        Segment("x", "DiagnosticVirtualTextError"),
    ]
    assert segments_text(segments) == "    ●x"


@mark_pipeline
def test_multiple_diagnostics_emit_one_marker_each_and_last_message() -> None:
    """Every diagnostic adds a marker in its own style; only the last contributes text."""
    line_diags = [
        make_diag(0, "first", Severity.WARN),
        make_diag(0, "second", Severity.ERROR),
    ]
    options = RenderOptions(prefix="■", spacing=2)

    segments = build_segments(line_diags, options)

    assert segments == [
        Segment("  "),
        Segment("■", "DiagnosticVirtualTextWarn"),
        Segment("■", "DiagnosticVirtualTextError"),
        Segment("second", "DiagnosticVirtualTextError"),
    ]


@mark_pipeline
def test_computed_prefix_and_suffix() -> None:
    """Callable prefix/suffix are resolved per diagnostic; suffix uses the last one."""
    line_diags = [
        make_diag(0, "a", Severity.HINT, code="H1"),
        make_diag(0, "b", Severity.INFO, code="I2"),
    ]
    options = RenderOptions(
        prefix=lambda d: f"[{d.code}]",
        suffix=lambda d: f" ({d.code})",
        spacing=0,
    )

    segments = build_segments(line_diags, options)

    assert segments is not None
    assert segments_text(segments) == "[H1][I2]b (I2)"


@mark_pipeline
def test_computed_suffix_returning_none_is_empty() -> None:
    """A computed suffix returning None contributes nothing."""
    options = RenderOptions(suffix=lambda d: None, spacing=0, prefix="")
    segments = build_segments([make_diag(0, "msg")], options)
    assert segments is not None
    assert segments_text(segments) == "msg"


@mark_pipeline
@parametrize("message", ["", None])
def test_empty_message_shows_nothing(message: str | None) -> None:
    """An empty or missing message on the last diagnostic yields no segments."""
    assert build_segments([make_diag(0, "earlier"), make_diag(0, message)]) is None


@mark_pipeline
def test_no_diagnostics_shows_nothing() -> None:
    """An empty line group yields no segments."""
    assert build_segments([]) is None


@mark_pipeline
def test_code_is_prepended_when_enabled() -> None:
    """With ``code`` enabled the rule id precedes the message."""
    d = make_diag(0, "unused", code="F401")
    assert format_message(d, show_code=True) == "F401: unused"
    assert format_message(d, show_code=False) == "unused"
    assert format_message(make_diag(0, "plain"), show_code=True) == "plain"


@mark_pipeline
def test_newlines_are_collapsed() -> None:
    """CR is dropped and LF becomes two spaces."""
    d = make_diag(0, "first\r\nsecond\nthird")
    assert format_message(d, show_code=False) == "first  second  third"


@mark_pipeline
def test_unknown_severity_raises() -> None:
    """Composing a diagnostic with an unknown severity fails."""
    with pytest.raises(InvalidSeverityError):
        build_segments([make_diag(0, "x", 7)])


@mark_pipeline
def test_single_warning_with_multiline_message() -> None:
    """A multi-line warning renders as spacer, warn marker and collapsed message."""
    segments = build_segments([make_diag(0, "x\ny", Severity.WARN)], RenderOptions(spacing=2))
    assert segments == [
        Segment("  "),
        Segment("●", "DiagnosticVirtualTextWarn"),
        Segment("x  y", "DiagnosticVirtualTextWarn"),
    ]
