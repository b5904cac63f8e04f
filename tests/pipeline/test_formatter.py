# topmark:header:start
#
#   project      : InlineDiag
#   file         : test_formatter.py
#   file_relpath : tests/pipeline/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for custom message formatting and source prefixing."""

from __future__ import annotations

import pytest

from inlinediag.core.errors import InvalidArgumentError
from inlinediag.pipeline.formatter import apply_custom_format, prefix_source
from tests.conftest import make_diag, mark_pipeline


@mark_pipeline
def test_apply_custom_format_replaces_messages() -> None:
    """Each message becomes the formatter's result; originals stay untouched."""
    original = make_diag(1, "unused", code="F401")
    diags = [original]

    formatted = apply_custom_format(lambda d: f"[{d.code}] {d.message}", diags)

    assert [d.message for d in formatted] == ["[F401] unused"]
    assert formatted[0].line == 1
    assert diags[0] is original
    assert original.message == "unused"


@mark_pipeline
def test_apply_custom_format_allows_none() -> None:
    """A formatter may return None to hide a message."""
    formatted = apply_custom_format(lambda d: None, [make_diag(0)])
    assert formatted[0].message is None


@mark_pipeline
def test_apply_custom_format_rejects_non_callable() -> None:
    """A non-callable formatter is rejected."""
    with pytest.raises(InvalidArgumentError):
        apply_custom_format("upper", [make_diag(0)])  # type: ignore[arg-type]


@mark_pipeline
def test_apply_custom_format_rejects_non_list() -> None:
    """Diagnostics must be passed as a list or tuple."""
    with pytest.raises(InvalidArgumentError):
        apply_custom_format(lambda d: "x", {make_diag(0)})  # type: ignore[arg-type]


@mark_pipeline
def test_prefix_source() -> None:
    """Messages gain a ``source: `` prefix; source-less diagnostics pass through as-is."""
    with_source = make_diag(0, "bad", source="ruff")
    without_source = make_diag(1, "worse")

    prefixed = prefix_source([with_source, without_source])

    assert prefixed[0].message == "ruff: bad"
    assert prefixed[1] is without_source
    assert with_source.message == "bad"


@mark_pipeline
def test_prefix_source_skips_missing_message() -> None:
    """A None message is not turned into ``"source: None"``."""
    hidden = make_diag(0, None, source="ruff")
    assert prefix_source([hidden]) == [hidden]
