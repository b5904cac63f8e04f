# topmark:header:start
#
#   project      : InlineDiag
#   file         : test_options.py
#   file_relpath : tests/config/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `RenderOptions` normalization, validation and TOML mapping."""

from __future__ import annotations

import logging

import pytest

from inlinediag.config.options import (
    ComputedText,
    CurrentLinePolicy,
    LiteralText,
    RenderOptions,
    SourcePolicy,
)
from inlinediag.core.errors import InvalidArgumentError, InvalidSeverityError
from inlinediag.diagnostic.severity import SeverityRange
from tests.conftest import make_diag, parametrize


def test_defaults() -> None:
    """Defaults: bullet prefix, empty suffix, four spaces, no source, no filters."""
    options = RenderOptions()
    assert options.prefix == LiteralText("●")
    assert options.suffix == LiteralText("")
    assert options.spacing == 4
    assert options.source is SourcePolicy.OFF
    assert options.format is None
    assert options.severity is None
    assert options.code is False
    assert options.current_line is CurrentLinePolicy.OFF


def test_text_options_are_normalized() -> None:
    """Strings become LiteralText and callables ComputedText."""
    options = RenderOptions(prefix="!", suffix=lambda d: d.code)
    assert options.prefix == LiteralText("!")
    assert isinstance(options.suffix, ComputedText)
    assert options.suffix.resolve(make_diag(0, code="E1")) == "E1"
    assert options.suffix.resolve(make_diag(0)) == ""


@parametrize(
    "value, expected",
    [
        (True, SourcePolicy.ALWAYS),
        (False, SourcePolicy.OFF),
        (None, SourcePolicy.OFF),
        ("always", SourcePolicy.ALWAYS),
        ("IF_MANY", SourcePolicy.IF_MANY),
        (SourcePolicy.OFF, SourcePolicy.OFF),
    ],
)
def test_source_policy_parse(value: object, expected: SourcePolicy) -> None:
    """Booleans and policy names map onto SourcePolicy."""
    assert SourcePolicy.parse(value) is expected


def test_source_policy_rejects_unknown() -> None:
    """Unknown source policies are an error."""
    with pytest.raises(InvalidArgumentError, match="source policy"):
        RenderOptions(source="sometimes")  # type: ignore[arg-type]


def test_current_line_unknown_falls_back_to_off(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown current_line values behave as ``off`` and log a warning."""
    with caplog.at_level(logging.WARNING):
        options = RenderOptions(current_line="above")  # type: ignore[arg-type]
    assert options.current_line is CurrentLinePolicy.OFF
    assert "above" in caplog.text


@parametrize(
    "kwargs",
    [
        {"spacing": -1},
        {"spacing": True},
        {"spacing": "4"},
        {"code": "yes"},
        {"format": "upper"},
        {"prefix": 3},
    ],
)
def test_invalid_values_are_rejected(kwargs: dict[str, object]) -> None:
    """Malformed option values raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        RenderOptions(**kwargs)  # type: ignore[arg-type]


def test_unknown_severity_fails_fast() -> None:
    """Severity filters are validated when the options are built."""
    with pytest.raises(InvalidSeverityError):
        RenderOptions(severity="loud")


def test_merged_with_skips_none() -> None:
    """Only non-None overrides are applied; an empty override returns self."""
    base = RenderOptions(spacing=2)
    assert base.merged_with(spacing=None) is base

    merged = base.merged_with(prefix="→", spacing=None, source="always")
    assert merged.prefix == LiteralText("→")
    assert merged.spacing == 2
    assert merged.source is SourcePolicy.ALWAYS


def test_from_table() -> None:
    """A [virtual_text] table maps onto options; severity tables become ranges."""
    options = RenderOptions.from_table(
        {
            "prefix": "■",
            "suffix": " <",
            "spacing": 1,
            "source": "if_many",
            "code": True,
            "current_line": "hide",
            "severity": {"min": "warn"},
        }
    )
    assert options.prefix == LiteralText("■")
    assert options.suffix == LiteralText(" <")
    assert options.spacing == 1
    assert options.source is SourcePolicy.IF_MANY
    assert options.code is True
    assert options.current_line is CurrentLinePolicy.HIDE
    assert options.severity == SeverityRange(min="warn", max=None)


def test_from_table_scalar_severity() -> None:
    """A scalar severity stays a scalar (exact match)."""
    assert RenderOptions.from_table({"severity": "error"}).severity == "error"


def test_from_table_warns_on_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""
    with caplog.at_level(logging.WARNING):
        options = RenderOptions.from_table({"colour": "red"})
    assert options == RenderOptions()
    assert "colour" in caplog.text


def test_from_table_rejects_bad_severity_shape() -> None:
    """Severity must be a name, an ordinal or a table."""
    with pytest.raises(InvalidArgumentError):
        RenderOptions.from_table({"severity": ["error"]})
