# topmark:header:start
#
#   project      : InlineDiag
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output and bare group invocation."""

from __future__ import annotations

import json

from inlinediag.constants import INLINEDIAG_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == INLINEDIAG_VERSION


@mark_cli
def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with the version value."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": INLINEDIAG_VERSION}


@mark_cli
def test_group_without_command_prints_hint() -> None:
    """Running the bare group prints a usage hint and the help text."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "inlinediag render FILE" in result.output
    assert "render" in result.output
    assert "version" in result.output
