# topmark:header:start
#
#   project      : InlineDiag
#   file         : version.py
#   file_relpath : src/inlinediag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InlineDiag `version` command.

Prints the current InlineDiag version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from inlinediag.constants import INLINEDIAG_VERSION

if TYPE_CHECKING:
    from inlinediag.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of InlineDiag.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of InlineDiag."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": INLINEDIAG_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("InlineDiag version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(INLINEDIAG_VERSION, bold=True)}")
    else:
        console.print(console.styled(INLINEDIAG_VERSION, bold=True))
