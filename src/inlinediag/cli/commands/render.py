# topmark:header:start
#
#   project      : InlineDiag
#   file         : render.py
#   file_relpath : src/inlinediag/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InlineDiag `render` command.

Previews the virtual text an editor would show for a file: the file is loaded
into an in-memory buffer, the diagnostics JSON is rendered through
`RenderController`, and the buffer is printed with the annotations appended to
their lines (or the placements are dumped as JSON).

Render options come from, in increasing precedence: defaults, the discovered or
explicit config file, and command-line flags.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from inlinediag.cli.console import ClickConsole
from inlinediag.cli.errors import InlineDiagConfigError, InlineDiagDataError, InlineDiagUsageError
from inlinediag.cli.io import load_diagnostics, read_text
from inlinediag.cli.options import resolve_color_mode
from inlinediag.config.loaders import discover_config_file, load_render_options
from inlinediag.config.logging import get_logger
from inlinediag.config.options import CurrentLinePolicy, RenderOptions, SourcePolicy
from inlinediag.core.errors import InlineDiagError
from inlinediag.diagnostic.severity import SeverityRange
from inlinediag.editor.memory import InMemoryEditor
from inlinediag.pipeline.controller import RenderController
from inlinediag.rendering.preview import annotations_payload, render_preview

if TYPE_CHECKING:
    from inlinediag.cli.console import ConsoleLike
    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic
    from inlinediag.diagnostic.severity import SeverityFilter
    from inlinediag.editor.memory import PlacedAnnotation

logger: InlineDiagLogger = get_logger(__name__)

SEVERITY_CHOICES: tuple[str, ...] = ("error", "warn", "info", "hint")


def resolve_options(
    file: Path,
    *,
    config_file: Path | None,
    no_config: bool,
    overrides: dict[str, Any],
) -> RenderOptions:
    """Resolve the effective render options for ``file``.

    Args:
        file (Path): The file being rendered; config discovery starts at its directory.
        config_file (Path | None): Explicit config file (skips discovery).
        no_config (bool): Ignore config files entirely.
        overrides (dict[str, Any]): Command-line values; ``None`` entries are ignored.

    Returns:
        RenderOptions: The merged options.

    Raises:
        InlineDiagConfigError: If an option value is invalid.
    """
    try:
        if no_config:
            base: RenderOptions = RenderOptions()
        else:
            path: Path | None = config_file or discover_config_file(file)
            base = load_render_options(path)
        return base.merged_with(**overrides)
    except InlineDiagError as e:
        raise InlineDiagConfigError(str(e)) from e


def _severity_override(
    severity: str | None,
    min_severity: str | None,
    max_severity: str | None,
) -> SeverityFilter | None:
    if severity and (min_severity or max_severity):
        raise InlineDiagUsageError(
            "--severity cannot be combined with --min-severity/--max-severity."
        )
    if severity:
        return severity
    if min_severity or max_severity:
        return SeverityRange(min=min_severity, max=max_severity)
    return None


@click.command(
    name="render",
    help="Preview the inline diagnostics for FILE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--diagnostics",
    "-d",
    "diagnostics_file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="JSON file holding an array of diagnostic objects (0-based lines).",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of discovering inlinediag.toml / pyproject.toml.",
)
@click.option("--no-config", is_flag=True, default=False, help="Ignore config files.")
@click.option("--group", "group_id", type=int, default=1, show_default=True, help="Owner group.")
@click.option(
    "--cursor-line",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="0-based cursor line used by --current-line.",
)
@click.option(
    "--current-line",
    type=click.Choice([p.value for p in CurrentLinePolicy]),
    default=None,
    help="Hide the cursor line's diagnostics, or show only those.",
)
@click.option(
    "--severity",
    type=click.Choice(SEVERITY_CHOICES, case_sensitive=False),
    default=None,
    help="Show only diagnostics of exactly this severity.",
)
@click.option(
    "--min-severity",
    type=click.Choice(SEVERITY_CHOICES, case_sensitive=False),
    default=None,
    help="Least severe severity to show.",
)
@click.option(
    "--max-severity",
    type=click.Choice(SEVERITY_CHOICES, case_sensitive=False),
    default=None,
    help="Most severe severity to show.",
)
@click.option("--spacing", type=click.IntRange(min=0), default=None, help="Leading blanks.")
@click.option("--prefix", default=None, help="Marker emitted for each diagnostic.")
@click.option("--suffix", default=None, help="Text appended to the message.")
@click.option(
    "--source",
    type=click.Choice([p.value for p in SourcePolicy]),
    default=None,
    help="Prefix messages with their source.",
)
@click.option("--code/--no-code", default=None, help="Prepend diagnostic codes to messages.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def render_command(
    *,
    file: Path,
    diagnostics_file: Path,
    config_file: Path | None,
    no_config: bool,
    group_id: int,
    cursor_line: int,
    current_line: str | None,
    severity: str | None,
    min_severity: str | None,
    max_severity: str | None,
    spacing: int | None,
    prefix: str | None,
    suffix: str | None,
    source: str | None,
    code: bool | None,
    output_format: str,
) -> None:
    """Preview the inline diagnostics for FILE."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    text: str = read_text(file)
    diagnostics: list[Diagnostic] = load_diagnostics(diagnostics_file)

    options: RenderOptions = resolve_options(
        file,
        config_file=config_file,
        no_config=no_config,
        overrides={
            "prefix": prefix,
            "suffix": suffix,
            "spacing": spacing,
            "source": source,
            "code": code,
            "current_line": current_line,
            "severity": _severity_override(severity, min_severity, max_severity),
        },
    )

    editor = InMemoryEditor(cursor_line=cursor_line)
    lines: list[str] = text.splitlines()
    buffer_id: int = editor.add_buffer(lines)
    editor.publish(buffer_id, diagnostics)
    controller = RenderController(buffers=editor, cursor=editor, registry=editor, sink=editor)

    try:
        if options.current_line is CurrentLinePolicy.OFF:
            placed: int = controller.show(group_id, buffer_id, list(diagnostics), options)
        else:
            placed = controller.filter_current_line(group_id, buffer_id, diagnostics, options)
    except InlineDiagError as e:
        raise InlineDiagDataError(str(e)) from e

    # JSON output is never colored, whatever the group-level color mode.
    enable_color: bool = resolve_color_mode(
        cli_mode=ctx.obj.get("color_mode"), output_format=output_format
    )
    if enable_color != ctx.obj.get("color_enabled", False):
        console = ClickConsole(enable_color=enable_color)
        ctx.obj["console"] = console
        ctx.obj["color_enabled"] = enable_color

    annotations: list[PlacedAnnotation] = editor.annotations(buffer_id)
    if output_format == "json":
        console.print(
            json.dumps(
                {
                    "file": str(file),
                    "placed": placed,
                    "annotations": annotations_payload(annotations),
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    for line in render_preview(lines, annotations, color=enable_color):
        console.print(line)

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(
            console.styled(
                f"{placed} annotation(s) from {len(diagnostics)} diagnostic(s)", dim=True
            )
        )
