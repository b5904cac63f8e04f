# topmark:header:start
#
#   project      : InlineDiag
#   file         : preview.py
#   file_relpath : src/inlinediag/rendering/preview.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal preview of placed annotations.

Annotations are appended to the end of the line they are attached to, the way an
editor draws end-of-line virtual text. Segment styles map back to the severity
colors of `Severity.color`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inlinediag.diagnostic.severity import Severity
from inlinediag.pipeline.composer import SEVERITY_STYLES

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from inlinediag.editor.memory import PlacedAnnotation
    from inlinediag.pipeline.composer import Segment

_STYLE_COLORS: dict[str, Callable[[str], str]] = {
    style: Severity(severity).color for severity, style in SEVERITY_STYLES.items()
}


def render_segment(segment: Segment, *, color: bool) -> str:
    """Return the segment text, colored by its style when ``color`` is set."""
    if not color or segment.style is None:
        return segment.text
    paint: Callable[[str], str] | None = _STYLE_COLORS.get(segment.style)
    return paint(segment.text) if paint else segment.text


def render_preview(
    lines: Sequence[str],
    annotations: Iterable[PlacedAnnotation],
    *,
    color: bool = True,
) -> list[str]:
    """Return the buffer lines with their annotations appended.

    Args:
        lines (Sequence[str]): Buffer lines (without line terminators).
        annotations (Iterable[PlacedAnnotation]): Annotations placed in the buffer.
        color (bool): Whether to emit ANSI colors.

    Returns:
        list[str]: One output line per buffer line.
    """
    suffixes: dict[int, str] = {}
    for annotation in annotations:
        text: str = "".join(render_segment(s, color=color) for s in annotation.segments)
        suffixes[annotation.line] = suffixes.get(annotation.line, "") + text
    return [line + suffixes.get(i, "") for i, line in enumerate(lines)]


def annotations_payload(annotations: Iterable[PlacedAnnotation]) -> list[dict[str, Any]]:
    """Return a JSON-friendly description of annotations."""
    return [
        {
            "line": a.line,
            "column": a.start_column,
            "text": a.text,
            "segments": [{"text": s.text, "style": s.style} for s in a.segments],
        }
        for a in annotations
    ]
