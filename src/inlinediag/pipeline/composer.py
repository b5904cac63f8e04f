# topmark:header:start
#
#   project      : InlineDiag
#   file         : composer.py
#   file_relpath : src/inlinediag/pipeline/composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compose the virtual text segments shown for one line.

A line carrying diagnostics ``d1 .. dn`` (already sorted) is rendered as::

    <spacing> <prefix(d1)> ... <prefix(dn)> <message(dn)><suffix(dn)>

Only the *last* diagnostic of the line contributes its message; every diagnostic
contributes a marker styled by its own severity, so the markers summarize what
else is on the line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from inlinediag.config.logging import get_logger
from inlinediag.config.options import RenderOptions
from inlinediag.core.errors import InvalidSeverityError
from inlinediag.diagnostic.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic

logger: InlineDiagLogger = get_logger(__name__)

SEVERITY_STYLES: Final[dict[int, str]] = {
    Severity.ERROR: "DiagnosticVirtualTextError",
    Severity.WARN: "DiagnosticVirtualTextWarn",
    Severity.INFO: "DiagnosticVirtualTextInfo",
    Severity.HINT: "DiagnosticVirtualTextHint",
}


@dataclass(frozen=True, slots=True)
class Segment:
    """One styled chunk of virtual text; ``style`` is ``None`` for plain spacing."""

    text: str
    style: str | None = None


def severity_style(severity: int) -> str:
    """Return the style class for a severity.

    Raises:
        InvalidSeverityError: If ``severity`` is not one of the four known ordinals.
    """
    try:
        return SEVERITY_STYLES[severity]
    except KeyError:
        raise InvalidSeverityError(severity) from None


def format_message(diagnostic: Diagnostic, *, show_code: bool) -> str | None:
    """Return the display text of a diagnostic's message, on a single line.

    Carriage returns are dropped and newlines collapse to two spaces. With
    ``show_code`` the diagnostic code, when present, is prepended as ``"{code}: "``.
    """
    message: str | None = diagnostic.message
    if message is None:
        return None
    if show_code and diagnostic.code:
        message = f"{diagnostic.code}: {message}"
    return message.replace("\r", "").replace("\n", "  ")


def build_segments(
    line_diagnostics: Sequence[Diagnostic],
    options: RenderOptions | None = None,
) -> list[Segment] | None:
    """Build the segments for the diagnostics anchored at one line.

    Args:
        line_diagnostics (Sequence[Diagnostic]): The line's diagnostics, in display order.
        options (RenderOptions | None): Render options; defaults when ``None``.

    Returns:
        list[Segment] | None: Spacer, one marker per diagnostic and the message segment,
        or ``None`` when there is nothing to show (no diagnostics, or an empty message).

    Raises:
        InvalidSeverityError: If a diagnostic has an unknown severity.
    """
    if not line_diagnostics:
        return None

    opts: RenderOptions = options or RenderOptions()
    last: Diagnostic = line_diagnostics[-1]

    message: str | None = format_message(last, show_code=opts.code)
    if not message:
        logger.trace("Line %d: empty message, nothing to show", last.line)
        return None

    segments: list[Segment] = [Segment(" " * opts.spacing)]
    segments.extend(
        Segment(opts.prefix.resolve(d), severity_style(d.severity)) for d in line_diagnostics
    )
    segments.append(Segment(message + opts.suffix.resolve(last), severity_style(last.severity)))
    return segments


def segments_text(segments: Iterable[Segment]) -> str:
    """Return the concatenated text of ``segments``."""
    return "".join(s.text for s in segments)
