# topmark:header:start
#
#   project      : InlineDiag
#   file         : filters.py
#   file_relpath : src/inlinediag/pipeline/filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic filters: by severity and relative to the cursor line.

Both filters are pure: they never mutate their input and preserve the relative
order of the diagnostics they keep.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inlinediag.config.logging import get_logger
from inlinediag.config.options import CurrentLinePolicy
from inlinediag.diagnostic.severity import resolve_range

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic
    from inlinediag.diagnostic.severity import SeverityFilter

logger: InlineDiagLogger = get_logger(__name__)


def by_severity(
    severity: SeverityFilter | None,
    diagnostics: Sequence[Diagnostic],
) -> Sequence[Diagnostic]:
    """Keep the diagnostics accepted by a severity filter.

    Args:
        severity (SeverityFilter | None): Scalar (exact match) or range filter; ``None``
            disables filtering.
        diagnostics (Sequence[Diagnostic]): Diagnostics to filter.

    Returns:
        Sequence[Diagnostic]: ``diagnostics`` itself when ``severity`` is ``None``,
        otherwise a new list.

    Raises:
        InvalidSeverityError: If the filter names an unknown severity.
    """
    if severity is None:
        return diagnostics
    accept: Callable[[Diagnostic], bool] = resolve_range(severity)
    return [d for d in diagnostics if accept(d)]


def by_current_line(
    diagnostics: Sequence[Diagnostic],
    cursor_line: int,
    policy: CurrentLinePolicy | str | None,
) -> list[Diagnostic]:
    """Keep or drop the diagnostics covering the cursor line.

    A diagnostic covers the cursor line when the line lies within
    ``[line, end_line]``, or equals ``line`` when there is no ``end_line``.

    Args:
        diagnostics (Sequence[Diagnostic]): Diagnostics to filter.
        cursor_line (int): 0-based cursor row.
        policy (CurrentLinePolicy | str | None): ``hide`` drops covering diagnostics,
            ``only`` keeps just those; anything else keeps everything.

    Returns:
        list[Diagnostic]: The retained diagnostics.
    """
    resolved: CurrentLinePolicy = CurrentLinePolicy.parse(policy)
    if resolved is CurrentLinePolicy.HIDE:
        return [d for d in diagnostics if not d.covers(cursor_line)]
    if resolved is CurrentLinePolicy.ONLY:
        return [d for d in diagnostics if d.covers(cursor_line)]
    return list(diagnostics)
