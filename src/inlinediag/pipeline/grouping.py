# topmark:header:start
#
#   project      : InlineDiag
#   file         : grouping.py
#   file_relpath : src/inlinediag/pipeline/grouping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group diagnostics by the line they annotate."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inlinediag.diagnostic.model import Diagnostic


def group_by_line(diagnostics: Iterable[Diagnostic] | None) -> dict[int, list[Diagnostic]]:
    """Partition diagnostics by ``line``, keeping arrival order within each line.

    Args:
        diagnostics (Iterable[Diagnostic] | None): Diagnostics, usually pre-sorted.

    Returns:
        dict[int, list[Diagnostic]]: Line → diagnostics; empty for ``None``.
    """
    groups: dict[int, list[Diagnostic]] = {}
    if diagnostics is None:
        return groups
    for diagnostic in diagnostics:
        groups.setdefault(diagnostic.line, []).append(diagnostic)
    return groups
