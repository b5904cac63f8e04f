# topmark:header:start
#
#   project      : InlineDiag
#   file         : severity.py
#   file_relpath : src/inlinediag/diagnostic/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity levels and severity-range resolution.

Severities are ordinals where a *lower* number means a *more severe* diagnostic:
``ERROR (1) < WARN (2) < INFO (3) < HINT (4)``.

A severity filter is either a single severity (exact match) or a range with
optional ``min``/``max`` bounds. The bounds keep the editor convention where
``min`` names the *least* severe severity allowed (numerically largest) and
``max`` the *most* severe one (numerically smallest)::

    severity <= resolved_min and severity >= resolved_max

Existing configurations depend on this reading; do not swap the comparison.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Union, cast

from yachalk import chalk

from inlinediag.config.logging import get_logger
from inlinediag.core.errors import InvalidSeverityError

if TYPE_CHECKING:
    from collections.abc import Callable

    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic

logger: InlineDiagLogger = get_logger(__name__)


class Severity(IntEnum):
    """Diagnostic severity ordinals (lower is more severe)."""

    ERROR = 1
    WARN = 2
    INFO = 3
    HINT = 4

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity.

        Intended for human-readable terminal previews only.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this severity.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.ERROR: chalk.red_bright,
                Severity.WARN: chalk.yellow,
                Severity.INFO: chalk.blue,
                Severity.HINT: chalk.cyan,
            }[self],
        )


# Names accepted by `resolve_severity()` (matched case-insensitively).
_SEVERITY_NAMES: dict[str, Severity] = {
    "ERROR": Severity.ERROR,
    "WARN": Severity.WARN,
    "WARNING": Severity.WARN,
    "INFO": Severity.INFO,
    "INFORMATION": Severity.INFO,
    "HINT": Severity.HINT,
}

SeverityValue = Union[int, str]


@dataclass(frozen=True, slots=True)
class SeverityRange:
    """Severity range with optional bounds.

    Attributes:
        min (SeverityValue | None): Least severe severity shown; defaults to ``HINT``.
        max (SeverityValue | None): Most severe severity shown; defaults to ``ERROR``.
    """

    min: SeverityValue | None = None
    max: SeverityValue | None = None


SeverityFilter = Union[SeverityValue, SeverityRange, Mapping[str, SeverityValue]]


def resolve_severity(value: SeverityValue | None) -> int | None:
    """Normalize a severity name or ordinal into an ordinal.

    Args:
        value (SeverityValue | None): A severity name (case-insensitive), an ordinal,
            or ``None``.

    Returns:
        int | None: The ordinal; ordinals are returned unchanged and ``None`` stays ``None``.

    Raises:
        InvalidSeverityError: If ``value`` is an unknown name or not a name/ordinal at all.
    """
    if value is None:
        return None
    if isinstance(value, str):
        resolved: Severity | None = _SEVERITY_NAMES.get(value.strip().upper())
        if resolved is None:
            raise InvalidSeverityError(value)
        return resolved
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSeverityError(value)
    return value


def resolve_range(severity: SeverityFilter) -> Callable[[Diagnostic], bool]:
    """Resolve a severity filter into a predicate over diagnostics.

    Args:
        severity (SeverityFilter): A single severity (exact match), a `SeverityRange`,
            or a mapping with optional ``"min"``/``"max"`` keys.

    Returns:
        Callable[[Diagnostic], bool]: Predicate accepting the diagnostics that pass.

    Raises:
        InvalidSeverityError: If a severity name or bound cannot be resolved.
    """
    if isinstance(severity, Mapping):
        table = cast("Mapping[str, SeverityValue]", severity)
        severity = SeverityRange(min=table.get("min"), max=table.get("max"))

    if not isinstance(severity, SeverityRange):
        exact: int | None = resolve_severity(severity)
        logger.trace("Severity filter: exact match on %s", exact)
        return lambda d: d.severity == exact

    resolved_min: int | None = resolve_severity(severity.min)
    resolved_max: int | None = resolve_severity(severity.max)
    min_severity: int = Severity.HINT if resolved_min is None else resolved_min
    max_severity: int = Severity.ERROR if resolved_max is None else resolved_max
    logger.trace("Severity filter: min=%s max=%s", min_severity, max_severity)
    return lambda d: d.severity <= min_severity and d.severity >= max_severity
