# topmark:header:start
#
#   project      : InlineDiag
#   file         : options.py
#   file_relpath : src/inlinediag/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render options for the virtual text pipeline.

This module defines:
    - `SourcePolicy` / `CurrentLinePolicy`: the enumerated option values.
    - `LiteralText` / `ComputedText`: the two forms a ``prefix``/``suffix`` can take.
    - `RenderOptions`: the immutable option bag consumed by every render call.

`RenderOptions` accepts plain strings and callables for ``prefix``/``suffix`` and
plain strings for the policies; ``__post_init__`` normalizes them so the pipeline
only ever sees the canonical types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Union

from inlinediag.config.keys import Toml
from inlinediag.config.logging import get_logger
from inlinediag.constants import DEFAULT_PREFIX, DEFAULT_SPACING, DEFAULT_SUFFIX
from inlinediag.core.errors import InvalidArgumentError
from inlinediag.diagnostic.severity import SeverityFilter, SeverityRange, resolve_range

if TYPE_CHECKING:
    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic

logger: InlineDiagLogger = get_logger(__name__)

MessageFormatter = Callable[["Diagnostic"], Union[str, None]]


class SourcePolicy(str, Enum):
    """When to prefix messages with the diagnostic source."""

    ALWAYS = "always"
    IF_MANY = "if_many"
    OFF = "off"

    @classmethod
    def parse(cls, value: object) -> SourcePolicy:
        """Parse a config/API value into a `SourcePolicy`.

        ``True`` means ``always``; ``False`` and ``None`` mean ``off``.

        Raises:
            InvalidArgumentError: If ``value`` is not a recognized policy.
        """
        if isinstance(value, SourcePolicy):
            return value
        if value is None or value is False:
            return cls.OFF
        if value is True:
            return cls.ALWAYS
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(
            f"Invalid source policy {value!r}; expected one of: "
            + ", ".join(p.value for p in cls)
        )


class CurrentLinePolicy(str, Enum):
    """Which diagnostics to keep relative to the cursor line."""

    HIDE = "hide"
    ONLY = "only"
    OFF = "off"

    @classmethod
    def parse(cls, value: object) -> CurrentLinePolicy:
        """Parse a config/API value into a `CurrentLinePolicy`.

        Unrecognized values are a pass-through (``off``) rather than an error, so that
        configurations written for other policy names keep showing diagnostics. A
        warning is logged since this is a likely misconfiguration.
        """
        if isinstance(value, CurrentLinePolicy):
            return value
        if value is None or value is False:
            return cls.OFF
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning("Unrecognized current_line policy %r; diagnostics are not filtered", value)
        return cls.OFF


@dataclass(frozen=True, slots=True)
class LiteralText:
    """Fixed text, identical for every diagnostic."""

    text: str

    def resolve(self, diagnostic: Diagnostic) -> str:
        """Return the literal text (``diagnostic`` is ignored)."""
        return self.text


@dataclass(frozen=True, slots=True)
class ComputedText:
    """Text computed from each diagnostic; a ``None`` result resolves to ``""``."""

    fn: Callable[[Diagnostic], str | None]

    def resolve(self, diagnostic: Diagnostic) -> str:
        """Return ``fn(diagnostic)``, or ``""`` when it returns ``None``."""
        return self.fn(diagnostic) or ""


TextSource = Union[LiteralText, ComputedText]


def as_text_source(value: object, name: str) -> TextSource:
    """Normalize a string, callable or `TextSource` into a `TextSource`.

    Args:
        value (object): Raw option value.
        name (str): Option name, used in error messages.

    Returns:
        TextSource: The normalized value.

    Raises:
        InvalidArgumentError: If ``value`` is neither text nor callable.
    """
    if isinstance(value, (LiteralText, ComputedText)):
        return value
    if isinstance(value, str):
        return LiteralText(value)
    if callable(value):
        return ComputedText(value)
    raise InvalidArgumentError(f"Option '{name}' must be a string or a callable, got {value!r}")


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable option bag for one render call.

    Attributes:
        prefix (TextSource): Marker emitted once per diagnostic on a line.
        suffix (TextSource): Text appended to the line's message.
        spacing (int): Number of blank columns between buffer text and annotation.
        source (SourcePolicy): Whether to prefix messages with their source.
        format (MessageFormatter | None): Optional message transform applied before grouping.
        severity (SeverityFilter | None): Optional severity filter (scalar or range).
        code (bool): Whether to prepend the diagnostic code to the message.
        current_line (CurrentLinePolicy): Cursor-relative filter used by
            ``filter_current_line``.
    """

    prefix: TextSource = field(default_factory=lambda: LiteralText(DEFAULT_PREFIX))
    suffix: TextSource = field(default_factory=lambda: LiteralText(DEFAULT_SUFFIX))
    spacing: int = DEFAULT_SPACING
    source: SourcePolicy = SourcePolicy.OFF
    format: MessageFormatter | None = None
    severity: SeverityFilter | None = None
    code: bool = False
    current_line: CurrentLinePolicy = CurrentLinePolicy.OFF

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "prefix", as_text_source(self.prefix, Toml.KEY_PREFIX))
        object.__setattr__(self, "suffix", as_text_source(self.suffix, Toml.KEY_SUFFIX))
        object.__setattr__(self, "source", SourcePolicy.parse(self.source))
        object.__setattr__(self, "current_line", CurrentLinePolicy.parse(self.current_line))

        if isinstance(self.spacing, bool) or not isinstance(self.spacing, int) or self.spacing < 0:
            raise InvalidArgumentError(
                f"Option 'spacing' must be a non-negative int, got {self.spacing!r}"
            )
        if not isinstance(self.code, bool):
            raise InvalidArgumentError(f"Option 'code' must be a bool, got {self.code!r}")
        if self.format is not None and not callable(self.format):
            raise InvalidArgumentError(f"Option 'format' must be callable, got {self.format!r}")
        if self.severity is not None:
            # Fail fast on unknown severity names.
            resolve_range(self.severity)

    def merged_with(self, **overrides: Any) -> RenderOptions:
        """Return a copy with every non-``None`` override applied.

        Args:
            **overrides (Any): Field values keyed by field name.

        Returns:
            RenderOptions: The updated options.
        """
        changes: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        logger.debug("Overriding render options: %s", sorted(changes))
        return replace(self, **changes)

    @classmethod
    def from_table(cls, table: Mapping[str, Any]) -> RenderOptions:
        """Build options from a ``[virtual_text]`` TOML table.

        Unknown keys are logged and ignored. ``format`` cannot be expressed in TOML.

        Args:
            table (Mapping[str, Any]): Parsed table.

        Returns:
            RenderOptions: The options, with defaults for absent keys.

        Raises:
            InvalidArgumentError: If a value has the wrong shape.
            InvalidSeverityError: If a severity name is unknown.
        """
        unknown: set[str] = set(table) - Toml.ALL_VIRTUAL_TEXT_KEYS
        for key in sorted(unknown):
            logger.warning("Ignoring unknown [%s] key: %s", Toml.SECTION_VIRTUAL_TEXT, key)

        kwargs: dict[str, Any] = {}
        for key in (
            Toml.KEY_PREFIX,
            Toml.KEY_SUFFIX,
            Toml.KEY_SPACING,
            Toml.KEY_SOURCE,
            Toml.KEY_CODE,
            Toml.KEY_CURRENT_LINE,
        ):
            if key in table:
                kwargs[key] = table[key]

        if Toml.KEY_SEVERITY in table:
            kwargs[Toml.KEY_SEVERITY] = _severity_from_toml(table[Toml.KEY_SEVERITY])

        return cls(**kwargs)


def _severity_from_toml(value: Any) -> SeverityFilter:
    if isinstance(value, Mapping):
        return SeverityRange(
            min=value.get(Toml.KEY_SEVERITY_MIN),
            max=value.get(Toml.KEY_SEVERITY_MAX),
        )
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return value
    raise InvalidArgumentError(
        f"Option '{Toml.KEY_SEVERITY}' must be a name, an ordinal or a min/max table, "
        f"got {value!r}"
    )
