# topmark:header:start
#
#   project      : InlineDiag
#   file         : memory.py
#   file_relpath : src/inlinediag/editor/memory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory editor implementing every collaborator Protocol.

`InMemoryEditor` stands in for a real editor host: it stores buffers as lists of
lines, tracks a single cursor, hands out owner scopes and records placed
annotations keyed by ``(buffer_id, scope)``. The CLI preview and the test-suite
render against it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from inlinediag.config.logging import get_logger
from inlinediag.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic
    from inlinediag.pipeline.composer import Segment

logger: InlineDiagLogger = get_logger(__name__)


@dataclass
class InMemoryBuffer:
    """A buffer: its lines, whether it is loaded, and the diagnostics published for it."""

    lines: list[str]
    loaded: bool = True
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])


@dataclass(frozen=True, slots=True)
class PlacedAnnotation:
    """One annotation as recorded by `InMemoryEditor.place_annotation`."""

    buffer_id: int
    scope: int
    line: int
    start_column: int
    segments: tuple[Segment, ...]
    blend_mode: str

    @property
    def text(self) -> str:
        """Return the concatenated text of all segments."""
        return "".join(s.text for s in self.segments)


class InMemoryEditor:
    """Editor double implementing `BufferQuery`, `CursorQuery`, `NamespaceRegistry` and
    `AnnotationSink`.

    Args:
        cursor_line (int): Initial 0-based cursor row.
        first_scope (int): First handle handed out for owner scopes. Kept well apart from
            typical group ids so raw-scope and owner-scope clears are easy to tell apart.
    """

    def __init__(self, *, cursor_line: int = 0, first_scope: int = 1000) -> None:
        self.cursor_line: int = cursor_line
        self._buffers: dict[int, InMemoryBuffer] = {}
        self._next_buffer_id: int = 1
        self._owner_scopes: dict[int, int] = {}
        self._next_scope: int = first_scope
        self._placements: dict[tuple[int, int], list[PlacedAnnotation]] = {}

    # --- buffer management ---

    def add_buffer(self, lines: Iterable[str] | str) -> int:
        """Create a loaded buffer and return its id.

        Args:
            lines (Iterable[str] | str): Buffer lines, or a text to split into lines.

        Returns:
            int: The new buffer id.
        """
        content: list[str] = lines.splitlines() if isinstance(lines, str) else list(lines)
        buffer_id: int = self._next_buffer_id
        self._next_buffer_id += 1
        self._buffers[buffer_id] = InMemoryBuffer(lines=content)
        logger.debug("Added buffer %d with %d line(s)", buffer_id, len(content))
        return buffer_id

    def buffer(self, buffer_id: int) -> InMemoryBuffer:
        """Return the buffer for ``buffer_id``.

        Raises:
            InvalidArgumentError: If no such buffer exists.
        """
        try:
            return self._buffers[buffer_id]
        except KeyError:
            raise InvalidArgumentError(f"Unknown buffer: {buffer_id}") from None

    def unload(self, buffer_id: int) -> None:
        """Mark a buffer as unloaded; it keeps its lines and annotations."""
        self.buffer(buffer_id).loaded = False

    def set_lines(self, buffer_id: int, lines: Iterable[str]) -> None:
        """Replace the lines of a buffer (annotations are left in place)."""
        self.buffer(buffer_id).lines = list(lines)

    def set_cursor(self, line: int) -> None:
        """Move the cursor of the active view to the 0-based row ``line``."""
        self.cursor_line = line

    def publish(self, buffer_id: int, diagnostics: Iterable[Diagnostic]) -> None:
        """Record the diagnostics producers currently report for a buffer."""
        self.buffer(buffer_id).diagnostics = list(diagnostics)

    # --- BufferQuery ---

    def is_loaded(self, buffer_id: int) -> bool:
        """Return True if the buffer exists and is loaded."""
        buf: InMemoryBuffer | None = self._buffers.get(buffer_id)
        return buf is not None and buf.loaded

    def line_count(self, buffer_id: int) -> int:
        """Return the number of lines in the buffer."""
        return len(self.buffer(buffer_id).lines)

    def distinct_source_count(self, buffer_id: int) -> int:
        """Return the number of distinct non-empty sources among published diagnostics."""
        return len({d.source for d in self.buffer(buffer_id).diagnostics if d.source})

    # --- CursorQuery ---

    def current_cursor_line(self) -> int:
        """Return the 0-based cursor row."""
        return self.cursor_line

    # --- NamespaceRegistry ---

    def resolve_owner_sub_namespace(self, group_id: int) -> int:
        """Return the scope owned by ``group_id``, allocating it on first use."""
        scope: int | None = self._owner_scopes.get(group_id)
        if scope is None:
            scope = self._next_scope
            self._next_scope += 1
            self._owner_scopes[group_id] = scope
            logger.trace("Allocated scope %d for group %d", scope, group_id)
        return scope

    # --- AnnotationSink ---

    def clear_annotations(self, buffer_id: int, scope: int, start: int = 0, end: int = -1) -> None:
        """Remove the annotations of ``scope`` on rows ``[start, end)``; ``end=-1`` means all."""
        key: tuple[int, int] = (buffer_id, scope)
        placed: list[PlacedAnnotation] = self._placements.get(key, [])
        kept: list[PlacedAnnotation] = [
            a for a in placed if not (a.line >= start and (end < 0 or a.line < end))
        ]
        logger.trace(
            "Cleared %d annotation(s) from buffer %d scope %d",
            len(placed) - len(kept),
            buffer_id,
            scope,
        )
        if kept:
            self._placements[key] = kept
        else:
            self._placements.pop(key, None)

    def place_annotation(
        self,
        buffer_id: int,
        scope: int,
        line: int,
        start_column: int,
        segments: Sequence[Segment],
        blend_mode: str,
    ) -> None:
        """Record an annotation.

        Raises:
            IndexError: If ``line`` is outside the buffer.
        """
        if not 0 <= line < self.line_count(buffer_id):
            raise IndexError(f"Line value outside range: {line}")
        self._placements.setdefault((buffer_id, scope), []).append(
            PlacedAnnotation(
                buffer_id=buffer_id,
                scope=scope,
                line=line,
                start_column=start_column,
                segments=tuple(segments),
                blend_mode=blend_mode,
            )
        )

    # --- inspection ---

    def annotations(self, buffer_id: int, scope: int | None = None) -> list[PlacedAnnotation]:
        """Return the annotations of a buffer, optionally restricted to one scope.

        Args:
            buffer_id (int): Buffer to inspect.
            scope (int | None): Scope handle, or ``None`` for every scope.

        Returns:
            list[PlacedAnnotation]: Annotations ordered by line, then scope.
        """
        found: list[PlacedAnnotation] = [
            a
            for (buf, sc), placed in self._placements.items()
            if buf == buffer_id and (scope is None or sc == scope)
            for a in placed
        ]
        return sorted(found, key=lambda a: (a.line, a.scope))
