# topmark:header:start
#
#   project      : InlineDiag
#   file         : contracts.py
#   file_relpath : src/inlinediag/editor/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for the editor collaborators (controller-facing).

The render pipeline never touches an editor directly. `RenderController` is
constructed with four collaborators, each described by a small Protocol here:

- `BufferQuery`: buffer liveness, size and diagnostic sources.
- `CursorQuery`: the cursor row of the active view.
- `NamespaceRegistry`: maps a logical owner group to the scope it writes.
- `AnnotationSink`: clears and places annotations.

Handles (buffers, groups, scopes) are plain ``int`` values. All rows are 0-based.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inlinediag.pipeline.composer import Segment


class BufferQuery(Protocol):
    """Read-only queries about editor buffers."""

    def is_loaded(self, buffer_id: int) -> bool:
        """Return True if the buffer is loaded and addressable."""
        ...

    def line_count(self, buffer_id: int) -> int:
        """Return the current number of lines in the buffer."""
        ...

    def distinct_source_count(self, buffer_id: int) -> int:
        """Return how many distinct diagnostic sources currently report on the buffer."""
        ...


class CursorQuery(Protocol):
    """Cursor position of the active view."""

    def current_cursor_line(self) -> int:
        """Return the 0-based cursor row of the active view."""
        ...


class NamespaceRegistry(Protocol):
    """Resolves owner groups to the concrete scope their annotations live in."""

    def resolve_owner_sub_namespace(self, group_id: int) -> int:
        """Return the scope handle owned by ``group_id``."""
        ...


class AnnotationSink(Protocol):
    """The editor primitive that paints annotations."""

    def clear_annotations(self, buffer_id: int, scope: int, start: int = 0, end: int = -1) -> None:
        """Remove the annotations of ``scope`` on rows ``[start, end)`` (``-1``: to the end)."""
        ...

    def place_annotation(
        self,
        buffer_id: int,
        scope: int,
        line: int,
        start_column: int,
        segments: Sequence[Segment],
        blend_mode: str,
    ) -> None:
        """Attach ``segments`` as end-of-line virtual text to ``line`` under ``scope``."""
        ...
