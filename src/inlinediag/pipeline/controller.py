# topmark:header:start
#
#   project      : InlineDiag
#   file         : controller.py
#   file_relpath : src/inlinediag/pipeline/controller.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render controller: runs the virtual text pipeline for one buffer.

Every ``show`` call replaces the output of its owner group in a buffer:

    validate → (buffer loaded?) → clear owner scope → sort → format
    → prefix source → group by line → per line: severity filter → compose → place

Calls are synchronous and self-contained. Because each call clears its own scope
before placing anything, re-rendering the same ``(group, buffer)`` pair any number
of times leaves exactly the output of the last call.

Clearing granularities:
    - ``show`` and ``hide_group`` clear the owner *sub-scope* resolved through the
      `NamespaceRegistry`.
    - ``hide`` clears the *raw* scope handle it is given, without indirection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inlinediag.config.logging import get_logger
from inlinediag.config.options import RenderOptions, SourcePolicy
from inlinediag.constants import BLEND_MODE_COMBINE
from inlinediag.core.errors import InvalidArgumentError
from inlinediag.pipeline.composer import build_segments, severity_style
from inlinediag.pipeline.filters import by_current_line, by_severity
from inlinediag.pipeline.formatter import apply_custom_format, prefix_source
from inlinediag.pipeline.grouping import group_by_line

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.diagnostic.model import Diagnostic
    from inlinediag.editor.contracts import (
        AnnotationSink,
        BufferQuery,
        CursorQuery,
        NamespaceRegistry,
    )
    from inlinediag.pipeline.composer import Segment

logger: InlineDiagLogger = get_logger(__name__)


def _check_handle(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int handle, got {value!r}")


class RenderController:
    """Places diagnostic virtual text through injected editor collaborators.

    Args:
        buffers (BufferQuery): Buffer liveness, size and source queries.
        cursor (CursorQuery): Cursor position of the active view.
        registry (NamespaceRegistry): Owner group → scope resolution.
        sink (AnnotationSink): Clears and places annotations.
    """

    def __init__(
        self,
        *,
        buffers: BufferQuery,
        cursor: CursorQuery,
        registry: NamespaceRegistry,
        sink: AnnotationSink,
    ) -> None:
        self.buffers = buffers
        self.cursor = cursor
        self.registry = registry
        self.sink = sink

    def show(
        self,
        group_id: int,
        buffer_id: int,
        diagnostics: list[Diagnostic] | None,
        options: RenderOptions | None = None,
    ) -> int:
        """Replace the virtual text of ``group_id`` in ``buffer_id``.

        ``diagnostics`` is sorted in place by ``(line, column)``.

        Args:
            group_id (int): Owner group of the annotations.
            buffer_id (int): Target buffer.
            diagnostics (list[Diagnostic] | None): Diagnostics to display; ``None`` or an
                empty list only clears.
            options (RenderOptions | None): Render options; defaults when ``None``.

        Returns:
            int: The number of annotations placed.

        Raises:
            InvalidArgumentError: On a malformed handle, diagnostics or options. Raised
                before anything is cleared.
            InvalidSeverityError: If the severity filter or a diagnostic severity is unknown.
                Also raised before anything is cleared.
        """
        _check_handle(group_id, "group_id")
        _check_handle(buffer_id, "buffer_id")
        if diagnostics is not None and not isinstance(diagnostics, list):
            raise InvalidArgumentError(
                f"diagnostics must be a list of diagnostics, got {type(diagnostics).__name__}"
            )
        if options is not None and not isinstance(options, RenderOptions):
            raise InvalidArgumentError(
                f"options must be RenderOptions, got {type(options).__name__}"
            )
        for diagnostic in diagnostics or ():
            severity_style(diagnostic.severity)

        if not self.buffers.is_loaded(buffer_id):
            logger.debug("Buffer %d is not loaded; skipping render", buffer_id)
            return 0

        scope: int = self.registry.resolve_owner_sub_namespace(group_id)
        self.sink.clear_annotations(buffer_id, scope, 0, -1)

        if not diagnostics:
            return 0

        opts: RenderOptions = options or RenderOptions()

        diagnostics.sort(key=lambda d: (d.line, d.column))

        prepared: Sequence[Diagnostic] = diagnostics
        if opts.format is not None:
            prepared = apply_custom_format(opts.format, prepared)
        if opts.source is SourcePolicy.ALWAYS or (
            opts.source is SourcePolicy.IF_MANY
            and self.buffers.distinct_source_count(buffer_id) > 1
        ):
            prepared = prefix_source(prepared)

        line_count: int = self.buffers.line_count(buffer_id)
        placed: int = 0
        for line, line_diagnostics in group_by_line(prepared).items():
            shown: Sequence[Diagnostic] = by_severity(opts.severity, line_diagnostics)
            segments: list[Segment] | None = build_segments(shown, opts)
            if not segments:
                continue
            if line >= line_count:
                logger.trace(
                    "Line %d is past the end of buffer %d (%d lines); skipped",
                    line,
                    buffer_id,
                    line_count,
                )
                continue
            self.sink.place_annotation(
                buffer_id, scope, line, 0, segments, BLEND_MODE_COMBINE
            )
            placed += 1

        logger.debug(
            "Placed %d annotation(s) for group %d in buffer %d", placed, group_id, buffer_id
        )
        return placed

    def filter_current_line(
        self,
        group_id: int,
        buffer_id: int,
        diagnostics: list[Diagnostic] | None,
        options: RenderOptions | None = None,
    ) -> int:
        """Render only the diagnostics selected by ``options.current_line``.

        With ``hide`` the diagnostics covering the cursor line are dropped, with ``only``
        they are the only ones kept; any other policy renders everything.

        Args:
            group_id (int): Owner group of the annotations.
            buffer_id (int): Target buffer.
            diagnostics (list[Diagnostic] | None): Diagnostics; ``None`` is a no-op.
            options (RenderOptions | None): Render options; defaults when ``None``.

        Returns:
            int: The number of annotations placed.
        """
        if diagnostics is None:
            return 0
        opts: RenderOptions = options or RenderOptions()
        cursor_line: int = self.cursor.current_cursor_line()
        shown: list[Diagnostic] = by_current_line(diagnostics, cursor_line, opts.current_line)
        logger.trace(
            "Cursor on line %d, policy %s: %d of %d diagnostic(s) kept",
            cursor_line,
            opts.current_line.value,
            len(shown),
            len(diagnostics),
        )
        return self.show(group_id, buffer_id, shown, opts)

    def hide(self, namespace: int, buffer_id: int) -> None:
        """Clear every annotation of the raw scope ``namespace`` in ``buffer_id``."""
        self.sink.clear_annotations(buffer_id, namespace, 0, -1)

    def hide_group(self, group_id: int, buffer_id: int) -> None:
        """Clear the annotations ``show`` placed for ``group_id`` in ``buffer_id``."""
        self.hide(self.registry.resolve_owner_sub_namespace(group_id), buffer_id)
