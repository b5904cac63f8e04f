# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InlineDiag virtual text pipeline.

Stages, leaf to root: `filters` → `formatter` → `grouping` → `composer`,
orchestrated by `controller.RenderController`.
"""

from __future__ import annotations

from inlinediag.pipeline.composer import Segment, build_segments, segments_text, severity_style
from inlinediag.pipeline.controller import RenderController
from inlinediag.pipeline.filters import by_current_line, by_severity
from inlinediag.pipeline.formatter import apply_custom_format, prefix_source
from inlinediag.pipeline.grouping import group_by_line

__all__ = [
    "RenderController",
    "Segment",
    "apply_custom_format",
    "build_segments",
    "by_current_line",
    "by_severity",
    "group_by_line",
    "prefix_source",
    "segments_text",
    "severity_style",
]
