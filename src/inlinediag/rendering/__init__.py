# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human- and machine-readable rendering of placed annotations."""

from __future__ import annotations

from inlinediag.rendering.preview import annotations_payload, render_preview, render_segment

__all__ = [
    "annotations_payload",
    "render_preview",
    "render_segment",
]
