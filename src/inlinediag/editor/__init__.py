# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/editor/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editor collaborators: Protocols and an in-memory implementation."""

from __future__ import annotations

from inlinediag.editor.contracts import (
    AnnotationSink,
    BufferQuery,
    CursorQuery,
    NamespaceRegistry,
)
from inlinediag.editor.memory import InMemoryBuffer, InMemoryEditor, PlacedAnnotation

__all__ = [
    "AnnotationSink",
    "BufferQuery",
    "CursorQuery",
    "InMemoryBuffer",
    "InMemoryEditor",
    "NamespaceRegistry",
    "PlacedAnnotation",
]
