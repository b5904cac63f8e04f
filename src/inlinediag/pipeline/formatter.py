# topmark:header:start
#
#   project      : InlineDiag
#   file         : formatter.py
#   file_relpath : src/inlinediag/pipeline/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message rewriting applied before diagnostics are grouped.

Diagnostics are frozen; rewritten messages are carried by copies made with
`dataclasses.replace`, so the producer's list and objects stay untouched.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from inlinediag.config.logging import get_logger
from inlinediag.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inlinediag.config.logging import InlineDiagLogger
    from inlinediag.config.options import MessageFormatter
    from inlinediag.diagnostic.model import Diagnostic

logger: InlineDiagLogger = get_logger(__name__)


def apply_custom_format(
    format_fn: MessageFormatter,
    diagnostics: Sequence[Diagnostic],
) -> list[Diagnostic]:
    """Replace each message with ``format_fn(diagnostic)``.

    The formatter receives the original diagnostic. Returning ``None`` hides the
    message (the line then shows nothing if it was the line's last diagnostic).

    Args:
        format_fn (MessageFormatter): Message transform.
        diagnostics (Sequence[Diagnostic]): Diagnostics to reformat.

    Returns:
        list[Diagnostic]: New diagnostics with the formatted messages.

    Raises:
        InvalidArgumentError: If ``format_fn`` is not callable or ``diagnostics`` is not
            a list or tuple.
    """
    if not callable(format_fn):
        raise InvalidArgumentError(f"format must be callable, got {format_fn!r}")
    if not isinstance(diagnostics, (list, tuple)):
        raise InvalidArgumentError(
            f"diagnostics must be a list of diagnostics, got {type(diagnostics).__name__}"
        )
    return [replace(d, message=format_fn(d)) for d in diagnostics]


def prefix_source(diagnostics: Sequence[Diagnostic]) -> list[Diagnostic]:
    """Prefix each message with its source as ``"{source}: {message}"``.

    Diagnostics without a source or without a message are passed through unchanged
    (same object).

    Args:
        diagnostics (Sequence[Diagnostic]): Diagnostics to prefix.

    Returns:
        list[Diagnostic]: The prefixed diagnostics.
    """
    return [
        replace(d, message=f"{d.source}: {d.message}")
        if d.source and d.message is not None
        else d
        for d in diagnostics
    ]
