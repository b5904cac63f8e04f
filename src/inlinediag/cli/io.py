# topmark:header:start
#
#   project      : InlineDiag
#   file         : io.py
#   file_relpath : src/inlinediag/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for CLI commands.

Reads buffer text and diagnostics JSON from disk, mapping filesystem and decoding
problems to CLI errors with the matching exit codes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from inlinediag.cli.errors import (
    InlineDiagDataError,
    InlineDiagFileNotFoundError,
    InlineDiagIOError,
)
from inlinediag.config.logging import get_logger
from inlinediag.core.errors import InlineDiagError
from inlinediag.diagnostic.model import Diagnostic

if TYPE_CHECKING:
    from pathlib import Path

    from inlinediag.config.logging import InlineDiagLogger

logger: InlineDiagLogger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        InlineDiagFileNotFoundError: If ``path`` does not exist.
        InlineDiagDataError: If the file is not valid UTF-8.
        InlineDiagIOError: On any other I/O error.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InlineDiagFileNotFoundError(f"File not found: {path}") from e
    except UnicodeDecodeError as e:
        raise InlineDiagDataError(f"Cannot decode {path} as UTF-8: {e}") from e
    except OSError as e:
        raise InlineDiagIOError(f"Cannot read {path}: {e}") from e


def load_diagnostics(path: Path) -> list[Diagnostic]:
    """Load diagnostics from a JSON file holding an array of objects.

    Args:
        path (Path): JSON file, e.g. ``[{"line": 3, "message": "unused", "severity": "warn"}]``.

    Returns:
        list[Diagnostic]: The decoded diagnostics, in file order.

    Raises:
        InlineDiagDataError: If the JSON is invalid or an entry is not a valid diagnostic.
    """
    text: str = read_text(path)
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise InlineDiagDataError(f"Invalid diagnostics JSON in {path}: {e}") from e

    if not isinstance(payload, list):
        raise InlineDiagDataError(f"Diagnostics JSON in {path} must be an array of objects")

    diagnostics: list[Diagnostic] = []
    for index, entry in enumerate(payload):
        try:
            diagnostics.append(Diagnostic.from_dict(entry))
        except InlineDiagError as e:
            raise InlineDiagDataError(f"{path}: diagnostic #{index}: {e}") from e
    logger.debug("Loaded %d diagnostic(s) from %s", len(diagnostics), path)
    return diagnostics
