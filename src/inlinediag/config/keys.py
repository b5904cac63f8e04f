# topmark:header:start
#
#   project      : InlineDiag
#   file         : keys.py
#   file_relpath : src/inlinediag/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for InlineDiag configuration.

This module defines the authoritative string constants used when reading
InlineDiag configuration from TOML sources (``inlinediag.toml`` and
``[tool.inlinediag]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by InlineDiag configuration."""

    # [virtual_text]
    SECTION_VIRTUAL_TEXT: Final[str] = "virtual_text"

    KEY_PREFIX: Final[str] = "prefix"
    KEY_SUFFIX: Final[str] = "suffix"
    KEY_SPACING: Final[str] = "spacing"
    KEY_SOURCE: Final[str] = "source"
    KEY_SEVERITY: Final[str] = "severity"
    KEY_CODE: Final[str] = "code"
    KEY_CURRENT_LINE: Final[str] = "current_line"

    # Sub-keys of a `severity = { min = ..., max = ... }` table
    KEY_SEVERITY_MIN: Final[str] = "min"
    KEY_SEVERITY_MAX: Final[str] = "max"

    ALL_VIRTUAL_TEXT_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_PREFIX,
            KEY_SUFFIX,
            KEY_SPACING,
            KEY_SOURCE,
            KEY_SEVERITY,
            KEY_CODE,
            KEY_CURRENT_LINE,
        }
    )
