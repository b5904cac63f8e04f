# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for InlineDiag: render options, TOML I/O and logging.

Modules:
    - `inlinediag.config.options`: `RenderOptions` and its policy enums.
    - `inlinediag.config.loaders`: TOML discovery and loading (``tomlkit``).
    - `inlinediag.config.keys`: TOML key constants.
    - `inlinediag.config.logging`: TRACE-aware logger and colored formatter.

This package ``__init__`` intentionally re-exports nothing: `logging` is imported by
every module, including those `options` depends on.
"""

from __future__ import annotations
