# topmark:header:start
#
#   project      : InlineDiag
#   file         : constants.py
#   file_relpath : src/inlinediag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InlineDiag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

INLINEDIAG_VERSION: str = get_version("inlinediag")

# Config discovery
CONFIG_FILE_NAME: Final[str] = "inlinediag.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.inlinediag"

# Environment variable consulted by `setup_logging()`
LOG_LEVEL_ENV_VAR: Final[str] = "INLINEDIAG_LOG_LEVEL"

# Virtual text defaults
DEFAULT_PREFIX: Final[str] = "●"
DEFAULT_SUFFIX: Final[str] = ""
DEFAULT_SPACING: Final[int] = 4

# Blend mode passed to the annotation sink with every placement
BLEND_MODE_COMBINE: Final[str] = "combine"
