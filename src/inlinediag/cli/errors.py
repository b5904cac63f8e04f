# topmark:header:start
#
#   project      : InlineDiag
#   file         : errors.py
#   file_relpath : src/inlinediag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the InlineDiag CLI.

Mapping:
    - missing input file: `InlineDiagFileNotFoundError` (66)
    - undecodable text, bad diagnostics JSON, render failures: `InlineDiagDataError` (65)
    - invalid config or option values: `InlineDiagConfigError` (78)
    - conflicting flags: `InlineDiagUsageError` (64)

    Library errors (`inlinediag.core.errors`) are converted at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from inlinediag.cli.exit_codes import ExitCode


class InlineDiagCliError(click.ClickException):
    """Base class for all InlineDiag CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class InlineDiagUsageError(InlineDiagCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class InlineDiagConfigError(InlineDiagCliError):
    """Error for configuration errors (invalid option values or severities)."""

    exit_code = ExitCode.CONFIG_ERROR


class InlineDiagFileNotFoundError(InlineDiagCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class InlineDiagIOError(InlineDiagCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class InlineDiagDataError(InlineDiagCliError):
    """Error for undecodable text or malformed diagnostics input."""

    exit_code = ExitCode.ENCODING_ERROR
