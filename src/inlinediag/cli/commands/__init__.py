# topmark:header:start
#
#   project      : InlineDiag
#   file         : __init__.py
#   file_relpath : src/inlinediag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the InlineDiag CLI."""
