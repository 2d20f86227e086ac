"""API module for DMS commands.

Functions named ``cmd_*`` in the domain subpackages return a ``StageResult`` and
are the single source of truth for the CLI.
"""

__all__ = []
