"""API module for mdlinks.

Functions named ``cmd_*`` are the single source of truth for CLI commands;
the plain functions next to them are the library surface used by editor
integrations.
"""

__all__ = []
