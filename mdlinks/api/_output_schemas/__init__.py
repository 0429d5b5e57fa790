"""Output schemas for API commands - enforces consistent output structure.

Each command has a Pydantic model that defines its output structure.
All fields are always present (even if empty) so CLI consumers can rely on them.
"""

from . import config, ref, target

__all__ = ["config", "ref", "target"]
