"""Display abstraction shared by output front-ends."""

from .Display import Display

__all__ = ["Display"]
