"""Abstract base class for opener backends."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from .EditorBuffer import EditorBuffer

RevealProvider = tuple[str, Callable[[Path], None]]


class _AbstractImpl(ABC):
    """Platform-specific actions the opener needs from its host."""

    @abstractmethod
    def reveal_providers(self) -> list[RevealProvider]:
        """Return named reveal actions, most specific first.

        Each action raises if it cannot reveal the path.
        """
        pass

    @abstractmethod
    def show(self, buffer: EditorBuffer) -> None:
        """Bring the buffer into focus in an editor."""
        pass
