"""Opener public API - loads the configured platform backend."""

import importlib

from ._AbstractImpl import RevealProvider, _AbstractImpl
from .EditorBuffer import EditorBuffer
from .OpenerConfig import _BACKEND_REGISTRY, OpenerConfig


class Opener:
    """Host actions used when a target is opened.

    Use as a context manager; the backend module named by ``opener.type`` is
    imported on enter.
    """

    def __init__(self, opener_config: OpenerConfig):
        self.opener_config = opener_config
        self._impl: _AbstractImpl | None = None

    def __enter__(self) -> "Opener":
        backend_type = self.opener_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(
                f"Unsupported opener type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
            )

        module = importlib.import_module(f"mdlinks.api.target._{backend_type}._Impl")
        self._impl = module._Impl(self.opener_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Opener not initialized. Use as context manager first.")
        return self._impl

    def reveal_providers(self) -> list[RevealProvider]:
        """Named reveal actions to try in order."""
        return self._require_impl().reveal_providers()

    def show(self, buffer: EditorBuffer) -> None:
        """Show a loaded buffer in the configured editor."""
        self._require_impl().show(buffer)
