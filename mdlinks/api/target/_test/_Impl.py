"""Test opener implementation - records actions in memory and optionally to a file."""

import json
from pathlib import Path
from typing import Any

from .._AbstractImpl import RevealProvider, _AbstractImpl
from ..EditorBuffer import EditorBuffer
from ..OpenerConfig import OpenerConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Opener backend used by the test suite."""

    def __init__(self, opener_config: OpenerConfig):
        if not isinstance(opener_config.data, _Data):
            raise ValueError("Test opener config data is required")
        self.config = opener_config
        self._data: _Data = opener_config.data
        self.actions: list[dict[str, Any]] = []

    def _record(self, action: str, path: Path, **extra: Any) -> None:
        entry = {"action": action, "path": str(path), **extra}
        self.actions.append(entry)
        if self._data.record_file:
            with Path(self._data.record_file).open("a", encoding="utf-8") as fh:
                fh.write(json.dumps(entry) + "\n")

    def _provider(self, name: str):
        def reveal(path: Path) -> None:
            if name in self._data.fail_providers:
                self._record("reveal_failed", path, provider=name)
                raise RuntimeError(f"{name} reveal unavailable")
            self._record("reveal", path, provider=name)

        return reveal

    def reveal_providers(self) -> list[RevealProvider]:
        return [(name, self._provider(name)) for name in ("file_browser", "os")]

    def show(self, buffer: EditorBuffer) -> None:
        if self._data.fail_show:
            raise RuntimeError("show unavailable")
        self._record("show", buffer.path, text=buffer.text)
