"""Linux opener implementation - shells out to configured commands and xdg-open."""

from pathlib import Path

from .._AbstractImpl import RevealProvider, _AbstractImpl
from .._run_command import _run_command
from ..EditorBuffer import EditorBuffer
from ..OpenerConfig import OpenerConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Linux-specific opener using desktop commands."""

    def __init__(self, opener_config: OpenerConfig):
        if not isinstance(opener_config.data, _Data):
            raise ValueError("Linux opener config data is required")
        self.config = opener_config
        self._data: _Data = opener_config.data

    def reveal_providers(self) -> list[RevealProvider]:
        providers: list[RevealProvider] = []
        if self._data.file_browser:
            providers.append(("file_browser", self._reveal_in_file_browser))
        providers.append(("os", self._reveal_in_os))
        return providers

    def _reveal_in_file_browser(self, path: Path) -> None:
        _run_command([*self._data.file_browser, str(path)])

    def _reveal_in_os(self, path: Path) -> None:
        _run_command(["xdg-open", str(path)])

    def show(self, buffer: EditorBuffer) -> None:
        _run_command([*self._data.editor, str(buffer.path)], capture=False)
