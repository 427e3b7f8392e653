"""Browser-style back/forward history of visited directories."""

from __future__ import annotations

from pathlib import Path

from .filesystem import PathLike


def _has_parent(path: Path) -> bool:
    return bool(path.anchor) or len(path.parts) > 1


class FileHistory:
    """Visited directories; the first entry is the base and is never dropped."""

    def __init__(self, base_directory: PathLike) -> None:
        self._history: list[Path] = [Path(base_directory)]
        self._index = 0

    def cwd(self) -> Path:
        return self._history[self._index]

    def base_path(self) -> Path:
        return self._history[0]

    def cd(self, path: PathLike) -> None:
        """Visit ``path``; a new turn discards the forward history."""
        target = Path(path)
        if self._would_forward(target):
            self.cd_forward()
            return
        if self._would_backward(target):
            self.cd_backward()
            return
        del self._history[self._index + 1:]
        self._history.append(target)
        self._index = len(self._history) - 1

    def cd_parent(self) -> None:
        if not self.can_cd_parent():
            raise ValueError("no parent path to change to")
        self.cd(self.cwd().parent)

    def cd_forward(self) -> None:
        if not self.can_cd_forward():
            raise IndexError("no history to move forward to")
        self._index += 1

    def cd_backward(self) -> None:
        if not self.can_cd_backward():
            raise IndexError("no history to move backward to")
        self._index -= 1

    def can_cd(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def can_cd_parent(self) -> bool:
        return _has_parent(self.cwd())

    def can_cd_forward(self) -> bool:
        return self._index + 1 < len(self._history)

    def can_cd_backward(self) -> bool:
        return self._index > 0

    def _would_forward(self, path: Path) -> bool:
        return self.can_cd_forward() and self._history[self._index + 1] == path

    def _would_backward(self, path: Path) -> bool:
        return self.can_cd_backward() and self._history[self._index - 1] == path