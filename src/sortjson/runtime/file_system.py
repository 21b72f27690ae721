from __future__ import annotations

from dataclasses import dataclass
import glob as _glob
from pathlib import Path
from typing import Iterator, Protocol


class FileSystem(Protocol):
    """File access used by config loading, discovery and processing.

    Relative paths are POSIX-style strings relative to the run root.
    """

    def read_text(self, path: str) -> str: ...

    def write_text(self, path: str, content: str) -> None: ...

    def exists(self, path: str) -> bool: ...

    def glob(self, pattern: str) -> Iterator[str]: ...


@dataclass(frozen=True)
class LocalFileSystem:
    root: Path

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def read_text(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: str, content: str) -> None:
        # Encode first so a failure leaves the existing file untouched.
        data = content.encode("utf-8")
        self._resolve(path).write_bytes(data)

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def glob(self, pattern: str) -> Iterator[str]:
        # Absolute patterns come back absolute; relative ones relative to root.
        for match in _glob.iglob(
            pattern,
            root_dir=self.root,
            recursive=True,
            include_hidden=True,
        ):
            if self._resolve(match).is_file():
                yield Path(match).as_posix()
