"""Output provider for generated sources: create-and-write only, one stream per artifact."""
from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from .errors import FilerError
from .naming import source_relative_path


class SourceFile:
    """Handle on one generated source file, returned by Filer.create_source_file()."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path

    @contextmanager
    def open_writer(self) -> Iterator[TextIO]:
        """Open the file for writing; the stream is closed on every exit path.

        A failed write removes the partial file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self.path.open("w", encoding="utf-8", newline="\n") as stream:
                yield stream
        except BaseException:
            self.path.unlink(missing_ok=True)
            raise

    def __repr__(self) -> str:
        return f"SourceFile(name={self.name!r}, path={str(self.path)!r})"


class Filer(ABC):
    """Base contract for output providers."""

    @abstractmethod
    def create_source_file(self, qualified_name: str) -> SourceFile:
        """Reserve a new source file for a fully-qualified type name."""


class DirectoryFiler(Filer):
    """Writes sources below output_dir using the package path of each type."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self._created: dict[str, SourceFile] = {}

    @property
    def created(self) -> list[str]:
        return list(self._created)

    def create_source_file(self, qualified_name: str) -> SourceFile:
        name = qualified_name.strip()
        if not name:
            raise FilerError("Cannot create a source file without a type name.")
        if name in self._created:
            raise FilerError(f"Attempt to recreate a file for type '{name}'")
        source_file = SourceFile(name, self.output_dir / source_relative_path(name))
        self._created[name] = source_file
        return source_file
