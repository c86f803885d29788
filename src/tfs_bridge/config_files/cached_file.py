"""Load-or-cache protocol shared by the bridge's auxiliary config files.

A config file is supplied explicitly on one run, copied into the metadata
directory under a fixed name, and silently reloaded from there on later runs
that do not pass it again.
"""

from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from tfs_bridge.infrastructure.config import FILE_ENCODING
from tfs_bridge.infrastructure.logger import logger

from .errors import ConfigParseError, ConfigurationNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")


class CachedConfigFile(ABC, Generic[T]):
    """Base class for a line-oriented config file cached in the metadata directory."""

    CACHE_FILE_NAME: ClassVar[str]
    DISPLAY_NAME: ClassVar[str]
    PARSE_ERROR: ClassVar[type[ConfigParseError]] = ConfigParseError

    def __init__(self, encoding: str = FILE_ENCODING) -> None:
        self._items: list[T] = []
        self._encoding = encoding
        self.is_parse_successful = False

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    @abstractmethod
    def _parse_lines(self, lines: list[str]) -> list[T]:
        """Convert the non-blank lines of a file into items, in file order."""

    def _read_lines(self, file_path: Path) -> list[str]:
        # read_text folds \r\n and \r into \n; other separators stay inside the line.
        text = file_path.read_text(encoding=self._encoding).removeprefix("\ufeff")
        return text.split("\n")

    def parse(self, file_path: str | Path) -> bool:
        """Replace the current items with the contents of ``file_path``."""
        path = Path(file_path)
        self._items.clear()
        self.is_parse_successful = False

        try:
            lines = [line for line in self._read_lines(path) if line.strip()]
            parsed = self._parse_lines(lines)
        except (OSError, ValueError, IndexError) as err:
            raise self.PARSE_ERROR(
                f"Unable to parse {self.DISPLAY_NAME} file {path}",
                {"path": str(path), "cause": str(err)},
            ) from err

        self._items.extend(parsed)
        self.is_parse_successful = True
        return True

    def load_or_cache(self, source_path: str | Path | None, metadata_dir: str | Path, allow_caching: bool) -> bool:
        """Load an explicitly supplied file, or fall back to the cached copy.

        Returns False when no file was supplied and nothing has been cached.
        Raises ConfigurationNotFoundError when an explicit file is missing.
        """
        if _is_blank(source_path):
            return self.load_from_cache(metadata_dir)

        path = Path(str(source_path))
        if not path.is_file():
            raise ConfigurationNotFoundError(
                f"{self.DISPLAY_NAME.capitalize()} file cannot be found: '{path}'",
                {"path": str(path)},
            )

        if allow_caching:
            self.save_to_metadata_dir(path, metadata_dir)

        logger.info(f"Reading {self.DISPLAY_NAME} file", path=str(path))
        return self.parse(path)

    def cached_file_path(self, metadata_dir: str | Path) -> Path:
        return Path(metadata_dir) / self.CACHE_FILE_NAME

    def save_to_metadata_dir(self, source_path: str | Path | None, metadata_dir: str | Path) -> bool:
        """Copy ``source_path`` over the cached file. Failures are logged, not raised."""
        if _is_blank(source_path):
            return False

        cached_path = self.cached_file_path(metadata_dir)
        try:
            shutil.copyfile(str(source_path), cached_path)
        except OSError as err:
            logger.warning(
                f"Failed to copy {self.DISPLAY_NAME} file",
                source=str(source_path),
                destination=str(cached_path),
                error=str(err),
            )
            return False
        return True

    def load_from_cache(self, metadata_dir: str | Path) -> bool:
        """Parse the cached file unless items are already loaded."""
        cached_path = self.cached_file_path(metadata_dir)
        if not cached_path.is_file():
            logger.info(f"No {self.DISPLAY_NAME} file used")
            return False

        if self._items:
            return True

        logger.info(f"Reading cached {self.DISPLAY_NAME} file", path=str(cached_path))
        return self.parse(cached_path)


def _is_blank(path: str | Path | None) -> bool:
    return path is None or not str(path).strip()
