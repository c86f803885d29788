"""Changeset ids excluded from rename detection."""

from __future__ import annotations

import re
from typing import ClassVar

from tfs_bridge.infrastructure.logger import logger

from .cached_file import CachedConfigFile
from .constants import EXCLUDED_RENAMES_CACHE_FILE
from .errors import ConfigParseError, ExclusionParseError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class ExcludedRenamesFile(CachedConfigFile[int]):
    """One changeset id per line.

    Lines that are not 32-bit signed integers are skipped.
    """

    CACHE_FILE_NAME: ClassVar[str] = EXCLUDED_RENAMES_CACHE_FILE
    DISPLAY_NAME: ClassVar[str] = "excluded renames"
    PARSE_ERROR: ClassVar[type[ConfigParseError]] = ExclusionParseError

    @property
    def excluded(self) -> list[int]:
        return self.items

    def _parse_lines(self, lines: list[str]) -> list[int]:
        ids: list[int] = []
        for line in lines:
            trimmed = line.strip()
            if not _INTEGER_PATTERN.fullmatch(trimmed):
                logger.debug("Skipping non-numeric excluded rename", line=trimmed)
                continue
            value = int(trimmed)
            if not INT32_MIN <= value <= INT32_MAX:
                logger.debug("Skipping out-of-range excluded rename", line=trimmed)
                continue
            ids.append(value)
        return ids

    def is_excluded(self, changeset_id: int) -> bool:
        return changeset_id in self._items
