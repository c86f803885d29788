"""Path mappings between TFS server paths and the working copy."""

from __future__ import annotations

from typing import ClassVar

from .cached_file import CachedConfigFile
from .constants import MAPPING_FIELD_SEPARATOR, MAPPINGS_CACHE_FILE
from .errors import ConfigParseError, MappingParseError
from .types import Mapping


class MappingsFile(CachedConfigFile[Mapping]):
    """Ordered ``<tfs-path>[;<local-path>]`` mappings, one per line.

    Order is preserved so callers can resolve paths first-match-wins.
    """

    CACHE_FILE_NAME: ClassVar[str] = MAPPINGS_CACHE_FILE
    DISPLAY_NAME: ClassVar[str] = "mappings"
    PARSE_ERROR: ClassVar[type[ConfigParseError]] = MappingParseError

    @property
    def mappings(self) -> list[Mapping]:
        return self.items

    def _parse_lines(self, lines: list[str]) -> list[Mapping]:
        mappings: list[Mapping] = []
        for line in lines:
            fields = [field.strip() for field in line.split(MAPPING_FIELD_SEPARATOR) if field]
            # Fields beyond the second are ignored.
            local_path = fields[1] if len(fields) >= 2 else ""
            mappings.append(Mapping(tfs_path=fields[0], local_path=local_path))
        return mappings

    def find_mapping(self, tfs_path: str) -> Mapping | None:
        """Return the first mapping covering ``tfs_path``, comparing case-insensitively."""
        target = _normalize_tfs_path(tfs_path)
        for mapping in self._items:
            prefix = _normalize_tfs_path(mapping.tfs_path)
            if not prefix or target == prefix or target.startswith(prefix + "/"):
                return mapping
        return None


def _normalize_tfs_path(path: str) -> str:
    return path.strip().strip("/").lower()
