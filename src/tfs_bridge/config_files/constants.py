"""Config file constants."""

from __future__ import annotations

MAPPINGS_CACHE_FILE = "git-tfs_mappings"
EXCLUDED_RENAMES_CACHE_FILE = "git-tfs_excluded_renames"
MAPPING_FIELD_SEPARATOR = ";"
