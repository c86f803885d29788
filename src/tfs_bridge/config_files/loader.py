"""Load both auxiliary config files for a bridge command."""

from __future__ import annotations

from pathlib import Path

from .excluded_renames import ExcludedRenamesFile
from .mappings_file import MappingsFile
from .types import LoadSummary


def load_config_files(
    metadata_dir: str | Path,
    mappings_path: str | Path | None = None,
    excluded_renames_path: str | Path | None = None,
    allow_caching: bool = True,
    *,
    mappings_file: MappingsFile | None = None,
    excluded_renames_file: ExcludedRenamesFile | None = None,
) -> LoadSummary:
    """Run the load-or-cache protocol for the mappings and excluded renames files.

    Pass existing store instances to reuse what they already hold.
    """
    mappings_file = mappings_file if mappings_file is not None else MappingsFile()
    excluded_renames_file = excluded_renames_file if excluded_renames_file is not None else ExcludedRenamesFile()

    mappings_loaded = mappings_file.load_or_cache(mappings_path, metadata_dir, allow_caching)
    excluded_loaded = excluded_renames_file.load_or_cache(excluded_renames_path, metadata_dir, allow_caching)

    return LoadSummary(
        metadata_dir=str(metadata_dir),
        mappings_loaded=mappings_loaded,
        mappings=mappings_file.mappings,
        excluded_renames_loaded=excluded_loaded,
        excluded_renames=excluded_renames_file.excluded,
    )
