"""Auxiliary config files for the bridge: path mappings and excluded renames."""

from __future__ import annotations

from .cached_file import CachedConfigFile
from .constants import EXCLUDED_RENAMES_CACHE_FILE, MAPPING_FIELD_SEPARATOR, MAPPINGS_CACHE_FILE
from .errors import (
    ConfigParseError,
    ConfigurationNotFoundError,
    ExclusionParseError,
    MappingParseError,
    TfsBridgeConfigError,
)
from .excluded_renames import ExcludedRenamesFile
from .loader import load_config_files
from .mappings_file import MappingsFile
from .types import LoadSummary, Mapping

__all__ = [
    # cached_file
    "CachedConfigFile",
    # constants
    "EXCLUDED_RENAMES_CACHE_FILE",
    "MAPPING_FIELD_SEPARATOR",
    "MAPPINGS_CACHE_FILE",
    # errors
    "ConfigParseError",
    "ConfigurationNotFoundError",
    "ExclusionParseError",
    "MappingParseError",
    "TfsBridgeConfigError",
    # excluded_renames
    "ExcludedRenamesFile",
    # loader
    "load_config_files",
    # mappings_file
    "MappingsFile",
    # types
    "LoadSummary",
    "Mapping",
]
