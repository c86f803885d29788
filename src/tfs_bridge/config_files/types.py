"""Config file domain types."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, field_validator


class Mapping(BaseModel):
    """A TFS path mapped onto a path inside the working copy."""

    model_config = ConfigDict(validate_assignment=True)

    tfs_path: str = ""
    local_path: str = ""

    @field_validator("tfs_path", mode="before")
    @classmethod
    def _none_as_empty(cls, value: str | None) -> str:
        return value or ""

    @field_validator("local_path", mode="before")
    @classmethod
    def _strip_leading_separators(cls, value: str | None) -> str:
        return (value or "").lstrip("/")

    def local_path_with_root(self, root: str) -> str:
        """Join the local path onto a working-copy root."""
        if not self.local_path:
            return root
        return os.path.join(root, self.local_path)

    def tfs_path_with_root(self, root: str) -> str:
        """Join the TFS path onto a server root such as ``$/Project/Main``."""
        trimmed_root = root.rstrip("/")
        if not self.tfs_path.strip():
            return trimmed_root
        return f"{trimmed_root}/{self.tfs_path.lstrip('/')}"


class LoadSummary(BaseModel):
    metadata_dir: str
    mappings_loaded: bool
    mappings: list[Mapping]
    excluded_renames_loaded: bool
    excluded_renames: list[int]
