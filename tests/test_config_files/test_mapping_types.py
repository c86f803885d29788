"""Tests for the Mapping model and its path helpers."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from tfs_bridge.config_files.types import LoadSummary, Mapping


class TestMappingConstruction:
    def test_local_path_leading_separator_is_stripped(self) -> None:
        assert Mapping(tfs_path="foo", local_path="/bar").local_path == "bar"

    def test_local_path_multiple_leading_separators_are_stripped(self) -> None:
        assert Mapping(tfs_path="foo", local_path="///bar/baz").local_path == "bar/baz"

    def test_none_paths_become_empty(self) -> None:
        mapping = Mapping(tfs_path=None, local_path=None)
        assert mapping.tfs_path == ""
        assert mapping.local_path == ""

    def test_defaults_are_empty(self) -> None:
        mapping = Mapping()
        assert mapping.tfs_path == ""
        assert mapping.local_path == ""

    def test_assignment_also_strips_leading_separator(self) -> None:
        mapping = Mapping(tfs_path="foo", local_path="bar")
        mapping.local_path = "/other"
        assert mapping.local_path == "other"

    def test_rejects_non_string_paths(self) -> None:
        with pytest.raises(ValidationError):
            Mapping(tfs_path=["not", "a", "path"])


class TestLocalPathWithRoot:
    def test_combines_root_and_stripped_path(self) -> None:
        mapping = Mapping(tfs_path="foo", local_path="/bar")
        assert mapping.local_path_with_root("root") == os.path.join("root", "bar")

    @pytest.mark.parametrize("raw", ["bar", "/bar", "//bar"])
    def test_result_independent_of_leading_separators(self, raw: str) -> None:
        assert Mapping(tfs_path="foo", local_path=raw).local_path_with_root("root") == os.path.join("root", "bar")

    def test_empty_local_path_is_the_root(self) -> None:
        assert Mapping(tfs_path="foo", local_path="").local_path_with_root("root") == "root"


class TestTfsPathWithRoot:
    def test_empty_tfs_path_yields_root(self) -> None:
        assert Mapping(tfs_path="", local_path="").tfs_path_with_root("root") == "root"

    def test_empty_tfs_path_strips_trailing_separator(self) -> None:
        assert Mapping(tfs_path="", local_path="").tfs_path_with_root("root/") == "root"

    def test_whitespace_tfs_path_yields_root(self) -> None:
        assert Mapping(tfs_path="  ", local_path="").tfs_path_with_root("$/Project/") == "$/Project"

    def test_joins_root_and_tfs_path(self) -> None:
        assert Mapping(tfs_path="foo", local_path="").tfs_path_with_root("root") == "root/foo"

    def test_joins_without_doubling_separators(self) -> None:
        mapping = Mapping(tfs_path="/Main/src", local_path="src")
        assert mapping.tfs_path_with_root("$/Project/") == "$/Project/Main/src"


class TestLoadSummary:
    def test_dumps_mappings_as_plain_data(self) -> None:
        summary = LoadSummary(
            metadata_dir=".git",
            mappings_loaded=True,
            mappings=[Mapping(tfs_path="foo", local_path="bar")],
            excluded_renames_loaded=False,
            excluded_renames=[],
        )
        assert summary.model_dump()["mappings"] == [{"tfs_path": "foo", "local_path": "bar"}]
