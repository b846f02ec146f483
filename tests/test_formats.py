"""Tests for format resolution."""

import dataclasses
from pathlib import Path

import pytest

from tools.transcode.formats import (
    FileFormat,
    InputRef,
    OutputRef,
    derive_output_path,
    resolve,
)


class TestFileFormat:
    """Test FileFormat helpers."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("config.json", FileFormat.JSON),
            ("config.yaml", FileFormat.YAML),
            ("config.yml", FileFormat.YAML),
            ("pyproject.toml", FileFormat.TOML),
            ("dir/nested/settings.toml", FileFormat.TOML),
            ("archive.tar.json", FileFormat.JSON),
            ("notes.txt", FileFormat.UNKNOWN),
            ("Makefile", FileFormat.UNKNOWN),
        ],
    )
    def test_from_path(self, path, expected):
        """Test extension mapping."""
        assert FileFormat.from_path(path) == expected

    def test_from_path_is_case_sensitive(self):
        """Test that upper-case extensions are not recognized."""
        assert FileFormat.from_path("CONFIG.JSON") == FileFormat.UNKNOWN
        assert FileFormat.from_path("data.Yml") == FileFormat.UNKNOWN

    def test_dotfile_has_no_extension(self):
        """Test that a bare dotfile is not mistaken for an extension."""
        assert FileFormat.from_path(".json") == FileFormat.UNKNOWN

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("json", FileFormat.JSON),
            ("yaml", FileFormat.YAML),
            ("yml", FileFormat.YAML),
            ("TOML", FileFormat.TOML),
            ("xml", FileFormat.UNKNOWN),
        ],
    )
    def test_from_name(self, name, expected):
        """Test parsing format names."""
        assert FileFormat.from_name(name) == expected

    def test_extensions(self):
        """Test canonical extensions."""
        assert FileFormat.JSON.extension == "json"
        assert FileFormat.YAML.extension == "yml"
        assert FileFormat.TOML.extension == "toml"
        assert FileFormat.UNKNOWN.extension == "txt"


class TestResolve:
    """Test resolve()."""

    def test_uses_extension(self):
        """Test resolving without an override."""
        assert resolve(Path("a.toml")) == FileFormat.TOML

    def test_override_wins(self):
        """Test that an explicit format ignores the extension."""
        assert resolve(Path("a.toml"), FileFormat.JSON) == FileFormat.JSON
        assert resolve(Path("a.txt"), FileFormat.YAML) == FileFormat.YAML


class TestDeriveOutputPath:
    """Test output path derivation."""

    def test_replaces_extension(self):
        """Test swapping the input extension."""
        assert derive_output_path(Path("data.yml"), FileFormat.TOML) == Path("data.toml")
        assert derive_output_path(Path("cfg/app.toml"), FileFormat.YAML) == Path("cfg/app.yml")

    def test_appends_when_missing(self):
        """Test a path without an extension."""
        assert derive_output_path(Path("data"), FileFormat.JSON) == Path("data.json")

    def test_unknown_uses_txt(self):
        """Test the UNKNOWN extension."""
        assert derive_output_path(Path("data.json"), FileFormat.UNKNOWN) == Path("data.txt")


class TestFormatRefs:
    """Test InputRef and OutputRef."""

    def test_input_ref(self):
        """Test input format comes from the extension."""
        ref = InputRef.from_path("data.yaml")
        assert ref.path == Path("data.yaml")
        assert ref.format == FileFormat.YAML
        assert ref.role == "input"

    def test_output_ref_from_extension(self):
        """Test output format without override."""
        ref = OutputRef.from_path("out.json")
        assert ref.format == FileFormat.JSON
        assert ref.role == "output"

    def test_output_ref_override(self):
        """Test output format override."""
        ref = OutputRef.from_path("out.json", FileFormat.TOML)
        assert ref.format == FileFormat.TOML

    def test_refs_are_immutable(self):
        """Test that the format cannot change after construction."""
        ref = InputRef.from_path("data.json")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ref.format = FileFormat.TOML

    def test_str_is_path(self):
        """Test string form."""
        assert str(OutputRef.from_path("out.toml")) == "out.toml"
