"""File formats and the input/output references built from paths."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, Optional, Union

from shared.logger import get_logger

logger = get_logger(__name__)


class FileFormat(str, Enum):
    """Supported serialization formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
    UNKNOWN = "unknown"

    @property
    def extension(self) -> str:
        """Canonical file extension (without the dot)."""
        return _EXTENSIONS[self]

    @classmethod
    def from_name(cls, name: str) -> "FileFormat":
        """
        Parse a format name such as ``json`` or ``yml``.

        Unrecognized names give UNKNOWN rather than raising.
        """
        return _NAMES.get(name.strip().lower(), cls.UNKNOWN)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileFormat":
        """
        Infer a format from a path's extension.

        Matching is exact and case-sensitive: ``config.JSON`` is UNKNOWN.
        """
        return _SUFFIXES.get(Path(path).suffix, cls.UNKNOWN)


_EXTENSIONS = {
    FileFormat.JSON: "json",
    FileFormat.YAML: "yml",
    FileFormat.TOML: "toml",
    FileFormat.UNKNOWN: "txt",
}

_NAMES = {
    "json": FileFormat.JSON,
    "yaml": FileFormat.YAML,
    "yml": FileFormat.YAML,
    "toml": FileFormat.TOML,
}

_SUFFIXES = {
    ".json": FileFormat.JSON,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
    ".toml": FileFormat.TOML,
}


def resolve(path: Union[str, Path], explicit_override: Optional[FileFormat] = None) -> FileFormat:
    """
    Resolve the format of a path.

    Args:
        path: File path
        explicit_override: Format to use regardless of the extension

    Returns:
        Resolved format (UNKNOWN when the extension is not recognized)
    """
    if explicit_override is not None:
        return explicit_override
    return FileFormat.from_path(path)


def derive_output_path(input_path: Union[str, Path], fmt: FileFormat) -> Path:
    """Swap the input path's extension for the canonical one of ``fmt``."""
    return Path(input_path).with_suffix(f".{fmt.extension}")


@dataclass(frozen=True)
class FormatRef:
    """A path bound to the format it is read or written as."""

    path: Path
    format: FileFormat

    role: ClassVar[str] = ""

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class InputRef(FormatRef):
    """The file being converted. Its format always comes from the extension."""

    role: ClassVar[str] = "input"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "InputRef":
        ref = cls(Path(path), resolve(path))
        logger.debug(f"Resolved input {ref.path} as {ref.format.value}")
        return ref


@dataclass(frozen=True)
class OutputRef(FormatRef):
    """The file being written."""

    role: ClassVar[str] = "output"

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        override: Optional[FileFormat] = None,
    ) -> "OutputRef":
        ref = cls(Path(path), resolve(path, override))
        logger.debug(f"Resolved output {ref.path} as {ref.format.value}")
        return ref
