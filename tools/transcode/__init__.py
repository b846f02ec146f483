"""Transcode - Convert files between JSON, YAML, and TOML formats."""

from .converter import Transcoder
from .exceptions import TranscodeError
from .formats import FileFormat, InputRef, OutputRef, derive_output_path, resolve

__all__ = [
    "FileFormat",
    "InputRef",
    "OutputRef",
    "TranscodeError",
    "Transcoder",
    "derive_output_path",
    "resolve",
]
