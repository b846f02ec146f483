"""Core transcoding logic."""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

import tomli
import tomli_w
import yaml

from shared.logger import get_logger

from .exceptions import (
    IdenticalFormatsError,
    ParseError,
    ReadError,
    UnknownInputFormatError,
    UnknownOutputFormatError,
    WriteError,
)
from .formats import FileFormat, InputRef, OutputRef
from .values import VALUE_MODELS

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def load_json(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def load_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def load_toml(text: str) -> Any:
    return tomli.loads(text)


def _sort_tables(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _sort_tables(value[k]) for k in sorted(value)}
    if isinstance(value, list):
        return [_sort_tables(v) for v in value]
    return value


def make_json_dumper(indent: Optional[int] = None) -> Callable[[Any], str]:
    """
    Build a JSON emitter.

    Keys are sorted. Without ``indent`` the output is compact and has no
    trailing newline.
    """

    def dump(value: Any) -> str:
        if indent is None:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)
        return json.dumps(value, indent=indent, ensure_ascii=False, sort_keys=True) + "\n"

    return dump


def make_yaml_dumper(indent: Optional[int] = None) -> Callable[[Any], str]:
    """Build a block-style YAML emitter that keeps source key order."""

    def dump(value: Any) -> str:
        return yaml.safe_dump(
            value,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            indent=indent or 2,
        )

    return dump


def dump_toml(value: Dict[str, Any]) -> str:
    return tomli_w.dumps(_sort_tables(value))


LOADERS: Dict[FileFormat, Callable[[str], Any]] = {
    FileFormat.JSON: load_json,
    FileFormat.YAML: load_yaml,
    FileFormat.TOML: load_toml,
}


@dataclass(frozen=True)
class Route:
    """One cell of the conversion table."""

    source: FileFormat
    target: FileFormat
    load: Callable[[str], Any]
    coerce: Callable[[Any, FileFormat], Any]
    dump: Callable[[Any], str]


class Transcoder:
    """
    Convert files between JSON, YAML, and TOML.

    Parsed documents are rebuilt in the output format's value model before they
    are emitted. Values the output format cannot hold are rejected.
    """

    def __init__(self, indent: Optional[int] = None):
        """
        Initialize transcoder.

        Args:
            indent: Indentation for JSON and YAML output (compact JSON if None)
        """
        self.indent = indent
        self.routes = self._build_routes()
        logger.debug(f"Initialized Transcoder with {len(self.routes)} routes")

    def _build_routes(self) -> Dict[Tuple[FileFormat, FileFormat], Route]:
        dumpers = {
            FileFormat.JSON: make_json_dumper(self.indent),
            FileFormat.YAML: make_yaml_dumper(self.indent),
            FileFormat.TOML: dump_toml,
        }

        routes = {}
        for source, load in LOADERS.items():
            for target, dump in dumpers.items():
                if source == target:
                    continue
                routes[(source, target)] = Route(
                    source=source,
                    target=target,
                    load=load,
                    coerce=VALUE_MODELS[target],
                    dump=dump,
                )
        return routes

    def route(self, source: FileFormat, target: FileFormat) -> Route:
        """
        Look up the conversion for a format pair.

        Args:
            source: Input format
            target: Output format

        Returns:
            Route for the pair

        Raises:
            IdenticalFormatsError: If both formats are equal (UNKNOWN included)
            UnknownInputFormatError: If the input format is UNKNOWN
            UnknownOutputFormatError: If the output format is UNKNOWN
        """
        if source == target:
            raise IdenticalFormatsError()
        if source == FileFormat.UNKNOWN:
            raise UnknownInputFormatError()
        if target == FileFormat.UNKNOWN:
            raise UnknownOutputFormatError()
        return self.routes[(source, target)]

    def transcode_text(self, text: str, source: FileFormat, target: FileFormat) -> str:
        """
        Convert a document held in memory.

        Args:
            text: Document in the ``source`` syntax
            source: Input format
            target: Output format

        Returns:
            Document in the ``target`` syntax

        Raises:
            ParseError: If ``text`` is malformed or holds values ``target`` cannot represent
        """
        route = self.route(source, target)

        try:
            value = route.load(text)
        except (ValueError, yaml.YAMLError) as e:
            logger.debug(f"Failed to parse {source.value}: {e}")
            raise ParseError(source, str(e)) from e

        value = route.coerce(value, source)
        return route.dump(value)

    def transcode(self, input: InputRef, output: OutputRef) -> str:
        """
        Read ``input`` and return its contents in the output format.

        Format checks happen before the file is opened.

        Raises:
            TranscodeError: On any format, read, or parse failure
        """
        self.route(input.format, output.format)

        logger.debug(f"Reading {input.format.value} from {input.path}")
        try:
            text = input.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read {input.path}: {e}")
            raise ReadError(f"Failed to read {input.path}: {e}") from e

        return self.transcode_text(text, input.format, output.format)

    def convert_file(self, input: InputRef, output: OutputRef) -> str:
        """
        Convert ``input`` and write the result to ``output``.

        Nothing is written unless the conversion succeeds.

        Returns:
            The text that was written

        Raises:
            TranscodeError: On any format, read, or parse failure
            WriteError: If the output file cannot be written
        """
        content = self.transcode(input, output)

        try:
            output.path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.debug(f"Failed to write {output.path}: {e}")
            raise WriteError() from e

        logger.debug(f"Converted {input.path} to {output.path}")
        return content
