"""CLI interface for transcode."""

import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import click

from shared.cli import error, handle_errors, success
from shared.logger import setup_logger

from .converter import Transcoder
from .exceptions import TranscodeError
from .formats import FileFormat, InputRef, OutputRef, derive_output_path

try:
    __version__ = version("transcode")
except PackageNotFoundError:
    __version__ = "0.0.0"


@click.command()
@click.version_option(__version__, prog_name="transcode")
@click.argument("input_file", metavar="INPUT", type=click.Path(dir_okay=False))
@click.argument(
    "output_file",
    metavar="[OUTPUT]",
    required=False,
    type=click.Path(dir_okay=False),
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["json", "yaml", "yml", "toml"], case_sensitive=False),
    help="Output format (overrides the OUTPUT extension)",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    help="Indentation for JSON and YAML output (JSON is compact if not set)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    input_file: str,
    output_file: Optional[str],
    output_format: Optional[str],
    indent: Optional[int],
    verbose: bool,
):
    """
    Transcode - Convert a file between JSON, YAML, and TOML.

    OUTPUT may be omitted when --format is given; the output path is then
    INPUT with its extension replaced.

    Examples:

        \b
        # JSON to TOML
        transcode config.json config.toml

        \b
        # YAML to TOML, written next to the input as data.toml
        transcode data.yml --format toml

        \b
        # Pretty-printed JSON
        transcode settings.toml settings.json --indent 2
    """
    # Setup logging
    log_level = "DEBUG" if verbose else "WARNING"
    setup_logger("tools.transcode", level=log_level)

    override = FileFormat.from_name(output_format) if output_format else None

    if output_file is None:
        if override is None:
            raise click.UsageError("Missing argument 'OUTPUT' (required unless --format is given).")
        output_file = str(derive_output_path(input_file, override))

    source = InputRef.from_path(input_file)
    target = OutputRef.from_path(output_file, override)

    try:
        Transcoder(indent=indent).convert_file(source, target)
    except TranscodeError as e:
        error(str(e))
        sys.exit(1)

    success(f"Wrote {input_file} to {output_file}")
    sys.exit(0)


if __name__ == "__main__":
    main()
