"""Exceptions raised by the transcode tool."""


class TranscodeError(Exception):
    """Base class for every error that ends a conversion."""


class IdenticalFormatsError(TranscodeError):
    """Raised when input and output resolve to the same format."""

    def __init__(self):
        super().__init__("Input format is the same as output format.")


class UnknownInputFormatError(TranscodeError):
    """Raised when the input format cannot be determined."""

    def __init__(self):
        super().__init__("Input format is unknown")


class UnknownOutputFormatError(TranscodeError):
    """Raised when the output format cannot be determined."""

    def __init__(self):
        super().__init__("Output format is unknown")


class ReadError(TranscodeError):
    """Raised when the input file cannot be read."""


class ParseError(TranscodeError):
    """Raised when the input text is not valid for its format."""

    def __init__(self, format, message: str):
        self.format = format
        super().__init__(f"Failed to parse {format.value}: {message}")


class IncompatibleValueError(ParseError):
    """Raised when a parsed value has no representation in the output format."""


class WriteError(TranscodeError):
    """Raised when the output file cannot be written."""

    def __init__(self):
        super().__init__("Failed to write file")
