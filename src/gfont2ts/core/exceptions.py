"""Exceptions raised while reading font description files."""


class MetadataError(ValueError):
    """Description file cannot produce a font record. Aborts the run."""


class TextProtoError(MetadataError):
    """Description file is not well-formed protobuf text format."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column
