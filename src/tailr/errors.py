"""Exceptions raised by tailr."""


class TailError(Exception):
    """Base class for errors that abort a tail run."""


class IllegalCountError(TailError, ValueError):
    """A line or byte count argument could not be parsed."""

    def __init__(self, field_name: str, text: str):
        self.field_name = field_name
        self.text = text
        super().__init__(f"illegal {field_name} count -- {text}")


class FileReadError(TailError):
    """An already opened file failed while being scanned or streamed."""

    def __init__(self, filename: str, error: OSError):
        self.filename = filename
        self.error = error
        super().__init__(f"{filename}: {error.strerror or error}")
