"""Exception types raised by commentscan."""

import pathlib


class CommentScanError(Exception):
    """Base class for all commentscan errors."""


class ConfigurationError(CommentScanError):
    """Raised when the requested language key is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"error: unknown language '{name}' (known: {', '.join(known)})")


class PathNotFoundError(CommentScanError):
    """Raised when the root directory does not exist."""

    def __init__(self, path: pathlib.Path):
        self.path = path
        super().__init__(f"error: directory does not exist: {path}")


class NoMatchingFilesError(CommentScanError):
    """Raised when the walk finds no file for the active language."""

    def __init__(self, path: pathlib.Path, language: str):
        self.path = path
        self.language = language
        super().__init__(f"error: no {language} source files found in directory: {path}")


class ReadError(CommentScanError):
    """Raised when a source file cannot be opened or read.

    Attributes:
        path: File that failed
        reason: Underlying OS error
    """

    def __init__(self, path: pathlib.Path, reason: OSError):
        # args mirror __init__ so instances unpickle in the parent process
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"error processing file {self.path}: {self.reason}"
