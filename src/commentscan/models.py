"""Data models for commentscan."""

import pathlib
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguageSpec:
    """Lexical conventions of one source language.

    Attributes:
        name: Registry key (e.g. ``c``)
        inline_comment: Marker opening a comment that runs to end of line
        block_comment_start: Marker opening a block comment
        block_comment_end: Marker closing a block comment
        escape_char: Character escaping the next character inside strings
        line_continuation: Trailing character that carries an inline comment
            onto the next line
        string_delimiters: Markers opening and closing string literals,
            tried in order
        extensions: Lowercase file extensions, leading dot included
    """

    name: str
    inline_comment: str | None = None
    block_comment_start: str | None = None
    block_comment_end: str | None = None
    escape_char: str | None = None
    line_continuation: str | None = None
    string_delimiters: tuple[str, ...] = ()
    extensions: frozenset[str] = frozenset()

    def __post_init__(self):
        if (self.block_comment_start is None) != (self.block_comment_end is None):
            raise ValueError(f"{self.name}: block comment markers must be given together")
        if any(not marker for marker in self.string_delimiters):
            raise ValueError(f"{self.name}: empty string delimiter")

    def matches_path(self, file_path: pathlib.Path) -> bool:
        """Whether the file extension (case-insensitive) belongs to this language."""
        return file_path.suffix.lower() in self.extensions


@dataclass
class ScanState:
    """State carried from one line to the next while scanning a file."""

    in_block_comment: bool = False
    in_inline_comment: bool = False
    in_string: bool = False
    string_delimiter: str | None = None

    def open_string(self, delimiter: str) -> None:
        self.in_string = True
        self.string_delimiter = delimiter

    def close_string(self) -> None:
        self.in_string = False
        self.string_delimiter = None


@dataclass
class FileStats:
    """Line counters for a single file.

    Attributes:
        total_lines: Every line read, whatever its content
        inline_comments: Lines carrying an inline comment
        block_comments: Lines touched by a block comment
    """

    total_lines: int = 0
    inline_comments: int = 0
    block_comments: int = 0

    def __add__(self, other: "FileStats") -> "FileStats":
        return FileStats(
            total_lines=self.total_lines + other.total_lines,
            inline_comments=self.inline_comments + other.inline_comments,
            block_comments=self.block_comments + other.block_comments,
        )


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning a directory.

    Attributes:
        root: Directory that was walked
        language: Name of the active language
        files: ``(path, stats)`` pairs sorted by path
    """

    root: pathlib.Path
    language: str
    files: tuple[tuple[pathlib.Path, FileStats], ...] = field(default_factory=tuple)

    @property
    def totals(self) -> FileStats:
        return sum((stats for _, stats in self.files), FileStats())

    def as_dict(self) -> dict[str, FileStats]:
        return {str(path): stats for path, stats in self.files}
