"""Character-level line classifier.

The scanner walks every line with a cursor and keeps a small amount of state
between lines (open block comment, open string, inline comment carried by a
trailing continuation marker). Comment markers inside string literals are
inert, block comments may span any number of lines, and unterminated
constructs at end of file are accepted as they are.
"""

import enum
import io
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from commentscan.models import FileStats, LanguageSpec, ScanState


class LineKind(str, enum.Enum):
    """How a single line was classified."""

    CODE = "code"
    INLINE = "inline"
    BLOCK = "block"
    BOTH = "both"


@dataclass(frozen=True)
class LineOutcome:
    """Counters contributed by one line."""

    inline: bool = False
    block: bool = False

    @property
    def kind(self) -> LineKind:
        if self.inline and self.block:
            return LineKind.BOTH
        if self.block:
            return LineKind.BLOCK
        if self.inline:
            return LineKind.INLINE
        return LineKind.CODE


def _starts(line: str, i: int, marker: str | None) -> bool:
    return bool(marker) and line.startswith(marker, i)


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def scan_line(line: str, state: ScanState, spec: LanguageSpec) -> LineOutcome:
    """Classify one physical line and advance ``state`` in place.

    Args:
        line: Line text without its line terminator
        state: State carried over from the previous line of the same file
        spec: Lexical conventions of the file's language

    Returns:
        Which counters the line contributes to
    """
    continued = bool(line) and _starts(line, len(line) - 1, spec.line_continuation)

    if not line:
        inline = state.in_inline_comment
        state.in_inline_comment = False
        return LineOutcome(inline=inline, block=state.in_block_comment)

    counted_block = False
    counted_inline = False
    i = 0
    n = len(line)
    while i < n:
        if state.in_string:
            if _starts(line, i, state.string_delimiter):
                i += len(state.string_delimiter)
                state.close_string()
            elif _starts(line, i, spec.escape_char):
                i += 2
            else:
                i += 1
            continue

        if state.in_block_comment:
            counted_block = True
            if _starts(line, i, spec.block_comment_end):
                state.in_block_comment = False
                i += len(spec.block_comment_end)
            else:
                i += 1
            continue

        if state.in_inline_comment:
            counted_inline = True
            state.in_inline_comment = continued
            break

        delimiter = next((d for d in spec.string_delimiters if line.startswith(d, i)), None)
        if delimiter is not None:
            state.open_string(delimiter)
            i += len(delimiter)
        elif _starts(line, i, spec.block_comment_start):
            state.in_block_comment = True
            counted_block = True
            i += len(spec.block_comment_start)
        elif _starts(line, i, spec.inline_comment):
            counted_inline = True
            state.in_inline_comment = continued
            break
        else:
            i += 1

    return LineOutcome(inline=counted_inline, block=counted_block)


def scan_lines(lines: Iterable[str], spec: LanguageSpec) -> FileStats:
    """Count total, inline-comment and block-comment lines of one file.

    Lines may still carry their ``\\n`` or ``\\r\\n`` terminator. Errors raised
    while iterating ``lines`` propagate unchanged.

    Examples:
        >>> from commentscan.constants import LANGUAGES
        >>> scan_lines(["int x; // note", "/* a", "b */"], LANGUAGES["c"])
        FileStats(total_lines=3, inline_comments=1, block_comments=2)
    """
    stats = FileStats()
    state = ScanState()
    for raw in lines:
        stats.total_lines += 1
        outcome = scan_line(_strip_newline(raw), state, spec)
        if outcome.inline:
            stats.inline_comments += 1
        if outcome.block:
            stats.block_comments += 1
    return stats


def scan_text(text: str, spec: LanguageSpec) -> FileStats:
    """Scan an in-memory file body, split on "\\n" as ``scan_file`` reads files."""
    return scan_lines(io.StringIO(text), spec)


def classify_lines(lines: Iterable[str], spec: LanguageSpec) -> Iterator[tuple[int, LineKind]]:
    """Yield ``(line_number, kind)`` for every line, numbering from 1."""
    state = ScanState()
    for number, raw in enumerate(lines, start=1):
        yield number, scan_line(_strip_newline(raw), state, spec).kind
