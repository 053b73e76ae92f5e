"""Report generation and the top-level scan run."""

import pathlib
from collections.abc import Iterable

from commentscan.constants import COUNT_COLUMN_WIDTH, PATH_COLUMN_WIDTH, TOTAL_COLUMN_WIDTH
from commentscan.exceptions import NoMatchingFilesError, PathNotFoundError
from commentscan.file_operations import build_ignore_spec, collect_files, scan_files
from commentscan.log import get_logger
from commentscan.models import FileStats, LanguageSpec, ScanResult

logger = get_logger(__name__)


def format_row(label: str, stats: FileStats) -> str:
    """Format one aligned report line.

    Examples:
        >>> format_row("a.c", FileStats(10, 2, 3)).split()
        ['a.c', 'total:', '10', 'inline:', '2', 'block:', '3']
    """
    return (
        f"{label:<{PATH_COLUMN_WIDTH}} "
        f"total: {stats.total_lines:{TOTAL_COLUMN_WIDTH}d}    "
        f"inline: {stats.inline_comments:{COUNT_COLUMN_WIDTH}d}    "
        f"block: {stats.block_comments:{COUNT_COLUMN_WIDTH}d}"
    )


def generate_report(result: ScanResult, include_summary: bool = False) -> list[str]:
    """Render the report lines for a scan, one per file in path order.

    Args:
        result: Completed scan
        include_summary: Whether to append a TOTAL row

    Returns:
        Report lines without trailing newlines
    """
    lines = [format_row(str(path), stats) for path, stats in result.files]
    if include_summary:
        lines.append(format_row("TOTAL", result.totals))
    return lines


def count_comment_lines(
    target_dir: str | pathlib.Path,
    spec: LanguageSpec,
    exclude: Iterable[str] = (),
    use_gitignore: bool = False,
    jobs: int = 1,
    show_progress: bool = False,
) -> ScanResult:
    """Walk a directory and scan every file of the active language.

    A path naming a single file is scanned alone when its extension matches.

    Paths in the result keep the form they were given in (relative roots
    give relative paths), as in the walk itself.

    Args:
        target_dir: Directory to scan, or a single source file
        spec: Active language, selected once for the whole run
        exclude: Gitwildmatch patterns for paths to skip
        use_gitignore: Whether to honor the root ``.gitignore``
        jobs: Number of worker processes
        show_progress: Whether to draw a progress bar on stderr

    Returns:
        The scan result, files sorted by path

    Raises:
        PathNotFoundError: If target_dir does not exist
        NoMatchingFilesError: If no file matches the language's extensions
        ReadError: If any file cannot be read; no partial result is returned
    """
    start_path = pathlib.Path(target_dir)
    if not start_path.exists():
        raise PathNotFoundError(start_path)

    logger.info("Scanning %s as %s", start_path, spec.name)
    ignore_spec = build_ignore_spec(start_path, exclude, use_gitignore)
    file_paths = collect_files(start_path, spec, ignore_spec)
    if not file_paths:
        raise NoMatchingFilesError(start_path, spec.name)
    logger.info("Found %d files to scan", len(file_paths))

    files = scan_files(file_paths, spec, jobs=jobs, show_progress=show_progress)
    return ScanResult(root=start_path, language=spec.name, files=tuple(files))
