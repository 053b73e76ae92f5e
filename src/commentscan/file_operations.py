"""File system walking and per-file scanning."""

import os
import pathlib
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor, as_completed

import pathspec
from tqdm import tqdm

from commentscan.exceptions import ReadError
from commentscan.log import get_logger
from commentscan.models import FileStats, LanguageSpec
from commentscan.scanner import scan_lines

logger = get_logger(__name__)


def build_ignore_spec(
    root_dir: pathlib.Path, patterns: Iterable[str] = (), use_gitignore: bool = False
) -> pathspec.PathSpec | None:
    """Combine exclude patterns with the root ``.gitignore``.

    Args:
        root_dir: Directory being scanned
        patterns: Extra gitwildmatch patterns from the command line
        use_gitignore: Whether to load ``root_dir/.gitignore``

    Returns:
        PathSpec matching ignored paths, or None when nothing is ignored

    Raises:
        ReadError: If the .gitignore exists but cannot be read
    """
    all_patterns = list(patterns)

    gitignore_path = root_dir / ".gitignore"
    if use_gitignore and gitignore_path.is_file():
        try:
            with open(gitignore_path, encoding="utf-8", errors="ignore") as f:
                all_patterns.extend(f.read().splitlines())
        except OSError as e:
            raise ReadError(gitignore_path, e) from e
        logger.debug("Loaded ignore patterns from %s", gitignore_path)

    if not all_patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(all_patterns)


def _relative_posix(path: pathlib.Path, root: pathlib.Path) -> str:
    return str(path.relative_to(root)).replace(os.sep, "/")


def collect_files(
    start_path: pathlib.Path,
    spec: LanguageSpec,
    ignore_spec: pathspec.PathSpec | None = None,
) -> list[pathlib.Path]:
    """Recursively collect the files of the active language, sorted by path.

    Args:
        start_path: Directory to walk, or a single file
        spec: Active language; its extensions select the files
        ignore_spec: Optional patterns for paths to skip, relative to start_path

    Returns:
        Matching file paths in lexicographic order

    Raises:
        ReadError: If a directory cannot be listed
    """
    if start_path.is_file():
        return [start_path] if spec.matches_path(start_path) else []

    files_to_process = []

    def on_error(error: OSError) -> None:
        raise ReadError(pathlib.Path(error.filename or start_path), error)

    for root, dirs, files in os.walk(start_path, topdown=True, onerror=on_error):
        root_path = pathlib.Path(root)

        if ignore_spec is not None:
            # Prune ignored directories; the trailing slash matches patterns like "build/"
            for d in list(dirs):
                if ignore_spec.match_file(_relative_posix(root_path / d, start_path) + "/"):
                    logger.debug("Skipping directory %s", root_path / d)
                    dirs.remove(d)

        for filename in files:
            file_path = root_path / filename
            if not spec.matches_path(file_path):
                continue
            if ignore_spec is not None and ignore_spec.match_file(
                _relative_posix(file_path, start_path)
            ):
                logger.debug("Skipping file %s", file_path)
                continue
            files_to_process.append(file_path)

    return sorted(files_to_process, key=str)


def scan_file(file_path: pathlib.Path, spec: LanguageSpec) -> FileStats:
    """Open a file and count its comment lines.

    Raises:
        ReadError: If the file cannot be opened or read
    """
    try:
        with open(file_path, encoding="utf-8", errors="ignore", newline="\n") as f:
            return scan_lines(f, spec)
    except OSError as e:
        raise ReadError(file_path, e) from e


def scan_files(
    file_paths: list[pathlib.Path],
    spec: LanguageSpec,
    jobs: int = 1,
    show_progress: bool = False,
) -> list[tuple[pathlib.Path, FileStats]]:
    """Scan every file and return ``(path, stats)`` pairs sorted by path.

    With ``jobs > 1`` files are scanned in a process pool. The first read
    error aborts the whole batch.

    Args:
        file_paths: Files to scan
        spec: Active language shared by every scan
        jobs: Number of worker processes
        show_progress: Whether to draw a progress bar on stderr

    Raises:
        ReadError: If any file cannot be read
    """
    results: dict[pathlib.Path, FileStats] = {}

    with tqdm(
        total=len(file_paths), desc="Scanning", unit="file", disable=not show_progress
    ) as pbar:
        if jobs <= 1 or len(file_paths) <= 1:
            for file_path in file_paths:
                results[file_path] = scan_file(file_path, spec)
                pbar.update(1)
        else:
            with ProcessPoolExecutor(max_workers=jobs) as executor:
                futures = {
                    executor.submit(scan_file, file_path, spec): file_path
                    for file_path in file_paths
                }
                try:
                    for future in as_completed(futures):
                        results[futures[future]] = future.result()
                        pbar.update(1)
                except ReadError:
                    for future in futures:
                        future.cancel()
                    raise

    for file_path, stats in results.items():
        logger.debug(
            "%s: %d lines, %d inline, %d block",
            file_path,
            stats.total_lines,
            stats.inline_comments,
            stats.block_comments,
        )

    return sorted(results.items(), key=lambda item: str(item[0]))
