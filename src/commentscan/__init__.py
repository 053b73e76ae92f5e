"""commentscan: count comment lines in source trees.

This package provides a character-level scanner that classifies every line
of a source file as code, inline comment or block comment, along with a
small CLI that walks a directory and reports per-file counts.
"""

from commentscan.cli import main
from commentscan.models import FileStats, LanguageSpec, ScanResult
from commentscan.scanner import scan_lines, scan_text

__version__ = "0.1.0"
__all__ = ["main", "FileStats", "LanguageSpec", "ScanResult", "scan_lines", "scan_text"]
