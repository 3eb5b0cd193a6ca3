"""
Utility functions for the Baseline compatibility checker.
"""

import re
from pathlib import Path
from typing import List, Optional

_SIZE_KB_PATTERN = re.compile(r"\+?(\d+)\s*KB", re.IGNORECASE)

LANGUAGE_BY_EXTENSION = {
    '.js': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
    '.jsx': 'javascript',
    '.ts': 'typescript',
    '.tsx': 'typescript',
    '.css': 'css',
    '.html': 'html',
    '.htm': 'html',
}


def detect_language(file_path: Path) -> str:
    """Detect source language from file extension. Unknown extensions are read as JavaScript."""
    return LANGUAGE_BY_EXTENSION.get(file_path.suffix.lower(), 'javascript')


def is_supported_file(file_path: Path) -> bool:
    return file_path.suffix.lower() in LANGUAGE_BY_EXTENSION


def parse_size_kb(value: Optional[str]) -> int:
    """Parse sizes like "+2KB" or "15KB" into whole kilobytes; anything else is 0."""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    match = _SIZE_KB_PATTERN.search(str(value))
    return int(match.group(1)) if match else 0


def split_lines(text: str) -> List[str]:
    """Split on line feeds, dropping the carriage return of CRLF endings."""
    return [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
