# -*- coding: utf-8 -*-
"""
File helpers shared by the converters.

Reading the primary JSON document is all-or-nothing; writing is one file at
a time so callers can skip a failed item and carry on.

Date: 2026-10-19
"""

import json
from pathlib import Path
from typing import Any

from .errors import InputReadError, ParseError, PerItemWriteError


def load_json_document(path: Path, encoding: str = 'utf-8') -> Any:
    """
    Read and parse a JSON document.

    Raises:
        InputReadError: If the file is missing or cannot be read
        ParseError: If the content is not valid JSON
    """
    try:
        content = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Could not read {path}: {e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e
    except RecursionError as e:
        raise ParseError(f"JSON in {path} is nested too deeply to decode") from e


def write_text_file(path: Path, content: str, encoding: str = 'utf-8') -> None:
    """Write a text file, overwriting any previous version."""
    try:
        with open(path, 'w', encoding=encoding) as f:
            f.write(content)
    except (OSError, ValueError) as e:
        # ValueError covers encoding failures and NUL bytes in the file name
        raise PerItemWriteError(path, str(e)) from e


def ensure_directory(path: Path, verbose: int = 2) -> bool:
    """
    Create a directory (and parents) if it does not exist yet.

    Returns:
        True if the directory was created by this call
    """
    path = Path(path)
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    if verbose >= 2:
        print(f"[SETUP] Created directory {path}")
    return True
