"""Pathname resolution and stream opening for mapping files.

Relative pathnames resolve against the base directory named by the
ROLE_MAPPINGS_BASE_DIR environment variable, read at call time. When the
variable is unset or empty, the current working directory is used.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from role_mappings.errors import ResolutionError, StreamOpenError

BASE_DIR_ENV = "ROLE_MAPPINGS_BASE_DIR"


def get_base_dir() -> Path:
    """Return the base directory for relative pathnames."""
    base = os.environ.get(BASE_DIR_ENV, "")
    if base:
        return Path(base)
    return Path.cwd()


def resolve(pathname: str | os.PathLike[str] | None, base_dir: Path | None = None) -> Path:
    """Resolve pathname to an absolute Path.

    Args:
        pathname: Absolute path, or path relative to the base directory.
        base_dir: Overrides the configured base directory when given.

    Raises:
        ResolutionError: If pathname is None, blank, or contains a NUL byte.
    """
    if pathname is None:
        raise ResolutionError(
            "No pathname given for the role mappings file. "
            "Fix: configure the path of the role-to-groups XML file."
        )
    text = os.fspath(pathname)
    if not text.strip():
        raise ResolutionError(
            "Empty pathname given for the role mappings file. "
            "Fix: configure the path of the role-to-groups XML file."
        )
    if "\x00" in text:
        raise ResolutionError(
            f"Pathname {text!r} contains a NUL byte and cannot name a file. "
            f"Fix: correct the configured path."
        )

    path = Path(text)
    if path.is_absolute():
        return path
    base = base_dir if base_dir is not None else get_base_dir()
    return Path(base).absolute() / path


def open_stream(path: Path) -> BinaryIO:
    """Open path for binary reading.

    Raises:
        StreamOpenError: If the file is missing, unreadable, or a directory.
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise StreamOpenError(
            f"Cannot open role mappings file {path}: {e.strerror or e}. "
            f"Fix: check that the file exists and is readable, or set "
            f"{BASE_DIR_ENV} so the relative path resolves to it."
        ) from e
