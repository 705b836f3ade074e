"""Load a role-to-groups mapping file: resolve, validate, then parse.

The file is read twice. The first stream is validated and closed; only if
validation passes is a second stream opened and parsed. Every stream is
closed on every exit path. Any stage failure surfaces as a single
InitializationError with the stage error chained as __cause__, and no
index is returned.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from role_mappings.errors import InitializationError, RoleMappingsError
from role_mappings.parser import parse
from role_mappings.paths import open_stream, resolve
from role_mappings.types import RoleGroupIndex
from role_mappings.validator import validate

logger = logging.getLogger(__name__)

Opener = Callable[[Path], BinaryIO]


def load(
    pathname: str | os.PathLike[str] | None,
    *,
    base_dir: Path | None = None,
    opener: Opener = open_stream,
) -> RoleGroupIndex:
    """Load and return the RoleGroupIndex declared by a mapping file.

    Args:
        pathname: Absolute path, or path relative to the base directory
            (ROLE_MAPPINGS_BASE_DIR, else the working directory).
        base_dir: Overrides the configured base directory when given.
        opener: Opens a resolved path as a binary stream. Called once per
            phase; each returned stream is closed by load().

    Raises:
        InitializationError: If the pathname cannot be resolved, the file
            cannot be opened or read, the document fails validation, or
            parsing fails.
    """
    try:
        path = resolve(pathname, base_dir)
    except RoleMappingsError as e:
        raise InitializationError(
            f"Unable to resolve the pathname {pathname!r}: {e}", pathname, "resolve"
        ) from e

    logger.debug("Validating role mappings file %s", path)
    try:
        with opener(path) as stream:
            validate(stream)
    except RoleMappingsError as e:
        raise InitializationError(
            f"Unable to validate the pathname {path}: {e}", pathname, "validate"
        ) from e

    logger.debug("Parsing role mappings file %s", path)
    try:
        with opener(path) as stream:
            index = parse(stream)
    except RoleMappingsError as e:
        raise InitializationError(
            f"Unable to parse the pathname {path}: {e}", pathname, "parse"
        ) from e

    logger.info("Loaded %d role mapping(s) from %s", len(index), path)
    return index
