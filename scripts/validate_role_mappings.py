#!/usr/bin/env python3
"""Validate a role-to-groups mappings file and summarize its contents.

Usage:
    scripts/validate_role_mappings.py conf/role-to-groups.xml
    scripts/validate_role_mappings.py --base-dir /srv/app conf/role-to-groups.xml
    ROLE_MAPPINGS_BASE_DIR=/srv/app scripts/validate_role_mappings.py conf/role-to-groups.xml

Exit codes: 0=valid, 1=validation/parse errors, 2=path or file error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from role_mappings.errors import (
    InitializationError,
    ResolutionError,
    StreamOpenError,
    ValidationError,
)
from role_mappings.loader import load
from role_mappings.paths import BASE_DIR_ENV


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments; --base-dir falls back to ROLE_MAPPINGS_BASE_DIR."""
    parser = argparse.ArgumentParser(
        description="Validate a role-to-groups mappings file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment variables:\n"
            f"  {BASE_DIR_ENV}  Base directory for relative paths (default: cwd)\n"
        ),
    )
    parser.add_argument("path", help="Mapping file, absolute or relative to the base directory")
    parser.add_argument(
        "--base-dir",
        default=os.environ.get(BASE_DIR_ENV) or None,
        metavar="DIR",
        help=f"Base directory for relative paths (env: {BASE_DIR_ENV})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each load phase",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code: 0=valid, 1=errors, 2=path/file error."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    base_dir = Path(args.base_dir) if args.base_dir else None
    try:
        index = load(args.path, base_dir=base_dir)
    except InitializationError as e:
        cause = e.__cause__
        if isinstance(cause, (ResolutionError, StreamOpenError)):
            print(f"Error: {cause}", file=sys.stderr)
            return 2
        if isinstance(cause, ValidationError) and cause.issues:
            print(f"=== Validation Errors: {args.path} ===")
            for issue in cause.issues:
                print(f"  {issue}")
            print(f"\nRole mappings validation: {len(cause.issues)} error(s) found")
        else:
            print(f"Error: {cause or e}", file=sys.stderr)
        return 1

    print(f"Role mappings validation: {Path(args.path).name} OK ({len(index)} role(s))")
    for role in index.roles:
        groups = index.groups_for_role(role)
        print(f"  {role}: {len(groups)} group(s)")
        for group_dn in groups:
            print(f"    - {group_dn}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
