"""Error taxonomy for loading role-to-groups mappings.

Stage errors (raised by paths, validator, parser):
    ResolutionError   — pathname is None, empty, or unusable
    StreamOpenError   — resolved file cannot be opened
    StreamReadError   — I/O failure while reading an open stream
    ValidationError   — not well-formed XML, or violates the bundled schema
    ParseError        — structural failure while building the index

Loader boundary:
    InitializationError — the single failure load() raises; the stage error
                          is chained as __cause__.

Messages are actionable: what went wrong, where, and how to fix it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    """One entry from the validator's error log."""

    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"


class RoleMappingsError(Exception):
    """Base class for every role mappings failure."""


class ResolutionError(RoleMappingsError):
    """Raised when a pathname cannot be resolved to a file location."""


class StreamOpenError(RoleMappingsError):
    """Raised when the resolved file cannot be opened for reading."""


class StreamReadError(RoleMappingsError):
    """Raised when reading an already opened stream fails."""


class ValidationError(RoleMappingsError):
    """Raised when a document is malformed or does not conform to the schema."""

    def __init__(self, message: str, issues: tuple[ValidationIssue, ...] = ()) -> None:
        self.issues = issues
        if issues:
            message = message + "\n" + "\n".join(f"  {issue}" for issue in issues)
        super().__init__(message)


class ParseError(RoleMappingsError):
    """Raised when the structural event stream fails during parsing."""


class InitializationError(RoleMappingsError):
    """Raised by load() when any stage fails. No index is produced.

    Attributes:
        pathname: The pathname passed to load().
        stage: "resolve", "validate", or "parse".
    """

    def __init__(self, message: str, pathname: object, stage: str) -> None:
        super().__init__(message)
        self.pathname = pathname
        self.stage = stage
