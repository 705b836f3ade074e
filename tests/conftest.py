"""Shared pytest fixtures and helpers for the role_mappings test suite.

Module-level helpers (import directly):
    LAZYDOG_GROUP1, LAZYDOG_GROUP2 — group DNs declared in role-to-groups.xml.
    RecordingStream — raw in-memory stream that records close() calls.
    recording_opener(streams, fail_read=False) — opener for load() that
        hands out RecordingStreams and appends each to `streams`.

pytest fixtures:
    fixture_dir      — tests/fixtures directory.
    mappings_path    — absolute path of the valid lazydog fixture.
    write_document   — write XML text under tmp_path, return the path.
    mapping_cases    — MappingCases singleton (YAML-driven document cases).
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

# Resolved through pytest pythonpath = ["scripts", "tests"]
from fixtures.fixture_loader import FIXTURE_DIR, MappingCases

_MAPPING_CASES = MappingCases()

LAZYDOG_GROUP1 = "cn=group1,ou=groups,dc=lazydog,dc=org"
LAZYDOG_GROUP2 = "cn=group2,ou=groups,dc=lazydog,dc=org"


# ─── Module-Level Helpers ─────────────────────────────────────────────────────


class RecordingStream(io.RawIOBase):
    """In-memory raw stream that counts close() calls and can fail on read.

    Reads go through readinto(), so `position` shows how much was consumed.
    """

    def __init__(self, data: bytes, fail_read: bool = False) -> None:
        super().__init__()
        self._data = data
        self.position = 0
        self.fail_read = fail_read
        self.close_calls = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self.fail_read:
            raise OSError("simulated read failure")
        chunk = self._data[self.position : self.position + len(buffer)]
        buffer[: len(chunk)] = chunk
        self.position += len(chunk)
        return len(chunk)

    def close(self) -> None:
        self.close_calls += 1
        super().close()


def recording_opener(
    streams: list[RecordingStream],
    fail_read: bool = False,
) -> Callable[[Path], RecordingStream]:
    """Return an opener that reads the real file into RecordingStreams."""

    def opener(path: Path) -> RecordingStream:
        stream = RecordingStream(Path(path).read_bytes(), fail_read=fail_read)
        streams.append(stream)
        return stream

    return opener


# ─── pytest Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def fixture_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def mappings_path() -> Path:
    return FIXTURE_DIR / "role-to-groups.xml"


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write XML text to tmp_path/<name> and return the absolute path."""

    def write(text: str, name: str = "role-to-groups.xml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def mapping_cases() -> MappingCases:
    return _MAPPING_CASES
