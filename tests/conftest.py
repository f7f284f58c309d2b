"""Shared test fixtures."""

from pathlib import Path

import pytest

from srtclip.models import SubtitleEntry
from srtclip.timecode import format_timestamp

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_entry(index: int | None, start: float, end: float, text: str = "") -> SubtitleEntry:
    return SubtitleEntry(
        index=index,
        start=format_timestamp(start),
        end=format_timestamp(end),
        start_seconds=start,
        end_seconds=end,
        text=text or f"line {index}",
    )


@pytest.fixture
def sample_manifest_path() -> Path:
    return FIXTURES_DIR / "sample_manifest.json"


@pytest.fixture
def sample_srt_path() -> Path:
    return FIXTURES_DIR / "sample.srt"


@pytest.fixture
def entries_5_to_12() -> list[SubtitleEntry]:
    """Entries indexed 5..12, two seconds apart, each 1.5s long."""
    return [make_entry(i, 2.0 * i, 2.0 * i + 1.5) for i in range(5, 13)]
