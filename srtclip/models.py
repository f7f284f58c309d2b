"""Shared data types used across srtclip."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SubtitleEntry:
    """One timed SubRip block.

    ``index`` is the number written in the source file; it may have gaps or
    be out of order, and is ``None`` when the index line could not be read.
    """

    index: int | None
    start: str
    end: str
    start_seconds: float
    end_seconds: float
    text: str


@dataclass(frozen=True)
class Interval:
    """A user-requested subtitle index range. Bounds may be given in any order."""

    start_index: int
    end_index: int

    @property
    def low(self) -> int:
        return min(self.start_index, self.end_index)

    @property
    def high(self) -> int:
        return max(self.start_index, self.end_index)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.low <= index <= self.high


@dataclass(frozen=True)
class ClipPlan:
    """Everything needed to render one clip: its window and rebased subtitles."""

    group_index: int
    interval: Interval
    window_start: float
    window_duration: float
    entries: tuple[SubtitleEntry, ...]
    subtitle_text: str

    @property
    def group_number(self) -> int:
        return self.group_index + 1

    @property
    def window_end(self) -> float:
        return self.window_start + self.window_duration


@dataclass
class ClipResult:
    """Outcome of one group's plan-and-render pipeline."""

    group_index: int
    interval: Interval
    output_path: Path | None = None
    error: str | None = None

    @property
    def group_number(self) -> int:
        return self.group_index + 1

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    results: list[ClipResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def succeeded(self) -> list[ClipResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[ClipResult]:
        return [r for r in self.results if not r.ok]
