"""Clip planner — selects a subtitle range and rebases it to start at zero."""

from srtclip.analyzers.subtitles import render_subtitles
from srtclip.models import ClipPlan, Interval, SubtitleEntry
from srtclip.timecode import format_timestamp


class EmptyRangeError(LookupError):
    """Raised when no subtitle entry falls inside the requested index range."""
    pass


class InvalidWindowError(ValueError):
    """Raised when the selected entries span zero or negative time."""
    pass


def select_entries(
    interval: Interval, entries: list[SubtitleEntry]
) -> list[SubtitleEntry]:
    """Entries whose index lies in ``[interval.low, interval.high]``, in input order."""
    return [e for e in entries if e.index in interval]


def rebase_entries(
    entries: list[SubtitleEntry], offset: float
) -> tuple[SubtitleEntry, ...]:
    """Sort by start time (stable), renumber from 1 and shift back by *offset*."""
    ordered = sorted(entries, key=lambda e: e.start_seconds)
    rebased: list[SubtitleEntry] = []
    for i, e in enumerate(ordered, 1):
        start_seconds = e.start_seconds - offset
        end_seconds = e.end_seconds - offset
        rebased.append(
            SubtitleEntry(
                index=i,
                start=format_timestamp(start_seconds),
                end=format_timestamp(end_seconds),
                start_seconds=start_seconds,
                end_seconds=end_seconds,
                text=e.text,
            )
        )
    return tuple(rebased)


def plan_clip(
    group_index: int, interval: Interval, entries: list[SubtitleEntry]
) -> ClipPlan:
    """Build the ClipPlan for one group."""
    selected = select_entries(interval, entries)
    if not selected:
        raise EmptyRangeError(
            f"No subtitles found for interval {interval.low} to {interval.high}"
        )

    window_start = min(e.start_seconds for e in selected)
    window_end = max(e.end_seconds for e in selected)
    duration = window_end - window_start
    if duration <= 0:
        raise InvalidWindowError(
            f"Interval {interval.low} to {interval.high} spans {duration:.3f}s; "
            "clip duration must be positive"
        )

    rebased = rebase_entries(selected, window_start)
    return ClipPlan(
        group_index=group_index,
        interval=interval,
        window_start=window_start,
        window_duration=duration,
        entries=rebased,
        subtitle_text=render_subtitles(rebased),
    )
