"""Orchestrator — turns an interval spec into a batch of vertical clips."""

import asyncio
import logging
from pathlib import Path
from typing import Callable

from srtclip import ffutil
from srtclip.analyzers.intervals import resolve_intervals
from srtclip.analyzers.subtitles import load_subtitles
from srtclip.editors.plan import EmptyRangeError, InvalidWindowError, plan_clip
from srtclip.editors.render import TEMP_SUBTITLE_PREFIX, clip_output_path, render_clip
from srtclip.manifest import Manifest
from srtclip.models import BatchResult, ClipResult, Interval, SubtitleEntry

log = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]


def cleanup_temp_files(work_dir: Path) -> int:
    """Delete every per-group subtitle file in *work_dir*; return how many."""
    removed = 0
    for path in Path(work_dir).glob(f"{TEMP_SUBTITLE_PREFIX}*.srt"):
        path.unlink(missing_ok=True)
        removed += 1
    if removed:
        log.debug("Removed %d temporary subtitle files from %s", removed, work_dir)
    return removed


async def _run_group(
    group_index: int,
    interval: Interval,
    entries: list[SubtitleEntry],
    manifest: Manifest,
    on_progress: ProgressCallback | None,
) -> ClipResult:
    """Plan and render one group. Failures are reported, never raised."""
    n = group_index + 1

    def _progress(message: str) -> None:
        log.info("[group %d] %s", n, message)
        if on_progress:
            on_progress(n, message)

    result = ClipResult(group_index=group_index, interval=interval)
    try:
        plan = plan_clip(group_index, interval, entries)
        _progress(
            f"Interval {interval.low} to {interval.high}: start {plan.window_start:.3f}s, "
            f"duration {plan.window_duration:.3f}s"
        )
        output_path = clip_output_path(manifest.output_dir, group_index)
        await render_clip(
            plan, manifest.input, output_path, manifest.work_dir, manifest.render
        )
    except (EmptyRangeError, InvalidWindowError, ffutil.RenderError, OSError) as e:
        log.error("[group %d] Clip generation failed: %s", n, e)
        result.error = str(e)
        return result

    _progress(f"Clip generated: {output_path}")
    result.output_path = output_path
    return result


async def run_batch(
    manifest: Manifest,
    raw_spec: str,
    entries: list[SubtitleEntry],
    on_progress: ProgressCallback | None = None,
) -> BatchResult:
    """Render one clip per interval group concurrently.

    A malformed interval spec raises IntervalFormatError before any file is
    written. Temporary subtitle files are always removed afterwards.
    """
    intervals = resolve_intervals(raw_spec)
    log.info("Rendering %d clip(s)", len(intervals))

    try:
        manifest.output_dir.mkdir(parents=True, exist_ok=True)
        manifest.work_dir.mkdir(parents=True, exist_ok=True)
        results = await asyncio.gather(*(
            _run_group(i, interval, entries, manifest, on_progress)
            for i, interval in enumerate(intervals)
        ))
    finally:
        cleanup_temp_files(manifest.work_dir)

    return BatchResult(results=list(results))


def process(
    manifest: Manifest,
    raw_spec: str,
    on_progress: ProgressCallback | None = None,
) -> BatchResult:
    """Load the subtitle track and run the whole batch.

    Raises MissingInputError, IntervalFormatError or FFmpegNotFoundError
    before any clip is started.
    """
    entries = load_subtitles(manifest.subtitle_path)
    ffutil.check_ffmpeg()
    return asyncio.run(run_batch(manifest, raw_spec, entries, on_progress))
