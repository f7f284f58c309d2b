"""Clip renderer — writes a group's subtitle file and encodes its clip."""

import logging
from pathlib import Path

from srtclip import ffutil
from srtclip.manifest import RenderConfig
from srtclip.models import ClipPlan

log = logging.getLogger(__name__)

TEMP_SUBTITLE_PREFIX = "selected_subtitles_group_"
OUTPUT_PREFIX = "vertical_clip_group_"


def subtitle_temp_path(work_dir: Path, group_index: int) -> Path:
    return Path(work_dir) / f"{TEMP_SUBTITLE_PREFIX}{group_index + 1}.srt"


def clip_output_path(output_dir: Path, group_index: int) -> Path:
    return Path(output_dir) / f"{OUTPUT_PREFIX}{group_index + 1}.mp4"


async def render_clip(
    plan: ClipPlan,
    input_path: Path,
    output_path: Path,
    work_dir: Path,
    config: RenderConfig,
) -> Path:
    """Persist the plan's subtitles and burn them into a vertical clip."""
    subtitle_path = subtitle_temp_path(work_dir, plan.group_index)
    subtitle_path.write_text(plan.subtitle_text, encoding="utf-8")
    log.info("[group %d] Subtitle file written: %s", plan.group_number, subtitle_path)

    cmd = ffutil.build_render_command(
        input_path,
        subtitle_path,
        output_path,
        start=plan.window_start,
        duration=plan.window_duration,
        config=config,
    )
    await ffutil.render(cmd)
    return output_path
