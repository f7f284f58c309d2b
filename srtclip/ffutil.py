"""FFmpeg subprocess helpers."""

import asyncio
import logging
import shutil
import subprocess
from pathlib import Path

from srtclip.manifest import RenderConfig

log = logging.getLogger(__name__)

# Lines of ffmpeg stderr kept in a RenderError message.
STDERR_TAIL_LINES = 20


class FFmpegNotFoundError(RuntimeError):
    pass


class RenderError(RuntimeError):
    """Raised when an ffmpeg render exits with a failure."""

    def __init__(self, message: str, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)


def check_ffmpeg() -> None:
    """Raise FFmpegNotFoundError if ffmpeg is not on PATH."""
    if shutil.which("ffmpeg") is None:
        raise FFmpegNotFoundError("ffmpeg not found on PATH")


def _backslash_escape(value: str, special: str) -> str:
    return "".join("\\" + c if c in special else c for c in value)


def escape_filter_value(value: str) -> str:
    """Escape a filter option value for an unquoted ``-vf`` filter graph.

    ffmpeg unescapes twice: once when splitting the graph into filters and
    once when splitting a filter's arguments into options.
    """
    option_level = _backslash_escape(value, "\\':")
    return _backslash_escape(option_level, "\\'[],;")


def escape_filter_path(path: Path) -> str:
    return escape_filter_value(str(path).replace("\\", "/"))


def vertical_filters(subtitle_path: Path, config: RenderConfig) -> str:
    """Scale to the output height, centre-crop to width, burn in subtitles."""
    w, h = config.width, config.height
    return ",".join([
        f"scale=-2:{h}",
        f"crop={w}:{h}:(in_w-{w})/2:0",
        f"subtitles=filename={escape_filter_path(subtitle_path)}"
        f":force_style={escape_filter_value(config.style.force_style())}",
    ])


def build_render_command(
    input_path: Path,
    subtitle_path: Path,
    output_path: Path,
    start: float,
    duration: float,
    config: RenderConfig,
) -> list[str]:
    """ffmpeg command for one vertical, subtitled clip.

    ``-ss`` is an input option, so output timestamps (and therefore the
    subtitle filter's clock) start at zero.
    """
    return [
        "ffmpeg", "-y",
        "-ss", f"{start:.3f}",
        "-i", str(input_path),
        "-t", f"{duration:.3f}",
        "-vf", vertical_filters(subtitle_path, config),
        "-movflags", "+faststart",
        str(output_path),
    ]


async def render(cmd: list[str]) -> None:
    """Run an ffmpeg command without blocking the event loop.

    Raises RenderError with the tail of ffmpeg's stderr on failure.
    """
    log.debug("Running: %s", " ".join(cmd))
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise RenderError(f"Could not start {cmd[0]}: {e}") from e

    _, stderr = await proc.communicate()
    if proc.returncode != 0:
        lines = stderr.decode("utf-8", errors="replace").strip().splitlines()
        tail = "\n".join(lines[-STDERR_TAIL_LINES:])
        raise RenderError(
            f"ffmpeg failed (rc={proc.returncode}): {tail or 'no output'}",
            returncode=proc.returncode,
        )


def extract_audio(
    input_path: Path, output_path: Path, sample_rate: int = 16000
) -> Path:
    """Extract audio as mono WAV at the given sample rate (for Whisper)."""
    cmd = [
        "ffmpeg", "-y",
        "-i", str(input_path),
        "-vn",
        "-acodec", "pcm_s16le",
        "-ar", str(sample_rate),
        "-ac", "1",
        str(output_path),
    ]
    subprocess.run(cmd, capture_output=True, check=True)
    return output_path
