"""SubRip (.srt) reading and writing."""

import logging
import re
from pathlib import Path

from srtclip.models import SubtitleEntry
from srtclip.timecode import FormatError, parse_timestamp

log = logging.getLogger(__name__)

_BLOCK_SEPARATOR = re.compile(r"\r?\n[ \t]*\r?\n")
_LINE_SEPARATOR = re.compile(r"\r?\n")


class MissingInputError(FileNotFoundError):
    """Raised when the subtitle file (or source video) does not exist."""
    pass


class SubtitleParseError(ValueError):
    """Raised when a subtitle block has an unreadable timing line."""
    pass


def subtitle_path_for(video_path: Path) -> Path:
    """Subtitle file expected next to *video_path* (same stem, ``.srt``)."""
    return Path(video_path).with_suffix(".srt")


def _parse_index(line: str) -> int | None:
    try:
        return int(line.strip())
    except ValueError:
        return None


def parse_subtitles(text: str) -> list[SubtitleEntry]:
    """Parse SubRip text into entries, in file order.

    Blocks with fewer than two lines are skipped. An unreadable index line
    yields ``index=None`` (the entry can never be selected by index) instead
    of failing the whole file.
    """
    text = text.lstrip("\ufeff")
    entries: list[SubtitleEntry] = []

    for block_no, block in enumerate(_BLOCK_SEPARATOR.split(text.strip()), 1):
        lines = _LINE_SEPARATOR.split(block.strip())
        if len(lines) < 2:
            continue

        index = _parse_index(lines[0])
        if index is None:
            log.warning("Block %d has a non-numeric index %r", block_no, lines[0])

        start, sep, end = lines[1].partition("-->")
        if not sep:
            raise SubtitleParseError(
                f"Block {block_no}: missing '-->' in timing line {lines[1]!r}"
            )
        start, end = start.strip(), end.strip()
        try:
            start_seconds = parse_timestamp(start)
            end_seconds = parse_timestamp(end)
        except FormatError as e:
            raise SubtitleParseError(f"Block {block_no}: {e}") from e

        if end_seconds < start_seconds:
            raise SubtitleParseError(
                f"Block {block_no}: end {end} is before start {start}"
            )

        entries.append(
            SubtitleEntry(
                index=index,
                start=start,
                end=end,
                start_seconds=start_seconds,
                end_seconds=end_seconds,
                text=" ".join(line.strip() for line in lines[2:]).strip(),
            )
        )
    return entries


def render_subtitles(entries: list[SubtitleEntry] | tuple[SubtitleEntry, ...]) -> str:
    """Serialize entries back to SubRip blocks separated by a blank line."""
    return "\n\n".join(
        f"{e.index}\n{e.start} --> {e.end}\n{e.text}" for e in entries
    )


def load_subtitles(path: Path) -> list[SubtitleEntry]:
    """Read and parse a subtitle file."""
    path = Path(path)
    if not path.is_file():
        raise MissingInputError(f"Subtitle file not found: {path}")

    entries = parse_subtitles(path.read_text(encoding="utf-8"))
    log.info("Loaded %d subtitle entries from %s", len(entries), path)
    return entries
