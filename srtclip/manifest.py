"""JSON manifest schema — the contract between the CLI and the engine."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from srtclip.analyzers.subtitles import subtitle_path_for


@dataclass
class SubtitleStyle:
    """libass force_style overrides used when burning subtitles in."""

    font_name: str = "DejaVu Sans Bold"
    font_size: int = 12
    primary_colour: str = "&HFFFFFF&"
    outline_colour: str = "&H000000&"
    outline: int = 2
    shadow: int = 1
    margin_v: int = 10
    alignment: int = 6

    def force_style(self) -> str:
        return (
            f"FontName={self.font_name},"
            f"FontSize={self.font_size},"
            f"PrimaryColour={self.primary_colour},"
            f"OutlineColour={self.outline_colour},"
            f"Outline={self.outline},"
            f"Shadow={self.shadow},"
            f"MarginV={self.margin_v},"
            f"Alignment={self.alignment}"
        )


@dataclass
class RenderConfig:
    """Output geometry and subtitle styling for every clip."""

    width: int = 1080
    height: int = 1920
    style: SubtitleStyle = field(default_factory=SubtitleStyle)


@dataclass
class TranscribeConfig:
    """Configuration for subtitle generation via Whisper."""

    model: str = "large"
    output_format: str = "srt"
    device: str = "cuda"
    language: str | None = None


@dataclass
class Manifest:
    """Top-level clip batch manifest.

    ``work_dir`` holds the per-group temporary subtitle files; it defaults to
    the directory the process was started in.
    """

    input: Path
    subtitles: Path | None = None
    output_dir: Path = Path("out")
    work_dir: Path = field(default_factory=Path.cwd)
    intervals: str | None = None
    version: str = "1"
    render: RenderConfig = field(default_factory=RenderConfig)
    transcribe: TranscribeConfig = field(default_factory=TranscribeConfig)

    @property
    def subtitle_path(self) -> Path:
        return self.subtitles or subtitle_path_for(self.input)


def _render_config(data: dict) -> RenderConfig:
    data = dict(data)
    style = SubtitleStyle(**data.pop("style")) if "style" in data else SubtitleStyle()
    return RenderConfig(style=style, **data)


def load_manifest(path: str | Path) -> Manifest:
    """Load and validate a manifest from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())

    if "input" not in data:
        raise ValueError("Manifest must contain an 'input' field")

    render = _render_config(data["render"]) if "render" in data else RenderConfig()
    transcribe = TranscribeConfig(**data["transcribe"]) if "transcribe" in data else TranscribeConfig()

    m = Manifest(
        version=data.get("version", "1"),
        input=Path(data["input"]),
        subtitles=Path(data["subtitles"]) if data.get("subtitles") else None,
        intervals=data.get("intervals"),
        render=render,
        transcribe=transcribe,
    )
    if "output_dir" in data:
        m.output_dir = Path(data["output_dir"])
    if "work_dir" in data:
        m.work_dir = Path(data["work_dir"])
    return m
