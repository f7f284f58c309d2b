"""Tests for manifest loading and validation."""

import json
from pathlib import Path

import pytest

from srtclip.manifest import (
    Manifest,
    RenderConfig,
    SubtitleStyle,
    TranscribeConfig,
    load_manifest,
)


class TestSubtitleStyle:
    def test_defaults(self):
        assert SubtitleStyle().force_style() == (
            "FontName=DejaVu Sans Bold,FontSize=12,PrimaryColour=&HFFFFFF&,"
            "OutlineColour=&H000000&,Outline=2,Shadow=1,MarginV=10,Alignment=6"
        )

    def test_custom_values(self):
        style = SubtitleStyle(font_name="Arial", margin_v=40)
        assert "FontName=Arial," in style.force_style()
        assert "MarginV=40," in style.force_style()


class TestRenderConfig:
    def test_defaults(self):
        cfg = RenderConfig()
        assert (cfg.width, cfg.height) == (1080, 1920)
        assert cfg.style == SubtitleStyle()


class TestTranscribeConfig:
    def test_defaults(self):
        cfg = TranscribeConfig()
        assert cfg.model == "large"
        assert cfg.output_format == "srt"
        assert cfg.device == "cuda"
        assert cfg.language is None


class TestManifest:
    def test_minimal(self):
        m = Manifest(input=Path("video_001.mp4"))
        assert m.version == "1"
        assert m.output_dir == Path("out")
        assert m.work_dir == Path.cwd()
        assert m.intervals is None

    def test_subtitle_path_derived_from_video(self):
        m = Manifest(input=Path("clips/video_001.mp4"))
        assert m.subtitle_path == Path("clips/video_001.srt")

    def test_subtitle_path_override(self):
        m = Manifest(input=Path("video.mp4"), subtitles=Path("other.srt"))
        assert m.subtitle_path == Path("other.srt")


class TestLoadManifest:
    def test_load_sample(self, sample_manifest_path: Path):
        m = load_manifest(sample_manifest_path)
        assert m.version == "1"
        assert m.input == Path("video_001.mp4")
        assert m.output_dir == Path("out")
        assert m.intervals == "7,9; 10,15"
        assert (m.render.width, m.render.height) == (720, 1280)
        assert m.render.style.font_size == 14
        assert m.render.style.font_name == "DejaVu Sans Bold"
        assert m.transcribe.model == "small"
        assert m.transcribe.device == "cpu"

    def test_load_minimal(self, tmp_path: Path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"input": "v.mp4", "work_dir": str(tmp_path)}))
        m = load_manifest(path)
        assert m.render == RenderConfig()
        assert m.work_dir == tmp_path
        assert m.subtitles is None

    def test_load_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        with pytest.raises(json.JSONDecodeError):
            load_manifest(bad)

    def test_load_missing_fields(self, tmp_path: Path):
        incomplete = tmp_path / "incomplete.json"
        incomplete.write_text('{"version": "1"}')
        with pytest.raises(ValueError, match="must contain"):
            load_manifest(incomplete)

    def test_unknown_render_field(self, tmp_path: Path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"input": "v.mp4", "render": {"fps": 30}}))
        with pytest.raises(TypeError):
            load_manifest(path)
