"""Thin CLI entry point — builds a Manifest and calls the engine."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from srtclip.analyzers.intervals import IntervalFormatError
from srtclip.analyzers.subtitles import MissingInputError, SubtitleParseError
from srtclip.analyzers.transcribe import transcribe_to_srt
from srtclip.engine import process
from srtclip.ffutil import FFmpegNotFoundError
from srtclip.manifest import Manifest, TranscribeConfig, load_manifest

INTERVAL_PROMPT = "Enter intervals (e.g. '7,9' or '7,9; 10,15; 20,25'): "


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _build_manifest(args: argparse.Namespace) -> Manifest:
    video, intervals = args.video, args.intervals
    # With a manifest the video is optional, so a lone positional is the interval spec.
    if args.manifest and video is not None and intervals is None:
        video, intervals = None, video

    if args.manifest:
        m = load_manifest(args.manifest)
        if video:
            m.input = Path(video)
    else:
        m = Manifest(input=Path(video))

    if args.subtitles:
        m.subtitles = args.subtitles
    if args.output_dir:
        m.output_dir = args.output_dir
    if args.work_dir:
        m.work_dir = args.work_dir
    if args.width:
        m.render.width = args.width
    if args.height:
        m.render.height = args.height
    if intervals:
        m.intervals = intervals
    return m


def _run_clips(args: argparse.Namespace) -> int:
    if not args.video and not args.manifest:
        print("Error: provide either a VIDEO argument or --manifest.", file=sys.stderr)
        return 1

    m = _build_manifest(args)
    if not m.subtitle_path.is_file():
        print(f"Error: subtitle file not found: {m.subtitle_path}", file=sys.stderr)
        return 1

    if m.intervals:
        raw_spec = m.intervals
    else:
        try:
            raw_spec = input(INTERVAL_PROMPT)
        except EOFError:
            print("\nError: no intervals given (stdin closed).", file=sys.stderr)
            return 1

    try:
        result = process(m, raw_spec)
    except (MissingInputError, SubtitleParseError, IntervalFormatError, FFmpegNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print()
    for r in result.results:
        if r.ok:
            print(f"  [group {r.group_number}] {r.output_path}")
        else:
            print(f"  [group {r.group_number}] FAILED: {r.error}", file=sys.stderr)

    if not result.ok:
        failed = ", ".join(str(r.group_number) for r in result.failed)
        print(f"Clip generation failed for group(s): {failed}", file=sys.stderr)
        return 1
    print(f"All {len(result.results)} clip(s) generated in {m.output_dir}")
    return 0


def _run_transcribe(args: argparse.Namespace) -> int:
    if args.manifest:
        m = load_manifest(args.manifest)
        video = args.video or m.input
        config = m.transcribe
    elif args.video:
        video = args.video
        config = TranscribeConfig()
    else:
        print("Error: provide either a VIDEO argument or --manifest.", file=sys.stderr)
        return 1

    if args.model:
        config.model = args.model
    if args.output_format:
        config.output_format = args.output_format
    if args.device:
        config.device = args.device
    if args.language:
        config.language = args.language

    print(f"Running Whisper ({config.model}, {config.device}) to extract subtitles...")
    try:
        path = transcribe_to_srt(video, config, output_dir=args.output_dir)
    except (MissingInputError, FFmpegNotFoundError, RuntimeError, subprocess.CalledProcessError) as e:
        print(f"Error running Whisper: {e}", file=sys.stderr)
        return 1

    print(f"Subtitles extracted: {path}")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="srtclip",
        description="srtclip — cut vertical, subtitled clips from subtitle index ranges.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    clips = sub.add_parser("clips", help="Generate clips for subtitle intervals")
    clips.add_argument("video", nargs="?", help="Input video file (optional with --manifest)")
    clips.add_argument("intervals", nargs="?", help="Intervals, e.g. '7,9; 10,15'")
    clips.add_argument("--manifest", "-m", type=Path, help="Path to a JSON manifest file")
    clips.add_argument("--subtitles", "-s", type=Path, help="Subtitle file (default: VIDEO with .srt)")
    clips.add_argument("--output-dir", "-o", type=Path, help="Directory for generated clips")
    clips.add_argument("--work-dir", type=Path, help="Directory for temporary subtitle files")
    clips.add_argument("--width", type=int, help="Output width in pixels")
    clips.add_argument("--height", type=int, help="Output height in pixels")

    tr = sub.add_parser("transcribe", help="Generate the subtitle track with Whisper")
    tr.add_argument("video", nargs="?", type=Path, help="Input video file (optional with --manifest)")
    tr.add_argument("--manifest", "-m", type=Path, help="Path to a JSON manifest file")
    tr.add_argument("--model", type=str, help="Whisper model size (tiny, base, small, medium, large, turbo; default large)")
    tr.add_argument("--output-format", choices=["srt", "vtt", "txt", "tsv", "json"], help="Subtitle output format (default srt)")
    tr.add_argument("--device", type=str, help="Torch device, e.g. cuda or cpu (default cuda)")
    tr.add_argument("--language", type=str, help="Spoken language (default: auto-detect)")
    tr.add_argument("--output-dir", "-o", type=Path, help="Directory for the subtitle file (default: next to VIDEO)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    _setup_logging(args.verbose)

    if args.command == "transcribe":
        sys.exit(_run_transcribe(args))
    sys.exit(_run_clips(args))


if __name__ == "__main__":
    main()
