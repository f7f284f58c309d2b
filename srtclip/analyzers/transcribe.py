"""Speech-to-text analyzer using OpenAI Whisper — produces the subtitle track."""

import logging
import tempfile
from pathlib import Path

from srtclip import ffutil
from srtclip.analyzers.subtitles import MissingInputError
from srtclip.manifest import TranscribeConfig

log = logging.getLogger(__name__)


class TranscriptionError(RuntimeError):
    pass


def transcribe_to_srt(
    input_path: Path, config: TranscribeConfig, output_dir: Path | None = None
) -> Path:
    """Extract audio, run Whisper and write a subtitle file named after the video.

    Returns the path of the written file (``<output_dir>/<video stem>.<format>``).
    """
    import whisper

    input_path = Path(input_path)
    if not input_path.is_file():
        raise MissingInputError(f"Video file not found: {input_path}")
    ffutil.check_ffmpeg()
    output_dir = Path(output_dir) if output_dir else input_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    log.info(
        "Transcribing %s with Whisper model=%s device=%s",
        input_path, config.model, config.device,
    )
    with tempfile.TemporaryDirectory() as tmpdir:
        wav_path = Path(tmpdir) / "audio.wav"
        ffutil.extract_audio(input_path, wav_path)

        model = whisper.load_model(config.model, device=config.device)
        result = model.transcribe(str(wav_path), language=config.language)

    # The writer names its file after the path it is given, not the WAV.
    writer = whisper.utils.get_writer(config.output_format, str(output_dir))
    writer(result, str(input_path))

    subtitle_path = output_dir / f"{input_path.stem}.{config.output_format}"
    if not subtitle_path.is_file():
        raise TranscriptionError(f"Whisper did not produce {subtitle_path}")
    log.info("Subtitle track written: %s", subtitle_path)
    return subtitle_path
