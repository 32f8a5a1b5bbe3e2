"""Join per-segment clips into one lesson track."""

from pydub import AudioSegment

from aula_click.constants import PAUSE_SAME_LANGUAGE_MS, PAUSE_LANGUAGE_CHANGE_MS
from aula_click.models import Segment


def calculate_pause(prev: Segment, curr: Segment) -> int:
    """Longer pause when the voice switches language."""
    if prev.language != curr.language:
        return PAUSE_LANGUAGE_CHANGE_MS
    return PAUSE_SAME_LANGUAGE_MS


def assemble(segments: list[Segment], audio_files: list[AudioSegment]) -> AudioSegment:
    """Concatenate clips in segment order with language-aware pauses."""
    if len(segments) != len(audio_files):
        raise ValueError(
            f"Got {len(audio_files)} audio clips for {len(segments)} segments"
        )
    if not audio_files:
        return AudioSegment.silent(duration=0)

    result = audio_files[0]
    for i in range(1, len(audio_files)):
        pause_ms = calculate_pause(segments[i - 1], segments[i])
        result += AudioSegment.silent(duration=pause_ms) + audio_files[i]

    return result
