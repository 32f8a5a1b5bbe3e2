"""Timestamps and section markers for lesson audio."""

from aula_click.cleaner import clean_text_for_tts
from aula_click.constants import (
    DEFAULT_WORDS_PER_SECOND,
    MARKER_CONTENT,
    MARKER_INTRODUCTION,
    MARKER_KEYWORDS,
    MIN_SEGMENT_SECONDS,
    WORDS_PER_SECOND,
)
from aula_click.exercises import clean_content_from_exercises
from aula_click.models import Segment


def estimate_duration(text: str, language: str) -> float:
    """Estimated speaking time in seconds, never below MIN_SEGMENT_SECONDS."""
    words_per_second = WORDS_PER_SECOND.get(language, DEFAULT_WORDS_PER_SECOND)
    return max(len(text.split()) / words_per_second, MIN_SEGMENT_SECONDS)


def marker_label(text: str, index: int) -> str:
    if index == 0:
        return MARKER_INTRODUCTION
    lower = text.lower()
    for label, keywords in MARKER_KEYWORDS:
        if any(k in lower for k in keywords):
            return label
    return MARKER_CONTENT


def build_timeline(segments: list[Segment], durations: list[float] | None = None) -> float:
    """Lay segments back to back from 0s, in-place. Returns total duration.

    durations (seconds per segment) replaces the word-rate estimate when the
    real clip lengths are known.
    """
    if durations is not None and len(durations) != len(segments):
        raise ValueError(f"Got {len(durations)} durations for {len(segments)} segments")

    current = 0.0
    for i, seg in enumerate(segments):
        if durations is None:
            duration = estimate_duration(seg.text, seg.language)
        else:
            duration = durations[i]
        seg.start_time = current
        seg.end_time = current + duration
        seg.marker_label = marker_label(seg.text, i)
        current = seg.end_time
    return current


def lesson_text(title: str, content: str) -> str:
    """Speakable text for a lesson: title plus body, exercises removed."""
    body = clean_content_from_exercises(content or "")
    if title:
        body = f"{title}. {body}"
    return clean_text_for_tts(body)
