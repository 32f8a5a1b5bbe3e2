"""End-to-end tests across the lesson text pipeline (no network)."""

from aula_click.detection import has_portuguese_mixed, segment_text
from aula_click.exercises import clean_content_from_exercises, parse_exercises_from_content
from aula_click.timeline import build_timeline, lesson_text
from aula_click.voices import assign_voices


def test_lesson_pipeline(lesson_html):
    """Lesson HTML → exercises + voiced, timed language segments."""
    exercises = parse_exercises_from_content(lesson_html)
    assert len(exercises) == 2

    display_html = clean_content_from_exercises(lesson_html)
    assert "<activities>" not in display_html

    text = lesson_text("Aula 1", lesson_html)
    assert has_portuguese_mixed(text)

    segments = segment_text(text)
    assert segments
    assign_voices(segments)
    total = build_timeline(segments)

    assert total > 0
    assert segments[0].marker_label == "Introduction"
    for seg in segments:
        assert seg.voice.startswith(seg.language)
        assert seg.text
