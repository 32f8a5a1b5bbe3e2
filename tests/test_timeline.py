"""Tests for timeline module."""

import pytest

from aula_click.constants import MIN_SEGMENT_SECONDS
from aula_click.models import Segment
from aula_click.timeline import build_timeline, estimate_duration, lesson_text, marker_label


def test_estimate_duration_by_language():
    text = " ".join(["palavra"] * 23)
    assert estimate_duration(text, "pt-BR") == pytest.approx(10.0)
    assert estimate_duration(" ".join(["word"] * 27), "en-US") == pytest.approx(10.0)


def test_estimate_duration_unknown_language():
    assert estimate_duration(" ".join(["mot"] * 5), "fr-FR") == pytest.approx(2.0)


def test_estimate_duration_minimum():
    assert estimate_duration("Oi", "pt-BR") == MIN_SEGMENT_SECONDS


def test_marker_labels():
    assert marker_label("Example one", 0) == "Introduction"
    assert marker_label("Veja este exemplo", 3) == "Examples"
    assert marker_label("A gramática do verbo", 1) == "Grammar"
    assert marker_label("Time to practice", 2) == "Practice"
    assert marker_label("Just content", 5) == "Content"


def test_marker_keyword_order():
    """Examples wins over Grammar when both appear."""
    assert marker_label("A grammar example", 1) == "Examples"


def test_build_timeline_contiguous(sample_segments):
    total = build_timeline(sample_segments)
    assert sample_segments[0].start_time == 0.0
    for prev, curr in zip(sample_segments, sample_segments[1:]):
        assert curr.start_time == prev.end_time
        assert curr.end_time > curr.start_time
    assert total == sample_segments[-1].end_time
    assert sample_segments[0].marker_label == "Introduction"
    assert sample_segments[2].marker_label == "Examples"


def test_build_timeline_with_durations(sample_segments):
    total = build_timeline(sample_segments, [1.5, 2.0, 0.5])
    assert [s.start_time for s in sample_segments] == [0.0, 1.5, 3.5]
    assert total == pytest.approx(4.0)


def test_build_timeline_duration_mismatch(sample_segments):
    with pytest.raises(ValueError):
        build_timeline(sample_segments, [1.0])


def test_build_timeline_empty():
    assert build_timeline([]) == 0.0


def test_lesson_text_strips_exercises_and_markup(lesson_html):
    text = lesson_text("Aula 1", lesson_html)
    assert text.startswith("Aula 1. Present Perfect")
    assert "estudar o present perfect" in text
    assert "activities" not in text
    assert "correct_answer" not in text
    assert "<" not in text


def test_lesson_text_without_title():
    assert lesson_text("", "<p>Olá!!</p>") == "Olá!"
