"""Tests for constants and models."""

from aula_click.models import Exercise, PcmBlob, Segment
from aula_click import constants


def test_segment_dataclass():
    """Segment fields exist and defaults work."""
    seg = Segment(text="Olá.", language="pt-BR")
    assert seg.text == "Olá."
    assert seg.language == "pt-BR"
    assert seg.voice == ""
    assert seg.start_time == 0.0
    assert seg.end_time == 0.0
    assert seg.marker_label == ""


def test_exercise_defaults_to_multiple_choice():
    ex = Exercise(question="Q?", options=["A", "B"], correct_answer="A", explanation="E")
    assert ex.type == "multiple_choice"


def test_exercise_to_dict():
    ex = Exercise(question="Q?", options=["A"], correct_answer="A", explanation="E", type="true_false")
    assert ex.to_dict() == {
        "question": "Q?",
        "options": ["A"],
        "correct_answer": "A",
        "explanation": "E",
        "type": "true_false",
    }


def test_exercise_to_dict_key_order():
    ex = Exercise(question="Q?", options=["A"], correct_answer="A", explanation="E")
    assert list(ex.to_dict()) == ["type", "question", "options", "correct_answer", "explanation"]


def test_pcm_blob_mime_type():
    assert PcmBlob(data=b"\x00\x00").mime_type == "audio/pcm"


def test_constants_exist():
    """All module-level constants are defined."""
    expected = [
        "PT_BR",
        "EN_US",
        "MIXED_THRESHOLD_RATIO",
        "CHUNK_MAX_CHARS",
        "WORDS_PER_SECOND",
        "MIN_SEGMENT_SECONDS",
        "PAUSE_SAME_LANGUAGE_MS",
        "PAUSE_LANGUAGE_CHANGE_MS",
        "PCM_SAMPLE_RATE",
        "OUTPUT_BITRATE",
        "TTS_RETRY_COUNT",
        "TTS_RETRY_BASE_DELAY",
        "TTS_RATE",
        "OUTPUT_DIR",
        "VERSION",
        "PORTUGUESE_WORDS",
        "PORTUGUESE_PATTERNS",
        "ENGLISH_TERMS",
    ]
    for name in expected:
        assert hasattr(constants, name), f"Missing constant: {name}"


def test_portuguese_lexicon_size():
    """Lexicon stays a small curated word list."""
    assert 70 <= len(constants.PORTUGUESE_WORDS) <= 150
