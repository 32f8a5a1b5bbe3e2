"""Tests for assembly module."""

import numpy as np
import pytest
from pydub import AudioSegment

from aula_click.assembly import assemble, calculate_pause
from aula_click.constants import PAUSE_LANGUAGE_CHANGE_MS, PAUSE_SAME_LANGUAGE_MS
from aula_click.models import Segment


def _seg(language="pt-BR"):
    return Segment(text="teste", language=language)


def _audio(duration_ms=500):
    return AudioSegment.silent(duration=duration_ms)


def _loud_audio(duration_ms=500):
    """Create an AudioSegment with actual sound (not silence)."""
    samples = np.random.randint(-5000, 5000, int(44100 * duration_ms / 1000), dtype=np.int16)
    return AudioSegment(
        data=samples.tobytes(),
        sample_width=2,
        frame_rate=44100,
        channels=1,
    )


def test_pause_same_language():
    assert calculate_pause(_seg("pt-BR"), _seg("pt-BR")) == PAUSE_SAME_LANGUAGE_MS


def test_pause_language_change():
    assert calculate_pause(_seg("pt-BR"), _seg("en-US")) == PAUSE_LANGUAGE_CHANGE_MS


def test_assemble_empty():
    assert len(assemble([], [])) == 0


def test_assemble_single_segment():
    result = assemble([_seg()], [_audio(500)])
    assert abs(len(result) - 500) <= 2


def test_assemble_same_language_pause():
    result = assemble([_seg(), _seg()], [_audio(500), _audio(500)])
    assert abs(len(result) - (1000 + PAUSE_SAME_LANGUAGE_MS)) <= 2


def test_assemble_language_change_pause():
    segments = [_seg("pt-BR"), _seg("en-US"), _seg("en-US")]
    result = assemble(segments, [_audio(300), _audio(300), _audio(300)])
    assert abs(len(result) - (900 + PAUSE_LANGUAGE_CHANGE_MS + PAUSE_SAME_LANGUAGE_MS)) <= 2


def test_assemble_preserves_order():
    """Sound clip placed second is found after the first clip and pause."""
    result = assemble([_seg(), _seg()], [_audio(500), _loud_audio(500)])
    assert result[:500].dBFS == float("-inf")
    assert result[500 + PAUSE_SAME_LANGUAGE_MS:].dBFS > -60


def test_assemble_length_mismatch():
    with pytest.raises(ValueError):
        assemble([_seg()], [])
