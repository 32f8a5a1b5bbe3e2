"""Shared fixtures for aula_click tests."""

import pytest
from pydub import AudioSegment

from aula_click.models import Segment


@pytest.fixture
def tiny_mp3(tmp_path):
    """Generate a 100ms silent MP3 for testing."""
    path = tmp_path / "test.mp3"
    silence = AudioSegment.silent(duration=100)
    silence.export(str(path), format="mp3")
    return path


@pytest.fixture
def sample_segments():
    """Pre-built bilingual segments for voice/assembly/timeline tests."""
    return [
        Segment(text="Bem-vindo à aula de hoje.", language="pt-BR"),
        Segment(text="The present perfect connects past and present.", language="en-US"),
        Segment(text="Vamos ver um exemplo.", language="pt-BR"),
    ]


@pytest.fixture
def lesson_html():
    """Lesson HTML with an embedded exercise block."""
    return (
        "<h2>Present Perfect</h2>\n"
        "<p>Nesta aula vamos estudar o <strong>present perfect</strong>.</p>\n"
        "<activities>\n"
        '[{"type": "fill_blank", "question": "I ___ (be) here before.",'
        ' "options": [], "correct_answer": "have been",'
        ' "explanation": "Use have + particípio."},\n'
        ' {"question": "Qual frase está correta?",'
        ' "options": ["I have went", "I have gone"],'
        ' "correct_answer": "I have gone",'
        ' "explanation": "Gone é o particípio de go."}]\n'
        "</activities>"
    )
