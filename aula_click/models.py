"""Data models for lesson text, exercises and audio frames."""

from dataclasses import dataclass, field

from aula_click.constants import DEFAULT_EXERCISE_TYPE, PCM_MIME_TYPE


@dataclass
class Segment:
    text: str
    language: str             # "pt-BR" or "en-US"
    voice: str = ""           # populated by assign_voices()
    start_time: float = 0.0   # seconds, populated by build_timeline()
    end_time: float = 0.0
    marker_label: str = ""


@dataclass
class Exercise:
    question: str
    options: list[str]
    correct_answer: str
    explanation: str
    type: str = DEFAULT_EXERCISE_TYPE   # multiple_choice, fill_blank or true_false

    def to_dict(self) -> dict:
        """Serialize with the exercise type first, as lesson JSON lists it."""
        return {
            "type": self.type,
            "question": self.question,
            "options": self.options,
            "correct_answer": self.correct_answer,
            "explanation": self.explanation,
        }


@dataclass
class PcmBlob:
    data: bytes
    mime_type: str = field(default=PCM_MIME_TYPE)
