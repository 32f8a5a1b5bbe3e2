"""Voice selection per detected language."""

import logging

from aula_click.constants import EN_US, PT_BR
from aula_click.models import Segment

logger = logging.getLogger(__name__)

# Hardcoded edge-tts neural voices (avoids network call at startup).
# First entry per language is the default.
VOICES = {
    PT_BR: [
        "pt-BR-FranciscaNeural",
        "pt-BR-AntonioNeural",
        "pt-BR-ThalitaNeural",
    ],
    EN_US: [
        "en-US-JennyNeural",
        "en-US-GuyNeural",
        "en-US-AriaNeural",
        "en-GB-SoniaNeural",
        "en-GB-RyanNeural",
    ],
}


def voice_for_language(language: str, voices: dict | None = None) -> str:
    """Default voice for a language tag; unknown tags fall back to English."""
    if voices is None:
        voices = VOICES
    pool = voices.get(language)
    if not pool:
        logger.warning("No voice configured for %s, using %s", language, EN_US)
        pool = voices.get(EN_US) or VOICES[EN_US]
    return pool[0]


def assign_voices(segments: list[Segment], overrides: dict | None = None) -> None:
    """Assign voices to all segments in-place.

    overrides maps a language tag to a voice name and wins over the defaults.
    """
    if overrides is None:
        overrides = {}

    for seg in segments:
        voice = overrides.get(seg.language)
        seg.voice = voice if voice else voice_for_language(seg.language)
