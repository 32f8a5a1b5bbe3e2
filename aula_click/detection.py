"""Heuristic Portuguese/English detection and language segmentation."""

import logging
import re

from aula_click.constants import (
    CHUNK_MAX_CHARS,
    EN_US,
    ENGLISH_STOPWORDS,
    ENGLISH_TERMS,
    MIXED_MIN_TOKENS,
    MIXED_THRESHOLD_RATIO,
    PARAGRAPH_ENGLISH_WORDS,
    PARAGRAPH_PORTUGUESE_WORDS,
    PORTUGUESE_PATTERNS,
    PORTUGUESE_STOPWORDS,
    PORTUGUESE_WORDS,
    PT_BR,
)
from aula_click.models import Segment

logger = logging.getLogger(__name__)

_PATTERNS = [re.compile(p, re.IGNORECASE) for p in PORTUGUESE_PATTERNS]
_ENGLISH_TERMS_RE = re.compile(
    r"\b(" + "|".join(re.escape(t) for t in ENGLISH_TERMS) + r")\b",
    re.IGNORECASE,
)
_TOKEN_PUNCTUATION_RE = re.compile(r"[.,!?;:()]")

# Letter tokens including accented Latin letters and apostrophes
_WORD_RE = re.compile(r"[a-zà-úâêôãõáéíóúç']+", re.IGNORECASE)
_ASCII_LETTER_RE = re.compile(r"[A-Za-z]")

_ACCENTED_RE = re.compile(r"[áàâãéêíóôõúçÁÀÂÃÉÊÍÓÔÕÚÇ]")
_FUNCTION_WORD_RE = re.compile(
    r"\b(o|a|os|as|um|uma|de|da|do|para|com|em|que|não|sim|é|são)\b",
    re.IGNORECASE,
)

_CHUNK_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?;:])\s+")
_WHITESPACE_SPLIT_RE = re.compile(r"\s+")


def detect_portuguese(text) -> bool:
    """Decide whether text is predominantly Brazilian Portuguese.

    Explicit patterns short-circuit; otherwise at least 30% of the
    whitespace tokens (minimum one) must be in the Portuguese lexicon.
    Never raises: empty or non-string input is simply False.
    """
    if not text or not isinstance(text, str):
        logger.debug("Language detection skipped: empty or non-string input")
        return False

    clean_text = text.lower().strip()

    for pattern in _PATTERNS:
        if pattern.search(clean_text):
            return True

    words = clean_text.split()
    portuguese_count = 0
    for word in words:
        if _TOKEN_PUNCTUATION_RE.sub("", word) in PORTUGUESE_WORDS:
            portuguese_count += 1

    threshold = max(1, int(len(words) * MIXED_THRESHOLD_RATIO))
    return portuguese_count >= threshold


def has_portuguese_mixed(text) -> bool:
    """True for Portuguese text that also carries English lesson vocabulary
    or is longer than a couple of words."""
    if not text or not isinstance(text, str):
        return False

    if not detect_portuguese(text):
        return False

    has_english_terms = _ENGLISH_TERMS_RE.search(text) is not None
    # Untrimmed text keeps its empty edge tokens in the count
    return has_english_terms or len(_WHITESPACE_SPLIT_RE.split(text)) > MIXED_MIN_TOKENS


def detect_sentence_language(sentence: str) -> str:
    """Label a single sentence by stop-word score.

    Ties are broken by the share of ASCII letters in the sentence.
    """
    english = 0
    portuguese = 0
    for token in _WORD_RE.findall(sentence.lower()):
        if token in ENGLISH_STOPWORDS:
            english += 1
        if token in PORTUGUESE_STOPWORDS:
            portuguese += 1

    if english == portuguese:
        ascii_letters = len(_ASCII_LETTER_RE.findall(sentence))
        if ascii_letters > len(sentence) - ascii_letters:
            english += 1
        else:
            portuguese += 1

    return EN_US if english > portuguese else PT_BR


def guess_language(text: str) -> str:
    """Whole-text fallback used when no segmentation is available."""
    if _ACCENTED_RE.search(text) or _FUNCTION_WORD_RE.search(text):
        return PT_BR
    return EN_US


def split_into_chunks(text: str, max_len: int = CHUNK_MAX_CHARS) -> list[str]:
    """Group sentences into chunks of at most max_len characters.

    A single sentence longer than max_len is kept whole.
    """
    chunks = []
    current = ""
    for sentence in _CHUNK_SPLIT_RE.split(text):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) > max_len:
            if current:
                chunks.append(current)
            current = sentence
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def split_into_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s]


def segment_text(text: str, max_len: int = CHUNK_MAX_CHARS) -> list[Segment]:
    """Split text into sentence-level segments labelled pt-BR or en-US.

    Order follows the source text.
    """
    if not text or not isinstance(text, str):
        return []

    segments = []
    for chunk in split_into_chunks(text.strip(), max_len):
        for sentence in split_into_sentences(chunk):
            sentence = sentence.strip()
            if sentence:
                segments.append(Segment(text=sentence, language=detect_sentence_language(sentence)))
    return segments


def segment_paragraphs(text: str) -> list[Segment]:
    """One segment per non-blank line, labelled by a short word-list vote."""
    if not text or not isinstance(text, str):
        return []

    segments = []
    for paragraph in text.split("\n"):
        paragraph = paragraph.strip()
        if not paragraph:
            continue
        english = 0
        portuguese = 0
        for word in paragraph.lower().split():
            if word in PARAGRAPH_ENGLISH_WORDS:
                english += 1
            if word in PARAGRAPH_PORTUGUESE_WORDS:
                portuguese += 1
        language = EN_US if english > portuguese else PT_BR
        segments.append(Segment(text=paragraph, language=language))
    return segments
