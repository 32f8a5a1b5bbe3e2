"""Strip HTML, Markdown and emoji from lesson text before speech synthesis.

The substitutions run in a fixed order: later patterns assume earlier ones
have already collapsed their constructs.
"""

import re

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_HEADING_RE = re.compile(r"^#+\s+", re.MULTILINE)
_BOLD_RE = re.compile(r"(\*\*|__)(.*?)\1")
_ITALIC_RE = re.compile(r"(\*|_)(.*?)\1")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_CODE_BLOCK_RE = re.compile(r"```[^`]*```")
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_HORIZONTAL_RULE_RE = re.compile(r"^[-_*]{3,}$", re.MULTILINE)
_BULLET_RE = re.compile(r"^\s*[-*+]\s+", re.MULTILINE)
_NUMBERED_RE = re.compile(r"^\s*\d+\.\s+", re.MULTILINE)
_EMOJI_RE = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F700-\U0001F77F"  # alchemical
    "\U0001F780-\U0001F7FF"  # geometric shapes extended
    "\U0001F800-\U0001F8FF"  # supplemental arrows-c
    "\U0001F900-\U0001F9FF"  # supplemental symbols & pictographs
    "\U0001FA00-\U0001FA6F"  # chess symbols
    "\U0001FA70-\U0001FAFF"  # symbols & pictographs extended-a
    "\u2600-\u26FF"          # misc symbols
    "\u2700-\u27BF"          # dingbats
    "]"
)
_BLOCKQUOTE_RE = re.compile(r"^\s*>\s+", re.MULTILINE)
_REPEATED_PUNCTUATION_RE = re.compile(r"([!?.]){2,}")
_BRACKETS_RE = re.compile(r"[{}\[\]()<>]")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text_for_tts(text: str) -> str:
    """Turn rich lesson content into plain prose for a speech synthesizer."""
    if not text:
        return ""

    cleaned = _HTML_TAG_RE.sub(" ", text)
    cleaned = _HEADING_RE.sub("", cleaned)

    # **bold** / __bold__ before *italic* / _italic_
    cleaned = _BOLD_RE.sub(r"\2", cleaned)
    cleaned = _ITALIC_RE.sub(r"\2", cleaned)

    cleaned = _LINK_RE.sub(r"\1", cleaned)

    cleaned = _CODE_BLOCK_RE.sub(" ", cleaned)
    cleaned = _INLINE_CODE_RE.sub(r"\1", cleaned)

    cleaned = _HORIZONTAL_RULE_RE.sub(" ", cleaned)
    cleaned = _BULLET_RE.sub("", cleaned)
    cleaned = _NUMBERED_RE.sub("", cleaned)

    cleaned = _EMOJI_RE.sub(" ", cleaned)
    cleaned = _BLOCKQUOTE_RE.sub("", cleaned)

    # "!!!" -> "!", "?!" -> "!"
    cleaned = _REPEATED_PUNCTUATION_RE.sub(r"\1", cleaned)

    # TTS engines read these literally
    cleaned = _BRACKETS_RE.sub(" ", cleaned)

    return _WHITESPACE_RE.sub(" ", cleaned).strip()
