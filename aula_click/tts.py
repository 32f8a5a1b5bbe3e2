"""Lesson speech synthesis: one edge-tts clip per language segment.

Clip names carry a digest of the segment text, voice and rate, so editing a
lesson re-synthesizes only the segments that changed. Clips left behind by an
earlier version of the lesson are deleted after a run.
"""

import asyncio
import hashlib
import logging
import os
import re
import time

import edge_tts

from aula_click.constants import (
    CLIP_DIGEST_LENGTH,
    TTS_RATE,
    TTS_RETRY_BASE_DELAY,
    TTS_RETRY_COUNT,
)
from aula_click.models import Segment

logger = logging.getLogger(__name__)

_CLIP_NAME_RE = re.compile(r"^\d{3}_[A-Za-z-]+_[0-9a-f]+\.mp3$")


class EmptyClipError(RuntimeError):
    """edge-tts finished without writing any audio."""


async def _synthesize(text: str, voice: str, rate: str, output_path: str) -> None:
    await edge_tts.Communicate(text, voice, rate=rate).save(output_path)
    if not os.path.exists(output_path) or os.path.getsize(output_path) == 0:
        raise EmptyClipError(f"No audio written for: {text[:50]}")


def generate_single(text: str, voice: str, output_path: str, rate: str = TTS_RATE) -> None:
    """Synthesize one clip, retrying with exponential backoff.

    A network error and an empty output file both count as a failed attempt.
    The error from the last attempt propagates.
    """
    for attempt in range(1, TTS_RETRY_COUNT + 1):
        try:
            asyncio.run(_synthesize(text, voice, rate, output_path))
            return
        except Exception as e:
            if attempt == TTS_RETRY_COUNT:
                raise
            delay = TTS_RETRY_BASE_DELAY * 2 ** (attempt - 1)
            logger.warning(
                "Synthesis attempt %d/%d with %s failed (%s), retrying in %.1fs",
                attempt, TTS_RETRY_COUNT, voice, e, delay,
            )
            time.sleep(delay)


def rate_for_language(language: str, rate=TTS_RATE) -> str:
    """Resolve a rate given as one string or as a per-language dict."""
    if isinstance(rate, dict):
        return rate.get(language, TTS_RATE)
    return rate


def clip_filename(index: int, segment: Segment, rate: str = TTS_RATE) -> str:
    """Clip name such as 004_en-US_1c9e0b7a52f3.mp3: position, language, digest."""
    key = "|".join((segment.text, segment.voice, rate))
    digest = hashlib.sha256(key.encode("utf-8")).hexdigest()[:CLIP_DIGEST_LENGTH]
    return f"{index:03d}_{segment.language}_{digest}.mp3"


def _remove_stale_clips(output_dir: str, keep: set[str]) -> None:
    for name in sorted(os.listdir(output_dir)):
        if _CLIP_NAME_RE.match(name) and name not in keep:
            logger.info("Removing stale clip %s", name)
            os.remove(os.path.join(output_dir, name))


def generate_tts(segments: list[Segment], output_dir: str, rate=TTS_RATE) -> list[str]:
    """Synthesize every segment into output_dir, in order.

    rate is a relative string like "-10%", or a dict keyed by language.
    Clips whose text, voice and rate are unchanged are reused. Returns the
    clip paths.
    """
    total = len(segments)
    names = []

    for i, seg in enumerate(segments):
        seg_rate = rate_for_language(seg.language, rate)
        filename = clip_filename(i, seg, seg_rate)
        output_path = os.path.join(output_dir, filename)
        names.append(filename)

        if os.path.exists(output_path) and os.path.getsize(output_path) > 0:
            print(f"  [skip] Segment {i + 1}/{total}: {filename}")
            continue

        print(f"  Generating segment {i + 1}/{total} ({seg.language}, {seg_rate}): {filename}")
        generate_single(seg.text, seg.voice, output_path, rate=seg_rate)

    _remove_stale_clips(output_dir, set(names))
    return [os.path.join(output_dir, name) for name in names]
