"""Export assembled lesson audio as MP3 plus a segment manifest."""

import json
import os
from dataclasses import asdict
from datetime import datetime, timezone

from pydub import AudioSegment

from aula_click.constants import OUTPUT_BITRATE, VERSION
from aula_click.models import Segment


def export(
    assembled: AudioSegment,
    output_dir: str,
    slug: str,
    title: str,
    segments: list[Segment],
) -> str:
    """Export assembled audio as MP3 with a JSON manifest beside it.

    Creates:
      - <output_dir>/<slug>.mp3
      - <output_dir>/<slug>.json (segments with timestamps and markers)

    Returns path to the MP3 file.
    """
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"{slug}.mp3")

    tags = {"title": title} if title else {}
    assembled.export(
        output_path,
        format="mp3",
        bitrate=OUTPUT_BITRATE,
        tags=tags,
    )

    audio_duration = segments[-1].end_time if segments else 0.0
    manifest = {
        "lesson": slug,
        "title": title,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "version": VERSION,
        "audio_duration": round(audio_duration, 1),
        "audio_segments": [asdict(s) for s in segments],
    }

    manifest_path = os.path.join(output_dir, f"{slug}.json")
    with open(manifest_path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)

    return output_path
