"""CLI interface with subcommand routing and the lesson-audio pipeline."""

import argparse
import json
import os
import re
import shutil
import sys

from pydub import AudioSegment

from aula_click.constants import EN_US, OUTPUT_DIR, PT_BR, TTS_RATE, VERSION
from aula_click.assembly import assemble, calculate_pause
from aula_click.cleaner import clean_text_for_tts
from aula_click.detection import (
    detect_portuguese,
    has_portuguese_mixed,
    segment_paragraphs,
    segment_text,
)
from aula_click.exercises import clean_content_from_exercises, parse_exercises_from_content
from aula_click.exporter import export
from aula_click.timeline import build_timeline, lesson_text
from aula_click.tts import generate_tts
from aula_click.voices import VOICES, assign_voices


def _check_ffmpeg():
    """Verify ffmpeg is installed."""
    if not shutil.which("ffmpeg"):
        print("Error: ffmpeg is required but not found.", file=sys.stderr)
        print("Install it with your package manager (e.g. apt install ffmpeg).", file=sys.stderr)
        raise SystemExit(1)


def _read_input(path: str) -> str:
    """Read a UTF-8 file, or stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    if not os.path.isfile(path):
        print(f"Error: File not found: {path}", file=sys.stderr)
        raise SystemExit(1)
    with open(path, encoding="utf-8") as f:
        return f.read()


def slug_from_path(path: str) -> str:
    """Convert a lesson filename to an output directory slug.

    "Aula 1 - Present Perfect.html" → "aula_1_present_perfect"
    """
    if path == "-":
        return "lesson"
    basename = os.path.splitext(os.path.basename(path))[0]
    slug = re.sub(r"[^a-zA-Z0-9]+", "_", basename).strip("_").lower()
    return slug or "lesson"


def cmd_clean(args):
    """Print text cleaned for speech synthesis."""
    print(clean_text_for_tts(_read_input(args.file)))


def cmd_detect(args):
    """Print the Portuguese / mixed-language verdicts."""
    text = _read_input(args.file)
    print(f"portuguese: {'yes' if detect_portuguese(text) else 'no'}")
    print(f"mixed: {'yes' if has_portuguese_mixed(text) else 'no'}")


def cmd_segments(args):
    """Print language segments, one per line."""
    raw = _read_input(args.file)
    if args.paragraphs:
        segments = segment_paragraphs(raw)
    else:
        segments = segment_text(clean_text_for_tts(raw))
    if not segments:
        print("No segments found.")
        return
    for seg in segments:
        print(f"[{seg.language}] {seg.text}")


def cmd_exercises(args):
    """Print parsed exercises as JSON, or the lesson without them."""
    content = _read_input(args.file)
    if args.strip:
        print(clean_content_from_exercises(content))
        return
    exercises = parse_exercises_from_content(content)
    print(json.dumps([e.to_dict() for e in exercises], indent=2, ensure_ascii=False))


def cmd_speak(args):
    """Synthesize a lesson into one MP3 with a segment manifest."""
    _check_ffmpeg()

    content = _read_input(args.file)
    title = args.title or ""
    text = lesson_text(title, content)
    if not text:
        print("Error: Lesson has no speakable text.", file=sys.stderr)
        raise SystemExit(1)

    segments = segment_text(text)

    overrides = {}
    if args.voice_pt:
        overrides[PT_BR] = args.voice_pt
    if args.voice_en:
        overrides[EN_US] = args.voice_en
    assign_voices(segments, overrides)

    slug = slug_from_path(args.file)
    lesson_dir = os.path.join(args.output, slug)
    seg_dir = os.path.join(lesson_dir, "segments")
    if args.force and os.path.exists(seg_dir):
        shutil.rmtree(seg_dir)
    os.makedirs(seg_dir, exist_ok=True)

    print(f"Generating TTS for {len(segments)} segments...")
    rates = {
        PT_BR: args.rate_pt or args.rate,
        EN_US: args.rate_en or args.rate,
    }
    paths = generate_tts(segments, seg_dir, rate=rates)
    audio_files = [AudioSegment.from_mp3(p) for p in paths]

    assembled = assemble(segments, audio_files)

    # Clip length plus the pause that follows it
    durations = []
    for i, audio in enumerate(audio_files):
        pause_ms = calculate_pause(segments[i], segments[i + 1]) if i + 1 < len(segments) else 0
        durations.append((len(audio) + pause_ms) / 1000)
    build_timeline(segments, durations)

    output_path = export(assembled, lesson_dir, slug, title, segments)
    print(f"Done: {output_path}")


def cmd_voices(args):
    """List configured voices."""
    languages = [args.language] if args.language else list(VOICES)
    found = False
    for language in languages:
        for voice in VOICES.get(language, []):
            print(f"  {language}  {voice}")
            found = True
    if not found:
        print("No matching voices found.")


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="aula-click",
        description="Aula Click: lesson text cleanup, language detection and lesson audio",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # clean
    clean_parser = subparsers.add_parser("clean", help="Strip markup and emoji for TTS")
    clean_parser.add_argument("file", help="Input file, or - for stdin")
    clean_parser.set_defaults(func=cmd_clean)

    # detect
    detect_parser = subparsers.add_parser("detect", help="Detect Portuguese / mixed-language text")
    detect_parser.add_argument("file", help="Input file, or - for stdin")
    detect_parser.set_defaults(func=cmd_detect)

    # segments
    segments_parser = subparsers.add_parser("segments", help="Split text into language segments")
    segments_parser.add_argument("file", help="Input file, or - for stdin")
    segments_parser.add_argument("--paragraphs", action="store_true", help="One segment per line")
    segments_parser.set_defaults(func=cmd_segments)

    # exercises
    exercises_parser = subparsers.add_parser("exercises", help="Extract exercises from lesson HTML")
    exercises_parser.add_argument("file", help="Lesson HTML file, or - for stdin")
    exercises_parser.add_argument("--strip", action="store_true", help="Print the lesson without the exercise block")
    exercises_parser.set_defaults(func=cmd_exercises)

    # speak
    speak_parser = subparsers.add_parser("speak", help="Generate lesson audio")
    speak_parser.add_argument("file", help="Lesson file, or - for stdin")
    speak_parser.add_argument("--title", help="Lesson title, spoken first")
    speak_parser.add_argument("--output", default=OUTPUT_DIR, help="Output directory")
    speak_parser.add_argument("--rate", default=TTS_RATE, help="Relative speech rate, e.g. -10%%")
    speak_parser.add_argument("--rate-pt", help="Speech rate for pt-BR segments (overrides --rate)")
    speak_parser.add_argument("--rate-en", help="Speech rate for en-US segments (overrides --rate)")
    speak_parser.add_argument("--voice-pt", help="Voice for pt-BR segments")
    speak_parser.add_argument("--voice-en", help="Voice for en-US segments")
    speak_parser.add_argument("--force", action="store_true", help="Regenerate existing clips")
    speak_parser.set_defaults(func=cmd_speak)

    # voices
    voices_parser = subparsers.add_parser("voices", help="List configured voices")
    voices_parser.add_argument("--language", choices=[PT_BR, EN_US], help="Only this language")
    voices_parser.set_defaults(func=cmd_voices)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    args.func(args)
