"""Byte, base64 and PCM16 helpers for the realtime speech tutor."""

import asyncio
import base64
import binascii
import io
import re

import numpy as np
from pydub import AudioSegment

from aula_click.constants import PCM_MIME_TYPE, PCM_SAMPLE_RATE
from aula_click.models import PcmBlob

_ASCII_WHITESPACE_RE = re.compile(r"[\t\n\f\r ]+")


def decode(b64: str) -> bytes:
    """Forgiving base64 decode, as browsers' atob() does it.

    ASCII whitespace is ignored and missing "=" padding is restored.
    Characters outside the standard alphabet, misplaced padding, or a
    length that no padding can fix raise binascii.Error.
    """
    data = _ASCII_WHITESPACE_RE.sub("", b64)
    if len(data) % 4 == 0:
        if data.endswith("=="):
            data = data[:-2]
        elif data.endswith("="):
            data = data[:-1]
    if "=" in data:
        raise binascii.Error("Misplaced base64 padding")
    if len(data) % 4 == 1:
        raise binascii.Error("Invalid base64 length")
    data += "=" * (-len(data) % 4)
    return base64.b64decode(data, validate=True)


async def decode_audio_data(audio_data: bytes, format: str | None = None) -> AudioSegment:
    """Decode an audio container (mp3, wav, ogg, ...) into an AudioSegment.

    The bytes are copied before decoding; the decoder runs in a worker thread
    and its errors propagate to the caller.
    """
    buffer = io.BytesIO(bytes(audio_data))
    return await asyncio.to_thread(AudioSegment.from_file, buffer, format=format)


def _to_int16(samples) -> np.ndarray:
    # Float32 input, scaled in double precision
    s = np.asarray(samples, dtype=np.float32).astype(np.float64)
    s = np.nan_to_num(s, nan=0.0)
    s = np.clip(s, -1.0, 1.0)
    # Asymmetric scaling: -1.0 -> -32768, 1.0 -> 32767
    scaled = np.where(s < 0, s * 0x8000, s * 0x7FFF)
    return np.trunc(scaled).astype("<i2")


def float32_to_pcm16(samples) -> bytes:
    """Convert float samples in [-1, 1] to little-endian signed 16-bit PCM."""
    return _to_int16(samples).tobytes()


def create_pcm_blob(samples) -> PcmBlob:
    return PcmBlob(data=float32_to_pcm16(samples), mime_type=PCM_MIME_TYPE)


def array_buffer_to_base64(buffer: bytes) -> str:
    return base64.b64encode(bytes(buffer)).decode("ascii")


def pcm16_to_float32(buffer: bytes) -> np.ndarray:
    """Reinterpret little-endian PCM16 bytes as float32 samples in [-1, 1)."""
    samples = np.frombuffer(bytes(buffer), dtype="<i2")
    return samples.astype(np.float32) / 0x8000


def pcm16_to_audio_segment(buffer: bytes, sample_rate: int = PCM_SAMPLE_RATE) -> AudioSegment:
    """Wrap mono PCM16 frames from the speech service as an AudioSegment."""
    return AudioSegment(
        data=bytes(buffer),
        sample_width=2,
        frame_rate=sample_rate,
        channels=1,
    )


def build_realtime_input(samples) -> dict:
    """Message carrying one microphone frame to the realtime speech API."""
    return {
        "realtimeInput": {
            "mediaChunks": [{
                "mimeType": PCM_MIME_TYPE,
                "data": array_buffer_to_base64(float32_to_pcm16(samples)),
            }]
        }
    }
