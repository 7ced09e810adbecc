"""Completion alerts: terminal bell bursts, timestamps and a WAV beep."""
from __future__ import annotations

import io
import math
import struct
import wave
from datetime import datetime
from typing import Optional, TextIO

BELL = "\a"
PULSE_PAUSE_SECONDS = 0.25
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def ring(times: int, *, token, clock, stream: TextIO) -> int:
    """Ring the terminal bell ``times`` times, pausing 250 ms after each pulse.

    Stops scheduling pulses as soon as ``token`` is cancelled. Write errors on
    ``stream`` are ignored. Returns the number of pulses emitted.
    """
    emitted = 0
    for _ in range(times):
        if token.cancelled:
            break
        try:
            stream.write(BELL)
            stream.flush()
        except (OSError, ValueError):
            pass
        emitted += 1
        clock.sleep(PULSE_PAUSE_SECONDS)
    return emitted


def timestamp_now(now: Optional[datetime] = None) -> str:
    if now is None:
        now = datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)


def generate_beep(duration_s: float = 0.5, freq: float = 880.0, volume: float = 0.5, samplerate: int = 44100) -> bytes:
    """Generate a short WAV beep (mono 16-bit PCM) in memory."""
    n_samples = int(samplerate * duration_s)
    amplitude = int(32767 * volume)
    frames = bytearray()
    for i in range(n_samples):
        t = i / samplerate
        frames += struct.pack("<h", int(amplitude * math.sin(2 * math.pi * freq * t)))
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(samplerate)
        wf.writeframes(bytes(frames))
    return buf.getvalue()
