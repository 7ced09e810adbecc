import io
import wave
from datetime import datetime

from coffeetimer import alert
from coffeetimer.clock import CancelToken


class BrokenStream:
    def write(self, text):
        raise OSError("closed")

    def flush(self):
        raise OSError("closed")


def test_ring_emits_pulses_with_pauses(fake_clock_cls):
    token = CancelToken()
    clock = fake_clock_cls()
    stream = io.StringIO()
    assert alert.ring(3, token=token, clock=clock, stream=stream) == 3
    assert stream.getvalue() == "\a\a\a"
    assert clock.sleeps == [0.25, 0.25, 0.25]


def test_ring_stops_once_cancelled(fake_clock_cls):
    token = CancelToken()
    clock = fake_clock_cls(token=token, cancel_after=1)
    stream = io.StringIO()
    assert alert.ring(3, token=token, clock=clock, stream=stream) == 1
    assert stream.getvalue() == "\a"


def test_ring_ignores_stream_errors(fake_clock_cls):
    clock = fake_clock_cls()
    assert alert.ring(2, token=CancelToken(), clock=clock, stream=BrokenStream()) == 2


def test_timestamp_now_format():
    assert alert.timestamp_now(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"
    assert len(alert.timestamp_now()) == len("YYYY-MM-DD HH:MM:SS")


def test_generate_beep_is_mono_16bit_wav():
    data = alert.generate_beep(duration_s=0.1, samplerate=8000)
    with wave.open(io.BytesIO(data), "rb") as wf:
        assert wf.getnchannels() == 1
        assert wf.getsampwidth() == 2
        assert wf.getframerate() == 8000
        assert wf.getnframes() == 800
