"""Shared fixtures: synthetic bass signals and WAV files."""

import numpy as np
import pytest
from scipy.io import wavfile


def generate_sine_wave(freq: float, duration: float, sr: int, amplitude: float = 0.8) -> np.ndarray:
    """Generate a sine wave at given frequency."""
    t = np.arange(int(sr * duration)) / sr
    return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)


def generate_tone_sequence(frequencies: list, durations: list, sr: int) -> np.ndarray:
    """Concatenate sine tones, one per (frequency, duration) pair."""
    return np.concatenate(
        [generate_sine_wave(f, d, sr) for f, d in zip(frequencies, durations)]
    )


def to_pcm16(audio: np.ndarray) -> np.ndarray:
    """Quantize float audio to 16-bit PCM."""
    return np.clip(np.round(audio * 32767), -32768, 32767).astype(np.int16)


@pytest.fixture
def sine():
    return generate_sine_wave


@pytest.fixture
def tone_sequence():
    return generate_tone_sequence


@pytest.fixture
def write_wav(tmp_path):
    """Write float or int16 audio to a WAV file in tmp_path."""

    def _write(audio: np.ndarray, sr: int, name: str = "bass.wav"):
        path = tmp_path / name
        if audio.dtype != np.int16:
            audio = to_pcm16(audio)
        wavfile.write(str(path), sr, audio)
        return path

    return _write
