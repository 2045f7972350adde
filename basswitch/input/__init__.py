"""Input layer - Decoding WAV recordings into normalized samples."""

from .loader import WavLoader, pcm16_to_float

__all__ = [
    "WavLoader",
    "pcm16_to_float",
]
