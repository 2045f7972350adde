"""WAV loading for 16-bit PCM mono recordings."""

import numpy as np
from pathlib import Path
from scipy.io import wavfile
from typing import Tuple

from ..core.constants import PCM16_MAX


def pcm16_to_float(samples: np.ndarray) -> np.ndarray:
    """Scale signed 16-bit PCM samples to float32 in [-1, 1]."""
    return np.asarray(samples, dtype=np.float32) / PCM16_MAX


class WavLoader:
    """Reads mono 16-bit PCM WAV files into normalized float samples."""

    SUPPORTED_FORMATS = {".wav"}

    def load(self, path: str) -> Tuple[np.ndarray, int]:
        """
        Load a WAV file.

        Args:
            path: Path to audio file

        Returns:
            Tuple of (audio array, sample rate)

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file is not 16-bit PCM mono WAV
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {self.SUPPORTED_FORMATS}"
            )

        sr, data = wavfile.read(str(path))

        if data.dtype != np.int16:
            raise ValueError(
                f"Unsupported sample format: {data.dtype}. Expected 16-bit PCM"
            )

        channels = 1 if data.ndim == 1 else data.shape[1]
        if channels != 1:
            raise ValueError(f"Expected mono audio, got {channels} channels")

        return pcm16_to_float(data.reshape(-1)), int(sr)

    def get_duration(self, audio: np.ndarray, sr: int) -> float:
        """Get duration in seconds."""
        return len(audio) / sr
