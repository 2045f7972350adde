"""Per-frame magnitude spectrum."""

import numpy as np


class SpectralFrameAnalyzer:
    """Hann-windowed real FFT magnitudes for fixed-size frames.

    The window is computed once at construction and reused for every frame.
    """

    def __init__(self, window_size: int):
        """
        Initialize SpectralFrameAnalyzer.

        Args:
            window_size: Frame length in samples

        Raises:
            ValueError: If window_size is not a positive integer
        """
        if window_size < 1:
            raise ValueError(f"Cannot plan an FFT of size {window_size}")

        self.window_size = int(window_size)
        # Symmetric Hann: 0.5 * (1 - cos(2*pi*i / (N - 1)))
        self.window = np.hanning(self.window_size).astype(np.float32)

    @property
    def n_bins(self) -> int:
        """Number of real-FFT output bins (N/2 + 1)."""
        return self.window_size // 2 + 1

    def bin_scale(self, sample_rate: int) -> float:
        """Width of one bin in Hz."""
        return sample_rate / self.window_size

    def bin_frequencies(self, sample_rate: int) -> np.ndarray:
        """Frequency (Hz) of every output bin."""
        return np.fft.rfftfreq(self.window_size, d=1.0 / sample_rate)

    def analyze(self, frame: np.ndarray) -> np.ndarray:
        """
        Compute the magnitude spectrum of one frame.

        Args:
            frame: Audio samples, length window_size

        Returns:
            Magnitudes [window_size // 2 + 1]
        """
        frame = np.asarray(frame, dtype=np.float32)
        if frame.shape != (self.window_size,):
            raise ValueError(
                f"Expected frame of {self.window_size} samples, got shape {frame.shape}"
            )

        spectrum = np.fft.rfft(frame * self.window)
        return np.abs(spectrum)
