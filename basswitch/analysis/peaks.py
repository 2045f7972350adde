"""Bass-band peak picking."""

from typing import Optional, Sequence

from ..core.constants import DEFAULT_BASS_CUTOFF


def pick_bass_peak(
    magnitudes: Sequence[float],
    bin_scale: float,
    cutoff: float = DEFAULT_BASS_CUTOFF,
) -> Optional[float]:
    """
    Find the strongest bin at or below the bass cutoff.

    Bins are scanned in increasing frequency, so the scan stops at the
    first bin above the cutoff. Equal maxima resolve to the lowest bin.

    Args:
        magnitudes: Magnitude spectrum, bin k at k * bin_scale Hz
        bin_scale: Hz per bin (sample_rate / window_size)
        cutoff: Highest frequency (Hz) eligible for the peak

    Returns:
        Peak frequency in Hz, or None if no bin has positive magnitude
        (or the peak is the DC bin)
    """
    max_magnitude = 0.0
    bass_freq = 0.0

    for j, magnitude in enumerate(magnitudes):
        freq = j * bin_scale
        if freq > cutoff:
            break
        if magnitude > max_magnitude:
            max_magnitude = magnitude
            bass_freq = freq

    if max_magnitude <= 0.0 or bass_freq <= 0.0:
        return None
    return float(bass_freq)


class BassPeakPicker:
    """Picks the dominant low-frequency bin from magnitude spectra."""

    def __init__(self, cutoff: float = DEFAULT_BASS_CUTOFF):
        self.cutoff = cutoff

    def pick(self, magnitudes: Sequence[float], bin_scale: float) -> Optional[float]:
        """Return the bass peak frequency in Hz, or None."""
        return pick_bass_peak(magnitudes, bin_scale, self.cutoff)
