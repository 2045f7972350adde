"""Analysis layer - Low-level signal analysis.

This layer turns frames of raw audio into bass pitch estimates:
- Hann-windowed magnitude spectra
- Bass-band peak picking
"""

from .spectrum import SpectralFrameAnalyzer
from .peaks import BassPeakPicker, pick_bass_peak

__all__ = [
    "SpectralFrameAnalyzer",
    "BassPeakPicker",
    "pick_bass_peak",
]
