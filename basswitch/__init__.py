"""Bass Switch - Bass root note switch detection.

Architecture Layers:
    1. core/       - Note mapping, NoteEvent, configuration
    2. input/      - WAV loading (16-bit PCM mono)
    3. analysis/   - Windowed spectra and bass peak picking
    4. detection/  - Frame scan and debounce state machine
    5. output/     - Reporting and MIDI export
"""

__version__ = "0.1.0"

# Core types
from .core import (
    NoteEvent,
    DetectorConfig,
    frequency_to_midi,
    midi_to_note_name,
)

# Input layer
from .input import WavLoader

# Analysis layer
from .analysis import SpectralFrameAnalyzer, BassPeakPicker

# Detection layer
from .detection import NoteSwitchDetector, NoteDebouncer

# Output layer
from .output import MIDIExporter

__all__ = [
    # Core
    "NoteEvent",
    "DetectorConfig",
    "frequency_to_midi",
    "midi_to_note_name",
    # Input
    "WavLoader",
    # Analysis
    "SpectralFrameAnalyzer",
    "BassPeakPicker",
    # Detection
    "NoteSwitchDetector",
    "NoteDebouncer",
    # Output
    "MIDIExporter",
]
