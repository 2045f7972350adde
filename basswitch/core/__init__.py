"""Core types and constants for Bass Switch."""

from .note import (
    NoteEvent,
    frequency_to_midi,
    frequency_to_note_name,
    midi_to_frequency,
    midi_to_note_name,
    round_midi,
)
from .config import DetectorConfig
from .constants import (
    PITCH_NAMES,
    PCM16_MAX,
    DEFAULT_WINDOW_SIZE,
    DEFAULT_OVERLAP_DIVISOR,
    DEFAULT_BASS_CUTOFF,
    DEFAULT_DEBOUNCE_FRAMES,
)

__all__ = [
    "NoteEvent",
    "DetectorConfig",
    "frequency_to_midi",
    "frequency_to_note_name",
    "midi_to_frequency",
    "midi_to_note_name",
    "round_midi",
    "PITCH_NAMES",
    "PCM16_MAX",
    "DEFAULT_WINDOW_SIZE",
    "DEFAULT_OVERLAP_DIVISOR",
    "DEFAULT_BASS_CUTOFF",
    "DEFAULT_DEBOUNCE_FRAMES",
]
