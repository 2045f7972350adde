"""Note mapping and the NoteEvent record emitted by the detector."""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict

import numpy as np

from .constants import PITCH_NAMES, A4_FREQUENCY, A4_MIDI


def frequency_to_midi(frequency_hz: float) -> float:
    """Convert frequency (Hz) to a fractional MIDI number.

    Raises:
        ValueError: If frequency is not positive
    """
    if frequency_hz <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency_hz}")
    return float(A4_MIDI + 12 * np.log2(frequency_hz / A4_FREQUENCY))


def midi_to_frequency(midi_number: float) -> float:
    """Convert MIDI number to frequency (Hz)."""
    return A4_FREQUENCY * (2 ** ((midi_number - A4_MIDI) / 12.0))


def round_midi(midi_number: float) -> int:
    """Round to the nearest MIDI number, ties away from zero."""
    return int(math.copysign(math.floor(abs(midi_number) + 0.5), midi_number))


def midi_to_note_name(midi_number: float) -> str:
    """Get note name (e.g., 'C4', 'A#3') for a MIDI number."""
    midi = round_midi(midi_number)
    # Floor semantics keep the pitch class in [0, 12) for negative numbers
    octave = (midi // 12) - 1
    name = PITCH_NAMES[midi % 12]
    return f"{name}{octave}"


def frequency_to_note_name(frequency_hz: float) -> str:
    """Convert frequency (Hz) straight to a note name."""
    return midi_to_note_name(frequency_to_midi(frequency_hz))


@dataclass(frozen=True)
class NoteEvent:
    """A confirmed bass note switch."""

    name: str  # Note name, e.g. 'A1'
    frequency: float  # Peak frequency (Hz) that produced the switch
    frame_index: int = 0  # Index of the confirming frame
    sample_offset: int = 0  # First sample of the confirming frame
    time: float = 0.0  # Frame start in seconds

    @property
    def midi(self) -> int:
        """Rounded MIDI pitch of the source frequency."""
        return round_midi(frequency_to_midi(self.frequency))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return asdict(self)
