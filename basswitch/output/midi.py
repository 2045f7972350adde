"""MIDI export of detected bass note switches."""

import pretty_midi
from typing import List, Optional
from pathlib import Path

from ..core import NoteEvent
from ..core.constants import DEFAULT_TEMPO, DEFAULT_VELOCITY, BASS_PROGRAM


class MIDIExporter:
    """Export note switches as a bass line.

    Each switch becomes one MIDI note that lasts until the next switch.
    """

    def __init__(
        self,
        tempo: float = DEFAULT_TEMPO,
        instrument_name: str = "Bass",
        instrument_program: int = BASS_PROGRAM,
        velocity: int = DEFAULT_VELOCITY,
    ):
        """
        Initialize MIDIExporter.

        Args:
            tempo: Tempo in BPM
            instrument_name: MIDI instrument name
            instrument_program: MIDI program number (0-127)
            velocity: Velocity for every note (0-127)
        """
        self.tempo = tempo
        self.instrument_name = instrument_name
        self.instrument_program = instrument_program
        self.velocity = velocity

    def events_to_pretty_midi(
        self,
        events: List[NoteEvent],
        duration: Optional[float] = None,
    ) -> pretty_midi.PrettyMIDI:
        """
        Convert events to a PrettyMIDI object without saving.

        Args:
            events: Note switches in time order
            duration: End of the recording in seconds; the last note is
                held until then (or one second if not given)
        """
        midi = pretty_midi.PrettyMIDI(initial_tempo=self.tempo)

        instrument = pretty_midi.Instrument(
            program=self.instrument_program,
            name=self.instrument_name,
        )

        for i, event in enumerate(events):
            if i + 1 < len(events):
                end = events[i + 1].time
            elif duration is not None:
                end = duration
            else:
                end = event.time + 1.0

            if end <= event.time:
                continue

            instrument.notes.append(
                pretty_midi.Note(
                    velocity=self.velocity,
                    pitch=max(0, min(127, event.midi)),
                    start=event.time,
                    end=end,
                )
            )

        midi.instruments.append(instrument)
        return midi

    def export(
        self,
        events: List[NoteEvent],
        output_path: str,
        duration: Optional[float] = None,
    ) -> None:
        """
        Export events to a MIDI file.

        Args:
            events: Note switches in time order
            output_path: Path to output MIDI file
            duration: End of the recording in seconds
        """
        midi = self.events_to_pretty_midi(events, duration)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))
