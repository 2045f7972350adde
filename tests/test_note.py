"""Tests for note mapping and NoteEvent."""

import pytest

from basswitch.core import (
    NoteEvent,
    frequency_to_midi,
    frequency_to_note_name,
    midi_to_frequency,
    midi_to_note_name,
    round_midi,
)


class TestFrequencyToMidi:
    """Tests for frequency_to_midi."""

    def test_reference_pitches(self):
        assert frequency_to_midi(440.0) == pytest.approx(69.0)
        assert frequency_to_midi(261.63) == pytest.approx(60.0, abs=0.01)
        assert frequency_to_midi(55.0) == pytest.approx(33.0)
        assert frequency_to_midi(880.0) == pytest.approx(81.0)

    def test_fractional_result(self):
        # Quarter tone above A4
        assert frequency_to_midi(440.0 * 2 ** (0.5 / 12)) == pytest.approx(69.5)

    @pytest.mark.parametrize("freq", [0.0, -55.0])
    def test_non_positive_frequency_rejected(self, freq):
        with pytest.raises(ValueError, match="positive"):
            frequency_to_midi(freq)

    def test_midi_to_frequency_inverse(self):
        assert midi_to_frequency(69) == 440.0
        assert abs(midi_to_frequency(60) - 261.63) < 0.01
        assert frequency_to_midi(midi_to_frequency(41.3)) == pytest.approx(41.3)


class TestMidiToNoteName:
    """Tests for midi_to_note_name."""

    def test_pitch_name(self):
        assert midi_to_note_name(69) == "A4"
        assert midi_to_note_name(60) == "C4"
        assert midi_to_note_name(61) == "C#4"
        assert midi_to_note_name(33) == "A1"
        assert midi_to_note_name(0) == "C-1"

    def test_rounds_to_nearest(self):
        assert midi_to_note_name(68.6) == "A4"
        assert midi_to_note_name(69.4) == "A4"

    def test_ties_round_away_from_zero(self):
        assert round_midi(69.5) == 70
        assert round_midi(68.5) == 69
        assert round_midi(-0.5) == -1
        assert midi_to_note_name(68.5) == "A4"

    def test_negative_midi_numbers(self):
        # Pitch class stays in range below MIDI 0
        assert midi_to_note_name(-1) == "B-2"
        assert midi_to_note_name(-12) == "C-2"
        assert midi_to_note_name(-13) == "B-3"

    @pytest.mark.parametrize(
        "freq,name",
        [
            (41.20, "E1"),
            (55.0, "A1"),
            (65.41, "C2"),
            (73.42, "D2"),
            (110.0, "A2"),
            (261.63, "C4"),
            (440.0, "A4"),
        ],
    )
    def test_equal_temperament_table(self, freq, name):
        assert frequency_to_note_name(freq) == name


class TestNoteEvent:
    """Tests for NoteEvent."""

    def test_event_fields(self):
        event = NoteEvent(name="A1", frequency=53.83, frame_index=9, sample_offset=36864, time=0.836)
        assert event.name == "A1"
        assert event.midi == 33
        assert event.frame_index == 9

    def test_event_is_immutable(self):
        event = NoteEvent(name="A1", frequency=55.0)
        with pytest.raises(AttributeError):
            event.name = "B1"

    def test_to_dict(self):
        event = NoteEvent(name="E1", frequency=40.37, frame_index=3, sample_offset=12288, time=0.25)
        assert event.to_dict() == {
            "name": "E1",
            "frequency": 40.37,
            "frame_index": 3,
            "sample_offset": 12288,
            "time": 0.25,
        }
