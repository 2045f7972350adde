"""Global constants for Bass Switch."""

# Pitch names
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Tuning reference
A4_FREQUENCY = 440.0
A4_MIDI = 69

# 16-bit PCM normalization divisor
PCM16_MAX = 32767

# Detector defaults
DEFAULT_WINDOW_SIZE = 2048 * 8
DEFAULT_OVERLAP_DIVISOR = 4
DEFAULT_BASS_CUTOFF = 80.0  # Hz
DEFAULT_DEBOUNCE_FRAMES = 10

# Export defaults
DEFAULT_TEMPO = 120.0
DEFAULT_VELOCITY = 100
BASS_PROGRAM = 33  # Electric Bass (finger)
