"""Output layer - Reporting and export of note switches.

- Console lines and JSON summaries
- MIDI files (one held note per switch)
"""

from .midi import MIDIExporter
from .report import format_event, events_to_json

__all__ = [
    "MIDIExporter",
    "format_event",
    "events_to_json",
]
