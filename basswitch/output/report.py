"""Text and JSON rendering of note switches."""

from typing import Any, Dict, List, Optional

from ..core import DetectorConfig, NoteEvent


def format_event(event: NoteEvent) -> str:
    """One-line description of a switch."""
    return f"Detected bass note switch: {event.name} at {event.frequency:.2f} Hz"


def events_to_json(
    events: List[NoteEvent],
    config: Optional[DetectorConfig] = None,
    sample_rate: Optional[int] = None,
    duration: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Build a JSON-serialisable summary of a detection run.

    Args:
        events: Detected note switches
        config: Detector config used for the run
        sample_rate: Sample rate of the analyzed audio
        duration: Audio duration in seconds

    Returns:
        Dictionary with the events and run metadata
    """
    result: Dict[str, Any] = {
        "notes": [event.name for event in events],
        "events": [event.to_dict() for event in events],
    }
    if config is not None:
        result["config"] = config.to_dict()
    if sample_rate is not None:
        result["sample_rate"] = sample_rate
    if duration is not None:
        result["duration"] = duration
    return result
