"""Debounce state machine for per-frame note detections."""

import logging
from collections import deque
from typing import Deque, List, Optional

from ..core import NoteEvent
from ..core.constants import DEFAULT_DEBOUNCE_FRAMES

logger = logging.getLogger(__name__)


class NoteDebouncer:
    """Confirms a note switch only after the detection has held steady.

    Keeps the last ``debounce_frames`` detected note names. Once the history
    is full, a detection that matches the oldest entry and differs from the
    last emitted note is confirmed as a switch, and the history is cleared.
    """

    def __init__(
        self,
        debounce_frames: int = DEFAULT_DEBOUNCE_FRAMES,
        previous_note: Optional[str] = None,
    ):
        """
        Initialize NoteDebouncer.

        Args:
            debounce_frames: Capacity of the detection history
            previous_note: Last emitted note name, if any
        """
        if debounce_frames < 1:
            raise ValueError(f"debounce_frames must be >= 1, got {debounce_frames}")

        self.debounce_frames = debounce_frames
        self._previous_note = previous_note
        self._recent: Deque[str] = deque(maxlen=debounce_frames)

    @property
    def previous_note(self) -> Optional[str]:
        """Name of the last emitted note."""
        return self._previous_note

    @property
    def recent_detections(self) -> List[str]:
        """Detection history, oldest first."""
        return list(self._recent)

    def reset(self, previous_note: Optional[str] = None) -> None:
        """Forget history and the last emitted note."""
        self._previous_note = previous_note
        self._recent.clear()

    def update(
        self,
        name: str,
        frequency: float,
        frame_index: int = 0,
        sample_offset: int = 0,
        time: float = 0.0,
    ) -> Optional[NoteEvent]:
        """
        Record one detection and confirm a switch if it is stable.

        Args:
            name: Detected note name for this frame
            frequency: Peak frequency (Hz) behind the detection
            frame_index: Index of the frame in the scan
            sample_offset: First sample of the frame
            time: Frame start in seconds

        Returns:
            NoteEvent if a switch was confirmed, else None
        """
        self._recent.append(name)

        if len(self._recent) < self.debounce_frames:
            return None

        oldest = self._recent[0]
        if name == self._previous_note or name != oldest:
            return None

        event = NoteEvent(
            name=name,
            frequency=frequency,
            frame_index=frame_index,
            sample_offset=sample_offset,
            time=time,
        )
        logger.debug(
            "Switch %s -> %s at frame %d (%.2f Hz)",
            self._previous_note, name, frame_index, frequency,
        )
        self._previous_note = name
        self._recent.clear()
        return event
