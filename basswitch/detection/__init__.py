"""Detection layer - From per-frame pitch estimates to note switches.

- Debounce state machine over detected note names
- Overlapping-frame scan orchestrating analysis and debouncing
"""

from .debounce import NoteDebouncer
from .switches import NoteSwitchDetector, FrameDetection

__all__ = [
    "NoteDebouncer",
    "NoteSwitchDetector",
    "FrameDetection",
]
