"""Detector configuration."""

import json
import numbers
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict

from .constants import (
    DEFAULT_WINDOW_SIZE,
    DEFAULT_OVERLAP_DIVISOR,
    DEFAULT_BASS_CUTOFF,
    DEFAULT_DEBOUNCE_FRAMES,
)


def _as_int(name: str, value: Any) -> int:
    """Coerce a whole-number setting to int, rejecting bools and strings."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not float(value).is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(value)


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


@dataclass
class DetectorConfig:
    """Tunables for note switch detection.

    Attributes:
        window_size: Samples per analysis frame (default: 16384)
        overlap_divisor: Hop is window_size / overlap_divisor (default: 4)
        bass_cutoff: Highest frequency in Hz considered for the bass peak (default: 80.0)
        debounce_frames: Detections a note must hold before a switch is emitted (default: 10)
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    overlap_divisor: int = DEFAULT_OVERLAP_DIVISOR
    bass_cutoff: float = DEFAULT_BASS_CUTOFF
    debounce_frames: int = DEFAULT_DEBOUNCE_FRAMES

    @property
    def hop_size(self) -> int:
        """Samples between consecutive frame starts (at least 1)."""
        return max(1, self.window_size // self.overlap_divisor)

    def validate(self) -> "DetectorConfig":
        """Check the tunables, returning self.

        Raises:
            ValueError: If any tunable has the wrong type or is out of range
        """
        for name in ("window_size", "overlap_divisor", "debounce_frames"):
            setattr(self, name, _as_int(name, getattr(self, name)))
        self.bass_cutoff = _as_float("bass_cutoff", self.bass_cutoff)

        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")
        if self.overlap_divisor < 1:
            raise ValueError(
                f"overlap_divisor must be >= 1, got {self.overlap_divisor}"
            )
        if not self.bass_cutoff > 0:
            raise ValueError(f"bass_cutoff must be positive, got {self.bass_cutoff}")
        if self.debounce_frames < 1:
            raise ValueError(
                f"debounce_frames must be >= 1, got {self.debounce_frames}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DetectorConfig":
        """Build a config from a mapping of tunables.

        Raises:
            ValueError: If the mapping contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown config keys: {sorted(unknown)}. Valid: {sorted(known)}"
            )
        return cls(**data).validate()

    @classmethod
    def from_json_file(cls, path: str) -> "DetectorConfig":
        """Load a config from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a JSON object of known tunables
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must hold a JSON object: {path}")

        return cls.from_dict(data)
