"""Bass note switch detection over overlapping frames."""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

import librosa
import numpy as np

from ..core import DetectorConfig, NoteEvent, frequency_to_note_name
from ..analysis import SpectralFrameAnalyzer, BassPeakPicker
from .debounce import NoteDebouncer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameDetection:
    """Pre-debounce result for one analysis frame."""

    frame_index: int
    sample_offset: int
    frequency: Optional[float] = None  # None for frames without a bass peak
    note_name: Optional[str] = None

    @property
    def voiced(self) -> bool:
        """Whether the frame produced a bass peak."""
        return self.frequency is not None


class NoteSwitchDetector:
    """Detects changes of the bass root note in a mono waveform.

    Frames of ``window_size`` samples, ``hop_size`` apart, are windowed and
    transformed; the strongest bin below the bass cutoff is mapped to a note
    name, and a debouncer turns those per-frame names into switch events.
    """

    def __init__(self, config: Optional[DetectorConfig] = None):
        """
        Initialize NoteSwitchDetector.

        Args:
            config: Detector tunables (defaults to DetectorConfig())

        Raises:
            ValueError: If the config is invalid
        """
        self.config = (config or DetectorConfig()).validate()
        self.analyzer = SpectralFrameAnalyzer(self.config.window_size)
        self.picker = BassPeakPicker(self.config.bass_cutoff)

    @property
    def window_size(self) -> int:
        return self.config.window_size

    @property
    def hop_size(self) -> int:
        return self.config.hop_size

    def iter_frame_offsets(self, n_samples: int) -> Iterator[int]:
        """Yield start offsets of every full frame strictly inside the buffer."""
        for i in range(0, n_samples, self.hop_size):
            if i + self.window_size >= n_samples:
                break
            yield i

    def count_frames(self, n_samples: int) -> int:
        """Number of frames analyzed for a buffer of n_samples."""
        return sum(1 for _ in self.iter_frame_offsets(n_samples))

    def detect_frames(
        self, samples: np.ndarray, sample_rate: int
    ) -> Iterator[FrameDetection]:
        """
        Run spectral analysis and peak picking frame by frame.

        Args:
            samples: Normalized mono audio
            sample_rate: Sample rate in Hz

        Yields:
            FrameDetection per analyzed frame, in frame order
        """
        samples = np.asarray(samples, dtype=np.float32)
        bin_scale = self.analyzer.bin_scale(sample_rate)

        for frame_index, offset in enumerate(self.iter_frame_offsets(len(samples))):
            frame = samples[offset:offset + self.window_size]
            magnitudes = self.analyzer.analyze(frame)
            bass_freq = self.picker.pick(magnitudes, bin_scale)

            if bass_freq is None:
                yield FrameDetection(frame_index=frame_index, sample_offset=offset)
                continue

            yield FrameDetection(
                frame_index=frame_index,
                sample_offset=offset,
                frequency=bass_freq,
                note_name=frequency_to_note_name(bass_freq),
            )

    def detect(self, samples: np.ndarray, sample_rate: int) -> List[NoteEvent]:
        """
        Detect bass note switches.

        Args:
            samples: Normalized mono audio
            sample_rate: Sample rate in Hz

        Returns:
            Note events in frame order, no two consecutive with the same name
        """
        debouncer = NoteDebouncer(self.config.debounce_frames)
        events: List[NoteEvent] = []
        n_frames = 0

        for detection in self.detect_frames(samples, sample_rate):
            n_frames += 1
            # Silent frames leave the debounce history untouched
            if not detection.voiced:
                continue

            event = debouncer.update(
                detection.note_name,
                detection.frequency,
                frame_index=detection.frame_index,
                sample_offset=detection.sample_offset,
                time=float(
                    librosa.samples_to_time(detection.sample_offset, sr=sample_rate)
                ),
            )
            if event is not None:
                events.append(event)

        logger.debug(
            "Analyzed %d frames (window=%d, hop=%d): %d switches",
            n_frames, self.window_size, self.hop_size, len(events),
        )
        return events

    def detect_names(self, samples: np.ndarray, sample_rate: int) -> List[str]:
        """Detect bass note switches, returning only the note names."""
        return [event.name for event in self.detect(samples, sample_rate)]
