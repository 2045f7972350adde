"""Tests for spectral frame analysis and bass peak picking."""

import numpy as np
import pytest

from basswitch.analysis import SpectralFrameAnalyzer, BassPeakPicker, pick_bass_peak


class TestSpectralFrameAnalyzer:
    """Tests for SpectralFrameAnalyzer."""

    def test_rejects_zero_window(self):
        with pytest.raises(ValueError, match="Cannot plan"):
            SpectralFrameAnalyzer(0)

    def test_output_length(self):
        analyzer = SpectralFrameAnalyzer(1024)
        magnitudes = analyzer.analyze(np.zeros(1024))
        assert magnitudes.shape == (513,)
        assert analyzer.n_bins == 513

    def test_hann_window_shape(self):
        n = 8
        analyzer = SpectralFrameAnalyzer(n)
        i = np.arange(n)
        expected = 0.5 * (1 - np.cos(2 * np.pi * i / (n - 1)))
        np.testing.assert_allclose(analyzer.window, expected, atol=1e-6)
        assert analyzer.window[0] == pytest.approx(0.0, abs=1e-7)
        assert analyzer.window[-1] == pytest.approx(0.0, abs=1e-7)

    def test_magnitudes_non_negative(self):
        rng = np.random.default_rng(0)
        analyzer = SpectralFrameAnalyzer(512)
        magnitudes = analyzer.analyze(rng.standard_normal(512))
        assert np.all(magnitudes >= 0)

    def test_sinusoid_peaks_at_its_bin(self, sine):
        sr = 8192
        analyzer = SpectralFrameAnalyzer(1024)  # 8 Hz per bin
        frame = sine(440.0, 1024 / sr, sr)
        magnitudes = analyzer.analyze(frame)
        assert int(np.argmax(magnitudes)) == 55

    def test_bin_frequencies(self):
        analyzer = SpectralFrameAnalyzer(16384)
        freqs = analyzer.bin_frequencies(44100)
        assert freqs[0] == 0.0
        assert freqs[1] == pytest.approx(44100 / 16384)
        assert freqs[-1] == pytest.approx(22050.0)
        assert analyzer.bin_scale(44100) == pytest.approx(2.69165, rel=1e-4)

    def test_wrong_frame_length(self):
        analyzer = SpectralFrameAnalyzer(256)
        with pytest.raises(ValueError, match="Expected frame"):
            analyzer.analyze(np.zeros(128))

    def test_deterministic(self, sine):
        analyzer = SpectralFrameAnalyzer(2048)
        frame = sine(55.0, 1.0, 22050)[:2048]
        np.testing.assert_array_equal(analyzer.analyze(frame), analyzer.analyze(frame))


class TestBassPeakPicker:
    """Tests for bass peak picking."""

    def test_single_bin_below_cutoff(self):
        magnitudes = np.zeros(100)
        magnitudes[20] = 3.0
        assert pick_bass_peak(magnitudes, bin_scale=2.0, cutoff=80.0) == 40.0

    def test_all_zero_spectrum(self):
        assert pick_bass_peak(np.zeros(100), bin_scale=2.0, cutoff=80.0) is None

    def test_ignores_peak_above_cutoff(self):
        magnitudes = np.zeros(100)
        magnitudes[10] = 1.0  # 20 Hz
        magnitudes[50] = 100.0  # 100 Hz
        assert pick_bass_peak(magnitudes, bin_scale=2.0, cutoff=80.0) == 20.0

    def test_bin_at_cutoff_is_candidate(self):
        magnitudes = np.zeros(100)
        magnitudes[40] = 1.0  # exactly 80 Hz
        assert pick_bass_peak(magnitudes, bin_scale=2.0, cutoff=80.0) == 80.0

    def test_bin_just_above_cutoff_ignored(self):
        magnitudes = np.zeros(100)
        magnitudes[41] = 5.0  # 82 Hz
        assert pick_bass_peak(magnitudes, bin_scale=2.0, cutoff=80.0) is None

    def test_tie_goes_to_lowest_bin(self):
        magnitudes = np.zeros(100)
        magnitudes[15] = 2.0
        magnitudes[25] = 2.0
        assert pick_bass_peak(magnitudes, bin_scale=2.0, cutoff=80.0) == 30.0

    def test_dc_peak_is_no_peak(self):
        magnitudes = np.zeros(100)
        magnitudes[0] = 10.0
        magnitudes[5] = 1.0
        assert pick_bass_peak(magnitudes, bin_scale=2.0, cutoff=80.0) is None

    def test_picker_uses_configured_cutoff(self):
        magnitudes = np.zeros(100)
        magnitudes[10] = 1.0
        magnitudes[50] = 5.0
        assert BassPeakPicker(cutoff=120.0).pick(magnitudes, 2.0) == 100.0
        assert BassPeakPicker(cutoff=80.0).pick(magnitudes, 2.0) == 20.0
