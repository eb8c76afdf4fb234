"""Acoustic Analysis Module

This module turns frequency-bin energy snapshots from the audio pipeline into
frame measurements (volume, peak, RMS and a three-band energy distribution),
makes a voice activity decision per frame, and summarizes the rolling speech
pattern over the most recent frames.

Snapshots are byte-scale (0-255) energies for equally spaced frequency bins,
bin 0 being the lowest frequency. Band energies are coarse proxies, not a
phonetic analysis.

Input contract:
    Samples must be finite and non-negative. Values outside 0-255 are not
    sanitized; snapshots with fewer than 4 bins are rejected.
"""

import logging
import time
from collections import deque
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from transcript_signals.models.enums import PatternQuality, SignalQuality, SpeechPattern
from transcript_signals.models.features import AudioFrameMetrics, BandEnergies
from transcript_signals.models.results import SpeechPatternSummary, VoiceActivity
from transcript_signals.config.config_loader import config


logger = logging.getLogger(__name__)

MAX_SAMPLE_VALUE = 255.0
MIN_BINS = 4


class AudioProcessingError(Exception):
    """Exception raised for errors during audio processing"""
    pass


class AudioFrameAnalyzer:
    """Analyzes frequency-bin snapshots and keeps a rolling frame history.

    This class implements the audio side of the pipeline that:
    1. Computes normalized average, peak and RMS energy per frame
    2. Splits bins into low (first quarter), mid (middle half) and high
       (last quarter) bands
    3. Flags speech when the raw mean energy exceeds the speech threshold
    4. Refines the speech flag into a voice activity decision
    5. Summarizes the speech pattern over the last frames

    The history belongs to a single session; callers feed frames in arrival
    order and must not share one analyzer between concurrent streams.

    Attributes:
        speech_threshold: Raw (0-255) mean energy above which a frame is speech
        history_size: Maximum number of frames kept in the rolling history
        vad_threshold: Default normalized threshold for voice activity detection
    """

    def __init__(
        self,
        speech_threshold: Optional[float] = None,
        history_size: Optional[int] = None,
        vad_threshold: Optional[float] = None
    ):
        """Initialize the analyzer, falling back to configured values."""
        self.speech_threshold = (
            speech_threshold if speech_threshold is not None
            else config.get('audio.speech_threshold', 30)
        )
        self.history_size = (
            history_size if history_size is not None
            else config.get('audio.history_size', 10)
        )
        self.vad_threshold = (
            vad_threshold if vad_threshold is not None
            else config.get('audio.vad_threshold', 0.1)
        )
        if self.history_size < 1:
            raise ValueError(f"Invalid history_size: {self.history_size}, must be >= 1")

        self._history: deque = deque(maxlen=self.history_size)

        logger.info(f"AudioFrameAnalyzer initialized with speech_threshold={self.speech_threshold}, "
                    f"history_size={self.history_size}")

    @property
    def history(self) -> Tuple[AudioFrameMetrics, ...]:
        """Recorded frames, oldest first."""
        return tuple(self._history)

    def analyze_frame(self, samples: Sequence[float], record: bool = True) -> AudioFrameMetrics:
        """Measure one frequency-bin snapshot.

        Band boundaries use floor division: low is ``[0, N//4)``, mid is
        ``[N//4, 3N//4)`` and high is ``[3N//4, N)``. For N not divisible by
        4 the split is asymmetric, which is intended.

        Args:
            samples: N >= 4 byte-scale bin energies, lowest frequency first
            record: Append the result to the rolling history

        Returns:
            AudioFrameMetrics with values normalized by 255

        Raises:
            AudioProcessingError: If fewer than 4 bins are supplied
        """
        data = np.asarray(samples, dtype=np.float64)
        n = data.size
        if n < MIN_BINS:
            raise AudioProcessingError(
                f"Frequency snapshot needs at least {MIN_BINS} bins, got {n}"
            )

        raw_average = float(np.mean(data))
        peak = float(np.max(data))
        rms = float(np.sqrt(np.mean(data * data)))

        low_end = n // 4
        high_start = (3 * n) // 4
        bands = BandEnergies(
            low=float(np.mean(data[:low_end])) / MAX_SAMPLE_VALUE,
            mid=float(np.mean(data[low_end:high_start])) / MAX_SAMPLE_VALUE,
            high=float(np.mean(data[high_start:])) / MAX_SAMPLE_VALUE
        )

        metrics = AudioFrameMetrics(
            average=raw_average / MAX_SAMPLE_VALUE,
            peak=peak / MAX_SAMPLE_VALUE,
            rms=rms / MAX_SAMPLE_VALUE,
            is_speaking=raw_average > self.speech_threshold,
            bands=bands,
            timestamp=time.time()
        )

        if record:
            self._history.append(metrics)

        logger.debug(f"Frame analyzed: average={metrics.average:.3f}, rms={metrics.rms:.3f}, "
                     f"speaking={metrics.is_speaking}")

        return metrics

    def detect_voice_activity(
        self,
        metrics: AudioFrameMetrics,
        threshold: Optional[float] = None
    ) -> VoiceActivity:
        """Decide whether a frame contains voice.

        Voice carries most of its energy in the mid band, so the indicator
        weights mid twice as much as low: ``(2 * mid + low) / 3``.

        Args:
            metrics: Frame measurements
            threshold: Normalized threshold (> 0), defaults to vad_threshold

        Returns:
            VoiceActivity with decision, confidence and signal quality
        """
        if threshold is None:
            threshold = self.vad_threshold
        if threshold <= 0:
            raise ValueError(f"Invalid voice activity threshold: {threshold}, must be > 0")

        voice_indicator = (metrics.bands.mid * 2 + metrics.bands.low) / 3

        return VoiceActivity(
            is_voice=metrics.average > threshold and voice_indicator > threshold,
            confidence=min(1.0, voice_indicator / threshold),
            quality=SignalQuality.GOOD if metrics.rms > 0.05 else SignalQuality.POOR
        )

    def summarize_pattern(
        self,
        history: Optional[Iterable[AudioFrameMetrics]] = None
    ) -> Optional[SpeechPatternSummary]:
        """Summarize the speech pattern of the most recent frames.

        Only the last ``history_size`` frames are considered. Consistency is
        ``1 - (max - min)`` of the frame averages and is not clamped.

        Args:
            history: Frames to summarize, oldest first. Defaults to the
                     analyzer's own rolling history.

        Returns:
            SpeechPatternSummary, or None when there are no frames yet
            (insufficient data rather than an error)
        """
        frames = list(self._history if history is None else history)[-self.history_size:]
        if not frames:
            logger.debug("No frames recorded, pattern summary unavailable")
            return None

        averages = np.array([frame.average for frame in frames], dtype=np.float64)
        average_volume = float(np.mean(averages))
        consistency = 1.0 - float(np.max(averages) - np.min(averages))

        speaking_frames = sum(1 for frame in frames if frame.is_speaking)
        speech_ratio = speaking_frames / len(frames)

        if speech_ratio > 0.8:
            pattern = SpeechPattern.CONTINUOUS
        elif speech_ratio > 0.5:
            pattern = SpeechPattern.INTERMITTENT
        elif speech_ratio > 0.2:
            pattern = SpeechPattern.SPARSE
        else:
            pattern = SpeechPattern.SILENT

        quality = (
            PatternQuality.HIGH if average_volume > 0.3 and consistency > 0.5
            else PatternQuality.MEDIUM
        )

        return SpeechPatternSummary(
            average_volume=average_volume,
            consistency=consistency,
            pattern=pattern,
            speech_ratio=speech_ratio,
            quality=quality
        )

    def reset(self) -> None:
        """Clear the rolling frame history."""
        self._history.clear()
        logger.info("Audio frame history cleared")
