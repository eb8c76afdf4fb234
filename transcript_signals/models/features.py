"""Data models for extracted audio and text features"""

import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class BandEnergies:
    """Mean energy of the low, mid and high frequency bands
    
    Attributes:
        low: Mean of the lowest quarter of bins, normalized to [0, 1]
        mid: Mean of the middle half of bins, normalized to [0, 1]
        high: Mean of the highest quarter of bins, normalized to [0, 1]
    """
    low: float
    mid: float
    high: float
    
    def __post_init__(self):
        """Validate band energies"""
        for name in ('low', 'mid', 'high'):
            assert 0.0 <= getattr(self, name) <= 1.0, f"Band {name} must be in [0, 1]"


@dataclass(frozen=True)
class AudioFrameMetrics:
    """Measurements taken from one frequency-bin snapshot
    
    Attributes:
        average: Mean bin energy normalized to [0, 1]
        peak: Maximum bin energy normalized to [0, 1]
        rms: Root mean square of bin energies normalized to [0, 1]
        is_speaking: Whether the raw mean exceeded the speech threshold
        bands: Low/mid/high band energy distribution
        timestamp: When the frame was analyzed (seconds since epoch)
    """
    average: float
    peak: float
    rms: float
    is_speaking: bool
    bands: BandEnergies
    timestamp: float = field(default_factory=time.time)
    
    def __post_init__(self):
        """Validate frame metrics"""
        assert 0.0 <= self.average <= 1.0, "Average must be in [0, 1]"
        assert 0.0 <= self.peak <= 1.0, "Peak must be in [0, 1]"
        assert 0.0 <= self.rms <= 1.0, "RMS must be in [0, 1]"
        assert self.timestamp >= 0, "Timestamp must be non-negative"


@dataclass
class TextFeatures:
    """Feature vector extracted from a finalized utterance
    
    Attributes:
        word_count: Number of whitespace-separated tokens
        avg_word_length: Mean token length (0 for empty text)
        question_marks: Number of '?' characters in the text
        exclamations: Number of '!' characters in the text
        speech_rate: Words per utterance, a proxy for speaking rate
        sentiment: Positive minus negative word hits
        complexity: Share of tokens longer than 6 characters [0, 1]
    """
    word_count: int
    avg_word_length: float
    question_marks: int
    exclamations: int
    speech_rate: int
    sentiment: int
    complexity: float
    
    def __post_init__(self):
        """Validate feature vector"""
        assert self.word_count >= 0, "Word count must be non-negative"
        assert self.avg_word_length >= 0, "Average word length must be non-negative"
        assert self.question_marks >= 0, "Question mark count must be non-negative"
        assert self.exclamations >= 0, "Exclamation count must be non-negative"
        assert 0.0 <= self.complexity <= 1.0, "Complexity must be in [0, 1]"
