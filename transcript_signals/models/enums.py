"""Enumerations for speech styles, audio patterns and quality tiers"""

from enum import Enum


class SpeechType(Enum):
    """Speech-style categories produced by the speech classifier"""
    FORMAL = "FormalSpeech"
    EXCITED = "ExcitedSpeech"
    CASUAL = "CasualSpeech"
    EMOTIONAL = "EmotionalSpeech"
    SLOW = "SlowSpeech"
    NORMAL = "NormalSpeech"
    
    @property
    def label(self) -> str:
        """Human-readable label, e.g. "Formal Speech" """
        return self.value.replace("Speech", " Speech")


class SpeechPattern(Enum):
    """Rolling speech pattern derived from recent audio frames"""
    CONTINUOUS = "continuous"
    INTERMITTENT = "intermittent"
    SPARSE = "sparse"
    SILENT = "silent"
    UNKNOWN = "unknown"


class PatternQuality(Enum):
    """Coarse quality of a speech pattern summary"""
    HIGH = "high"
    MEDIUM = "medium"


class SignalQuality(Enum):
    """Per-frame signal quality reported by voice activity detection"""
    GOOD = "good"
    POOR = "poor"


class QualityLevel(Enum):
    """Audio quality tiers for a quality assessment"""
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class RecognitionQuality(Enum):
    """Quality label combining audio level and recognizer confidence"""
    HIGH = "High Quality"
    GOOD = "Good Quality"
    MODERATE = "Moderate Quality"
    POOR = "Poor Quality"
