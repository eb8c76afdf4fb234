"""Data models"""

from transcript_signals.models.frames import RecognitionEvent
from transcript_signals.models.features import AudioFrameMetrics, BandEnergies, TextFeatures
from transcript_signals.models.results import (
    VoiceActivity,
    SpeechPatternSummary,
    QualityAssessment,
    Classification,
    UtteranceAnnotation,
    FrameAnnotation,
)
from transcript_signals.models.enums import (
    SpeechType,
    SpeechPattern,
    PatternQuality,
    SignalQuality,
    QualityLevel,
    RecognitionQuality,
)

__all__ = [
    # Events
    "RecognitionEvent",
    # Features
    "AudioFrameMetrics",
    "BandEnergies",
    "TextFeatures",
    # Results
    "VoiceActivity",
    "SpeechPatternSummary",
    "QualityAssessment",
    "Classification",
    "UtteranceAnnotation",
    "FrameAnnotation",
    # Enums
    "SpeechType",
    "SpeechPattern",
    "PatternQuality",
    "SignalQuality",
    "QualityLevel",
    "RecognitionQuality",
]
