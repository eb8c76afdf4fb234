"""Data models for analysis results"""

from dataclasses import dataclass, field
from typing import List, Optional

from transcript_signals.models.enums import (
    PatternQuality,
    QualityLevel,
    RecognitionQuality,
    SignalQuality,
    SpeechPattern,
    SpeechType,
)
from transcript_signals.models.features import AudioFrameMetrics, TextFeatures


@dataclass
class VoiceActivity:
    """Voice activity decision for a single frame
    
    Attributes:
        is_voice: Whether the frame is judged to contain voice
        confidence: Ratio of the voice indicator to the threshold, capped at 1
        quality: GOOD when the frame RMS is above 0.05
    """
    is_voice: bool
    confidence: float
    quality: SignalQuality
    
    def __post_init__(self):
        """Validate voice activity data"""
        assert 0.0 <= self.confidence <= 1.0, "Confidence must be in [0, 1]"


@dataclass
class SpeechPatternSummary:
    """Summary of the most recent audio frames
    
    Attributes:
        average_volume: Mean of the frame averages
        consistency: 1 minus the spread of frame averages (not clamped)
        pattern: Speech pattern bucket derived from speech_ratio
        speech_ratio: Share of frames flagged as speaking [0, 1]
        quality: HIGH for loud and consistent audio, MEDIUM otherwise
    """
    average_volume: float
    consistency: float
    pattern: SpeechPattern
    speech_ratio: float
    quality: PatternQuality
    
    def __post_init__(self):
        """Validate pattern summary"""
        assert 0.0 <= self.speech_ratio <= 1.0, "Speech ratio must be in [0, 1]"


@dataclass
class QualityAssessment:
    """Audio quality assessment for one frame
    
    Attributes:
        score: Sum of passed checks, a multiple of 25 in [0, 100]
        level: Quality tier derived from the score
        factors: Descriptive factors recorded by the checks, in check order
        recommendations: Remediation hints for unmet checks
    """
    score: int
    level: QualityLevel
    factors: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    
    def __post_init__(self):
        """Validate assessment"""
        assert 0 <= self.score <= 100, "Score must be in [0, 100]"
        assert self.score % 25 == 0, "Score must be a multiple of 25"


@dataclass
class Classification:
    """Speech-style classification of an utterance
    
    Attributes:
        type: One of the six speech styles
        confidence: Fixed per-rule confidence in (0, 1]
    """
    type: SpeechType
    confidence: float
    
    def __post_init__(self):
        """Validate classification"""
        assert isinstance(self.type, SpeechType), "Type must be a SpeechType"
        assert 0.0 < self.confidence <= 1.0, "Confidence must be in (0, 1]"


@dataclass
class UtteranceAnnotation:
    """Everything derived from one finalized utterance
    
    Attributes:
        text: The finalized utterance text
        tokens: Whitespace tokens the attention weights are aligned to
        features: Extracted text features
        classification: Speech-style classification
        attention: Softmax-normalized single-head weights (sum to 1)
        multi_head_attention: Averaged multi-head weights (not renormalized)
        recognition_confidence: Recognizer-reported confidence [0, 1]
    """
    text: str
    tokens: List[str]
    features: TextFeatures
    classification: Classification
    attention: List[float]
    multi_head_attention: List[float]
    recognition_confidence: float
    
    def __post_init__(self):
        """Validate alignment between tokens and weights"""
        assert len(self.attention) == len(self.tokens), "Attention must align with tokens"
        assert len(self.multi_head_attention) == len(self.tokens), \
            "Multi-head attention must align with tokens"
        assert 0.0 <= self.recognition_confidence <= 1.0, "Recognition confidence must be in [0, 1]"


@dataclass
class FrameAnnotation:
    """Everything derived from one audio frame
    
    Attributes:
        metrics: Frame measurements
        voice_activity: Voice activity decision
        pattern: Rolling pattern summary, None until frames are recorded
        assessment: Quality assessment
        recognition_quality: Label combining audio level and recognizer confidence
    """
    metrics: AudioFrameMetrics
    voice_activity: VoiceActivity
    pattern: Optional[SpeechPatternSummary]
    assessment: QualityAssessment
    recognition_quality: RecognitionQuality
