"""Analysis modules for audio frames and utterance text"""

from transcript_signals.analysis.acoustic import AudioFrameAnalyzer, AudioProcessingError
from transcript_signals.analysis.quality import QualityAssessor, quality_level
from transcript_signals.analysis.linguistic import TextFeatureExtractor, tokenize
from transcript_signals.analysis.classifier import SpeechClassifier

__all__ = [
    'AudioFrameAnalyzer',
    'AudioProcessingError',
    'QualityAssessor',
    'quality_level',
    'TextFeatureExtractor',
    'tokenize',
    'SpeechClassifier',
]
