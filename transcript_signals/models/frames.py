"""Data models for events consumed from the speech recognizer"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RecognitionEvent:
    """A single result emitted by the host speech-recognition engine
    
    Attributes:
        text: Recognized text for this result
        is_final: Whether the recognizer has finalized this utterance
        confidence: Recognizer-reported confidence [0, 1], if any
    """
    text: str
    is_final: bool
    confidence: Optional[float] = None
    
    def __post_init__(self):
        """Validate event data"""
        assert isinstance(self.text, str), "Text must be a string"
        if self.confidence is not None:
            assert 0.0 <= self.confidence <= 1.0, "Confidence must be in [0, 1]"
