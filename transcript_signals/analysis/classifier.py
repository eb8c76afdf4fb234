"""Speech Style Classifier

Classifies an utterance's speech style from its text features with an
ordered decision list. The first matching rule wins; confidences are fixed
per rule rather than derived from the input.
"""

import logging
from typing import Optional

from transcript_signals.analysis.linguistic import TextFeatureExtractor
from transcript_signals.models.enums import SpeechType
from transcript_signals.models.features import TextFeatures
from transcript_signals.models.results import Classification


logger = logging.getLogger(__name__)

RULE_CONFIDENCE = {
    SpeechType.FORMAL: 0.85,
    SpeechType.EXCITED: 0.78,
    SpeechType.CASUAL: 0.82,
    SpeechType.EMOTIONAL: 0.76,
    SpeechType.SLOW: 0.80,
    SpeechType.NORMAL: 0.75,
}


class SpeechClassifier:
    """Rule-based speech style classifier.

    Rules, tested in order:
    1. complexity > 0.3 and avg_word_length > 5 -> Formal
    2. speech_rate > 10 and sentiment > 0 -> Excited
    3. avg_word_length < 4 and word_count < 5 -> Casual
    4. sentiment < 0 -> Emotional
    5. speech_rate < 3 -> Slow
    6. otherwise -> Normal
    """

    def __init__(self, extractor: Optional[TextFeatureExtractor] = None):
        self.extractor = extractor or TextFeatureExtractor()

    def classify(self, features: TextFeatures) -> Classification:
        """Classify a feature vector.

        Args:
            features: Text features of one utterance

        Returns:
            Classification with speech type and its rule confidence
        """
        speech_type = self._decide(features)
        classification = Classification(
            type=speech_type,
            confidence=RULE_CONFIDENCE[speech_type]
        )

        logger.debug(f"Classified as {speech_type.label} "
                     f"(confidence={classification.confidence:.2f})")

        return classification

    def classify_text(self, text: str) -> Classification:
        """Extract features from text and classify them."""
        return self.classify(self.extractor.extract_features(text))

    def _decide(self, features: TextFeatures) -> SpeechType:
        if features.complexity > 0.3 and features.avg_word_length > 5:
            return SpeechType.FORMAL
        if features.speech_rate > 10 and features.sentiment > 0:
            return SpeechType.EXCITED
        if features.avg_word_length < 4 and features.word_count < 5:
            return SpeechType.CASUAL
        if features.sentiment < 0:
            return SpeechType.EMOTIONAL
        if features.speech_rate < 3:
            return SpeechType.SLOW
        return SpeechType.NORMAL
