"""Linguistic Feature Extraction

Extracts a fixed feature vector from a finalized utterance: token counts and
lengths, punctuation counts, a word-list sentiment score and a lexical
complexity ratio. The vector feeds the speech classifier.

Tokens are produced by lower-casing and splitting on whitespace. Punctuation
stays attached to tokens, so "great!" does not count as the positive word
"great".
"""

import logging
from typing import List

from transcript_signals.models.features import TextFeatures


logger = logging.getLogger(__name__)

POSITIVE_WORDS = frozenset([
    'good', 'great', 'awesome', 'excellent', 'wonderful', 'amazing', 'fantastic'
])

NEGATIVE_WORDS = frozenset([
    'bad', 'terrible', 'awful', 'horrible', 'disgusting', 'hate', 'angry'
])

COMPLEX_WORD_LENGTH = 6


def tokenize(text: str) -> List[str]:
    """Split an utterance on whitespace, keeping the original casing."""
    return text.split()


class TextFeatureExtractor:
    """Extracts classification features from utterance text."""

    def extract_features(self, text: str) -> TextFeatures:
        """Extract the feature vector of an utterance.

        Args:
            text: Finalized utterance text

        Returns:
            TextFeatures; empty or whitespace-only text yields zero counts,
            zero average length and zero complexity
        """
        words = [word.lower() for word in tokenize(text)]
        word_count = len(words)

        if word_count:
            avg_word_length = sum(len(word) for word in words) / word_count
            complexity = self._complexity(words)
        else:
            avg_word_length = 0.0
            complexity = 0.0

        features = TextFeatures(
            word_count=word_count,
            avg_word_length=avg_word_length,
            question_marks=text.count('?'),
            exclamations=text.count('!'),
            speech_rate=word_count,
            sentiment=self._sentiment(words),
            complexity=complexity
        )

        logger.debug(f"Text features: words={word_count}, sentiment={features.sentiment}, "
                     f"complexity={complexity:.2f}")

        return features

    def _sentiment(self, words: List[str]) -> int:
        """+1 per positive word, -1 per negative word."""
        score = 0
        for word in words:
            if word in POSITIVE_WORDS:
                score += 1
            if word in NEGATIVE_WORDS:
                score -= 1
        return score

    def _complexity(self, words: List[str]) -> float:
        complex_words = [word for word in words if len(word) > COMPLEX_WORD_LENGTH]
        return len(complex_words) / len(words)
