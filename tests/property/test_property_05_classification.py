"""Property-based tests for text features and speech classification

Feature: transcript-signals, Property 5: Total feature extraction and classification
"""

from hypothesis import given, strategies as st, settings

from transcript_signals.analysis.classifier import RULE_CONFIDENCE, SpeechClassifier
from transcript_signals.analysis.linguistic import NEGATIVE_WORDS, POSITIVE_WORDS, TextFeatureExtractor
from transcript_signals.models.enums import SpeechType


words = st.one_of(
    st.sampled_from(sorted(POSITIVE_WORDS | NEGATIVE_WORDS)),
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz?!", min_size=1, max_size=14),
)
texts = st.one_of(
    st.lists(words, max_size=20).map(" ".join),
    st.text(max_size=200),
)


# Feature: transcript-signals, Property 5: Total feature extraction and classification
@settings(max_examples=100, deadline=None)
@given(text=texts)
def test_features_are_well_formed(text):
    """For any text, extraction succeeds with guarded ratios."""
    features = TextFeatureExtractor().extract_features(text)

    assert features.word_count == len(text.split())
    assert features.speech_rate == features.word_count
    assert 0.0 <= features.complexity <= 1.0
    assert features.avg_word_length >= 0.0
    assert abs(features.sentiment) <= features.word_count
    assert features.question_marks == text.count('?')
    assert features.exclamations == text.count('!')


@settings(max_examples=100, deadline=None)
@given(text=texts)
def test_classification_is_one_of_six(text):
    """For any text, exactly one of the six styles is chosen with its rule confidence."""
    classification = SpeechClassifier().classify_text(text)

    assert isinstance(classification.type, SpeechType)
    assert classification.confidence == RULE_CONFIDENCE[classification.type]
    assert 0.0 < classification.confidence <= 1.0
