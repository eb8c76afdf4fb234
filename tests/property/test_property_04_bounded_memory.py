"""Property-based tests for the attention memory

Feature: transcript-signals, Property 4: Bounded utterance memory
"""

from hypothesis import given, strategies as st, settings

from transcript_signals.attention.engine import AttentionEngine


# Feature: transcript-signals, Property 4: Bounded utterance memory
@settings(max_examples=100, deadline=None)
@given(utterances=st.lists(st.text(max_size=40), max_size=30),
       capacity=st.integers(min_value=1, max_value=8))
def test_memory_keeps_last_utterances(utterances, capacity):
    """For any update sequence, memory holds the last `capacity` utterances in order."""
    engine = AttentionEngine(memory_capacity=capacity)

    for utterance in utterances:
        engine.update_memory(utterance)

    assert engine.get_recent_context(capacity) == utterances[-capacity:]
    assert len(engine.get_recent_context(capacity + 5)) <= capacity


@settings(max_examples=100, deadline=None)
@given(utterances=st.lists(st.text(max_size=40), max_size=30),
       k=st.integers(min_value=1, max_value=10))
def test_recent_context_is_suffix(utterances, k):
    """The recent context is always a suffix of the inserted utterances."""
    engine = AttentionEngine(memory_capacity=5)

    for utterance in utterances:
        engine.update_memory(utterance)

    context = engine.get_recent_context(k)
    assert len(context) == min(k, 5, len(utterances))
    assert context == utterances[len(utterances) - len(context):]
