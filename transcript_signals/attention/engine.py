"""Attention Engine

Assigns per-word attention weights to a tokenized utterance. Weights are
computed by deterministic heuristics (word importance lists, position,
length and relevance to recent utterances), not learned parameters.

Two normalization strategies coexist and are kept distinct:
    - single-head weights are clamped to [0.2, 1.0] and softmax-normalized,
      so they sum to 1 over the utterance;
    - multi-head weights are the element-wise mean of three specialized
      heads and are not renormalized. With up to three heads each weight lies
      in [0.2, 1.0]; extra heads reuse softmax-normalized single-head
      weights and can pull the mean below 0.2.

The engine owns a bounded memory of recent finalized utterances that serves
as context. It belongs to a single session and is mutated only through
update_memory().
"""

import logging
from collections import deque
from typing import List, Optional, Sequence

import numpy as np

from transcript_signals.config.config_loader import config


logger = logging.getLogger(__name__)

HIGH_IMPORTANCE_WORDS = frozenset([
    'important', 'critical', 'urgent', 'problem', 'solution', 'error',
    'success', 'failure', 'meeting', 'deadline', 'project', 'result'
])

MEDIUM_IMPORTANCE_WORDS = frozenset([
    'please', 'thank', 'help', 'question', 'answer', 'information',
    'data', 'report', 'analysis', 'summary', 'detail', 'process'
])

# Stopwords
LOW_IMPORTANCE_WORDS = frozenset([
    'the', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of',
    'with', 'by', 'from', 'up', 'about', 'into', 'through', 'during'
])

SEMANTIC_GROUPS = (
    frozenset(['meeting', 'conference', 'call', 'discussion', 'talk']),
    frozenset(['project', 'task', 'work', 'job', 'assignment']),
    frozenset(['problem', 'issue', 'bug', 'error', 'trouble']),
    frozenset(['data', 'information', 'report', 'analysis', 'statistics']),
    frozenset(['time', 'schedule', 'deadline', 'date', 'calendar']),
    frozenset(['money', 'cost', 'budget', 'price', 'financial']),
)

BASE_WEIGHT = 0.3
HIGH_IMPORTANCE_BONUS = 0.4
MEDIUM_IMPORTANCE_BONUS = 0.2
EDGE_POSITION_BONUS = 0.2
LONG_WORD_BONUS = 0.1
LONG_WORD_LENGTH = 6
CONTEXT_SCALE = 0.3
MIN_WEIGHT = 0.2
MAX_WEIGHT = 1.0

VERBATIM_RELEVANCE = 0.8
SEMANTIC_RELEVANCE = 0.6
BASELINE_RELEVANCE = 0.1

CONTENT_WEIGHT = 0.8
STOPWORD_WEIGHT = 0.2
SINGLE_TOKEN_POSITION_WEIGHT = 1.0


def softmax(weights: Sequence[float]) -> List[float]:
    """Exponentiate each weight and divide by the sum."""
    if len(weights) == 0:
        return []
    exp_weights = np.exp(np.asarray(weights, dtype=np.float64))
    return (exp_weights / np.sum(exp_weights)).tolist()


class AttentionEngine:
    """Computes per-word attention weights with a bounded utterance memory.

    Attributes:
        memory_capacity: Maximum number of utterances kept as context
        context_utterances: Utterances returned by get_recent_context() by
                            default, and used by the context head
        context_window: Number of context words a presentation layer shows
                        alongside highlighted words
    """

    def __init__(
        self,
        memory_capacity: Optional[int] = None,
        context_utterances: Optional[int] = None,
        context_window: Optional[int] = None
    ):
        """Initialize the engine, falling back to configured values."""
        self.memory_capacity = (
            memory_capacity if memory_capacity is not None
            else config.get('attention.memory_capacity', 5)
        )
        self.context_utterances = (
            context_utterances if context_utterances is not None
            else config.get('attention.context_utterances', 3)
        )
        self.context_window = (
            context_window if context_window is not None
            else config.get('attention.context_window', 10)
        )
        if self.memory_capacity < 1:
            raise ValueError(f"Invalid memory_capacity: {self.memory_capacity}, must be >= 1")

        self._memory: deque = deque(maxlen=self.memory_capacity)

        logger.info(f"AttentionEngine initialized with memory_capacity={self.memory_capacity}, "
                    f"context_utterances={self.context_utterances}")

    def update_memory(self, utterance: str) -> None:
        """Remember a finalized utterance, evicting the oldest beyond capacity."""
        self._memory.append(utterance)

    def get_recent_context(self, k: Optional[int] = None) -> List[str]:
        """Return the last k remembered utterances in insertion order.

        Args:
            k: Number of utterances, defaults to context_utterances
        """
        if k is None:
            k = self.context_utterances
        if k <= 0:
            return []
        return list(self._memory)[-k:]

    def clear_memory(self) -> None:
        self._memory.clear()

    def context_relevance(self, token: str, context: Sequence[str]) -> float:
        """Score how related a token is to the given context utterances.

        Returns 0.8 when the token appears verbatim among the context words,
        0.6 when it shares a semantic group with some context word, and 0.1
        otherwise.
        """
        context_words = set(' '.join(context).lower().split())
        word = token.lower()

        if word in context_words:
            return VERBATIM_RELEVANCE

        for group in SEMANTIC_GROUPS:
            if word in group and not group.isdisjoint(context_words):
                return SEMANTIC_RELEVANCE

        return BASELINE_RELEVANCE

    def compute_attention(self, tokens: Sequence[str], context: Sequence[str] = ()) -> List[float]:
        """Single-head attention over an utterance.

        Each token starts at 0.3 and gains importance, position, length and
        context bonuses. Raw weights are clamped to [0.2, 1.0] before the
        softmax.

        Args:
            tokens: Tokens of the utterance
            context: Recent utterances; relevance is only scored when non-empty

        Returns:
            One weight per token, summing to 1 (empty for no tokens)
        """
        weights = []
        last_index = len(tokens) - 1

        for index, token in enumerate(tokens):
            word = token.lower()
            weight = BASE_WEIGHT

            if word in HIGH_IMPORTANCE_WORDS:
                weight += HIGH_IMPORTANCE_BONUS
            elif word in MEDIUM_IMPORTANCE_WORDS:
                weight += MEDIUM_IMPORTANCE_BONUS

            if index == 0 or index == last_index:
                weight += EDGE_POSITION_BONUS

            if len(token) > LONG_WORD_LENGTH:
                weight += LONG_WORD_BONUS

            if context:
                weight += self.context_relevance(token, context) * CONTEXT_SCALE

            weights.append(min(MAX_WEIGHT, max(MIN_WEIGHT, weight)))

        return softmax(weights)

    def compute_multi_head_attention(self, tokens: Sequence[str], heads: int = 3) -> List[float]:
        """Multi-head attention over an utterance.

        Heads 0-2 score content, position and context relevance against the
        engine's memory. Any further heads use the single-head weights
        without context. The heads are averaged element-wise and the result
        is not renormalized.

        Args:
            tokens: Tokens of the utterance
            heads: Number of heads to average (>= 1)

        Returns:
            One averaged weight per token (empty for no tokens)

        Raises:
            ValueError: If heads is less than 1
        """
        if heads < 1:
            raise ValueError(f"Invalid number of heads: {heads}, must be >= 1")
        if not tokens:
            return []

        head_results = []
        for head in range(heads):
            if head == 0:
                head_results.append(self._content_attention(tokens))
            elif head == 1:
                head_results.append(self._positional_attention(tokens))
            elif head == 2:
                head_results.append(self._contextual_attention(tokens))
            else:
                head_results.append(self.compute_attention(tokens))

        combined = np.mean(np.asarray(head_results, dtype=np.float64), axis=0)

        logger.debug(f"Multi-head attention over {len(tokens)} tokens with {heads} heads")

        return combined.tolist()

    def _content_attention(self, tokens: Sequence[str]) -> List[float]:
        return [
            STOPWORD_WEIGHT if token.lower() in LOW_IMPORTANCE_WORDS else CONTENT_WEIGHT
            for token in tokens
        ]

    def _positional_attention(self, tokens: Sequence[str]) -> List[float]:
        """U-shaped curve, highest at the first and last token."""
        if len(tokens) == 1:
            return [SINGLE_TOKEN_POSITION_WEIGHT]

        last_index = len(tokens) - 1
        return [
            0.3 + 0.7 * (abs(index / last_index - 0.5) * 2)
            for index in range(len(tokens))
        ]

    def _contextual_attention(self, tokens: Sequence[str]) -> List[float]:
        context = self.get_recent_context()
        return [0.3 + self.context_relevance(token, context) * 0.7 for token in tokens]
