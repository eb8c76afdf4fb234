"""Helpers for presenting attention weights"""

from typing import List, Sequence, Tuple


def describe_attention(weight: float) -> str:
    """Describe the intensity of an attention weight in words."""
    if weight > 0.8:
        return 'Very High'
    if weight > 0.6:
        return 'High'
    if weight > 0.4:
        return 'Medium'
    if weight > 0.2:
        return 'Low'
    return 'Very Low'


def average_attention(weights: Sequence[float]) -> float:
    """Mean attention of a sentence, 0.0 when there are no weights."""
    if not weights:
        return 0.0
    return sum(weights) / len(weights)


def top_attended(tokens: Sequence[str], weights: Sequence[float], k: int = 3) -> List[Tuple[str, float]]:
    """Return the k highest-weighted tokens, ties resolved by position.

    Args:
        tokens: Tokens of the utterance
        weights: Weights aligned with tokens
        k: Number of tokens to return

    Returns:
        List of (token, weight) pairs, highest weight first
    """
    if len(tokens) != len(weights):
        raise ValueError(f"Got {len(weights)} weights for {len(tokens)} tokens")
    ranked = sorted(enumerate(zip(tokens, weights)), key=lambda item: (-item[1][1], item[0]))
    return [pair for _, pair in ranked[:max(k, 0)]]
