"""Attention weighting for transcript highlighting"""

from transcript_signals.attention.engine import AttentionEngine, softmax
from transcript_signals.attention.utils import average_attention, describe_attention, top_attended

__all__ = [
    'AttentionEngine',
    'softmax',
    'average_attention',
    'describe_attention',
    'top_attended',
]
