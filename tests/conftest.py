"""Pytest configuration and fixtures"""

import pytest
from hypothesis import settings, Verbosity

from transcript_signals.models.features import AudioFrameMetrics, BandEnergies

# Register Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20, verbosity=Verbosity.normal)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Use CI profile by default
settings.load_profile("ci")


def build_metrics(
    average: float = 0.5,
    peak: float = 0.9,
    rms: float = 0.5,
    is_speaking: bool = True,
    low: float = 0.2,
    mid: float = 0.6,
    high: float = 0.1
) -> AudioFrameMetrics:
    """Create frame metrics with explicit values for testing"""
    return AudioFrameMetrics(
        average=average,
        peak=peak,
        rms=rms,
        is_speaking=is_speaking,
        bands=BandEnergies(low=low, mid=mid, high=high),
        timestamp=0.0
    )


@pytest.fixture
def make_metrics():
    """Factory fixture for AudioFrameMetrics"""
    return build_metrics
