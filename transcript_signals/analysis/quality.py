"""Audio Quality Assessment

Scores a frame's audio quality from its measurements and the rolling speech
pattern summary. Four independent checks each contribute 25 points, so the
score is always one of 0, 25, 50, 75 or 100.
"""

import logging
from typing import List, Optional

from transcript_signals.models.enums import QualityLevel, RecognitionQuality
from transcript_signals.models.features import AudioFrameMetrics
from transcript_signals.models.results import QualityAssessment, SpeechPatternSummary


logger = logging.getLogger(__name__)

CHECK_POINTS = 25

GOOD_VOLUME = 'Good volume level'
GOOD_DISTRIBUTION = 'Good frequency distribution'
CONSISTENT_LEVELS = 'Consistent audio levels'
GOOD_DYNAMIC_RANGE = 'Good dynamic range'
VOLUME_TOO_LOW = 'Volume too low'
VOLUME_TOO_HIGH = 'Volume too high'

# One remediation per check, in check order
RECOMMENDATIONS = (
    (GOOD_VOLUME, 'Adjust microphone distance or system volume'),
    (GOOD_DISTRIBUTION, 'Check microphone quality and reduce background noise'),
    (CONSISTENT_LEVELS, 'Maintain steady speaking volume and distance'),
    (GOOD_DYNAMIC_RANGE, 'Ensure proper microphone settings and audio drivers'),
)


def quality_level(score: int) -> QualityLevel:
    """Map a 0-100 score to its quality tier."""
    if score >= 75:
        return QualityLevel.EXCELLENT
    if score >= 50:
        return QualityLevel.GOOD
    if score >= 25:
        return QualityLevel.FAIR
    return QualityLevel.POOR


class QualityAssessor:
    """Assesses audio quality and suggests improvements.

    Checks:
    1. Volume in the optimal range [0.3, 0.8]
    2. Mid band louder than both low and high bands (speech is mid-heavy)
    3. Consistent levels across recent frames (consistency > 0.7)
    4. RMS in (0.1, 0.8), indicating a usable dynamic range
    """

    def assess_quality(
        self,
        metrics: AudioFrameMetrics,
        pattern: Optional[SpeechPatternSummary] = None
    ) -> QualityAssessment:
        """Score a frame.

        Args:
            metrics: Frame measurements
            pattern: Rolling pattern summary; without it the consistency
                     check cannot pass

        Returns:
            QualityAssessment with score, tier, factors and recommendations
        """
        score = 0
        factors: List[str] = []

        if 0.3 <= metrics.average <= 0.8:
            score += CHECK_POINTS
            factors.append(GOOD_VOLUME)
        elif metrics.average < 0.1:
            factors.append(VOLUME_TOO_LOW)
        elif metrics.average > 0.9:
            factors.append(VOLUME_TOO_HIGH)

        bands = metrics.bands
        if bands.mid > bands.low and bands.mid > bands.high:
            score += CHECK_POINTS
            factors.append(GOOD_DISTRIBUTION)

        if pattern is not None and pattern.consistency > 0.7:
            score += CHECK_POINTS
            factors.append(CONSISTENT_LEVELS)

        if 0.1 < metrics.rms < 0.8:
            score += CHECK_POINTS
            factors.append(GOOD_DYNAMIC_RANGE)

        level = quality_level(score)
        assessment = QualityAssessment(
            score=score,
            level=level,
            factors=factors,
            recommendations=self._recommendations(score, factors)
        )

        logger.debug(f"Quality assessed: score={score}, level={level.value}")

        return assessment

    def _recommendations(self, score: int, factors: List[str]) -> List[str]:
        """Remediation hints for every unmet check, only below excellent."""
        if score >= 75:
            return []
        return [advice for factor, advice in RECOMMENDATIONS if factor not in factors]

    def classify_signal_quality(self, audio_level: float, confidence: float) -> RecognitionQuality:
        """Label recognition conditions from the audio level and recognizer confidence.

        Args:
            audio_level: Normalized audio level [0, 1]
            confidence: Recognizer-reported confidence [0, 1]

        Returns:
            RecognitionQuality label
        """
        if audio_level > 0.8:
            return RecognitionQuality.HIGH
        if audio_level > 0.5 and confidence > 0.7:
            return RecognitionQuality.GOOD
        if audio_level > 0.3:
            return RecognitionQuality.MODERATE
        return RecognitionQuality.POOR
