"""Main Application Entry Point

This module wires the analysis components into a transcript session. A
session receives recognizer events and frequency-bin snapshots in arrival
order and produces the annotations a presentation layer renders: the speech
style of each finalized utterance, per-word attention weights and the audio
quality of each frame.

Run as a command to annotate utterances read line by line from a file or
stdin:

    transcript-signals [transcript.txt]
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from transcript_signals.analysis.acoustic import AudioFrameAnalyzer
from transcript_signals.analysis.classifier import SpeechClassifier
from transcript_signals.analysis.linguistic import TextFeatureExtractor, tokenize
from transcript_signals.analysis.quality import QualityAssessor
from transcript_signals.attention.engine import AttentionEngine
from transcript_signals.attention.utils import describe_attention
from transcript_signals.config.config_loader import config
from transcript_signals.models.frames import RecognitionEvent
from transcript_signals.models.results import FrameAnnotation, UtteranceAnnotation


logger = logging.getLogger(__name__)


class TranscriptSession:
    """Annotates one live transcript.

    The session coordinates:
    1. Text Feature Extractor and Speech Classifier (speech style per utterance)
    2. Attention Engine (per-word weights, recent-utterance memory)
    3. Audio Frame Analyzer (frame metrics, rolling history)
    4. Quality Assessor (quality score and recommendations per frame)

    The utterance and audio branches are independent. All state (transcript,
    attention memory, audio history) belongs to this session, so separate
    sessions never share context. Callers must serialize updates.

    Attributes:
        transcript: Finalized utterances joined with spaces
        interim_text: Latest non-final recognizer text
        confidence: Recognizer confidence of the last finalized utterance
        last_utterance: Annotation of the last finalized utterance
        last_frame: Annotation of the last audio frame
    """

    def __init__(
        self,
        analyzer: Optional[AudioFrameAnalyzer] = None,
        assessor: Optional[QualityAssessor] = None,
        extractor: Optional[TextFeatureExtractor] = None,
        classifier: Optional[SpeechClassifier] = None,
        attention: Optional[AttentionEngine] = None,
        heads: Optional[int] = None
    ):
        """Initialize the session with its components."""
        self.analyzer = analyzer or AudioFrameAnalyzer()
        self.assessor = assessor or QualityAssessor()
        self.extractor = extractor or TextFeatureExtractor()
        self.classifier = classifier or SpeechClassifier(self.extractor)
        self.attention = attention or AttentionEngine()
        self.heads = heads if heads is not None else config.get('attention.heads', 3)
        self.default_confidence = config.get('recognition.default_confidence', 0.85)

        self._utterances: List[str] = []
        self.interim_text = ""
        self.confidence = 0.0
        self.last_utterance: Optional[UtteranceAnnotation] = None
        self.last_frame: Optional[FrameAnnotation] = None

        logger.info(f"TranscriptSession initialized with heads={self.heads}")

    @property
    def transcript(self) -> str:
        return " ".join(self._utterances)

    def handle_recognition(self, event: RecognitionEvent) -> Optional[UtteranceAnnotation]:
        """Process one recognizer event.

        Interim events only replace the interim text. Every final event is
        classified and annotated. Attention is computed against the context
        preceding the utterance, then a non-empty utterance is appended to
        the transcript and the attention memory. Blank final text is still
        classified (as zero features) but leaves transcript and memory
        untouched.

        A missing or zero recognizer confidence is treated as unreported and
        replaced by the configured default.

        Args:
            event: Recognizer result

        Returns:
            UtteranceAnnotation for final events, None for interim ones
        """
        if not event.is_final:
            self.interim_text = event.text
            return None

        self.interim_text = ""
        text = event.text.strip()
        self.confidence = event.confidence or self.default_confidence

        tokens = tokenize(text)
        features = self.extractor.extract_features(text)
        classification = self.classifier.classify(features)
        attention = self.attention.compute_attention(tokens, self.attention.get_recent_context())
        multi_head = self.attention.compute_multi_head_attention(tokens, self.heads)
        if text:
            self._utterances.append(text)
            self.attention.update_memory(text)
        else:
            logger.warning("Received empty final utterance, transcript unchanged")

        annotation = UtteranceAnnotation(
            text=text,
            tokens=tokens,
            features=features,
            classification=classification,
            attention=attention,
            multi_head_attention=multi_head,
            recognition_confidence=self.confidence
        )
        self.last_utterance = annotation

        logger.debug(f"Utterance annotated: {classification.type.label} "
                     f"({len(tokens)} tokens, confidence={self.confidence:.2f})")

        return annotation

    def handle_audio_frame(self, samples: Sequence[float]) -> FrameAnnotation:
        """Process one frequency-bin snapshot.

        Args:
            samples: Byte-scale bin energies, lowest frequency first

        Returns:
            FrameAnnotation with metrics, voice activity, pattern and quality
        """
        metrics = self.analyzer.analyze_frame(samples)
        pattern = self.analyzer.summarize_pattern()

        annotation = FrameAnnotation(
            metrics=metrics,
            voice_activity=self.analyzer.detect_voice_activity(metrics),
            pattern=pattern,
            assessment=self.assessor.assess_quality(metrics, pattern),
            recognition_quality=self.assessor.classify_signal_quality(
                metrics.average, self.confidence
            )
        )
        self.last_frame = annotation
        return annotation

    def clear(self) -> None:
        """Reset transcript, context and audio history."""
        self._utterances = []
        self.interim_text = ""
        self.confidence = 0.0
        self.last_utterance = None
        self.last_frame = None
        self.attention.clear_memory()
        self.analyzer.reset()
        logger.info("Transcript session cleared")


def format_annotation(annotation: UtteranceAnnotation) -> str:
    """Render an annotation as plain text, one word per line."""
    classification = annotation.classification
    lines = [
        f"{annotation.text}",
        f"  style: {classification.type.label} ({classification.confidence:.0%})",
    ]
    for token, weight, combined in zip(
        annotation.tokens, annotation.attention, annotation.multi_head_attention
    ):
        lines.append(f"  {token:<20} {weight:.3f}  {combined:.3f}  {describe_attention(combined)}")
    return "\n".join(lines)


def main():
    """Main entry point."""
    logging.basicConfig(
        level=config.get('logging.level', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        config.validate()

        if len(sys.argv) > 1:
            path = Path(sys.argv[1])
            if not path.exists():
                logger.error(f"Transcript file not found: {path}")
                logger.info("Usage: transcript-signals [transcript.txt]")
                sys.exit(1)
            lines = path.read_text().splitlines()
        else:
            lines = sys.stdin.read().splitlines()

        session = TranscriptSession()
        for line in lines:
            if not line.strip():
                continue
            annotation = session.handle_recognition(RecognitionEvent(text=line, is_final=True))
            if annotation is not None:
                print(format_annotation(annotation))

    except KeyboardInterrupt:
        logger.info("Application terminated by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
