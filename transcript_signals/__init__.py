"""Speech-style, attention and audio-quality signals for live transcripts"""

__version__ = "0.1.0"
