"""Configuration management"""

from transcript_signals.config.config_loader import Config, config

__all__ = ['Config', 'config']
