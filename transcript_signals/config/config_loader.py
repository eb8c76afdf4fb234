"""Configuration loader for transcript-signals"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)

# Fallback for running from a source checkout outside the project root
PACKAGE_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def default_config_path() -> Path:
    """Locate the default config file.

    The working directory's ``config/`` is searched before the checkout's,
    and an environment-specific ``config.<env>.yaml`` wins over
    ``config.yaml`` within each. When nothing exists the working directory's
    ``config/config.yaml`` is returned.
    """
    env = os.getenv('TRANSCRIPT_SIGNALS_ENV', 'development')
    for config_dir in (Path("config"), PACKAGE_CONFIG_DIR):
        for name in (f"config.{env}.yaml", "config.yaml"):
            candidate = config_dir / name
            if candidate.exists():
                return candidate
    return Path("config") / "config.yaml"


class Config:
    """Configuration manager for transcript-signals"""
    
    def __init__(self, config_path: Optional[str] = None):
        self._explicit = config_path is not None
        if config_path is None:
            config_path = str(default_config_path())
        
        self.config_path = Path(config_path)
        self._config = self._load_config()
    
    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if not self.config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            logger.warning(f"Config file not found: {self.config_path}, using built-in defaults")
            return {}
        
        with open(self.config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation
        
        Args:
            key: Configuration key in dot notation (e.g., 'attention.memory_capacity')
            default: Default value if key not found
            
        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self._config
        
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        
        return value if value is not None else default
    
    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access"""
        return self.get(key)
    
    def validate(self) -> None:
        """Validate configuration values"""
        vad_threshold = self.get('audio.vad_threshold')
        if vad_threshold is not None and vad_threshold <= 0:
            raise ValueError(f"Invalid vad_threshold: {vad_threshold}, must be > 0")
        
        speech_threshold = self.get('audio.speech_threshold')
        if speech_threshold is not None and not 0 <= speech_threshold <= 255:
            raise ValueError(f"Invalid speech_threshold: {speech_threshold}, must be in [0, 255]")
        
        for key in ('audio.history_size', 'attention.memory_capacity',
                    'attention.context_utterances', 'attention.heads'):
            value = self.get(key)
            if value is not None and value < 1:
                raise ValueError(f"Invalid {key}: {value}, must be >= 1")
        
        default_confidence = self.get('recognition.default_confidence')
        if default_confidence is not None and not 0 < default_confidence <= 1:
            raise ValueError(f"Invalid default_confidence: {default_confidence}, must be in (0, 1]")


# Global config instance
config = Config()
