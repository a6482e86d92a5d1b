"""Configuration management for postchunks."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


DEFAULT_SEPARATOR = "<!--more-->"
DEFAULT_TRANSFORM = "render"


@dataclass
class Config:
    """Default separator, transform and output settings."""

    separator: str = DEFAULT_SEPARATOR
    transform: str = DEFAULT_TRANSFORM
    outputs_dir: Path = Path("outputs")
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        log_file = os.getenv('POSTCHUNKS_LOG_FILE')
        return cls(
            separator=os.getenv('POSTCHUNKS_SEPARATOR', DEFAULT_SEPARATOR),
            transform=os.getenv('POSTCHUNKS_TRANSFORM', DEFAULT_TRANSFORM),
            outputs_dir=Path(os.getenv('POSTCHUNKS_OUTPUTS_DIR', 'outputs')),
            log_level=os.getenv('POSTCHUNKS_LOG_LEVEL', 'INFO'),
            log_file=Path(log_file) if log_file else None,
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigurationError("separator must be a non-empty string")

        if not isinstance(self.transform, str):
            raise ConfigurationError(
                f"transform must be a string, got {type(self.transform).__name__}"
            )

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}. Must be one of: {valid_log_levels}")

    def chunks_output_path(self) -> Path:
        """Default location of the JSON report written by the chunk command."""
        return self.outputs_dir / "chunks" / "postchunks.json"


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_env()
        config.validate()
        _config = config
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    config.validate()
    _config = config


def reset_config() -> None:
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None
