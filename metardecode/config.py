"""Configuration management with persistence."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path.home() / ".metardecode" / "config.json"


class DecoderConfig(BaseModel):
    """Configuration for report decoding."""
    default_message_type: str = Field(default="METAR", description="Used when a report has no METAR/SPECI keyword")

    @field_validator('default_message_type')
    @classmethod
    def validate_default_message_type(cls, v):
        if v not in ["METAR", "SPECI"]:
            raise ValueError("default_message_type must be one of: METAR, SPECI")
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = "INFO"
    log_dir: Optional[str] = None  # None = logs/ next to the package
    file_name: str = "metardecode.log"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        v = v.upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v


class WebUIConfig(BaseModel):
    """Configuration for the decode API server."""
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1024, le=65535)


class AppConfig(BaseModel):
    """Main application configuration."""
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    web_ui: WebUIConfig = Field(default_factory=WebUIConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from file, creating the default one if missing."""
        config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(**data)

        config = cls()
        config.save(config_path)
        return config

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()
