"""
Configuration management for skillhub.
"""

from typing import Optional, Any
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class ScoringConfig(BaseModel):
    """Point values, caps and length thresholds for the quality scorer."""

    # Schema dimension
    schema_fields_present: int = 10
    schema_description_length: int = 5
    schema_semver: int = 5
    schema_valid_category: int = 5
    schema_max: int = 25

    # Instructions dimension
    instruction_min_length: int = 10
    instruction_long_bonus: int = 5
    instruction_structured_phases: int = 15
    instruction_io_spec: int = 10
    instruction_error_handling: int = 10
    instruction_guardrails: int = 10
    instruction_examples: int = 10
    instruction_output_format: int = 10
    instruction_max: int = 75

    max_score: int = 100

    # Thresholds
    min_description_chars: int = 50
    min_instruction_chars: int = 500
    long_instruction_chars: int = 2000
    min_publish_score: int = 40
    min_nontrivial_chars: int = 100


class HandDefaults(BaseModel):
    """Defaults used when translating a skill into a hand configuration."""

    model_config = ConfigDict(protected_namespaces=())

    model_provider: str = "anthropic"
    model_id: str = "claude-sonnet-4-5-20250514"
    max_tokens: int = 4096
    temperature: float = 0.3
    timeout_seconds: int = 120
    max_retries: int = 2
    source: str = "skills-hub.ai"
    default_category: str = "general"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SKILLHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Sub-configurations
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    hand: HandDefaults = Field(default_factory=HandDefaults)

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def update_settings(**kwargs: Any) -> Settings:
    """Update settings with new values."""
    global settings
    settings = Settings(**kwargs)
    return settings
