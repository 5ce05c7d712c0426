"""Configuration management for Hebrew Tones."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEBREW_TONES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Directories
    output_dir: Path = Field(
        default=Path("./output"),
        description="Default output directory for analysis and rendered audio",
    )

    # Playback controls (slider defaults)
    default_speed: float = Field(
        default=1.0,
        gt=0,
        description="Playback speed multiplier (UI range 0.5-2.0)",
    )
    default_amplitude: float = Field(
        default=1.0,
        ge=0,
        description="Per-tone amplitude multiplier (UI range 0.1-2.0)",
    )
    default_volume: float = Field(
        default=1.0,
        ge=0,
        description="Output gain multiplier (UI range 0-2.0, shown as 0-100%)",
    )
    cancel_on_retrigger: bool = Field(
        default=True,
        description="Cancel pending tones of the previous sequence when playback restarts",
    )

    # Synthesis
    sample_rate: int = Field(
        default=44100,
        description="Sample rate for synthesis and playback",
    )
    envelope_floor: float = Field(
        default=0.001,
        gt=0,
        description="Amplitude the exponential decay envelope reaches at the end of a tone",
    )
    frames_per_buffer: int = Field(
        default=1024,
        description="Frames per audio callback buffer",
    )

    # Dynamics limiter
    limiter_threshold_db: float = Field(default=-24.0, description="Limiter threshold in dBFS")
    limiter_knee_db: float = Field(default=30.0, description="Soft knee width in dB")
    limiter_ratio: float = Field(default=12.0, description="Compression ratio above threshold")
    limiter_attack: float = Field(default=0.0, description="Attack time in seconds")
    limiter_release: float = Field(default=0.25, description="Release time in seconds")

    # Output format
    output_format: str = Field(
        default="wav",
        description="Audio format for rendered files (wav, flac, ogg)",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**overrides: object) -> Settings:
    """Configure settings with overrides. Useful for testing."""
    global _settings
    _settings = Settings(**overrides)  # type: ignore[arg-type]
    return _settings
