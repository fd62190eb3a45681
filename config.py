"""Configuration for the metrics log scanner"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Scanner configuration with Pydantic validation and environment-based settings"""

    # Output
    unique_metrics_file: Path = Field(default=Path("unique_metrics.txt"), description="Unique metric names output file")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")
    environment: str = Field(default="production", description="development or production log rendering")

    # Service settings
    service_name: str = Field(default="metrics-log-scanner", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names from the environment"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('unique_metrics_file', mode='before')
    @classmethod
    def validate_unique_metrics_file(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("UNIQUE_METRICS_FILE must not be empty")
        return v

    @field_validator('log_file')
    @classmethod
    def ensure_parent_directories(cls, v):
        """Ensure the parent directory exists for the log file"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"
