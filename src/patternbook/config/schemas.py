"""Configuration schemas for logging and demo output."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file_path: str = Field("logs/patternbook.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, value):
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def non_negative(cls, value: int) -> int:
        """Rotation settings cannot be negative."""
        if value < 0:
            raise ValueError("must be zero or greater")
        return value


class DemoConfig(BaseModel):
    """Console presentation of demo runs."""
    model_config = ConfigDict(extra="forbid")

    separator_char: str = Field("-", min_length=1, max_length=1, description="Separator character")
    separator_width: int = Field(50, ge=0, description="Separator width printed before each demo")

    @property
    def separator(self) -> str:
        return self.separator_char * self.separator_width


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())
