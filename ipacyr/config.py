"""IpaCyr configuration using Pydantic."""

import json
from pathlib import Path
from typing import Literal, Self

import yaml
from pydantic import BaseModel, Field

from ipacyr.exceptions import ConfigurationError


class TranscriberConfig(BaseModel):
    """Post-processing of the rendered text."""

    collapse_separators: bool = False
    strip: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Path | None = None


class IpaCyrConfig(BaseModel):
    """Complete IpaCyr configuration."""

    transcriber: TranscriberConfig = Field(default_factory=TranscriberConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path) -> Self:
        """Load configuration from a JSON or YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
            return cls.model_validate(data)
        except (ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e


def load_config(path: str | Path) -> IpaCyrConfig:
    """Convenience function to load configuration.

    Args:
        path: Path to config JSON or YAML file.

    Returns:
        IpaCyrConfig instance.
    """
    return IpaCyrConfig.load(Path(path))


__all__ = [
    "IpaCyrConfig",
    "LoggingConfig",
    "TranscriberConfig",
    "load_config",
]
