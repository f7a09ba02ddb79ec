"""
Configuration management for artifact requirement extraction.

Provides dataclasses for all configuration options with sensible defaults,
YAML file loading, and validation.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
from enum import Enum
import os
import yaml


class LoaderType(Enum):
    """Supported plugin loaders."""
    SHARED_LIBRARY = "shared_library"
    MOCK = "mock"  # For testing


class OutputFormat(Enum):
    """Output formats for extracted requirements."""
    JSON = "json"
    YAML = "yaml"


@dataclass
class ExtractionConfig:
    """Configuration for requirement extraction."""
    encoding: str = "utf-8"
    plugin_loader: LoaderType = field(default_factory=lambda: LoaderType(os.getenv(
        "ARTIFACTREQ_PLUGIN_LOADER",
        LoaderType.SHARED_LIBRARY.value,
    )))

    # Rules files without a requirement are reported, not failed
    allow_missing: bool = True

    def __post_init__(self):
        if isinstance(self.plugin_loader, str):
            self.plugin_loader = LoaderType(self.plugin_loader)


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: OutputFormat = OutputFormat.JSON
    indent: int = 2

    def __post_init__(self):
        if isinstance(self.format, str):
            self.format = OutputFormat(self.format.lower())


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = field(default_factory=lambda: os.getenv("ARTIFACTREQ_LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    """
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance
        """
        return cls(
            extraction=ExtractionConfig(**data.get('extraction', {})),
            output=OutputConfig(**data.get('output', {})),
            logging=LoggingConfig(**data.get('logging', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            'extraction': {
                'encoding': self.extraction.encoding,
                'plugin_loader': self.extraction.plugin_loader.value,
                'allow_missing': self.extraction.allow_missing,
            },
            'output': {
                'format': self.output.format.value,
                'indent': self.output.indent,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }


def get_default_config() -> AppConfig:
    """
    Get the default application configuration.

    Returns:
        AppConfig with all default values
    """
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. ./artifactreq.yaml
    3. ./config/artifactreq.yaml
    4. ~/.artifactreq/config.yaml
    5. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    default_paths = [
        Path("artifactreq.yaml"),
        Path("config/artifactreq.yaml"),
        Path.home() / ".artifactreq" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
