"""
Core module - Configuration and error types.
"""

from .config import (
    ExtractionConfig,
    OutputConfig,
    LoggingConfig,
    AppConfig,
    LoaderType,
    OutputFormat,
    get_default_config,
    load_config,
)
from .errors import (
    RequirementError,
    FileOpenError,
    FileReadError,
    RequirementNotFound,
    VersionParseError,
    MalformedAnchorError,
    PluginLoadError,
)

__all__ = [
    # Config classes
    'ExtractionConfig',
    'OutputConfig',
    'LoggingConfig',
    'AppConfig',
    # Config enums
    'LoaderType',
    'OutputFormat',
    # Config functions
    'get_default_config',
    'load_config',
    # Errors
    'RequirementError',
    'FileOpenError',
    'FileReadError',
    'RequirementNotFound',
    'VersionParseError',
    'MalformedAnchorError',
    'PluginLoadError',
]
