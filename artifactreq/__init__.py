"""
artifactreq - Extract version requirements from registry artifacts.

Main modules:
- extractors: Rules file and plugin requirement extractors
- versioning: Strict/tolerant version parsing
- loader: Plugin loader abstractions
- resolver: Extraction by artifact type, single or batch
- cli: Command-line interface
"""

from .core.errors import (
    RequirementError,
    FileOpenError,
    FileReadError,
    RequirementNotFound,
    VersionParseError,
    MalformedAnchorError,
    PluginLoadError,
)
from .extractors import RulesRequirementExtractor, PluginRequirementExtractor
from .models import (
    ArtifactRequirement,
    ArtifactType,
    ENGINE_VERSION_KEY,
    PLUGIN_API_VERSION_KEY,
)
from .resolver import RequirementResolver, ExtractionResult

__version__ = "1.0.0"

__all__ = [
    'RequirementError',
    'FileOpenError',
    'FileReadError',
    'RequirementNotFound',
    'VersionParseError',
    'MalformedAnchorError',
    'PluginLoadError',
    'RulesRequirementExtractor',
    'PluginRequirementExtractor',
    'ArtifactRequirement',
    'ArtifactType',
    'ENGINE_VERSION_KEY',
    'PLUGIN_API_VERSION_KEY',
    'RequirementResolver',
    'ExtractionResult',
    '__version__',
]
