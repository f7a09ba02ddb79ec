"""
Plugin Extractor - Extract the plugin API version required by a plugin.

The plugin declares the version itself; the loader is trusted to have
validated it, so the value is passed through unchanged.
"""

from pathlib import Path
from typing import Optional

from .base import BaseRequirementExtractor
from ..core.errors import PluginLoadError
from ..loader import BasePluginLoader, SharedLibraryPluginLoader
from ..models import ArtifactRequirement, ArtifactType, PLUGIN_API_VERSION_KEY
from ..utils.logger import get_logger

logger = get_logger(__name__)


class PluginRequirementExtractor(BaseRequirementExtractor):
    """Extractor for the API version required by a compiled plugin."""

    def __init__(self, loader: Optional[BasePluginLoader] = None):
        """
        Initialize the extractor.

        Args:
            loader: Plugin loader (shared library loader if None)
        """
        self.loader = loader or SharedLibraryPluginLoader()

    @property
    def artifact_type(self) -> ArtifactType:
        return ArtifactType.PLUGIN

    @property
    def requirement_name(self) -> str:
        return PLUGIN_API_VERSION_KEY

    def extract(self, path: Path | str) -> ArtifactRequirement:
        """
        Extract the API version requirement of a plugin.

        Args:
            path: Path to the compiled plugin

        Returns:
            ArtifactRequirement for the plugin API version

        Raises:
            PluginLoadError: If the loader fails to open or describe the plugin
        """
        try:
            plugin_info = self.loader.open(path).info()
        except Exception as e:
            raise PluginLoadError(path, e) from e

        logger.debug(
            f"Plugin {plugin_info.name or path} requires API {plugin_info.required_api_version}"
        )

        return ArtifactRequirement(
            name=PLUGIN_API_VERSION_KEY,
            version=plugin_info.required_api_version,
        )
