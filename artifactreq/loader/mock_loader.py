"""
Mock plugin loader for testing.

Serves plugin metadata from memory without touching shared libraries.
"""

from pathlib import Path
from typing import Optional, Dict, List

from .base import BasePluginHandle, BasePluginLoader, PluginInfo


class MockPluginHandle(BasePluginHandle):
    """Handle returning preconfigured metadata."""

    def __init__(self, path: Path | str, plugin_info: PluginInfo):
        super().__init__(path)
        self._info = plugin_info

    def info(self) -> PluginInfo:
        return self._info


class MockPluginLoader(BasePluginLoader):
    """
    Mock plugin loader for testing.

    Can be configured with:
    - Per-path plugin metadata
    - A default for unknown paths
    - Simulated open failures
    """

    def __init__(
        self,
        plugins: Optional[Dict[str, PluginInfo]] = None,
        default_info: Optional[PluginInfo] = None,
        error: Optional[Exception] = None,
    ):
        """
        Initialize the mock loader.

        Args:
            plugins: Metadata keyed by plugin path
            default_info: Metadata for paths not in `plugins`
            error: Exception raised by every open() call
        """
        self._plugins: Dict[str, PluginInfo] = {
            str(path): info for path, info in (plugins or {}).items()
        }
        self.default_info = default_info
        self.error = error

        # Call tracking
        self.calls: List[str] = []

    @property
    def loader_name(self) -> str:
        return "mock"

    def add_plugin(self, path: Path | str, plugin_info: PluginInfo) -> None:
        """Register metadata for a plugin path."""
        self._plugins[str(path)] = plugin_info

    def reset(self) -> None:
        """Reset call tracking."""
        self.calls.clear()

    def open(self, path: Path | str) -> MockPluginHandle:
        self.calls.append(str(path))

        if self.error is not None:
            raise self.error

        plugin_info = self._plugins.get(str(path), self.default_info)
        if plugin_info is None:
            raise OSError(f"no such plugin: {path}")

        return MockPluginHandle(path, plugin_info)

    @property
    def call_count(self) -> int:
        """Get total number of open() calls."""
        return len(self.calls)
