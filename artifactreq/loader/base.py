"""
Abstract base classes for plugin loaders.

A loader opens a compiled plugin and exposes the metadata the plugin
declares about itself. Extractors depend only on this interface so they
can run against a mock loader in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PluginInfo:
    """Metadata declared by a plugin."""
    required_api_version: str
    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    contact: Optional[str] = None


class BasePluginHandle(ABC):
    """An opened plugin."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @abstractmethod
    def info(self) -> PluginInfo:
        """
        Read the metadata declared by the plugin.

        Returns:
            PluginInfo with at least the required API version
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path})"


class BasePluginLoader(ABC):
    """
    Abstract base class for plugin loaders.

    Implementations raise OSError when the plugin file can't be opened
    and LookupError when it doesn't look like a plugin.
    """

    @abstractmethod
    def open(self, path: Path | str) -> BasePluginHandle:
        """
        Open a plugin.

        Args:
            path: Path to the compiled plugin

        Returns:
            Handle on the opened plugin
        """
        pass

    @property
    @abstractmethod
    def loader_name(self) -> str:
        """Get the loader name (e.g., 'shared_library', 'mock')."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
