"""
Loader module - Access to the metadata declared by compiled plugins.

Provides a unified interface for different loaders:
- Shared libraries (ctypes)
- Mock (for testing)
"""

from .base import (
    BasePluginHandle,
    BasePluginLoader,
    PluginInfo,
)
from .shared_library import SharedLibraryPluginLoader, SharedLibraryPluginHandle
from .mock_loader import MockPluginLoader, MockPluginHandle

__all__ = [
    # Base classes
    'BasePluginHandle',
    'BasePluginLoader',
    'PluginInfo',
    # Implementations
    'SharedLibraryPluginLoader',
    'SharedLibraryPluginHandle',
    'MockPluginLoader',
    'MockPluginHandle',
    'create_loader',
]


def create_loader(name: str = "shared_library", **kwargs) -> BasePluginLoader:
    """
    Factory function to create a plugin loader.

    Args:
        name: Loader name ("shared_library", "mock")
        **kwargs: Loader-specific configuration

    Returns:
        Configured loader instance

    Raises:
        ValueError: If loader is not supported
    """
    loaders = {
        "shared_library": SharedLibraryPluginLoader,
        "mock": MockPluginLoader,
    }

    if name not in loaders:
        raise ValueError(f"Unsupported loader: {name}. Available: {list(loaders.keys())}")

    return loaders[name](**kwargs)
