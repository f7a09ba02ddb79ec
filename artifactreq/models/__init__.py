"""
Models module - Requirement types shared by all extractors.
"""

from .requirement import (
    ENGINE_VERSION_KEY,
    PLUGIN_API_VERSION_KEY,
    REQUIREMENT_KEYS,
    PLUGIN_SUFFIXES,
    ArtifactType,
    ArtifactRequirement,
)

__all__ = [
    'ENGINE_VERSION_KEY',
    'PLUGIN_API_VERSION_KEY',
    'REQUIREMENT_KEYS',
    'PLUGIN_SUFFIXES',
    'ArtifactType',
    'ArtifactRequirement',
]
