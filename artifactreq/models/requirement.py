"""
Requirement Data Models - Named version requirements attached to artifacts.

These models are the output contract consumed by the registry pipeline
when it stores the requirements of a published artifact.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict


# Requirement keys understood by the registry
ENGINE_VERSION_KEY = "engine_version"
PLUGIN_API_VERSION_KEY = "plugin_api_version"

REQUIREMENT_KEYS = (ENGINE_VERSION_KEY, PLUGIN_API_VERSION_KEY)

# File suffixes of compiled plugins
PLUGIN_SUFFIXES = ('.so', '.dylib', '.dll')


class ArtifactType(Enum):
    """Kinds of artifacts a requirement can be extracted from."""
    RULESFILE = "rulesfile"
    PLUGIN = "plugin"

    @classmethod
    def from_string(cls, value: str) -> 'ArtifactType':
        """Parse artifact type from string, handling common variations."""
        value_lower = value.lower().strip()
        if value_lower in ('rulesfile', 'rulesfiles', 'rules', 'rule'):
            return cls.RULESFILE
        elif value_lower in ('plugin', 'plugins', 'library', 'shared_library'):
            return cls.PLUGIN
        raise ValueError(f"Unknown artifact type: {value}")

    @classmethod
    def from_path(cls, path: Path | str) -> 'ArtifactType':
        """Guess the artifact type from a file name."""
        if Path(path).suffix.lower() in PLUGIN_SUFFIXES:
            return cls.PLUGIN
        return cls.RULESFILE


@dataclass(frozen=True)
class ArtifactRequirement:
    """A named minimum-version constraint for an artifact."""
    name: str
    version: str

    def __post_init__(self):
        if self.name not in REQUIREMENT_KEYS:
            raise ValueError(
                f"Unknown requirement name: {self.name}. Available: {list(REQUIREMENT_KEYS)}"
            )

    def to_dict(self) -> Dict[str, str]:
        return {
            'name': self.name,
            'version': self.version,
        }

    def __str__(self) -> str:
        return f"{self.name}:{self.version}"
