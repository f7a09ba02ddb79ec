"""
Base Extractor - Abstract base class for artifact requirement extractors.

Each extractor reads one kind of artifact (rules file, plugin) and
returns the requirement it declares.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import ArtifactRequirement, ArtifactType


class BaseRequirementExtractor(ABC):
    """
    Abstract base class for requirement extractors.

    Extractors are stateless: concurrent calls on different paths need
    no coordination. Errors are raised to the caller, never logged here.
    """

    @property
    @abstractmethod
    def artifact_type(self) -> ArtifactType:
        """Kind of artifact this extractor handles."""
        pass

    @property
    @abstractmethod
    def requirement_name(self) -> str:
        """Requirement key produced by this extractor."""
        pass

    @abstractmethod
    def extract(self, path: Path | str) -> ArtifactRequirement:
        """
        Extract the requirement declared by an artifact.

        Args:
            path: Path to the artifact

        Returns:
            ArtifactRequirement named after `requirement_name`

        Raises:
            RequirementError: If the requirement can't be extracted
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(requirement={self.requirement_name})"
