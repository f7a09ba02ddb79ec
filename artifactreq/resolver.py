"""
Requirement Resolver - Main orchestrator for requirement extraction.

Picks the extractor matching each artifact type and turns batches of
artifacts into ExtractionResults for the registry pipeline.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, List, Dict, Any, Iterable

from .core.config import AppConfig
from .core.errors import RequirementError, RequirementNotFound
from .extractors import (
    BaseRequirementExtractor,
    RulesRequirementExtractor,
    PluginRequirementExtractor,
)
from .loader import BasePluginLoader, create_loader
from .models import ArtifactRequirement, ArtifactType
from .utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Result of extracting the requirement of one artifact."""
    path: str
    artifact_type: ArtifactType
    success: bool
    requirement: Optional[ArtifactRequirement] = None
    missing: bool = False
    error_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'type': self.artifact_type.value,
            'requirement': self.requirement.to_dict() if self.requirement else None,
            'missing': self.missing,
            'error': self.error_message,
        }


class RequirementResolver:
    """
    Resolves artifact requirements by artifact type.

    Rules files go through the rules extractor, compiled plugins through
    the plugin extractor and its loader.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        plugin_loader: Optional[BasePluginLoader] = None,
    ):
        """
        Initialize the resolver.

        Args:
            config: Application configuration
            plugin_loader: Plugin loader (created from config if None)
        """
        self.config = config or AppConfig()
        self.plugin_loader = plugin_loader or create_loader(
            self.config.extraction.plugin_loader.value
        )
        self._extractors: Dict[ArtifactType, BaseRequirementExtractor] = {}

        self._init_extractors()

    def _init_extractors(self) -> None:
        """Initialize one extractor per artifact type."""
        self._extractors = {
            ArtifactType.RULESFILE: RulesRequirementExtractor(
                encoding=self.config.extraction.encoding,
            ),
            ArtifactType.PLUGIN: PluginRequirementExtractor(loader=self.plugin_loader),
        }

    def extractor_for(self, artifact_type: ArtifactType) -> BaseRequirementExtractor:
        return self._extractors[artifact_type]

    def extract(
        self,
        path: Path | str,
        artifact_type: Optional[ArtifactType] = None,
    ) -> ArtifactRequirement:
        """
        Extract the requirement of a single artifact.

        Args:
            path: Path to the artifact
            artifact_type: Artifact type (guessed from the file name if None)

        Returns:
            ArtifactRequirement declared by the artifact

        Raises:
            RequirementError: If the requirement can't be extracted
        """
        artifact_type = artifact_type or ArtifactType.from_path(path)
        return self.extractor_for(artifact_type).extract(path)

    def extract_all(
        self,
        paths: Iterable[Path | str],
        artifact_type: Optional[ArtifactType] = None,
    ) -> List[ExtractionResult]:
        """
        Extract the requirements of several artifacts.

        Failures are recorded per artifact instead of being raised. A
        rules file without a requirement counts as a success when
        `allow_missing` is enabled.

        Args:
            paths: Paths to the artifacts
            artifact_type: Type shared by all artifacts (guessed per file if None)

        Returns:
            One ExtractionResult per path, in order
        """
        results = []

        for path in paths:
            kind = artifact_type or ArtifactType.from_path(path)
            try:
                requirement = self.extract(path, kind)
            except RequirementNotFound as e:
                allowed = self.config.extraction.allow_missing
                if allowed:
                    logger.warning(f"No requirement declared: {path}")
                else:
                    logger.error(str(e))
                results.append(ExtractionResult(
                    path=str(path),
                    artifact_type=kind,
                    success=allowed,
                    missing=True,
                    error_message=None if allowed else str(e),
                ))
                continue
            except RequirementError as e:
                logger.error(f"{type(e).__name__}: {e}")
                results.append(ExtractionResult(
                    path=str(path),
                    artifact_type=kind,
                    success=False,
                    error_message=str(e),
                ))
                continue

            logger.info(f"{path}: {requirement}")
            results.append(ExtractionResult(
                path=str(path),
                artifact_type=kind,
                success=True,
                requirement=requirement,
            ))

        return results


def requirements(results: Iterable[ExtractionResult]) -> List[ArtifactRequirement]:
    """Collect the requirements of successful results."""
    return [r.requirement for r in results if r.success and r.requirement is not None]
