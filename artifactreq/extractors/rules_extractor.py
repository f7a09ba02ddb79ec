"""
Rules Extractor - Extract the required engine version from a rules file.

Rules files declare the engine version they need on an anchor line:

    - required_engine_version: 0.26.0

Numeric values are engine requirements at minor-version level, so
`- required_engine_version: 3` yields 0.3.0.
"""

from pathlib import Path
from typing import Iterator, Optional, TextIO

from .base import BaseRequirementExtractor
from ..core.errors import (
    FileOpenError,
    FileReadError,
    MalformedAnchorError,
    RequirementNotFound,
)
from ..models import ArtifactRequirement, ArtifactType, ENGINE_VERSION_KEY
from ..versioning import parse_requirement_version
from ..utils.logger import get_logger

logger = get_logger(__name__)


RULES_ENGINE_ANCHOR = "- required_engine_version"


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines lazily with their terminators removed."""
    for line in stream:
        yield line.rstrip('\r\n')


def find_anchor_line(lines: Iterator[str], anchor: str = RULES_ENGINE_ANCHOR) -> Optional[str]:
    """Return the first line starting with the anchor, or None."""
    for line in lines:
        if line.startswith(anchor):
            return line
    return None


def requirement_token(line: str) -> str:
    """
    Get the raw version token of an anchor line.

    The line is split on ':' and the second field is returned untouched.

    Raises:
        MalformedAnchorError: If the line has no value field
    """
    tokens = line.split(':')
    if len(tokens) < 2:
        raise MalformedAnchorError(line)
    return tokens[1]


class RulesRequirementExtractor(BaseRequirementExtractor):
    """Extractor for the engine version required by a rules file."""

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the extractor.

        Args:
            encoding: Text encoding of rules files
        """
        self.encoding = encoding

    @property
    def artifact_type(self) -> ArtifactType:
        return ArtifactType.RULESFILE

    @property
    def requirement_name(self) -> str:
        return ENGINE_VERSION_KEY

    def extract(self, path: Path | str) -> ArtifactRequirement:
        """
        Extract the engine version requirement of a rules file.

        Args:
            path: Path to the rules file

        Returns:
            ArtifactRequirement for the engine version

        Raises:
            FileOpenError: If the file can't be opened
            FileReadError: If the file can't be read or decoded
            RequirementNotFound: If no line carries the anchor
            VersionParseError: If the anchor value is not a version
        """
        line = self._scan(path)
        if line is None:
            raise RequirementNotFound(path)

        result = parse_requirement_version(requirement_token(line))
        version = result.unwrap()

        logger.debug(f"Engine requirement of {path}: {version} ({result.kind.value})")

        return ArtifactRequirement(
            name=ENGINE_VERSION_KEY,
            version=str(version),
        )

    def _scan(self, path: Path | str) -> Optional[str]:
        """Find the anchor line, reading no further than needed."""
        try:
            stream = open(path, 'r', encoding=self.encoding)
        except OSError as e:
            raise FileOpenError(path, e) from e

        with stream:
            try:
                return find_anchor_line(iter_lines(stream))
            except (OSError, UnicodeDecodeError) as e:
                raise FileReadError(path, e) from e
