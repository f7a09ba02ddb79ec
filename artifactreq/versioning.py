"""
Version parsing for requirement tokens.

A token is first parsed as a strict semantic version. When that fails a
tolerant grammar is tried (bare integers, partial versions, an optional
leading "v"). A tolerant match is a numeric engine requirement and is
remapped so that its major component becomes the minor one:

    "1.2.3" -> 1.2.3  (STRICT)
    "3"     -> 0.3.0  (REMAPPED)
    "abc"   -> FAILED
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from semver import Version

from .core.errors import VersionParseError


class VersionParseKind(Enum):
    """How a requirement token was interpreted."""
    STRICT = "strict"
    REMAPPED = "remapped"
    FAILED = "failed"


@dataclass(frozen=True)
class VersionParseResult:
    """Tagged outcome of parsing a raw requirement token."""
    kind: VersionParseKind
    raw: str
    version: Optional[Version] = None

    @property
    def success(self) -> bool:
        return self.kind is not VersionParseKind.FAILED

    def unwrap(self) -> Version:
        """
        Get the parsed version.

        Raises:
            VersionParseError: If the token could not be parsed
        """
        if self.version is None:
            raise VersionParseError(self.raw)
        return self.version


def parse_strict(token: str) -> Optional[Version]:
    """Parse a full MAJOR.MINOR.PATCH[-pre][+build] version, or None."""
    try:
        return Version.parse(token)
    except (ValueError, TypeError):
        return None


def parse_tolerant(token: str) -> Optional[Version]:
    """
    Parse a loosely written version, or None.

    Accepts surrounding whitespace, a leading "v", leading zeros in the
    numeric components and missing minor/patch components, which are
    padded with zeros ("3" -> 3.0.0, "v1.02" -> 1.2.0). A short version
    can't carry prerelease or build metadata ("1-rc1" is rejected).
    """
    candidate = token.strip()
    if candidate.startswith('v'):
        candidate = candidate[1:]
    if not candidate:
        return None

    # Keep prerelease/build metadata apart from the numeric core
    cut = len(candidate)
    for marker in ('-', '+'):
        pos = candidate.find(marker)
        if pos != -1 and pos < cut:
            cut = pos
    core, suffix = candidate[:cut], candidate[cut:]

    parts = core.split('.')
    if len(parts) > 3:
        return None
    # Only a full MAJOR.MINOR.PATCH may carry prerelease or build metadata
    if len(parts) < 3 and suffix:
        return None
    for i, part in enumerate(parts):
        if not part.isdigit():
            return None
        parts[i] = part.lstrip('0') or '0'
    parts.extend(['0'] * (3 - len(parts)))

    return parse_strict('.'.join(parts) + suffix)


def remap_to_minor(version: Version) -> Version:
    """Move the major component to the minor slot: N.x.y -> 0.N.0."""
    return Version(major=0, minor=version.major, patch=0)


def parse_requirement_version(raw: str) -> VersionParseResult:
    """
    Parse a raw requirement token into a normalized version.

    Args:
        raw: Token as found in the source file (may carry whitespace)

    Returns:
        VersionParseResult tagged STRICT, REMAPPED or FAILED
    """
    token = raw.strip()

    version = parse_strict(token)
    if version is not None:
        return VersionParseResult(VersionParseKind.STRICT, raw, version)

    version = parse_tolerant(token)
    if version is not None:
        return VersionParseResult(VersionParseKind.REMAPPED, raw, remap_to_minor(version))

    return VersionParseResult(VersionParseKind.FAILED, raw)
