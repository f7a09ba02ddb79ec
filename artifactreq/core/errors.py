"""
Error types raised while extracting artifact requirements.

Every error carries enough context (file path, raw token) to be logged
or displayed by the caller without re-opening the artifact.
"""

from pathlib import Path
from typing import Optional


class RequirementError(Exception):
    """Base class for all requirement extraction errors."""


class FileOpenError(RequirementError):
    """An artifact file could not be opened."""

    action = "open"

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"unable to {self.action} file {self.path!r}: {cause}")


class FileReadError(FileOpenError):
    """An artifact file was opened but could not be read."""

    action = "read"


class RequirementNotFound(RequirementError):
    """
    The rules file declares no engine version requirement.

    Callers usually treat this as "no requirement" rather than corruption.
    """

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"requirements for rulesfile {self.path!r}: requirements not found")


class VersionParseError(RequirementError, ValueError):
    """The token after the anchor is not a usable version."""

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(
            message
            or f"unable to parse requirement {token!r}: "
               f"expected a numeric value or a valid semver string"
        )


class MalformedAnchorError(VersionParseError):
    """The anchor line has no ':'-delimited value field."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(
            line,
            f"malformed requirement line {line!r}: expected '<anchor>: <version>'",
        )


class PluginLoadError(RequirementError):
    """The plugin loader failed to open or describe a plugin."""

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"unable to open plugin {self.path!r}: {cause}")
