"""Unit tests for requirement models and error types."""

import dataclasses

import pytest
from artifactreq.models import (
    ArtifactRequirement,
    ArtifactType,
    ENGINE_VERSION_KEY,
    PLUGIN_API_VERSION_KEY,
)
from artifactreq.core.errors import (
    RequirementError,
    FileOpenError,
    FileReadError,
    RequirementNotFound,
    VersionParseError,
    MalformedAnchorError,
    PluginLoadError,
)


class TestArtifactRequirement:
    """Tests for ArtifactRequirement."""

    def test_engine_requirement(self):
        req = ArtifactRequirement(name=ENGINE_VERSION_KEY, version="0.3.0")
        assert req.name == "engine_version"
        assert req.version == "0.3.0"

    def test_to_dict(self):
        req = ArtifactRequirement(name=PLUGIN_API_VERSION_KEY, version="2.0.0")
        assert req.to_dict() == {"name": "plugin_api_version", "version": "2.0.0"}

    def test_str(self):
        req = ArtifactRequirement(ENGINE_VERSION_KEY, "1.2.3")
        assert str(req) == "engine_version:1.2.3"

    def test_is_immutable(self):
        req = ArtifactRequirement(ENGINE_VERSION_KEY, "1.2.3")
        with pytest.raises(dataclasses.FrozenInstanceError):
            req.version = "9.9.9"

    def test_equality_by_fields(self):
        assert ArtifactRequirement(ENGINE_VERSION_KEY, "1.0.0") == \
            ArtifactRequirement(ENGINE_VERSION_KEY, "1.0.0")

    def test_rejects_unknown_name(self):
        with pytest.raises(ValueError):
            ArtifactRequirement(name="kernel_version", version="1.0.0")


class TestArtifactType:
    """Tests for ArtifactType."""

    def test_from_string(self):
        assert ArtifactType.from_string("rulesfile") == ArtifactType.RULESFILE
        assert ArtifactType.from_string(" Plugin ") == ArtifactType.PLUGIN
        assert ArtifactType.from_string("rules") == ArtifactType.RULESFILE

    def test_from_string_unknown(self):
        with pytest.raises(ValueError):
            ArtifactType.from_string("asset")

    def test_from_path_shared_objects(self):
        assert ArtifactType.from_path("build/libk8saudit.so") == ArtifactType.PLUGIN
        assert ArtifactType.from_path("libjson.dylib") == ArtifactType.PLUGIN
        assert ArtifactType.from_path("C:/plugins/CLOUDTRAIL.DLL") == ArtifactType.PLUGIN

    def test_from_path_rules(self):
        assert ArtifactType.from_path("rules/falco_rules.yaml") == ArtifactType.RULESFILE
        assert ArtifactType.from_path("README") == ArtifactType.RULESFILE


class TestErrors:
    """Tests for the error taxonomy."""

    def test_all_errors_share_a_base(self):
        for cls in (FileOpenError, RequirementNotFound, VersionParseError, PluginLoadError):
            assert issubclass(cls, RequirementError)

    def test_file_open_error(self):
        cause = FileNotFoundError(2, "No such file or directory")
        err = FileOpenError("/tmp/rules.yaml", cause)
        assert err.path == "/tmp/rules.yaml"
        assert err.cause is cause
        assert "unable to open file '/tmp/rules.yaml'" in str(err)

    def test_file_read_error_is_open_error(self):
        err = FileReadError("rules.yaml", UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad"))
        assert isinstance(err, FileOpenError)
        assert "unable to read file 'rules.yaml'" in str(err)

    def test_requirement_not_found(self):
        err = RequirementNotFound("rules.yaml")
        assert err.path == "rules.yaml"
        assert "rules.yaml" in str(err)
        assert "requirements not found" in str(err)

    def test_version_parse_error_is_value_error(self):
        err = VersionParseError("abc")
        assert isinstance(err, ValueError)
        assert err.token == "abc"
        assert "'abc'" in str(err)

    def test_malformed_anchor_is_parse_error(self):
        err = MalformedAnchorError("- required_engine_version 3")
        assert isinstance(err, VersionParseError)
        assert err.line == "- required_engine_version 3"
        assert "malformed" in str(err)

    def test_plugin_load_error(self):
        cause = OSError("invalid ELF header")
        err = PluginLoadError("libfoo.so", cause)
        assert err.path == "libfoo.so"
        assert err.cause is cause
        assert "invalid ELF header" in str(err)
