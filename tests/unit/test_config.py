"""Unit tests for configuration loading."""

import pytest
import yaml
from pathlib import Path

from artifactreq.core.config import (
    AppConfig,
    ExtractionConfig,
    OutputConfig,
    LoggingConfig,
    LoaderType,
    OutputFormat,
    get_default_config,
    load_config,
)


class TestDefaults:
    """Tests for default configuration values."""

    def test_default_config(self, monkeypatch):
        monkeypatch.delenv("ARTIFACTREQ_PLUGIN_LOADER", raising=False)
        monkeypatch.delenv("ARTIFACTREQ_LOG_LEVEL", raising=False)
        config = get_default_config()
        assert config.extraction.encoding == "utf-8"
        assert config.extraction.plugin_loader == LoaderType.SHARED_LIBRARY
        assert config.extraction.allow_missing is True
        assert config.output.format == OutputFormat.JSON
        assert config.output.indent == 2
        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_loader_from_environment(self, monkeypatch):
        monkeypatch.setenv("ARTIFACTREQ_PLUGIN_LOADER", "mock")
        assert ExtractionConfig().plugin_loader == LoaderType.MOCK

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("ARTIFACTREQ_LOG_LEVEL", "DEBUG")
        assert LoggingConfig().level == "DEBUG"

    def test_string_enums_are_converted(self):
        assert ExtractionConfig(plugin_loader="mock").plugin_loader == LoaderType.MOCK
        assert OutputConfig(format="YAML").format == OutputFormat.YAML

    def test_invalid_enum_value(self):
        with pytest.raises(ValueError):
            OutputConfig(format="xml")

    def test_log_file_becomes_path(self):
        assert LoggingConfig(file="logs/run.log").file == Path("logs/run.log")


class TestAppConfig:
    """Tests for AppConfig loading and serialization."""

    def test_from_dict(self):
        config = AppConfig.from_dict({
            'extraction': {'plugin_loader': 'mock', 'allow_missing': False},
            'output': {'format': 'yaml', 'indent': 4},
            'logging': {'level': 'WARNING'},
        })
        assert config.extraction.plugin_loader == LoaderType.MOCK
        assert config.extraction.allow_missing is False
        assert config.output.format == OutputFormat.YAML
        assert config.output.indent == 4
        assert config.logging.level == "WARNING"

    def test_from_dict_partial(self):
        config = AppConfig.from_dict({'output': {'indent': 0}})
        assert config.output.indent == 0
        assert config.extraction.encoding == "utf-8"

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            AppConfig.from_dict({'extraction': {'anchor': '- foo'}})

    def test_to_dict_round_trip(self):
        config = AppConfig.from_dict({
            'extraction': {'plugin_loader': 'mock', 'encoding': 'latin-1'},
            'logging': {'level': 'DEBUG', 'file': 'out.log'},
        })
        data = config.to_dict()
        assert data['extraction']['plugin_loader'] == 'mock'
        assert data['logging']['file'] == 'out.log'
        assert AppConfig.from_dict(data).to_dict() == data

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "artifactreq.yaml"
        path.write_text(yaml.safe_dump({'output': {'format': 'yaml'}}))
        assert AppConfig.from_yaml(path).output.format == OutputFormat.YAML

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert isinstance(AppConfig.from_yaml(path), AppConfig)

    def test_from_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            AppConfig.from_yaml(path)


class TestLoadConfig:
    """Tests for load_config lookup order."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("extraction:\n  allow_missing: false\n")
        assert load_config(path).extraction.allow_missing is False

    def test_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "artifactreq.yaml").write_text("output:\n  indent: 8\n")
        assert load_config().output.indent == 8

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        assert load_config().to_dict() == AppConfig().to_dict()
