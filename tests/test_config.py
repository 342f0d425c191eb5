import json

import pytest

from sdk_codegen.codegen.core.config import (
    DEFAULT_NAMESPACE,
    DEFAULT_SERVICE_URL,
    EXAMPLE_CONFIG,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


@pytest.fixture
def manager():
    return ConfigManager()


class TestConfigManager:
    def test_defaults(self, manager):
        config = manager.get_config()

        assert config.namespace == DEFAULT_NAMESPACE
        assert config.service_url == DEFAULT_SERVICE_URL
        assert config.header_extension == ".h"
        assert config.indent == "\t"
        assert config.add_comments is True
        assert config.custom == {}

    def test_overrides(self, manager):
        config = manager.get_config({"namespace": "Contoso.Api", "indent": "    "})
        assert config.namespace == "Contoso.Api"
        assert config.indent == "    "

    def test_unknown_keys_go_to_custom(self, manager):
        config = manager.get_config({"export_macro": "SDK_API"})
        assert config.custom == {"export_macro": "SDK_API"}

    def test_config_file(self, manager, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(EXAMPLE_CONFIG), encoding="utf-8")

        config = manager.get_config({"add_comments": False}, config_file=path)

        assert config.namespace == "Contoso.Api"
        assert config.header_extension == ".hpp"
        assert config.add_comments is False

    def test_missing_file(self, manager, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            manager.get_config(config_file=tmp_path / "missing.json")

    def test_non_json_file(self, manager, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("namespace: x", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            manager.get_config(config_file=path)

    def test_invalid_json(self, manager, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            manager.get_config(config_file=path)

    def test_file_must_hold_object(self, manager, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            manager.get_config(config_file=path)

    def test_save_and_reload(self, manager, tmp_path):
        path = tmp_path / "saved.json"
        original = manager.get_config({"namespace": "Contoso", "export_macro": "SDK_API"})

        manager.save_config(original, path)
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["export_macro"] == "SDK_API"
        assert "custom" not in saved

        assert manager.get_config(config_file=path) == original


class TestValidateConfig:
    def test_default_config_is_valid(self, manager):
        assert manager.validate_config(GeneratorConfig()) == []

    def test_reports_problems(self, manager):
        config = GeneratorConfig(
            header_extension="h",
            namespace="Contoso.2nd",
            service_url="ftp://example.com",
            indent="x",
        )
        warnings = manager.validate_config(config)

        assert len(warnings) == 4
        assert any("'2nd'" in warning for warning in warnings)


class TestLoadConfig:
    def test_convenience_function(self):
        config = load_config({"service_url": "https://api.contoso.com"})
        assert isinstance(config, GeneratorConfig)
        assert config.service_url == "https://api.contoso.com"
