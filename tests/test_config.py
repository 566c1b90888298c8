"""Tests for generator configuration loading."""

import json

import pytest

from schemaforge.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def test_target_defaults():
    manager = ConfigManager()
    assert manager.get_config("zod").smart_max == 155
    assert manager.get_config("sql").json_column_type == "JSONB"
    assert manager.get_config("mongoose").timestamps is True
    assert manager.get_config().indent_size == 2
    assert set(manager.list_targets()) == {"zod", "typescript", "mongoose", "sql"}


def test_unknown_keys_go_to_custom():
    config = load_config("sql", {"schema_prefix": "app", "indent_size": 4})
    assert config.indent_size == 4
    assert config.indent == "    "
    assert config.custom == {"schema_prefix": "app"}


def test_file_then_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"indent_size": 8, "timestamps": False}), encoding="utf-8")
    config = load_config("mongoose", {"indent_size": 3}, config_file=path)
    assert config.indent_size == 3
    assert config.timestamps is False


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "absent.json")


def test_config_file_must_be_json(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("indent_size: 2", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=path)


def test_invalid_json_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=path)


def test_config_must_be_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(config_file=path)


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    path = tmp_path / "saved.json"
    original = GeneratorConfig(indent_size=4, custom={"flavor": "strict"})
    manager.save_config(original, path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["flavor"] == "strict"
    assert "custom" not in saved
    assert manager.get_config(config_file=path) == original


def test_validate_config():
    manager = ConfigManager()
    assert manager.validate_config(GeneratorConfig()) == []
    warnings = manager.validate_config(
        GeneratorConfig(smart_min=10, smart_max=5, string_column_width=0)
    )
    assert "smart_min (10) is greater than smart_max (5)" in warnings
    assert "Invalid string_column_width: 0" in warnings
