import json

import pytest

from modelgen import type_map_from_config
from modelgen.core.config import (
    EXAMPLE_CONFIG,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)
from modelgen.core.naming import NamingCase


@pytest.fixture()
def manager() -> ConfigManager:
    return ConfigManager()


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults(manager):
    config = manager.get_config()
    assert config == GeneratorConfig()
    assert config.model_pkg == "model"
    assert config.json_naming is NamingCase.ORIGINAL
    assert manager.validate_config(config) == []


def test_file_then_overrides(manager, tmp_path):
    path = write_json(
        tmp_path / "gen.json",
        {"model_pkg": "entity", "field_nullable": True, "json_tag_case": "snake"},
    )
    config = manager.get_config({"model_pkg": "dal"}, path)

    assert config.model_pkg == "dal"
    assert config.field_nullable is True
    assert config.json_naming is NamingCase.SNAKE_CASE


def test_unknown_keys_go_to_custom(manager):
    config = manager.get_config({"out_path": "./query", "with_unit_test": True})
    assert config.custom == {"out_path": "./query", "with_unit_test": True}


def test_data_type_overrides(manager, tmp_path):
    path = write_json(tmp_path / "gen.json", EXAMPLE_CONFIG)
    config = manager.get_config(config_file=path)

    assert config.data_type_overrides == {"uuid": "string", "jsonb": "datatypes.JSON"}
    type_map = type_map_from_config(config)
    assert type_map.get("JSONB") == "datatypes.JSON"
    assert type_map.get("varchar") == "string"


def test_missing_file(manager, tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        manager.get_config(config_file=tmp_path / "nope.json")


def test_non_json_extension(manager, tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("model_pkg: x", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be JSON"):
        manager.get_config(config_file=path)


def test_invalid_json(manager, tmp_path):
    path = tmp_path / "gen.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON") as exc_info:
        manager.get_config(config_file=path)
    assert exc_info.value.__cause__ is not None


def test_json_must_be_object(manager, tmp_path):
    path = write_json(tmp_path / "gen.json", ["model_pkg"])
    with pytest.raises(ConfigError, match="JSON object"):
        manager.get_config(config_file=path)


def test_bad_overrides_type(manager):
    with pytest.raises(ConfigError):
        manager.get_config({"data_type_overrides": ["uuid"]})


def test_validate_config_warnings(manager):
    config = GeneratorConfig(
        model_pkg="Bad-Pkg",
        json_tag_case="kebab",
        data_type_overrides={"uuid": " "},
    )
    warnings = manager.validate_config(config)

    assert "Invalid json_tag_case: kebab" in warnings
    assert "Invalid Go package name: Bad-Pkg" in warnings
    assert "Empty Go type for data type override: uuid" in warnings
    assert config.json_naming is NamingCase.ORIGINAL

    assert manager.validate_config(GeneratorConfig(model_pkg="Model")) == [
        "Package names should be lowercase: Model"
    ]


def test_save_and_reload(manager, tmp_path):
    config = GeneratorConfig(field_signable=True, custom={"out_path": "./q"})
    path = tmp_path / "saved.json"
    manager.save_config(config, path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["field_signable"] is True
    assert data["out_path"] == "./q"
    assert "custom" not in data

    assert manager.get_config(config_file=path) == config


def test_load_config_helper():
    assert load_config({"field_coverable": True}).field_coverable is True
