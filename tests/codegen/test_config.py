"""Generator configuration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from swagger_typegen.codegen.core.config import (
    DEFAULT_WRAPPER,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def test_defaults() -> None:
    config = load_config()

    assert config.camelcase is False
    assert config.wrapper == DEFAULT_WRAPPER
    assert config.warning is True
    assert config.add_comments is True
    assert config.indent_size == 2
    assert config.property_mapper is None
    assert config.custom == {}


def test_aliases_and_unknown_keys() -> None:
    mapper = lambda node, prop: prop  # noqa: E731
    config = load_config(
        custom_config={"camelCase": True, "propertyMapper": mapper, "banner": "x"}
    )

    assert config.camelcase is True
    assert config.property_mapper is mapper
    assert config.custom == {"banner": "x"}


@pytest.mark.parametrize(
    ("wrapper", "line"),
    [
        ("declare namespace OpenAPI2", "declare namespace OpenAPI2"),
        ("namespace", "declare namespace OpenAPI2"),
        ("module", "declare module OpenAPI2"),
        ("export namespace Api", "export namespace Api"),
        (True, DEFAULT_WRAPPER),
        (False, None),
        (None, None),
        ("", None),
    ],
)
def test_wrapper_line(wrapper: object, line: str | None) -> None:
    assert GeneratorConfig(wrapper=wrapper).wrapper_line == line


def test_config_file_is_merged_under_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "typegen.json"
    config_path.write_text(
        json.dumps({"camelcase": True, "wrapper": "module", "indent_size": 4}),
        encoding="utf-8",
    )

    config = load_config(custom_config={"indent_size": 3}, config_file=config_path)

    assert config.camelcase is True
    assert config.wrapper_line == "declare module OpenAPI2"
    assert config.indent_size == 3


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "missing.json")


def test_config_file_must_be_json(tmp_path: Path) -> None:
    config_path = tmp_path / "typegen.yaml"
    config_path.write_text("camelcase: true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=config_path)


def test_invalid_json_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "typegen.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=config_path)


def test_validate_config() -> None:
    manager = ConfigManager()

    assert manager.validate_config(GeneratorConfig()) == []

    warnings = manager.validate_config(
        GeneratorConfig(
            camelcase="yes",
            wrapper=42,
            indent_size=0,
            property_mapper="not callable",
            custom={"typo": 1},
        )
    )

    assert "camelcase should be a boolean, got 'yes'" in warnings
    assert "Invalid wrapper: 42" in warnings
    assert "Invalid indent_size: 0" in warnings
    assert "property_mapper must be callable" in warnings
    assert "Unknown option: typo" in warnings
