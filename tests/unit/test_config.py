"""Unit tests for configuration models and YAMLConfigLoader."""

from __future__ import annotations

from pathlib import Path

import pytest

from clawmeta.config import (
    BooleanConfig,
    ClawmetaConfig,
    ConfigLoadError,
    ConfigValidationError,
    YAMLConfigLoader,
    load_config,
)


def test_resolve_path_uses_env_first(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAWMETA_CONFIG", "/tmp/from-env.yaml")
    resolved = YAMLConfigLoader.resolve_path("/tmp/from-cli.yaml")
    assert str(resolved).endswith("from-env.yaml")


def test_resolve_path_uses_cli_when_env_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLAWMETA_CONFIG", raising=False)
    resolved = YAMLConfigLoader.resolve_path("/tmp/from-cli.yaml")
    assert str(resolved).endswith("from-cli.yaml")


def test_resolve_path_defaults_to_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CLAWMETA_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    assert YAMLConfigLoader.resolve_path("  ") == tmp_path / "clawmeta.yaml"


def test_load_dict_missing_file_returns_empty(tmp_path: Path) -> None:
    assert YAMLConfigLoader.load_dict(tmp_path / "missing.yaml") == {}


def test_load_dict_empty_file_returns_empty(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("", encoding="utf-8")
    assert YAMLConfigLoader.load_dict(target) == {}


def test_load_dict_yaml_error_has_line_column(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("booleans:\n  truthy: [\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError) as exc_info:
        YAMLConfigLoader.load_dict(target)
    assert "clawmeta.yaml" in str(exc_info.value)


def test_load_dict_non_mapping_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("- invalid\n- root\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="root must be mapping"):
        YAMLConfigLoader.load_dict(target)


def test_defaults() -> None:
    config = ClawmetaConfig.model_validate({})
    assert config.metadata.frontmatter_field == "metadata"
    assert config.metadata.manifest_key == "openclaw"
    assert config.booleans.truthy == ["true", "1", "yes", "on"]
    assert config.booleans.falsy == ["false", "0", "no", "off"]
    assert config.logging.level == "WARNING"


def test_boolean_tokens_are_normalized() -> None:
    config = BooleanConfig(truthy=[" Y ", "", "JA"], falsy=["n"])
    assert config.truthy == ["y", "ja"]


def test_boolean_tokens_must_be_disjoint() -> None:
    with pytest.raises(ValueError, match="both truthy and falsy"):
        BooleanConfig(truthy=["yes", "ok"], falsy=["ok"])


def test_load_config_merges_yaml_env_and_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text(
        "metadata:\n  manifest_key: acme\nlogging:\n  level: info\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CLAWMETA_BOOLEANS__TRUTHY", "y, yes")
    config = load_config(target, overrides={"metadata": {"frontmatter_field": "meta"}})
    assert config.metadata.manifest_key == "acme"
    assert config.metadata.frontmatter_field == "meta"
    assert config.booleans.truthy == ["y", "yes"]
    assert config.logging.level == "INFO"


def test_load_config_invalid_values_raise(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("metadata:\n  manifest_key: '   '\n", encoding="utf-8")
    with pytest.raises(ConfigValidationError, match="manifest_key"):
        load_config(target)


def test_load_config_rejects_unknown_log_level(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("logging:\n  level: chatty\n", encoding="utf-8")
    with pytest.raises(ConfigValidationError):
        load_config(target)


def test_load_config_env_json_list(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAWMETA_BOOLEANS__FALSY", '["nope", "nah"]')
    config = load_config(tmp_path / "missing.yaml")
    assert config.booleans.falsy == ["nope", "nah"]


def test_model_does_not_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAWMETA_BOOLEANS__TRUTHY", "y, yes")
    monkeypatch.setenv("CLAWMETA_LOGGING__LEVEL", "debug")
    config = ClawmetaConfig()
    assert config.booleans.truthy == ["true", "1", "yes", "on"]
    assert config.logging.level == "WARNING"


def test_load_dict_non_utf8_raises(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_bytes(b"metadata:\n  manifest_key: \xff\xfe\n")
    with pytest.raises(ConfigLoadError, match="not valid UTF-8"):
        YAMLConfigLoader.load_dict(target)


def test_load_dict_invalid_date_raises(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("released: 2024-13-45\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="Invalid YAML value"):
        YAMLConfigLoader.load_dict(target)


def test_load_dict_accepts_bom(tmp_path: Path) -> None:
    target = tmp_path / "clawmeta.yaml"
    target.write_text("\ufeffmetadata:\n  manifest_key: acme\n", encoding="utf-8")
    assert YAMLConfigLoader.load_dict(target) == {"metadata": {"manifest_key": "acme"}}
