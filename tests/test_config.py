from __future__ import annotations

import os
from pathlib import Path

import pytest

from tap_formula.common.config import DEFAULT_TEMPLATE_PATHS, ConfigError, load_config


def test_defaults() -> None:
    cfg = load_config(environ={})
    assert cfg.template_paths == list(DEFAULT_TEMPLATE_PATHS)
    assert cfg.log_level == "WARNING"


def test_yaml_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "tap.yaml"
    cfg_file.write_text("template_paths:\n  - packaging/tap-template\nlog_level: info\n", encoding="utf-8")
    cfg = load_config(str(cfg_file), environ={})
    assert cfg.template_paths == ["packaging/tap-template"]
    assert cfg.log_level == "INFO"


def test_config_path_from_env(tmp_path: Path) -> None:
    cfg_file = tmp_path / "tap.yaml"
    cfg_file.write_text("log_level: debug\n", encoding="utf-8")
    cfg = load_config(environ={"TAP_FORMULA_CONFIG": str(cfg_file)})
    assert cfg.log_level == "DEBUG"


def test_env_overrides_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "tap.yaml"
    cfg_file.write_text("template_paths: [from-file]\n", encoding="utf-8")
    env = {"TAP_TEMPLATE_PATHS": os.pathsep.join(["one", "two"])}
    cfg = load_config(str(cfg_file), environ=env)
    assert cfg.template_paths == ["one", "two"]


def test_empty_yaml_is_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "tap.yaml"
    cfg_file.write_text("", encoding="utf-8")
    assert load_config(str(cfg_file), environ={}).template_paths == list(DEFAULT_TEMPLATE_PATHS)


def test_empty_template_paths_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "tap.yaml"
    cfg_file.write_text("template_paths: []\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(cfg_file), environ={})


def test_non_mapping_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "tap.yaml"
    cfg_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(cfg_file), environ={})


def test_unreadable_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "nope.yaml"), environ={})


def test_default_paths_not_shared() -> None:
    cfg = load_config(environ={})
    cfg.template_paths.append("extra")
    assert DEFAULT_TEMPLATE_PATHS == ("tap-template", "./scripts/release/tap-template")
    assert load_config(environ={}).template_paths == list(DEFAULT_TEMPLATE_PATHS)
