"""Tests for option resolution from config files and CLI flags."""

import json

import pytest

from analysis.models import LintOptions
from args import parse_args
from lint_config import ConfigError, load_file_options, options_from_mapping, resolve_options


def test_defaults_without_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_file_options() == LintOptions(
        fail_on_warnings=True, strict_license=True, strict_dependencies=False
    )


def test_default_yaml_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".metadata-json-lint.yml").write_text(
        "metadata_json_lint:\n  strict_dependencies: true\n  strict_license: false\n",
        encoding="utf-8",
    )
    options = load_file_options()
    assert options.strict_dependencies is True
    assert options.strict_license is False
    assert options.fail_on_warnings is True


def test_explicit_json_config(tmp_path):
    cfg = tmp_path / "lint.json"
    cfg.write_text(json.dumps({"fail-on-warnings": False}), encoding="utf-8")
    assert load_file_options(str(cfg)).fail_on_warnings is False


def test_empty_yaml_config(tmp_path):
    cfg = tmp_path / "lint.yml"
    cfg.write_text("", encoding="utf-8")
    assert load_file_options(str(cfg)) == LintOptions()


def test_unknown_keys_are_ignored():
    assert options_from_mapping({"colour": "blue"}) == LintOptions()


def test_non_boolean_value_rejected():
    with pytest.raises(ConfigError):
        options_from_mapping({"strict_license": "yes"})


def test_non_mapping_section_rejected():
    with pytest.raises(ConfigError):
        options_from_mapping({"metadata_json_lint": ["strict_license"]})


def test_missing_explicit_config(tmp_path):
    with pytest.raises(ConfigError):
        load_file_options(str(tmp_path / "missing.yml"))


def test_invalid_yaml(tmp_path):
    cfg = tmp_path / "lint.yml"
    cfg.write_text("strict_license: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_file_options(str(cfg))


def test_cli_flags_override_config(tmp_path):
    cfg = tmp_path / "lint.yml"
    cfg.write_text("strict_license: false\nstrict_dependencies: true\n", encoding="utf-8")
    args = parse_args(["--config", str(cfg), "--strict-license"])
    options = resolve_options(args)
    assert options.strict_license is True
    assert options.strict_dependencies is True


def test_unset_cli_flags_keep_config_values(tmp_path):
    cfg = tmp_path / "lint.yml"
    cfg.write_text("fail_on_warnings: false\n", encoding="utf-8")
    options = resolve_options(parse_args(["-c", str(cfg)]))
    assert options.fail_on_warnings is False
