"""Tests for config file loading and precedence."""

import argparse
import logging
import os
import tempfile

from cli_config import apply_config_defaults, find_config_file, load_config


def _write(path, content):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def _ns(**kwargs):
    base = {"SORT_PROPS": None, "CHECK_COLLISIONS": None, "ERROR_ON_WARNINGS": None, "LOG_LEVEL": None}
    base.update(kwargs)
    return argparse.Namespace(**base)


def test_load_yaml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "unifyversions.yml")
        _write(path, "sort_props: true\nlog_level: debug\n")

        assert load_config(path) == {"sort_props": True, "log_level": "debug"}


def test_load_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "config.json")
        _write(path, '{"check_collisions": true}')

        assert load_config(path) == {"check_collisions": True}


def test_missing_or_broken_config_is_empty(caplog):
    with tempfile.TemporaryDirectory() as tmpdir:
        broken = os.path.join(tmpdir, "broken.yml")
        _write(broken, "sort_props: [unclosed\n")

        with caplog.at_level(logging.WARNING):
            assert load_config(os.path.join(tmpdir, "nope.yml")) == {}
            assert load_config(broken) == {}
            assert load_config(None) == {}

        assert "Config file not found" in caplog.text
        assert "Failed to load config" in caplog.text


def test_non_mapping_is_ignored():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "list.yml")
        _write(path, "- a\n- b\n")

        assert load_config(path) == {}


def test_unknown_keys_warn(caplog):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "c.yml")
        _write(path, "sort_prop: true\n")

        with caplog.at_level(logging.WARNING):
            load_config(path)

        assert "Unknown config key(s)" in caplog.text


def test_find_config_file(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.chdir(tmpdir)
        monkeypatch.delenv("UNIFYVERSIONS_CONFIG", raising=False)
        assert find_config_file() is None

        _write(os.path.join(tmpdir, "unifyversions.yml"), "{}")
        assert find_config_file() == "unifyversions.yml"

        monkeypatch.setenv("UNIFYVERSIONS_CONFIG", "/etc/uv.yml")
        assert find_config_file() == "/etc/uv.yml"
        assert find_config_file("explicit.yml") == "explicit.yml"


def test_cli_flags_win_over_config():
    args = _ns(SORT_PROPS=True)

    apply_config_defaults(args, {"sort_props": False, "check_collisions": True, "log_level": "warning"})

    assert args.SORT_PROPS is True
    assert args.CHECK_COLLISIONS is True
    assert args.ERROR_ON_WARNINGS is False
    assert args.LOG_LEVEL == "WARNING"


def test_defaults_without_config():
    args = _ns()

    apply_config_defaults(args, {})

    assert args.SORT_PROPS is False
    assert args.CHECK_COLLISIONS is False
    assert args.ERROR_ON_WARNINGS is False
    assert args.LOG_LEVEL is None


def test_non_boolean_flag_is_ignored(caplog):
    args = _ns()

    with caplog.at_level(logging.WARNING):
        apply_config_defaults(args, {"sort_props": "false", "check_collisions": 1})

    assert args.SORT_PROPS is False
    assert args.CHECK_COLLISIONS is False
    assert "Ignoring config key sort_props" in caplog.text
    assert "Ignoring config key check_collisions" in caplog.text
