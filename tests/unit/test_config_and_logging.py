"""Configuration hierarchy and structured logging setup."""

import json
import logging

import pytest

from occmatch.core.config.loader import ConfigLoader, get_config_value, load_config
from occmatch.core.models.results import EligibilityChecks
from occmatch.observability.logger import (
    get_logger,
    occupation_context,
    setup_logging,
    summarize_models,
)


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "environments").mkdir()
    (tmp_path / "default.yaml").write_text(
        "search:\n  default_limit: 10\nlogging:\n  level: WARNING\n  format: console\n",
        encoding="utf-8",
    )
    (tmp_path / "environments" / "testing.yaml").write_text(
        "logging:\n  level: DEBUG\n", encoding="utf-8"
    )
    return tmp_path


def test_bundled_defaults():
    config = load_config()

    assert get_config_value(config, "search.default_limit") == 10
    assert get_config_value(config, "catalog.path") is None
    assert get_config_value(config, "logging.level") == "WARNING"


def test_environment_file_is_merged(config_dir, monkeypatch):
    monkeypatch.setenv("OCCMATCH_ENV", "testing")
    config = ConfigLoader(config_dir).load()

    assert config["logging"] == {"level": "DEBUG", "format": "console"}
    assert config["search"]["default_limit"] == 10


def test_overrides_and_env_vars(config_dir, monkeypatch):
    monkeypatch.setenv("OCCMATCH_SEARCH__DEFAULT_LIMIT", "5")
    monkeypatch.setenv("OCCMATCH_CATALOG__PATH", "/data/occupations.yaml")

    config = ConfigLoader(config_dir).load(overrides={"search": {"default_limit": 3}})

    # Environment variables win over programmatic overrides
    assert config["search"]["default_limit"] == 5
    assert config["catalog"]["path"] == "/data/occupations.yaml"
    assert config["logging"]["format"] == "console"


def test_env_vars_without_nesting_are_ignored(config_dir, monkeypatch):
    monkeypatch.setenv("OCCMATCH_ENV", "missing")
    config = ConfigLoader(config_dir).load()

    assert "env" not in config
    assert config["logging"]["level"] == "WARNING"


def test_config_dir_from_environment(config_dir, monkeypatch):
    monkeypatch.setenv("OCCMATCH_CONFIG_DIR", str(config_dir))
    assert ConfigLoader().config_dir == config_dir


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("No", False),
        ("null", None),
        ("", None),
        ("1", 1),
        ("1.5", 1.5),
        ("console", "console"),
    ],
)
def test_convert_value(raw, expected):
    assert ConfigLoader("/nonexistent")._convert_value(raw) == expected


def test_get_config_value_default():
    config = {"search": {"default_limit": None}}

    assert get_config_value(config, "search.default_limit", 10) == 10
    assert get_config_value(config, "search.missing.deeper", "x") == "x"


def test_json_logging_to_file(tmp_path):
    log_file = tmp_path / "logs" / "occmatch.log"
    try:
        setup_logging(log_level="INFO", log_format="json", log_file=log_file)
        get_logger("tests.logging").info("catalog_loaded", occupations=7)

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        entry = json.loads(lines[-1])
        assert entry["event"] == "catalog_loaded"
        assert entry["occupations"] == 7
        assert entry["app"] == "occmatch"
        assert entry["level"] == "info"
    finally:
        setup_logging(log_level="WARNING", log_format="console")

    assert logging.getLogger().level == logging.WARNING


def test_summarize_models_collapses_occupations(catalog):
    event = summarize_models(
        None,
        "info",
        {
            "event": "eligibility_evaluated",
            "occupation": catalog.get_by_code("334111"),
            "checks": EligibilityChecks(qualification=True),
            "eligible": False,
        },
    )

    assert event["occupation"] == "334111"
    assert event["checks"] == {"qualification": True, "experience": False, "english": False}
    assert event["eligible"] is False


def test_occupation_context_tags_entries(tmp_path, catalog):
    log_file = tmp_path / "occmatch.log"
    try:
        setup_logging(log_level="INFO", log_format="json", log_file=log_file)
        log = get_logger("tests.occupation_context")
        with occupation_context("341111"):
            log.info("occupation_selected", occupation=catalog.get_by_code("341111"))
        log.info("search_done")

        inside, outside = [
            json.loads(line)
            for line in log_file.read_text(encoding="utf-8").strip().splitlines()
        ]
        assert inside["occupation_code"] == "341111"
        assert inside["occupation"] == "341111"
        assert "occupation_code" not in outside
    finally:
        setup_logging(log_level="WARNING", log_format="console")
