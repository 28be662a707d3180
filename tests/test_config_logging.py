# tests/test_config_logging.py
"""
tests/test_config_logging.py
----------------------------

Settings loading from the environment and the structlog-based logging
setup.
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from morphology import english
from utils.config import LogFormat, get_settings


def test_default_settings(clean_env) -> None:
    settings = get_settings()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT is LogFormat.CONSOLE
    assert settings.LOG_FILE is None
    assert settings.JOIN_SEPARATOR == ", "
    assert settings.JOIN_CONJUNCTIVE == "and"


def test_settings_read_prefixed_environment(clean_env) -> None:
    clean_env.setenv("INFLECT_LOG_LEVEL", "DEBUG")
    clean_env.setenv("INFLECT_LOG_FORMAT", "json")
    clean_env.setenv("INFLECT_JOIN_CONJUNCTIVE", "or")

    settings = get_settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT is LogFormat.JSON
    assert settings.JOIN_CONJUNCTIVE == "or"


def test_settings_reject_bad_values(clean_env) -> None:
    clean_env.setenv("INFLECT_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        get_settings()


def test_cli_join_uses_configured_conjunctive(clean_env, capsys) -> None:
    from nlg.cli_frontend import main

    clean_env.setenv("INFLECT_JOIN_CONJUNCTIVE", "or")
    assert main(["join", "tea", "coffee"]) == 0
    assert capsys.readouterr().out == "tea or coffee\n"


def test_debug_logging_traces_rule_decisions(debug_logging, caplog) -> None:
    assert logging.getLogger().level == logging.DEBUG

    with caplog.at_level(logging.DEBUG):
        assert english.pluralize("city") == "cities"

    messages = [r.getMessage() for r in caplog.records if r.name == "morphology.english"]
    assert any("rule_applied" in m and "cities" in m for m in messages)
