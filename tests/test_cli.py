# tests/test_cli.py
"""
tests/test_cli.py
-----------------

Smoke tests for the ``inflect-cli`` entrypoint. Each test calls
``nlg.cli_frontend.main`` with an argv list and checks stdout / stderr and
the exit status.
"""

from __future__ import annotations

import json

import pytest

from nlg.cli_frontend import EXIT_INFLECT_ERROR, EXIT_OK, main


def test_render(capsys) -> None:
    assert main(["render", "{{#f:n}} {{N:error}}", "--count", "4"]) == EXIT_OK
    assert capsys.readouterr().out == "a few errors\n"


def test_render_json(capsys) -> None:
    assert main(["render", "{{N:error}}", "-n", "2", "--json"]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"template": "{{N:error}}", "count": 2, "text": "errors"}


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["singularize", "people"], "person"),
        (["pluralize", "city"], "cities"),
        (["inflect", "error", "--count", "1"], "error"),
        (["conjugate", "tries", "--count", "2"], "try"),
        (["fuzzy", "8"], "several"),
        (["join", "a", "b", "c"], "a, b, and c"),
        (["join", "a", "b", "c", "--final-separator", "", "--conjunctive", "or"], "a, b or c"),
    ],
)
def test_word_commands(capsys, clean_env, argv, expected) -> None:
    assert main(argv) == EXIT_OK
    assert capsys.readouterr().out == expected + "\n"


def test_inflection_error_goes_to_stderr(capsys) -> None:
    assert main(["render", "{{Nu:error}}", "--count", "2"]) == EXIT_INFLECT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown option 'u' in {{N:...}} tag" in captured.err


def test_negative_count_is_an_error(capsys) -> None:
    assert main(["fuzzy", "-1"]) == EXIT_INFLECT_ERROR
    assert "non-negative" in capsys.readouterr().err


def test_missing_command_exits() -> None:
    with pytest.raises(SystemExit):
        main([])
