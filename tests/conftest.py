# tests/conftest.py
import logging
import os

import pytest

from utils.logging_setup import init_logging

# (singular, plural) pairs that both noun tables round-trip.
NOUN_PAIRS = [
    ("error", "errors"),
    ("person", "people"),
    ("child", "children"),
    ("man", "men"),
    ("woman", "women"),
    ("ox", "oxen"),
    ("foot", "feet"),
    ("tooth", "teeth"),
    ("goose", "geese"),
    ("mouse", "mice"),
    ("quiz", "quizzes"),
    ("criterion", "criteria"),
    ("phenomenon", "phenomena"),
    ("city", "cities"),
    ("day", "days"),
    ("box", "boxes"),
    ("church", "churches"),
    ("dish", "dishes"),
    ("class", "classes"),
    ("buzz", "buzzes"),
    ("knife", "knives"),
    ("wife", "wives"),
    ("life", "lives"),
    ("half", "halves"),
    ("wolf", "wolves"),
    ("shelf", "shelves"),
    ("thief", "thieves"),
    ("roof", "roofs"),
    ("octopus", "octopi"),
    ("cactus", "cacti"),
    ("radius", "radii"),
    ("datum", "data"),
    ("medium", "media"),
    ("matrix", "matrices"),
    ("index", "indices"),
    ("vertex", "vertices"),
    ("bus", "buses"),
    ("status", "statuses"),
    ("alias", "aliases"),
    ("virus", "viruses"),
    ("focus", "focuses"),
    ("menu", "menus"),
    ("potato", "potatoes"),
    ("hero", "heroes"),
    ("photo", "photos"),
    ("analysis", "analyses"),
    ("crisis", "crises"),
    ("axis", "axes"),
    ("movie", "movies"),
    ("tie", "ties"),
    ("cache", "caches"),
    ("beach", "beaches"),
    ("house", "houses"),
    ("taxi", "taxis"),
    ("tofu", "tofus"),
    ("bureau", "bureaus"),
    ("plateau", "plateaus"),
    ("bayou", "bayous"),
    ("lie", "lies"),
]

# (bare form, singular-subject form)
VERB_PAIRS = [
    ("try", "tries"),
    ("fly", "flies"),
    ("watch", "watches"),
    ("pass", "passes"),
    ("fix", "fixes"),
    ("buzz", "buzzes"),
    ("run", "runs"),
    ("play", "plays"),
    ("echo", "echoes"),
    ("are", "is"),
    ("were", "was"),
    ("have", "has"),
    ("do", "does"),
    ("go", "goes"),
    ("lie", "lies"),
    ("tie", "ties"),
    ("die", "dies"),
    ("untie", "unties"),
]


@pytest.fixture
def noun_pairs():
    return list(NOUN_PAIRS)


@pytest.fixture
def verb_pairs():
    return list(VERB_PAIRS)


@pytest.fixture
def clean_env(monkeypatch):
    """Strip INFLECT_* variables so settings fall back to their defaults."""
    for key in list(os.environ):
        if key.startswith("INFLECT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(os.path.dirname(os.path.abspath(__file__)))
    yield monkeypatch


@pytest.fixture
def debug_logging():
    """Switch logging to DEBUG for one test, then back to the quiet default."""
    init_logging(level=logging.DEBUG, force=True)
    yield
    init_logging(level=logging.WARNING, force=True)
