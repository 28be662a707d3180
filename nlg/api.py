# nlg/api.py
"""
Public entry points for inflection and template resolution.

    from nlg.api import parse_template, pluralize

    parse_template("Found {{#:n}} {{N:error}}", 3)   # "Found 3 errors"
    pluralize("error")                              # "errors"

All functions are pure and thread-safe; they read only module-level
constant tables.
"""

from __future__ import annotations

from morphology.english import (
    conjugate_verb,
    inflect,
    is_plural,
    is_singular,
    is_uncountable,
    pluralize,
    singularize,
)
from nlg.errors import InflectError, InvalidCount, MalformedTag, TemplateError, UnknownOption
from nlg.fuzzy_count import classify_fuzzy_count
from nlg.join import join_words
from nlg.template import parse_template

__all__ = [
    # nouns
    "singularize",
    "pluralize",
    "inflect",
    "is_singular",
    "is_plural",
    "is_uncountable",
    # verbs
    "conjugate_verb",
    # templates
    "parse_template",
    "classify_fuzzy_count",
    "join_words",
    # errors
    "InflectError",
    "InvalidCount",
    "TemplateError",
    "MalformedTag",
    "UnknownOption",
]
