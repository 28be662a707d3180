"""
nlg/template.py

Resolve inflection tags inside a template string against an item count.

Tag grammar
-----------

    span      := "{{" head ":" payload "}}"
    head      := ws* kind ws* modifiers
    kind      := "N" | "n" | "V" | "v" | "#"
    modifiers := (letter ws*)*
    payload   := any characters, trimmed of leading/trailing ws
    ws        := space | tab

Tag kinds
---------

- ``{{N:error}}``   noun, inflected for the count. Modifiers: ``s`` forces the
  singular, ``p`` the plural. If both are given the first one wins.
- ``{{V:tries}}``   verb, made to agree with the count. No modifiers.
- ``{{#:count}}``   the count itself. Modifier ``f`` swaps the numeral for a
  fuzzy label ("a few"). The payload is a free-form label and is ignored.

Modifiers are case-insensitive. Anything a kind does not accept raises
UnknownOption and aborts the whole call.

    >>> parse_template("{{#f:count}} {{N:error}} {{V:were}} found", 2)
    'a couple of errors were found'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Tuple

from morphology import english
from morphology.errors import check_count
from nlg.errors import MalformedTag, UnknownOption
from nlg.fuzzy_count import classify_fuzzy_count
from utils.logging_setup import get_logger

log = get_logger(__name__)

__all__ = [
    "TagKind",
    "Tag",
    "ALLOWED_MODIFIERS",
    "parse_tag",
    "render_tag",
    "iter_tags",
    "parse_template",
]

_SPAN_RE = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_WS = " \t"
_ESCAPE = "\\"
_SEPARATOR = ":"


class TagKind(str, Enum):
    NOUN = "N"
    VERB = "V"
    COUNT = "#"


ALLOWED_MODIFIERS: Dict[TagKind, FrozenSet[str]] = {
    TagKind.NOUN: frozenset({"s", "p"}),
    TagKind.VERB: frozenset(),
    TagKind.COUNT: frozenset({"f"}),
}


@dataclass(frozen=True)
class Tag:
    """A parsed ``{{...}}`` span, ready to be rendered."""

    kind: TagKind
    modifiers: Tuple[str, ...]
    payload: str
    source: str = ""


# ---------------------------------------------------------------------------
# Tokenizing
# ---------------------------------------------------------------------------


def _split_inner(inner: str, source: str) -> Tuple[str, str]:
    """Split the span body on the first ``:`` not preceded by a backslash."""
    i = 0
    while i < len(inner):
        ch = inner[i]
        if ch == _ESCAPE:
            i += 2
            continue
        if ch == _SEPARATOR:
            return inner[:i], inner[i + 1 :]
        i += 1
    raise MalformedTag(source, "missing ':' between tag kind and payload")


def _head_tokens(head: str) -> Iterator[str]:
    for ch in head:
        if ch not in _WS:
            yield ch


def _parse_head(head: str, source: str) -> Tuple[TagKind, Tuple[str, ...]]:
    tokens = _head_tokens(head)

    first = next(tokens, None)
    if first is None:
        raise MalformedTag(source, "missing tag kind")
    try:
        kind = TagKind(first.upper())
    except ValueError:
        raise MalformedTag(source, f"unknown tag kind {first!r}") from None

    allowed = ALLOWED_MODIFIERS[kind]
    modifiers: List[str] = []
    for token in tokens:
        option = token.lower()
        if option not in allowed:
            log.debug("template_tag_rejected", tag=source, option=option, kind=kind.value)
            raise UnknownOption(option, kind.value)
        modifiers.append(option)

    return kind, tuple(modifiers)


def parse_tag(source: str) -> Tag:
    """
    Parse one span, with or without its ``{{ }}`` delimiters.

        parse_tag("{{N p : error }}")
        # Tag(kind=TagKind.NOUN, modifiers=('p',), payload='error', ...)
    """
    inner = source
    if inner.startswith("{{") and inner.endswith("}}"):
        inner = inner[2:-2]

    head, payload = _split_inner(inner, source)
    kind, modifiers = _parse_head(head, source)

    payload = payload.strip(_WS)
    if not payload:
        raise MalformedTag(source, "empty payload")

    return Tag(kind=kind, modifiers=modifiers, payload=payload, source=source)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _render_noun(tag: Tag, count: int) -> str:
    for option in tag.modifiers:
        if option == "s":
            return english.singularize(tag.payload)
        if option == "p":
            return english.pluralize(tag.payload)
    return english.inflect(tag.payload, count)


def _render_verb(tag: Tag, count: int) -> str:
    return english.conjugate_verb(tag.payload, count)


def _render_count(tag: Tag, count: int) -> str:
    if "f" in tag.modifiers:
        return classify_fuzzy_count(count)
    return str(count)


_RENDERERS = {
    TagKind.NOUN: _render_noun,
    TagKind.VERB: _render_verb,
    TagKind.COUNT: _render_count,
}


def render_tag(tag: Tag, count: int) -> str:
    """Produce the replacement text for ``tag`` given ``count`` items."""
    check_count(count)
    return _RENDERERS[tag.kind](tag, count)


# ---------------------------------------------------------------------------
# Template scanning
# ---------------------------------------------------------------------------


def iter_tags(template: str) -> Iterator[Tag]:
    """Yield every tag of ``template`` in order, without rendering."""
    for match in _SPAN_RE.finditer(template):
        yield parse_tag(match.group(0))


def parse_template(template: str, count: int) -> str:
    """
    Replace every ``{{...}}`` span in ``template`` with its inflected text.

    Text outside spans is copied through unchanged. A ``{{`` without a
    closing ``}}`` is plain text.

    Raises:
        InvalidCount: if ``count`` is negative or not an integer.
        MalformedTag: if a span has no ``:``, no kind, an unknown kind or an
            empty payload.
        UnknownOption: if a span carries a modifier its kind does not accept.
    """
    check_count(count)

    parts: List[str] = []
    position = 0
    for match in _SPAN_RE.finditer(template):
        parts.append(template[position : match.start()])
        parts.append(render_tag(parse_tag(match.group(0)), count))
        position = match.end()
    parts.append(template[position:])

    log.debug("template_parsed", tags=(len(parts) - 1) // 2, count=count)
    return "".join(parts)
