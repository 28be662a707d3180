"""
nlg/cli_frontend.py

Command-line interface for the inflection API.

Typical usage:

    inflect-cli render "Found {{#f:n}} {{N:error}}" --count 4
    inflect-cli pluralize person
    inflect-cli conjugate tries --count 2
    inflect-cli join apples pears plums --final-separator ""

The CLI:

- Forwards each subcommand to the matching function in nlg.api.
- Prints the result to stdout (or a JSON object with --json for `render`).
- Reports inflection errors on stderr and exits with status 2.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Dict, Optional, Sequence

from nlg import api
from utils.config import get_settings
from utils.logging_setup import get_logger, init_logging

log = get_logger(__name__)

EXIT_OK = 0
EXIT_INFLECT_ERROR = 2


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_count(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        required=True,
        help="Number of items the text talks about.",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="inflect-cli",
        description="Inflect English nouns and verbs, and resolve {{N:...}} templates.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override INFLECT_LOG_LEVEL (e.g. DEBUG to trace rule decisions).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    render = subparsers.add_parser("render", help="Resolve every tag in a template.")
    render.add_argument("template", help="Template text, e.g. '{{#:n}} {{N:error}}'.")
    _add_count(render)
    render.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object with the template, count and text.",
    )

    for name, help_text in (
        ("singularize", "Print the singular form of a noun."),
        ("pluralize", "Print the plural form of a noun."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("word")

    inflect = subparsers.add_parser("inflect", help="Print the noun form for a count.")
    inflect.add_argument("word")
    _add_count(inflect)

    conjugate = subparsers.add_parser("conjugate", help="Make a verb agree with a count.")
    conjugate.add_argument("word")
    _add_count(conjugate)

    fuzzy = subparsers.add_parser("fuzzy", help="Print the fuzzy label for a count.")
    fuzzy.add_argument("count", type=int)

    join = subparsers.add_parser("join", help="Join words into a phrase.")
    join.add_argument("words", nargs="*")
    join.add_argument("--separator", default=settings.JOIN_SEPARATOR)
    join.add_argument("--final-separator", default=None)
    join.add_argument("--conjunctive", default=settings.JOIN_CONJUNCTIVE)

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_render(args: argparse.Namespace) -> str:
    text = api.parse_template(args.template, args.count)
    if args.json:
        return json.dumps(
            {"template": args.template, "count": args.count, "text": text},
            ensure_ascii=False,
        )
    return text


def _cmd_singularize(args: argparse.Namespace) -> str:
    return api.singularize(args.word)


def _cmd_pluralize(args: argparse.Namespace) -> str:
    return api.pluralize(args.word)


def _cmd_inflect(args: argparse.Namespace) -> str:
    return api.inflect(args.word, args.count)


def _cmd_conjugate(args: argparse.Namespace) -> str:
    return api.conjugate_verb(args.word, args.count)


def _cmd_fuzzy(args: argparse.Namespace) -> str:
    return api.classify_fuzzy_count(args.count)


def _cmd_join(args: argparse.Namespace) -> str:
    return api.join_words(
        *args.words,
        separator=args.separator,
        conjunctive=args.conjunctive,
        final_separator=args.final_separator,
    )


_COMMANDS: Dict[str, Callable[[argparse.Namespace], str]] = {
    "render": _cmd_render,
    "singularize": _cmd_singularize,
    "pluralize": _cmd_pluralize,
    "inflect": _cmd_inflect,
    "conjugate": _cmd_conjugate,
    "fuzzy": _cmd_fuzzy,
    "join": _cmd_join,
}


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.log_level:
        init_logging(level=args.log_level, force=True)

    try:
        output = _COMMANDS[args.command](args)
    except api.InflectError as exc:
        log.info("cli_command_failed", command=args.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INFLECT_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
