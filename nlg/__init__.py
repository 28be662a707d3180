"""
nlg

Template-level inflection: ``{{N:...}}``, ``{{V:...}}`` and ``{{#:...}}``
tags resolved against a count, plus word-list joining.

The stable surface lives in :mod:`nlg.api`; the ``inflect-cli`` command is
in :mod:`nlg.cli_frontend`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
