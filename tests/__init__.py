# tests\__init__.py
"""
Test Suite for the inflection toolkit

Organization:
- `test_rules`, `test_noun_inflection`, `test_verb_conjugation`: the rule engine.
- `test_fuzzy_count`, `test_template_parser`, `test_join_words`: the template layer.
- `test_cli`, `test_config_logging`: command line, settings and logging.
"""
