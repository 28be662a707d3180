"""
morphology

Rule-driven English inflection: noun number and verb agreement.

    from morphology import english
    english.pluralize("error")  # "errors"
"""
