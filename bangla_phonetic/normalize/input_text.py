"""Normalization of phonetic input before matching."""

from bangla_phonetic.models import Ruleset


def normalize_input(text: str) -> str:
    """
    Collapse whitespace runs to single spaces and trim both ends.

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    return " ".join(text.split())


def fix_string_case(text: str, ruleset: Ruleset) -> str:
    """
    Lower-case every character except the case-sensitive ones.

    Patterns are keyed in lower case, but some letters (e.g. "O" versus
    "o") select different patterns and must keep their case.

    Args:
        text: Input text
        ruleset: Ruleset supplying the case-sensitive set

    Returns:
        Text in the case the pattern table expects
    """
    return "".join(
        char if ruleset.is_case_sensitive(char) else char.lower()
        for char in text
    )


def prepare_input(text: str, ruleset: Ruleset) -> str:
    """Apply whitespace normalization and case fixing, in that order."""
    return fix_string_case(normalize_input(text), ruleset)
