"""Autocomplete suggestions from the pattern table."""

from bangla_phonetic.models import Ruleset
from bangla_phonetic.pipeline import convert
from bangla_phonetic.ruleset import get_ruleset


MIN_WORD_LENGTH = 2


def get_autocomplete_suggestions(
    partial_text: str,
    max_suggestions: int,
    ruleset: Ruleset | None = None,
) -> list[str]:
    """
    Suggest converted completions for the last word of the input.

    Every pattern key that strictly extends the last word yields a
    candidate: the preceding words plus that key, converted. Candidates
    follow the table's declaration order and duplicates are dropped.

    Args:
        partial_text: Text typed so far
        max_suggestions: Maximum number of suggestions to return
        ruleset: Ruleset to use (default: the bundled one)

    Returns:
        Converted suggestions

    Raises:
        ValueError: If max_suggestions is negative
    """
    if max_suggestions < 0:
        raise ValueError(f"max_suggestions must be >= 0, got {max_suggestions}")

    words = partial_text.split()
    if not words or max_suggestions == 0:
        return []

    last_word = words[-1]
    if len(last_word) < MIN_WORD_LENGTH:
        return []

    if ruleset is None:
        ruleset = get_ruleset()

    suggestions: list[str] = []
    for pattern in ruleset.patterns:
        if pattern.find == last_word or not pattern.find.startswith(last_word):
            continue

        candidate = " ".join([*words[:-1], pattern.find])
        converted = convert(candidate, ruleset)

        if converted not in suggestions:
            suggestions.append(converted)

        if len(suggestions) >= max_suggestions:
            break

    return suggestions
