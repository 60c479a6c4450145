"""Evaluation of contextual rule conditions."""

from collections.abc import Sequence

from bangla_phonetic.models import Match, MatchType, Rule, Ruleset, Scope


def process_match(
    match: Match,
    text: str,
    cur: int,
    cur_end: int,
    ruleset: Ruleset,
) -> bool:
    """
    Evaluate one condition against the text around a matched span.

    Args:
        match: Condition to evaluate
        text: Case-fixed input text
        cur: Start of the matched span
        cur_end: End (exclusive) of the matched span
        ruleset: Ruleset supplying the character classes

    Returns:
        True if the condition passes
    """
    # Index of the neighbouring character, and whether one exists at all
    if match.type is MatchType.PREFIX:
        chk = max(cur - 1, 0)
        in_bounds = cur > 0
    else:
        chk = cur_end
        in_bounds = cur_end < len(text)

    if match.scope is Scope.PUNCTUATION:
        # Text boundaries count as punctuation
        return ((not in_bounds) or ruleset.is_punctuation(text[chk])) ^ match.negated

    if match.scope is Scope.VOWEL:
        # Out of bounds fails whether negated or not
        return in_bounds and (ruleset.is_vowel(text[chk]) ^ match.negated)

    if match.scope is Scope.CONSONANT:
        return in_bounds and (ruleset.is_consonant(text[chk]) ^ match.negated)

    if match.scope is Scope.EXACT:
        if match.value is None:
            return True

        if match.type is MatchType.PREFIX:
            exact_start = max(cur - len(match.value), 0)
            exact_end = cur
        else:
            exact_start = cur_end
            exact_end = cur_end + len(match.value)

        # A window ending exactly at the end of the text never matches
        found = exact_end < len(text) and text[exact_start:exact_end] == match.value
        return found ^ match.negated

    # Scope.UNKNOWN
    return True


def process_rules(
    rules: Sequence[Rule],
    text: str,
    cur: int,
    cur_end: int,
    ruleset: Ruleset,
) -> str | None:
    """
    Pick the replacement of the first rule whose conditions all pass.

    Args:
        rules: Rules of the matched pattern, in declared order
        text: Case-fixed input text
        cur: Start of the matched span
        cur_end: End (exclusive) of the matched span
        ruleset: Ruleset supplying the character classes

    Returns:
        The rule's replacement, or None if no rule passes
    """
    for rule in rules:
        if all(process_match(m, text, cur, cur_end, ruleset) for m in rule.matches):
            return rule.replace
    return None
