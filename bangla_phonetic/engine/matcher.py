"""Greedy left-to-right pattern matcher."""

from collections.abc import Sequence
from dataclasses import dataclass

from bangla_phonetic.engine.conditions import process_rules
from bangla_phonetic.models import Pattern, Rule, Ruleset


@dataclass
class MatchResult:
    """Outcome of looking up patterns at one cursor position."""

    matched: bool
    found: str
    replaced: str
    rules: tuple[Rule, ...] | None = None


def find_exact(text: str, cur: int, patterns: Sequence[Pattern]) -> Pattern | None:
    """
    Find the first pattern whose key occurs in the text at the cursor.

    Declaration order decides, not key length.

    Args:
        text: Case-fixed input text
        cur: Cursor position
        patterns: Candidate patterns in declared order

    Returns:
        First matching pattern, or None
    """
    for pattern in patterns:
        if text.startswith(pattern.find, cur):
            return pattern
    return None


def match_direct_patterns(text: str, cur: int, ruleset: Ruleset) -> MatchResult:
    """Match the cursor position against patterns without rules."""
    pattern = find_exact(text, cur, ruleset.direct_patterns)
    if pattern is None:
        return MatchResult(matched=False, found="", replaced=text[cur])
    return MatchResult(matched=True, found=pattern.find, replaced=pattern.replace)


def match_rule_patterns(text: str, cur: int, ruleset: Ruleset) -> MatchResult:
    """Match the cursor position against rule-guarded patterns."""
    pattern = find_exact(text, cur, ruleset.rule_patterns)
    if pattern is None:
        return MatchResult(matched=False, found="", replaced=text[cur])
    return MatchResult(
        matched=True,
        found=pattern.find,
        replaced=pattern.replace,
        rules=pattern.rules,
    )


def transliterate(text: str, ruleset: Ruleset) -> str:
    """
    Convert case-fixed phonetic text with the ruleset's pattern table.

    At every position not yet consumed, direct patterns are tried first and
    rule-guarded patterns only if none matched. Unmatched characters are
    copied through unchanged. Consumed spans never overlap.

    Args:
        text: Normalized, case-fixed input
        ruleset: Ruleset to convert with

    Returns:
        Converted text, before script post-processing
    """
    output: list[str] = []
    cur_end = 0

    for cur, char in enumerate(text):
        # Already consumed by a longer match
        if cur < cur_end:
            continue

        result = match_direct_patterns(text, cur, ruleset)
        if result.matched:
            output.append(result.replaced)
            cur_end = cur + len(result.found)
            continue

        result = match_rule_patterns(text, cur, ruleset)
        if result.matched:
            cur_end = cur + len(result.found)
            replaced = process_rules(result.rules or (), text, cur, cur_end, ruleset)
            output.append(replaced if replaced is not None else result.replaced)
            continue

        output.append(char)
        cur_end = cur + 1

    return "".join(output)
