"""Tests for the pattern matcher."""

from bangla_phonetic.engine.matcher import (
    find_exact,
    match_direct_patterns,
    match_rule_patterns,
    transliterate,
)
from bangla_phonetic.models import Pattern


def test_find_exact_uses_declaration_order():
    """The first listed pattern wins even when a longer key also matches."""
    patterns = [Pattern("t", "ত"), Pattern("th", "থ")]
    assert find_exact("tha", 0, patterns) == patterns[0]
    assert find_exact("tha", 0, list(reversed(patterns))) == patterns[1]


def test_find_exact_bounds():
    """Keys running past the end of the text do not match."""
    patterns = [Pattern("kha", "খা")]
    assert find_exact("kh", 0, patterns) is None
    assert find_exact("akha", 1, patterns) == patterns[0]
    assert find_exact("akha", 2, patterns) is None


def test_match_direct_patterns(mini_ruleset):
    """Direct lookup reports the key and default replacement."""
    result = match_direct_patterns("kha", 0, mini_ruleset)
    assert result.matched
    assert result.found == "kh"
    assert result.replaced == "খ"
    assert result.rules is None

    result = match_direct_patterns("a", 0, mini_ruleset)
    assert not result.matched
    assert result.replaced == "a"


def test_match_rule_patterns(mini_ruleset):
    """Rule lookup only considers rule-guarded patterns."""
    result = match_rule_patterns("x", 0, mini_ruleset)
    assert result.matched
    assert result.replaced == "রুল"
    assert result.rules is not None and len(result.rules) == 1

    assert not match_rule_patterns("k", 0, mini_ruleset).matched


def test_direct_pattern_beats_rule_pattern(mini_ruleset):
    """A direct pattern wins over an earlier rule-guarded one on the same key."""
    assert transliterate("x", mini_ruleset) == "ক্স"


def test_declaration_order_beats_length(mini_ruleset):
    """"t" is listed before "th", so "th" never matches."""
    assert transliterate("th", mini_ruleset) == "তh"


def test_multi_character_match_consumes_span(mini_ruleset):
    """Positions inside a consumed span are skipped."""
    assert transliterate("kha", mini_ruleset) == "খা"


def test_rule_replacement(mini_ruleset):
    """Passing rules replace the default."""
    assert transliterate("a", mini_ruleset) == "আ"
    assert transliterate("ao", mini_ruleset) == "আও"
    assert transliterate("ai", mini_ruleset) == "আই"
    assert transliterate("o", mini_ruleset) == "অ"


def test_rule_fallback_to_default(mini_ruleset):
    """When every rule fails the pattern's own replacement is emitted."""
    assert transliterate("ka", mini_ruleset) == "কা"
    assert transliterate("ki", mini_ruleset) == "কি"
    # Default replacement of "o" is empty
    assert transliterate("ko", mini_ruleset) == "ক"
    # Negated consonant fails at the text start
    assert transliterate("i", mini_ruleset) == "ি"


def test_empty_rule_list_is_rule_guarded(mini_ruleset):
    """A pattern with an empty rules list emits its default."""
    assert transliterate("kr", mini_ruleset) == "কর"


def test_unknown_scope_rule_applies(mini_ruleset):
    """A rule whose only condition has an unknown scope always fires."""
    assert transliterate("ku", mini_ruleset) == "কউ"


def test_exact_suffix_boundary(mini_ruleset):
    """The exact window may not end on the last character of the text."""
    assert transliterate("e`k", mini_ruleset) == "এক"
    assert transliterate("e`", mini_ruleset) == "ে"
    assert transliterate("kya", mini_ruleset) == "ক\u09dfা"
    assert transliterate("kyak", mini_ruleset) == "ক্যাক"


def test_unmatched_characters_pass_through(mini_ruleset):
    """Characters no pattern covers are copied verbatim."""
    assert transliterate("q z 1!", mini_ruleset) == "q z 1!"
    assert transliterate("", mini_ruleset) == ""
