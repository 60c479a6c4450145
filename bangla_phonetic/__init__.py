"""Phonetic Latin to Bangla Unicode conversion."""

from bangla_phonetic.models import Match, MatchType, Pattern, Rule, Ruleset, Scope
from bangla_phonetic.pipeline import convert
from bangla_phonetic.ruleset import RulesetError, get_ruleset, load_ruleset
from bangla_phonetic.suggest import get_autocomplete_suggestions


suggest = get_autocomplete_suggestions

__version__ = "0.1.0"

__all__ = [
    'Match',
    'MatchType',
    'Pattern',
    'Rule',
    'Ruleset',
    'RulesetError',
    'Scope',
    'convert',
    'get_autocomplete_suggestions',
    'get_ruleset',
    'load_ruleset',
    'suggest',
]
