"""Pattern matching engine."""

from bangla_phonetic.engine.conditions import process_match, process_rules
from bangla_phonetic.engine.matcher import MatchResult, transliterate


__all__ = ['MatchResult', 'process_match', 'process_rules', 'transliterate']
