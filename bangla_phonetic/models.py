"""Data models for phonetic rulesets."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


NEGATION_MARKER = "!"


class MatchType(str, Enum):
    """Side of the matched span a condition inspects."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class Scope(str, Enum):
    """Kind of test a condition applies to the adjacent text."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    PUNCTUATION = "punctuation"
    EXACT = "exact"

    # Any scope name not listed above; evaluates as always-passing
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str) -> tuple["Scope", bool]:
        """
        Split a scope string into its base scope and negation flag.

        Args:
            raw: Scope as written in the ruleset, e.g. "!consonant"

        Returns:
            Tuple of (scope, negated)
        """
        negated = raw.startswith(NEGATION_MARKER)
        name = raw[len(NEGATION_MARKER):] if negated else raw
        try:
            return cls(name), negated
        except ValueError:
            return cls.UNKNOWN, negated


@dataclass(frozen=True)
class Match:
    """A single contextual condition of a rule."""

    type: MatchType
    scope: Scope
    raw_scope: str
    negated: bool = False
    value: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Match":
        scope, negated = Scope.parse(data["scope"])
        return cls(
            type=MatchType(data["type"]),
            scope=scope,
            raw_scope=data["scope"],
            negated=negated,
            value=data.get("value"),
        )


@dataclass(frozen=True)
class Rule:
    """An alternative replacement, selected when all its matches pass."""

    matches: tuple[Match, ...]
    replace: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rule":
        return cls(
            matches=tuple(Match.from_dict(m) for m in data["matches"]),
            replace=data["replace"],
        )


@dataclass(frozen=True)
class Pattern:
    """A find/replace pair, optionally guarded by contextual rules."""

    find: str
    replace: str
    rules: tuple[Rule, ...] | None = None

    @property
    def is_direct(self) -> bool:
        """True when the pattern carries no rules list at all."""
        return self.rules is None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pattern":
        rules = data.get("rules")
        return cls(
            find=data["find"],
            replace=data["replace"],
            rules=None if rules is None else tuple(Rule.from_dict(r) for r in rules),
        )


@dataclass(frozen=True)
class Ruleset:
    """
    Immutable conversion table plus character classifications.

    Pattern order is priority: the first qualifying pattern wins, never the
    longest or most specific one. Table authors must list longer keys before
    their prefixes.
    """

    patterns: tuple[Pattern, ...]
    vowels: frozenset[str]
    consonants: frozenset[str]
    case_sensitive: frozenset[str]
    numbers: frozenset[str] = frozenset()
    meta: dict[str, str] = field(default_factory=dict, compare=False)
    fingerprint: str | None = None

    # Derived views, declared order preserved
    direct_patterns: tuple[Pattern, ...] = field(init=False, repr=False, compare=False)
    rule_patterns: tuple[Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "direct_patterns", tuple(p for p in self.patterns if p.is_direct)
        )
        object.__setattr__(
            self, "rule_patterns", tuple(p for p in self.patterns if not p.is_direct)
        )

    @classmethod
    def from_dict(cls, document: dict[str, Any], fingerprint: str | None = None) -> "Ruleset":
        """
        Build a ruleset from a parsed ruleset document.

        Args:
            document: Parsed JSON with "data" and optional "meta" sections
            fingerprint: Content hash of the source file, if any

        Returns:
            Ruleset instance
        """
        data = document["data"]
        return cls(
            patterns=tuple(Pattern.from_dict(p) for p in data["patterns"]),
            vowels=frozenset(data["vowel"]),
            consonants=frozenset(data["consonant"]),
            case_sensitive=frozenset(data["casesensitive"]),
            numbers=frozenset(data.get("number", "")),
            meta=dict(document.get("meta", {})),
            fingerprint=fingerprint,
        )

    def is_vowel(self, char: str) -> bool:
        return char.lower() in self.vowels

    def is_consonant(self, char: str) -> bool:
        return char.lower() in self.consonants

    def is_number(self, char: str) -> bool:
        return char.lower() in self.numbers

    def is_punctuation(self, char: str) -> bool:
        """Anything that is neither a vowel nor a consonant."""
        return not (self.is_vowel(char) or self.is_consonant(char))

    def is_case_sensitive(self, char: str) -> bool:
        return char.lower() in self.case_sensitive

    def unknown_scopes(self) -> list[tuple[str, str]]:
        """
        List conditions whose scope is not recognised.

        Returns:
            (pattern find, raw scope) pairs in declared order
        """
        found = []
        for pattern in self.rule_patterns:
            for rule in pattern.rules or ():
                for match in rule.matches:
                    if match.scope is Scope.UNKNOWN:
                        found.append((pattern.find, match.raw_scope))
        return found

    def summary(self) -> dict[str, Any]:
        """Counts and classes for reporting."""
        return {
            "patterns": len(self.patterns),
            "direct_patterns": len(self.direct_patterns),
            "rule_patterns": len(self.rule_patterns),
            "vowels": "".join(sorted(self.vowels)),
            "consonants": "".join(sorted(self.consonants)),
            "case_sensitive": "".join(sorted(self.case_sensitive)),
            "numbers": "".join(sorted(self.numbers)),
            "fingerprint": self.fingerprint,
        }
