"""Pytest fixtures for bangla-phonetic tests."""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from bangla_phonetic.models import Ruleset
from bangla_phonetic.ruleset import get_ruleset


def prefix(scope: str, value: str | None = None) -> dict[str, str]:
    match = {"type": "prefix", "scope": scope}
    if value is not None:
        match["value"] = value
    return match


def suffix(scope: str, value: str | None = None) -> dict[str, str]:
    match = {"type": "suffix", "scope": scope}
    if value is not None:
        match["value"] = value
    return match


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mini_document() -> dict[str, Any]:
    """
    Small ruleset document with fixed, hand-checked behaviour.

    Order is deliberate: a rule-guarded "x" precedes a direct "x", and "t"
    precedes "th" so the longer key can never win.
    """
    return {
        "meta": {"file_name": "mini.json", "license": "MPL-1.1"},
        "data": {
            "patterns": [
                {"find": "x", "replace": "রুল", "rules": [
                    {"matches": [prefix("punctuation")], "replace": "এক্স"},
                ]},
                {"find": "x", "replace": "ক্স"},
                {"find": "t", "replace": "ত"},
                {"find": "th", "replace": "থ"},
                {"find": "kh", "replace": "খ"},
                {"find": "k", "replace": "ক"},
                {"find": "O", "replace": "ো"},
                {"find": "a", "replace": "া", "rules": [
                    {"matches": [prefix("punctuation")], "replace": "আ"},
                ]},
                {"find": "o", "replace": "", "rules": [
                    {"matches": [prefix("vowel")], "replace": "ও"},
                    {"matches": [prefix("punctuation")], "replace": "অ"},
                ]},
                {"find": "i", "replace": "ি", "rules": [
                    {"matches": [prefix("!consonant")], "replace": "ই"},
                ]},
                {"find": "e", "replace": "ে", "rules": [
                    {"matches": [suffix("exact", "`")], "replace": "এ"},
                ]},
                {"find": "u", "replace": "ু", "rules": [
                    {"matches": [prefix("syllable")], "replace": "উ"},
                ]},
                {"find": "y", "replace": "্য", "rules": [
                    {"matches": [suffix("!exact", "a")], "replace": "\u09df"},
                ]},
                {"find": "r", "replace": "র", "rules": []},
                {"find": "`", "replace": ""},
            ],
            "vowel": "aeiou",
            "consonant": "bcdfghjklmnpqrstvwxyz",
            "casesensitive": "o",
            "number": "0123456789",
        },
    }


@pytest.fixture
def mini_ruleset(mini_document) -> Ruleset:
    """Ruleset built from mini_document."""
    return Ruleset.from_dict(mini_document)


@pytest.fixture
def suggest_ruleset() -> Ruleset:
    """Ruleset whose keys share the prefix "ban"."""
    return Ruleset.from_dict({
        "data": {
            "patterns": [
                {"find": "bangla", "replace": "বাংলা"},
                {"find": "bang", "replace": "বাং"},
                {"find": "banG", "replace": "বাং"},
                {"find": "bant", "replace": "বান্ত"},
                {"find": "ban", "replace": "বান"},
                {"find": "b", "replace": "ব"},
            ],
            "vowel": "aeiou",
            "consonant": "bcdfghjklmnpqrstvwxyz",
            "casesensitive": "g",
        },
    })


@pytest.fixture
def bundled_ruleset() -> Ruleset:
    """The ruleset shipped with the package."""
    return get_ruleset()


@pytest.fixture
def rules_file(temp_dir, mini_document) -> Path:
    """mini_document written to disk."""
    path = temp_dir / "rules.json"
    path.write_text(json.dumps(mini_document, ensure_ascii=False), encoding="utf-8")
    return path
