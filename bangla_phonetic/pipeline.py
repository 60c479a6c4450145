"""Full phonetic-to-Bangla conversion pipeline."""

from bangla_phonetic.engine.matcher import transliterate
from bangla_phonetic.models import Ruleset
from bangla_phonetic.normalize.input_text import prepare_input
from bangla_phonetic.normalize.script import normalize_script
from bangla_phonetic.ruleset import get_ruleset


def convert(text: str, ruleset: Ruleset | None = None) -> str:
    """
    Convert phonetically typed Latin text to Bangla Unicode.

    Never fails: characters no pattern covers are copied through.

    Args:
        text: Phonetic input, e.g. "amar sOnar bangla"
        ruleset: Ruleset to use (default: the bundled one)

    Returns:
        Bangla text
    """
    if ruleset is None:
        ruleset = get_ruleset()

    fixed_text = prepare_input(text, ruleset)
    return normalize_script(transliterate(fixed_text, ruleset))
