"""Post-processing of converted Bangla text."""

import re
from collections.abc import Callable, Sequence


HASANT = "\u09cd"  # Bangla virama, the conjunct-forming mark
NUKTA = "\u09bc"
ZWJ = "\u200d"
ZWNJ = "\u200c"

# Characters a zero-width joiner or non-joiner must never precede
NEVER_FOLLOWS_ZW = (
    "কখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ"
    + NUKTA
    + "\u09dc\u09dd\u09df"  # precomposed rra, rha, yya
)

_LIGATURE_RE = re.compile(f"{HASANT}([^{HASANT}{ZWJ}{ZWNJ}])")
_INCORRECT_ZW_RE = re.compile(f"[{ZWJ}{ZWNJ}]+(?=[{NEVER_FOLLOWS_ZW}])")


def handle_ligatures(text: str) -> str:
    """
    Insert a zero-width joiner after each hasant that starts a conjunct.

    A hasant already followed by another hasant or a zero-width character
    is left alone.

    Args:
        text: Converted text

    Returns:
        Text with joiners inserted
    """
    return _LIGATURE_RE.sub(f"{HASANT}{ZWJ}\\1", text)


def handle_matra(text: str) -> str:
    """
    Hook for vowel-sign (matra) combination fixes.

    No combination currently needs rewriting, so the text is returned
    unchanged. Keep it in SCRIPT_PASSES so a fix lands between the ligature
    and zero-width passes.
    """
    return text


def handle_zero_width_chars(text: str) -> str:
    """
    Remove zero-width joiners/non-joiners placed before a consonant.

    Args:
        text: Converted text

    Returns:
        Text without misplaced zero-width characters
    """
    return _INCORRECT_ZW_RE.sub("", text)


SCRIPT_PASSES: tuple[Callable[[str], str], ...] = (
    handle_ligatures,
    handle_matra,
    handle_zero_width_chars,
)


def normalize_script(
    text: str,
    passes: Sequence[Callable[[str], str]] = SCRIPT_PASSES,
) -> str:
    """
    Run the post-processing passes over converted text.

    Args:
        text: Converted text
        passes: Text rewrites applied in order

    Returns:
        Normalized text
    """
    for fix in passes:
        text = fix(text)
    return text


def handle_backspace_correction(text: str, cursor_pos: int) -> tuple[str, int]:
    """
    Delete backwards from the cursor, treating a hasant conjunct as a unit.

    If the character before the cursor is a hasant, or the one before that
    is, two characters are removed; otherwise one.

    Args:
        text: Bangla text being edited
        cursor_pos: Cursor position in characters

    Returns:
        Tuple of (new text, new cursor position)
    """
    if cursor_pos <= 0 or not text:
        return text, cursor_pos

    cursor_pos = min(cursor_pos, len(text))

    if cursor_pos >= 2 and HASANT in (text[cursor_pos - 1], text[cursor_pos - 2]):
        return text[: cursor_pos - 2] + text[cursor_pos:], cursor_pos - 2

    return text[: cursor_pos - 1] + text[cursor_pos:], cursor_pos - 1
