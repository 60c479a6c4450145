"""Loading and caching of the conversion ruleset."""

import json
import logging
import threading
from pathlib import Path

from bangla_phonetic.models import Ruleset
from bangla_phonetic.utils.hashing import hash_file
from bangla_phonetic.utils.io import read_json
from bangla_phonetic.utils.log import log_with_context
from bangla_phonetic.utils.schema import validate_ruleset


DEFAULT_RULES_PATH = Path(__file__).resolve().parent / "etc" / "rules.json"

_default_ruleset: Ruleset | None = None
_default_lock = threading.Lock()


class RulesetError(ValueError):
    """The ruleset file is missing or malformed; no conversion is possible."""


def load_ruleset(
    path: Path | str | None = None,
    logger: logging.Logger | None = None,
) -> Ruleset:
    """
    Load and validate a ruleset file.

    Args:
        path: Path to a ruleset JSON file (default: bundled rules.json)
        logger: Logger instance

    Returns:
        Ruleset instance

    Raises:
        RulesetError: If the file cannot be read, parsed or fails the schema
    """
    logger = logger or logging.getLogger(__name__)
    path = Path(path) if path is not None else DEFAULT_RULES_PATH

    try:
        document = read_json(path)
    except FileNotFoundError as e:
        raise RulesetError(f"Ruleset file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise RulesetError(f"Ruleset file is not valid JSON: {path}: {e}") from e

    errors = validate_ruleset(document)
    if errors:
        details = "; ".join(errors[:10])
        raise RulesetError(f"Ruleset {path} failed validation ({len(errors)} errors): {details}")

    ruleset = Ruleset.from_dict(document, fingerprint=hash_file(path))

    for find, raw_scope in ruleset.unknown_scopes():
        logger.warning(f"Pattern '{find}' uses unknown scope '{raw_scope}', condition always passes")

    log_with_context(
        logger,
        "info",
        f"Loaded ruleset from {path}",
        path=str(path),
        patterns=len(ruleset.patterns),
        rule_patterns=len(ruleset.rule_patterns),
        fingerprint=ruleset.fingerprint,
    )
    return ruleset


def get_ruleset() -> Ruleset:
    """
    Get the process-wide bundled ruleset, loading it on first use.

    Concurrent first callers all receive the same instance. A failed load
    is not cached, so the error surfaces again on the next call.

    Returns:
        Shared Ruleset instance
    """
    global _default_ruleset

    if _default_ruleset is None:
        with _default_lock:
            if _default_ruleset is None:
                _default_ruleset = load_ruleset()
    return _default_ruleset
