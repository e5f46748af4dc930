"""
Language detection for arbitrary code snippets.

Detection is a pure scoring pass over the signature table: keyword hits,
pattern hits, a TypeScript disambiguation bonus and a strict JSON parse
check. Anything that does not clear the score threshold is "Unknown".
"""

import json
import re

from dev_diary.models.snippet import UNKNOWN_LANGUAGE

from .signatures import PREFIX_LANGUAGES, SIGNATURES, LanguageSignature

SCORE_THRESHOLD = 2
KEYWORD_WEIGHT = 1
PATTERN_WEIGHT = 2
TYPE_ANNOTATION_BONUS = 2
VALID_JSON_BONUS = 5

TYPE_ANNOTATION_PATTERN = re.compile(r"(:\s*\w+|<\w+>)")


def _score(text: str, signature: LanguageSignature) -> int:
    score = sum(KEYWORD_WEIGHT for keyword in signature.keywords if keyword in text)
    score += sum(PATTERN_WEIGHT for pattern in signature.patterns if pattern.search(text))
    return score


def _is_valid_json(code: str) -> bool:
    try:
        json.loads(code)
    except (ValueError, RecursionError):
        return False
    return True


def score_languages(code: str) -> dict[str, int]:
    """Score every language in the signature table against ``code``."""
    normalized = code.strip().lower()
    scores = {language: _score(normalized, sig) for language, sig in SIGNATURES.items()}

    if scores["JavaScript"] > 0 and scores["TypeScript"] > 0:
        if TYPE_ANNOTATION_PATTERN.search(normalized):
            scores["TypeScript"] += TYPE_ANNOTATION_BONUS

    if scores["JSON"] > 0:
        if _is_valid_json(code):
            scores["JSON"] += VALID_JSON_BONUS
        else:
            scores["JSON"] = 0

    return scores


def detect_language(code: str) -> str:
    """
    Return the best-guess language label for ``code``.

    Args:
        code: Raw snippet text.

    Returns:
        A label from the signature table, one of the prefix languages
        (XML, HTML, PHP), or ``"Unknown"``. Never raises.
    """
    normalized = code.strip().lower()
    for prefix, language in PREFIX_LANGUAGES:
        if normalized.startswith(prefix):
            return language

    best_language = None
    best_score = 0
    # Strict comparison keeps the earliest declared language on ties
    for language, score in score_languages(code).items():
        if score > best_score:
            best_language = language
            best_score = score

    if best_language is None or best_score <= SCORE_THRESHOLD:
        return UNKNOWN_LANGUAGE
    return best_language


class LanguageDetector:
    """Callable wrapper so the detector can be injected and replaced in tests."""

    def detect(self, code: str) -> str:
        return detect_language(code)

    __call__ = detect
