"""Programming language detection for code snippets."""

from .language_detector import LanguageDetector, detect_language, score_languages
from .signatures import KNOWN_LANGUAGES, SIGNATURES, LanguageSignature

__all__ = [
    "KNOWN_LANGUAGES",
    "LanguageDetector",
    "LanguageSignature",
    "SIGNATURES",
    "detect_language",
    "score_languages",
]
