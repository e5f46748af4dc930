"""LLM integration package."""

from .backend import GenerativeBackend, LangChainBackend
from .exceptions import GenerativeBackendError

__all__ = ["GenerativeBackend", "GenerativeBackendError", "LangChainBackend"]
