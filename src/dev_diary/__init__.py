"""Dev Diary: snippet capture, diary generation and multi-destination publishing."""

__version__ = "0.1.0"
