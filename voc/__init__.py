"""Flashcard vocabulary study tool for word:definition files."""

__version__ = "1.0.0"
