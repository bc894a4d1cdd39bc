"""Classify words in plain-text files by part of speech and look them up in an online dictionary."""

__version__ = "0.1.0"
