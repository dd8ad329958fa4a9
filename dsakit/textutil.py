"""String palindrome checks and normalisation."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """Return True when the text reads the same forwards and backwards."""
    return text == text[::-1]


def clean_string(text: str) -> str:
    """Keep only ASCII letters and digits, lower-cased."""
    return "".join(c.lower() for c in text if c.isascii() and c.isalnum())


def is_clean_palindrome(text: str) -> bool:
    """Return True when the text is a palindrome ignoring case and punctuation."""
    return is_palindrome(clean_string(text))