"""
Predefined character classes.

Each class maps a one letter code to a pool of characters that random
elements can draw from (e.g. ``V+`` picks a vowel).
"""

from __future__ import annotations

from typing import Dict

VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxyz"
DIGITS = "0123456789"
LETTERS = "abcdefghijklmnopqrstuvwxyz"

CHARACTER_CLASSES: Dict[str, str] = {
    "V": VOWELS,
    "C": CONSONANTS,
    "N": DIGITS,
    "L": LETTERS,
}


def get_predefined_data(prefix: str = "") -> Dict[str, str]:
    """
    Return the predefined data map with ``prefix`` prepended to every key.

    :param prefix: Prefix for the predefined keys, empty by default
    :return: A new dict with exactly one entry per character class
    """
    return {prefix + code: pool for code, pool in CHARACTER_CLASSES.items()}


__all__ = [
    "CHARACTER_CLASSES",
    "CONSONANTS",
    "DIGITS",
    "LETTERS",
    "VOWELS",
    "get_predefined_data",
]
