from typing import List

# Letter classes partition a-z; "y" is both a medium letter and a vowel.
VOWELS = "aeiouy"
CONSONANTS = "bcdfghjklmnpqrstvwxz"

CHEAP = "etaoinshrdl"
MEDIUM = "cumwfgyp"
EXPENSIVE = "bvkxjqz"
SPECIAL = "0123456789-"

LETTERS = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"


def _in_class(char: str, charset: str) -> bool:
    return char.lower() in charset


def find_runs(name: str, charset: str, min_length: int = 3) -> List[str]:
    """
    Return every maximal run of characters drawn from ``charset``
    (case-insensitive) that is at least ``min_length`` long, in order.
    """
    runs = []
    current = ""

    for char in name:
        if _in_class(char, charset):
            current += char
            continue
        if len(current) >= min_length:
            runs.append(current)
        current = ""

    if len(current) >= min_length:
        runs.append(current)

    return runs


def count_class(name: str, charset: str) -> int:
    """Count every character of ``name`` that belongs to ``charset``."""
    return sum(1 for char in name if _in_class(char, charset))


def shape(name: str) -> str:
    """
    Shape signature of a label.

    ``example`` -> ``7L``, ``12345`` -> ``5N``, ``abc-123`` -> ``LLL-NNN``.
    """
    if name and all(_in_class(c, LETTERS) for c in name):
        return f"{len(name)}L"
    if name and all(c in DIGITS for c in name):
        return f"{len(name)}N"

    out = []
    for char in name:
        if _in_class(char, LETTERS):
            out.append("L")
        elif char in DIGITS:
            out.append("N")
        else:
            out.append(char)
    return "".join(out)
