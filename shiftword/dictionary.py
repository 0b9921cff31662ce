"""Loading of the English word list used by the word finder."""

from __future__ import annotations

import sys

__all__ = ["read_dict_words"]


def _is_ascii_alpha(text: str) -> bool:
    return text.isascii() and text.isalpha()


def _is_ascii_upper(char: str) -> bool:
    return char.isascii() and char.isupper()


def read_dict_words(filename) -> frozenset[str]:
    """Read whitespace-separated words from *filename*.

    Words starting with an upper-case letter, and words containing anything
    other than letters, are skipped. Reports the number of accepted words
    on standard error.
    """
    try:
        with open(filename, encoding="utf-8", errors="surrogateescape") as handle:
            text = handle.read()
    except OSError as exc:
        raise OSError("Cannot open dictionary file.") from exc

    accepted = [
        word
        for word in text.split()
        if not _is_ascii_upper(word[0]) and _is_ascii_alpha(word)
    ]
    print(f"Read {len(accepted)} words into dictionary.", file=sys.stderr)
    return frozenset(accepted)