"""Find dictionary words matching a partial pattern and required letters."""

from __future__ import annotations

import sys
from collections.abc import Container, Iterator
from string import ascii_lowercase

from shiftword.dictionary import read_dict_words

__all__ = ["wordle", "main"]

_BLANK = "-"
_DICTIONARY_FILE = "dict-eng.txt"


def _candidates(pattern: str, pos: int, prefix: str, floating: str) -> Iterator[str]:
    if pos == len(pattern):
        if not floating:
            yield prefix
        return

    fixed = pattern[pos]
    if fixed != _BLANK:
        yield from _candidates(pattern, pos + 1, prefix + fixed, floating)
        return

    blanks_after = pattern.count(_BLANK, pos + 1)
    for letter in ascii_lowercase:
        if letter in floating:
            yield from _candidates(
                pattern, pos + 1, prefix + letter, floating.replace(letter, "", 1)
            )
        elif len(floating) <= blanks_after:
            yield from _candidates(pattern, pos + 1, prefix + letter, floating)


def wordle(pattern: str, floating: str, dictionary: Container[str]) -> set[str]:
    """Return every word in *dictionary* that fits *pattern*.

    Characters of *pattern* other than ``-`` are fixed; each ``-`` is filled
    with a lower-case letter. Every letter of *floating* must be used to fill
    some ``-`` position.
    """
    return {
        word for word in _candidates(pattern, 0, "", floating) if word in dictionary
    }


def main(argv=None) -> int:
    """Print the matching words for a pattern given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            'Please provide an initial string (e.g. "s---ng") '
            "and optional string of floating characters."
        )
        return 1
    dictionary = read_dict_words(_DICTIONARY_FILE)
    floating = args[1] if len(args) > 1 else ""
    for word in sorted(wordle(args[0], floating, dictionary)):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())