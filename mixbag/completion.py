"""A completion dictionary of words sharing prefixes through branching letter chains."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

END_MARK = "$"

EXAMPLE_WORDS = (
    "MY",
    "MYTHIC",
    "MYTHOLOGY",
    "MATH",
    "MYTHS",
    "MOZAMBIQUE",
    "MYTHOLOGIE",
    "MATHEMATIQUES",
    "MELANCOLIE",
    "MACAQUE",
)


@dataclass
class _Node:
    value: str
    next_letter: _Node | None = None
    next_word: _Node | None = None


def _chain(word: str) -> _Node:
    """Build a chain of letters for ``word`` ending with the end mark."""
    head = _Node(END_MARK)
    for letter in reversed(word):
        head = _Node(letter, next_letter=head)
    return head


def _check_word(word: str) -> None:
    if END_MARK in word:
        raise ValueError(f"word may not contain {END_MARK!r}: {word!r}")


class CompletionDictionary:
    """Words stored as letter chains; a word diverging from a chain hangs off it."""

    def __init__(self, word: str) -> None:
        _check_word(word)
        self._root = _chain(word)

    def add_word(self, word: str) -> None:
        """Add ``word``, sharing the letters it has in common with stored words."""
        _check_word(word)
        current = self._root
        rest = word
        while True:
            matched = 0
            for letter in rest:
                if letter != current.value:
                    break
                current = current.next_letter
                matched += 1
            rest = rest[matched:]
            if current.next_word is None:
                current.next_word = _chain(rest)
                return
            current = current.next_word

    def lines(self) -> Iterator[str]:
        """Yield every stored word, depth first in chain order."""
        yield from self._walk("", self._root)

    def _walk(self, prefix: str, node: _Node) -> Iterator[str]:
        letters = []
        cursor: _Node | None = node
        while cursor is not None and cursor.value != END_MARK:
            letters.append(cursor.value)
            cursor = cursor.next_letter
        yield prefix + "".join(letters)

        cursor = node
        while cursor is not None:
            if cursor.next_word is not None:
                yield from self._walk(prefix, cursor.next_word)
            prefix += cursor.value
            cursor = cursor.next_letter

    def display(self, out: TextIO | None = None) -> None:
        """Write every stored word on its own line."""
        stream = sys.stdout if out is None else out
        for line in self.lines():
            stream.write(line + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the words of a sample completion dictionary.")
    parser.parse_args(argv)
    first, *others = EXAMPLE_WORDS
    dictionary = CompletionDictionary(first)
    for word in others:
        dictionary.add_word(word)
    dictionary.display()
    return 0