from __future__ import annotations

from typing import Iterable, Iterator


WORD_SEPARATOR = " "


def split_words(text: str) -> list[str]:
    """Split on single spaces. Consecutive spaces yield empty words."""

    return text.split(WORD_SEPARATOR)


def join_words(words: Iterable[str]) -> str:
    return WORD_SEPARATOR.join(words)


def ngrams(tokens: Iterable[str], n: int) -> list[tuple[str, ...]]:
    if n <= 0:
        raise ValueError("n must be >= 1")
    toks = list(tokens)
    return [tuple(toks[i : i + n]) for i in range(0, max(0, len(toks) - n + 1))]


def char_windows(text: str, n: int) -> Iterator[tuple[str, str]]:
    """Yield (group, next_char) for every group of ``n`` characters.

    Stops once the group plus its following character would run past the
    text; the last character has nothing following it.
    """

    if n <= 0:
        raise ValueError("n must be >= 1")
    for i in range(0, max(0, len(text) - n)):
        yield text[i : i + n], text[i + n]


def word_windows(words: list[str], n: int) -> Iterator[tuple[str, str]]:
    """Yield (space-joined group of ``n`` words, next word)."""

    for gram, nxt in zip(ngrams(words, n), words[n:]):
        yield join_words(gram), nxt


def slide_word_key(key: str, successor: str, n: int) -> str:
    """Drop the first word of ``key`` and append ``successor``."""

    if n == 1:
        return successor
    return join_words(split_words(key)[1:] + [successor])
