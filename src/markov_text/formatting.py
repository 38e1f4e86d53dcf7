from __future__ import annotations


SENTENCE_ENDINGS = (". ", "? ", "! ")


def all_indexes_of(text: str, value: str) -> list[int]:
    """Start offsets of every non-overlapping occurrence of ``value``."""

    if not value:
        raise ValueError("value must be non-empty")
    indexes = []
    index = text.find(value)
    while index != -1:
        indexes.append(index)
        index = text.find(value, index + len(value))
    return indexes


def format_output(text: str) -> str:
    """Capitalize the first letter and the first letter of every sentence."""

    if not text:
        return text

    chars = list(text)
    chars[0] = chars[0].upper()

    # Offsets come from the unmodified text; upper() may lengthen a character.
    for ending in SENTENCE_ENDINGS:
        for index in all_indexes_of(text, ending):
            start = index + len(ending)
            if start < len(chars):
                chars[start] = chars[start].upper()

    return "".join(chars)
