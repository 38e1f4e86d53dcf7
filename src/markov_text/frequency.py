"""
Frequency Model Module

Builds the transition table used by the generator: each group of ``n``
characters or words maps to every unit observed right after it in the
corpus. Repeats are kept, so a uniform draw from a successor list is a
frequency-weighted draw.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

import pandas as pd

from .config import Mode
from .errors import CorpusValidityError
from .tokenization import WORD_SEPARATOR, char_windows, split_words, word_windows

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FrequencyModel:
    """
    Read-only mapping from key to the successors observed after it.

    Attributes:
        transitions: key -> tuple of successors, multiplicity preserved
        group_size: Number of units in every key
        mode: Whether units are characters or words
    """

    transitions: Mapping[str, Tuple[str, ...]]
    group_size: int
    mode: Mode

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self.transitions[key]

    def __contains__(self, key: object) -> bool:
        return key in self.transitions

    def __len__(self) -> int:
        return len(self.transitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.transitions)

    def keys(self):
        return self.transitions.keys()

    def successors(self, key: str) -> Tuple[str, ...]:
        return self.transitions[key]

    @property
    def transition_count(self) -> int:
        """Total number of observed (key, successor) pairs."""
        return sum(len(s) for s in self.transitions.values())

    def contains_successor(self, unit: str) -> bool:
        return any(unit in s for s in self.transitions.values())

    def to_frame(self) -> pd.DataFrame:
        """One row per distinct (key, successor) with its count, most frequent first."""
        rows = [
            (key, successor, count)
            for key, successors in self.transitions.items()
            for successor, count in Counter(successors).items()
        ]
        df = pd.DataFrame(rows, columns=["key", "successor", "count"])
        if df.empty:
            return df
        df["probability"] = df["count"] / df.groupby("key")["count"].transform("sum")
        return df.sort_values(["count", "key"], ascending=[False, True]).reset_index(drop=True)

    def summary(self) -> Dict:
        keys = len(self.transitions)
        transitions = self.transition_count
        return {
            'mode': self.mode.value,
            'group_size': self.group_size,
            'keys': keys,
            'transitions': transitions,
            'mean_successors': transitions / keys if keys else 0.0,
        }


def _freeze(table: Mapping[str, list]) -> MappingProxyType:
    return MappingProxyType({k: tuple(v) for k, v in table.items()})


def build_character_model(text: str, group_size: int = 1) -> FrequencyModel:
    table = defaultdict(list)
    for group, nxt in char_windows(text, group_size):
        table[group].append(nxt)

    model = FrequencyModel(_freeze(table), group_size, Mode.CHARACTER)
    validate_character_model(model)
    return model


def build_word_model(text: str, group_size: int = 1) -> FrequencyModel:
    table = defaultdict(list)
    for group, nxt in word_windows(split_words(text), group_size):
        table[group].append(nxt)

    return FrequencyModel(_freeze(table), group_size, Mode.WORD)


def validate_character_model(model: FrequencyModel) -> None:
    """Character generation counts words by spaces, so at least one must be reachable."""

    if not model:
        raise CorpusValidityError(
            f"Your input is too short for a group size of {model.group_size}. "
            "Add more input or decrease your group size."
        )
    if not model.contains_successor(WORD_SEPARATOR):
        raise CorpusValidityError(
            "Your input does not contain a space. Please add one and try again."
        )


def build_frequency_model(
    text: str,
    group_size: int = 1,
    mode: Mode = Mode.CHARACTER,
) -> FrequencyModel:
    """
    Build the frequency model for ``text``.

    Args:
        text: The full corpus
        group_size: Number of units per key (n)
        mode: Mode.CHARACTER or Mode.WORD

    Returns:
        FrequencyModel covering every (key, successor) pair in the corpus

    Raises:
        CorpusValidityError: character mode and no successor is a space
    """
    if group_size < 1:
        raise ValueError("group_size must be >= 1")

    if mode is Mode.WORD:
        model = build_word_model(text, group_size)
    else:
        model = build_character_model(text, group_size)

    logger.info(
        f"Built {mode.value} model: {len(model)} keys, "
        f"{model.transition_count} transitions (group size {group_size})"
    )
    if not model:
        logger.warning("Frequency model is empty; add more input or decrease the group size")
    return model
