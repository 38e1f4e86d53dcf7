"""
Generator Module

Random walk over a FrequencyModel. Starting from a random key, each step
draws one successor uniformly from the key's successor list, appends it
to the output and slides the key forward, until enough words are done.

Usage:
    rng = NumpyRandomSource(seed=7)
    text = generate_text(model, target_word_count=16, rng=rng)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import regex  # type: ignore

from .config import Mode
from .errors import GenerationDidNotConvergeError, ModelCoverageError, NoValidStartKeyError
from .formatting import format_output
from .frequency import FrequencyModel
from .randomness import RandomSource
from .tokenization import WORD_SEPARATOR, slide_word_key

logger = logging.getLogger(__name__)


_LETTERS_RE = regex.compile(r"\p{L}+")


def is_letter_group(key: str) -> bool:
    return _LETTERS_RE.fullmatch(key) is not None


def select_start_key(model: FrequencyModel, rng: RandomSource) -> str:
    """
    Pick the key the walk starts from.

    Word mode draws uniformly from all keys. Character mode draws uniformly
    from the keys made only of letters, so output never starts inside
    punctuation or whitespace.

    Raises:
        ModelCoverageError: the model has no keys at all
        NoValidStartKeyError: character mode and no key is all letters
    """
    keys = list(model.keys())
    if not keys:
        raise ModelCoverageError(
            None,
            "The input is too short to analyze with this group size. "
            "Add more input or decrease your group size.",
        )

    if model.mode is Mode.CHARACTER:
        keys = [k for k in keys if is_letter_group(k)]
        if not keys:
            raise NoValidStartKeyError(len(model))

    return keys[rng.randrange(len(keys))]


@dataclass
class GenerationState:
    """Mutable state of one walk."""
    current_key: str
    output: List[str] = field(default_factory=list)
    words_done: int = 0
    steps: int = 0

    def text(self) -> str:
        return "".join(self.output)


class MarkovWalk:
    """
    Produces raw (unformatted) text from a FrequencyModel.

    Word mode emits exactly ``target_word_count`` successors, each followed
    by a space; the start key only seeds the walk. Character mode emits the
    start key followed by drawn characters and stops at the
    ``target_word_count``-th space.

    There is no step limit unless ``max_steps`` is given. A model whose
    keys can cycle without ever producing a space will otherwise never
    finish; that happens when the group size is too large for the input.
    """

    def __init__(
        self,
        model: FrequencyModel,
        rng: RandomSource,
        max_steps: Optional[int] = None,
    ):
        self.model = model
        self.rng = rng
        self.max_steps = max_steps

    def start(self) -> GenerationState:
        key = select_start_key(self.model, self.rng)
        logger.debug(f"Starting walk from {key!r}")
        state = GenerationState(current_key=key)
        if self.model.mode is Mode.CHARACTER:
            state.output.append(key)
        return state

    def step(self, state: GenerationState) -> str:
        """Advance the walk by one successor and return it."""
        try:
            successors = self.model[state.current_key]
        except KeyError:
            raise ModelCoverageError(state.current_key) from None

        # Repeated successors make this a frequency-weighted draw.
        successor = successors[self.rng.randrange(len(successors))]
        state.output.append(successor)
        state.steps += 1
        logger.debug(f"{state.current_key!r} -> {successor!r}")

        if self.model.mode is Mode.WORD:
            state.output.append(WORD_SEPARATOR)
            state.words_done += 1
            state.current_key = slide_word_key(state.current_key, successor, self.model.group_size)
        else:
            if successor == WORD_SEPARATOR:
                state.words_done += 1
            state.current_key = (state.current_key + successor)[-self.model.group_size:]

        return successor

    def run(self, target_word_count: int) -> str:
        if target_word_count < 1:
            raise ValueError("target_word_count must be >= 1")

        state = self.start()
        while state.words_done < target_word_count:
            if self.max_steps is not None and state.steps >= self.max_steps:
                raise GenerationDidNotConvergeError(self.max_steps, state.words_done, target_word_count)
            self.step(state)

        logger.info(f"Generated {state.words_done} words in {state.steps} steps")
        return state.text()


def generate_text(
    model: FrequencyModel,
    target_word_count: int,
    rng: RandomSource,
    max_steps: Optional[int] = None,
) -> str:
    """Walk the model and return formatted text."""

    raw = MarkovWalk(model, rng, max_steps=max_steps).run(target_word_count)
    return format_output(raw)
