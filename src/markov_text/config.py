"""
Configuration Module for the Markov Text Generator

This module holds the settings for one generation run: where the corpus
comes from, how many words to produce, how many units make up a key and
whether units are characters or words.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Optional

from .errors import ConfigurationError


class Mode(Enum):
    """Unit of analysis for the frequency model."""
    CHARACTER = "character"
    WORD = "word"

    @classmethod
    def from_flag(cls, use_words: bool) -> "Mode":
        return cls.WORD if use_words else cls.CHARACTER


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Settings for a single generation run.

    Attributes:
        input_path: Path to a plain text file with at least one space
        target_word_count: Number of words to generate
        group_size: Number of characters/words grouped into one key
        mode: Analyze characters or whole words
        seed: Seed for the random source (None draws fresh entropy)
        max_steps: Optional cap on walk iterations (None means unbounded)
        encoding: Text encoding of the input file
    """

    input_path: Optional[str] = None
    target_word_count: int = 1
    group_size: int = 1
    mode: Mode = Mode.CHARACTER
    seed: Optional[int] = None
    max_steps: Optional[int] = None
    encoding: str = "utf-8"

    def __post_init__(self):
        """Reject values no run could succeed with."""
        if isinstance(self.mode, str):
            try:
                object.__setattr__(self, "mode", Mode(self.mode))
            except ValueError:
                raise ConfigurationError(f"Unknown mode: {self.mode!r}") from None
        elif not isinstance(self.mode, Mode):
            raise ConfigurationError(f"Unknown mode: {self.mode!r}")

        if not isinstance(self.encoding, str):
            raise ConfigurationError(f"encoding must be a string, got {self.encoding!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {self.encoding!r}") from None

        if self.input_path is not None and not isinstance(self.input_path, str):
            raise ConfigurationError(f"input_path must be a string, got {self.input_path!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigurationError(f"seed must be an integer, got {self.seed!r}")

        for name in ("target_word_count", "group_size"):
            value = getattr(self, name)
            if not _is_int(value) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

        if self.max_steps is not None and (not _is_int(self.max_steps) or self.max_steps < 1):
            raise ConfigurationError(f"max_steps must be a positive integer, got {self.max_steps!r}")

    @property
    def use_words(self) -> bool:
        return self.mode is Mode.WORD

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "GeneratorConfig":
        """Create a GeneratorConfig from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in config_dict.items() if k in known}
        if "use_words" in config_dict and "mode" not in values:
            use_words = config_dict["use_words"]
            if not isinstance(use_words, bool):
                raise ConfigurationError(f"use_words must be true or false, got {use_words!r}")
            values["mode"] = Mode.from_flag(use_words)
        return cls(**values)

    def to_dict(self) -> Dict:
        """Convert GeneratorConfig to a JSON-friendly dictionary."""
        return {
            'input_path': self.input_path,
            'target_word_count': self.target_word_count,
            'group_size': self.group_size,
            'mode': self.mode.value,
            'seed': self.seed,
            'max_steps': self.max_steps,
            'encoding': self.encoding,
        }


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
