"""
Markov Text Pipeline Module

This module ties the generator's components together for one run.

Pipeline Architecture:
1. Input Reading → the whole corpus as one string
2. Model Building → FrequencyModel of characters or words
3. Generation → random walk until the target word count is reached
4. Formatting → sentence capitalization

Usage:
    pipeline = MarkovTextPipeline(GeneratorConfig(input_path="corpus.txt", target_word_count=16))
    result = pipeline.run()
    print(result.text)
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .config import GeneratorConfig
from .errors import InputAccessError, ConfigurationError
from .formatting import format_output
from .frequency import FrequencyModel, build_frequency_model
from .generator import MarkovWalk
from .randomness import NumpyRandomSource, RandomSource
from .tokenization import WORD_SEPARATOR

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Complete result of one pipeline run.

    Attributes:
        text: Formatted generated text
        raw_text: Generated text before formatting
        model: The frequency model the text was sampled from
        processing_time: Time taken in seconds
    """
    text: str
    raw_text: str
    model: FrequencyModel
    processing_time: float = 0.0

    @property
    def word_count(self) -> int:
        # Both modes end every finished word with exactly one space.
        return self.raw_text.count(WORD_SEPARATOR)

    def to_dict(self) -> Dict:
        """Convert to dictionary representation."""
        return {
            'text': self.text,
            'word_count': self.word_count,
            'model': self.model.summary(),
            'processing_time': self.processing_time,
        }


class MarkovTextPipeline:
    """
    Reads a corpus, builds its frequency model and generates text from it.

    The model is rebuilt on every run; nothing is kept between runs.

    Usage:
        config = GeneratorConfig(input_path="corpus.txt", target_word_count=16, group_size=2)
        pipeline = MarkovTextPipeline(config)

        # From the configured file
        result = pipeline.run()

        # From a string already in memory
        result = pipeline.run_text("the cat sat. the dog ran.")
    """

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[RandomSource] = None):
        """
        Initialize the pipeline.

        Args:
            config: Configuration object (uses defaults if not provided)
            rng: Random source (a NumpyRandomSource seeded from config.seed if not provided)
        """
        self.config = config or GeneratorConfig()
        self.rng = rng if rng is not None else NumpyRandomSource(self.config.seed)

    def read_input(self, path=None) -> str:
        """
        Read the whole corpus file.

        Raises:
            InputAccessError: the file is missing, unreadable or not valid text
        """
        path = path if path is not None else self.config.input_path
        if path is None:
            raise ConfigurationError("No input file given")

        try:
            text = Path(path).read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputAccessError(str(path), e) from e

        logger.info(f"Read {len(text)} characters from {path}")
        return text

    def build_model(self, text: str) -> FrequencyModel:
        return build_frequency_model(text, self.config.group_size, self.config.mode)

    def generate(self, model: FrequencyModel) -> str:
        """Raw walk output for ``model``, before formatting."""
        walk = MarkovWalk(model, self.rng, max_steps=self.config.max_steps)
        return walk.run(self.config.target_word_count)

    def run_text(self, text: str) -> GenerationResult:
        """Build a model from ``text`` and generate from it."""
        start_time = time.time()

        model = self.build_model(text)
        raw = self.generate(model)
        formatted = format_output(raw)

        return GenerationResult(
            text=formatted,
            raw_text=raw,
            model=model,
            processing_time=time.time() - start_time,
        )

    def run(self) -> GenerationResult:
        """Read the configured input file and generate from it."""
        return self.run_text(self.read_input())

    def get_pipeline_info(self) -> Dict:
        """Get information about the pipeline configuration."""
        return {
            'config': self.config.to_dict(),
            'components': {
                'rng': type(self.rng).__name__,
                'walk': MarkovWalk.__name__,
            },
        }
