"""Markov chain text generation from character or word n-grams.

Build a frequency model from a corpus, then walk it to produce new text:

    model = build_frequency_model(text, group_size=2, mode=Mode.WORD)
    print(generate_text(model, 16, NumpyRandomSource(seed=1)))
"""

__version__ = "1.2.0"

from .config import GeneratorConfig, Mode
from .errors import (
    ConfigurationError,
    CorpusValidityError,
    GenerationDidNotConvergeError,
    InputAccessError,
    MarkovTextError,
    ModelCoverageError,
    NoValidStartKeyError,
)
from .formatting import format_output
from .frequency import FrequencyModel, build_frequency_model
from .generator import MarkovWalk, generate_text, select_start_key
from .pipeline import GenerationResult, MarkovTextPipeline
from .randomness import NumpyRandomSource, RandomSource

__all__ = [
    "GeneratorConfig",
    "Mode",
    "MarkovTextError",
    "ConfigurationError",
    "InputAccessError",
    "CorpusValidityError",
    "ModelCoverageError",
    "NoValidStartKeyError",
    "GenerationDidNotConvergeError",
    "format_output",
    "FrequencyModel",
    "build_frequency_model",
    "MarkovWalk",
    "generate_text",
    "select_start_key",
    "GenerationResult",
    "MarkovTextPipeline",
    "NumpyRandomSource",
    "RandomSource",
]
