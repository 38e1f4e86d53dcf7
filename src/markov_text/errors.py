"""Exceptions raised by the Markov text generator.

Every failure is terminal for a run. Library code raises these; only the
command-line entry point catches them and turns them into an exit code.
"""

from __future__ import annotations

from typing import Optional


class MarkovTextError(Exception):
    """Base class for all generator failures."""

    exit_code = 1


class ConfigurationError(MarkovTextError, ValueError):
    """Invalid generator settings (word count, group size, ...)."""

    exit_code = 2


class InputAccessError(MarkovTextError):
    """The input corpus could not be read."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading input file: {cause}")


class CorpusValidityError(MarkovTextError, ValueError):
    """The corpus cannot be analyzed in the requested mode."""


class ModelCoverageError(MarkovTextError, LookupError):
    """The walk needed a key the frequency model does not have."""

    def __init__(self, key: Optional[str], message: Optional[str] = None):
        self.key = key
        if message is None:
            message = (
                f"Key '{key}' not found. Try again, add more input, "
                "or decrease your group size."
            )
        super().__init__(message)


class NoValidStartKeyError(ModelCoverageError):
    """Character mode found no key made only of letters to start from."""

    def __init__(self, key_count: int):
        self.key_count = key_count
        super().__init__(
            None,
            f"None of the {key_count} letter groups in the input consists only of "
            "letters, so there is no valid place to start. Add more input or "
            "decrease your group size.",
        )


class GenerationDidNotConvergeError(MarkovTextError, RuntimeError):
    """The walk exceeded its step cap before producing enough words."""

    def __init__(self, max_steps: int, words_done: int, target: int):
        self.max_steps = max_steps
        self.words_done = words_done
        self.target = target
        super().__init__(
            f"Generation stopped after {max_steps} steps with {words_done} of "
            f"{target} words. Make the input longer or decrease your group size."
        )
