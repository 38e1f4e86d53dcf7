#!/usr/bin/env python3
"""
Markov Text Generator

Given a text file, analyzes which letters/words are statistically likely
to follow each group of letters/words, then generates text similar to the
input from those Markov chains.

Usage:
    markov-text -i NalhallanText.txt -o 16              # Character groups of 1
    markov-text -i NalhallanText.txt -o 16 -g 2         # Character groups of 2
    markov-text -i NalhallanText.txt -o 16 -w           # Single words
    markov-text -i NalhallanText.txt -o 16 -g 2 -w      # Pairs of words
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import GeneratorConfig, Mode
from .errors import ConfigurationError, MarkovTextError
from .pipeline import MarkovTextPipeline

logger = logging.getLogger(__name__)


DESCRIPTION = f"""\
Markov Text Generator {__version__}
Description: Generates text similar to input text using Markov probability chains."""

EPILOG = """\
Examples:
\tmarkov-text -i NalhallanText.txt -o 16
\tmarkov-text -i NalhallanText.txt -o 16 -g 2
\tmarkov-text -i NalhallanText.txt -o 16 -w
\tmarkov-text -i NalhallanText.txt -o 16 -g 2 -w

Group size
\tThe larger the group size, the closer the generated text will be to the input
\ttext. In general, the larger your input text, the larger a group size it can
\thandle; 2 or 3 is usually a good size. If the group size is too large for your
\tinput, generation may loop endlessly and hang. If it consistently hangs with a
\tcertain group size and input, either make the input longer or decrease the
\tgroup size (or pass --max-steps to stop it).

If you encounter the 'Key not found' error, either make the input longer or
decrease the group size."""


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that prints the full usage text to stdout on bad arguments."""

    def error(self, message):
        self.print_help(sys.stdout)
        print(f"\nerror: {message}")
        self.exit(2)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(
        prog="markov-text",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        help="Path to a plain text file with at least one space"
    )

    parser.add_argument(
        "--word-count", "-o",
        type=positive_int,
        dest="target_word_count",
        help="Number of words to generate from the input text"
    )

    parser.add_argument(
        "--group-size", "-g",
        type=positive_int,
        help="Number of characters or words to group together in Markov chains (default: 1)"
    )

    parser.add_argument(
        "--use-words", "-w",
        action="store_true",
        default=None,
        help="Calculate probabilities based on words (delimited by spaces) instead of chunks of characters"
    )

    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Seed for the random source, for reproducible output"
    )

    parser.add_argument(
        "--max-steps",
        type=positive_int,
        help="Give up after this many generation steps instead of running until done"
    )

    parser.add_argument(
        "--show-model",
        type=positive_int,
        nargs="?",
        const=20,
        metavar="N",
        help="Print the N most frequent transitions instead of generating text (default N: 20)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every generation step to stderr"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the optional JSON config file with explicit command-line flags."""
    config_dict = {}
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read config file {config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {config_path} is not valid JSON: {e}") from e
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

    overrides = {
        'input_path': args.input,
        'target_word_count': args.target_word_count,
        'group_size': args.group_size,
        'seed': args.seed,
        'max_steps': args.max_steps,
    }
    config_dict.update({k: v for k, v in overrides.items() if v is not None})
    if args.use_words:
        config_dict['mode'] = Mode.WORD

    if not config_dict.get('input_path'):
        raise ConfigurationError("the following argument is required: -i/--input")
    if 'target_word_count' not in config_dict and args.show_model is None:
        raise ConfigurationError("the following argument is required: -o/--word-count")

    return GeneratorConfig.from_dict(config_dict)


def configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def show_model(pipeline: MarkovTextPipeline, limit: int) -> None:
    model = pipeline.build_model(pipeline.read_input())
    summary = model.summary()
    print(
        f"{summary['keys']} keys, {summary['transitions']} transitions "
        f"({summary['mode']} mode, group size {summary['group_size']})"
    )
    frame = model.to_frame()
    if not frame.empty:
        print(frame.head(limit).to_string(index=False))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    configure_logging(args)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        parser.print_help(sys.stdout)
        print(f"\nerror: {e}")
        return 2

    pipeline = MarkovTextPipeline(config)
    logger.info(f"Pipeline: {pipeline.get_pipeline_info()}")

    try:
        if args.show_model is not None:
            show_model(pipeline, args.show_model)
        else:
            result = pipeline.run()
            logger.info(f"Finished in {result.processing_time:.3f}s")
            print(result.text)
    except MarkovTextError as e:
        print(e)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
