"""Command-line pipeline that sorts the words of .txt files into part-of-speech lists with dictionary explanations."""
from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from .cache import DEFAULT_CACHE_PATH, DEFAULT_UNKNOWN_PATH, UnknownWords, WordCache
from .client import DictionaryClient
from .config import Settings, load_settings
from .pipeline import PipelineConfig, PipelineError, default_output_dir, run_pipeline
from .resolver import WordResolver
from .tagging import SpacyTagger, load_model

LOGGER = logging.getLogger(__name__)


def configure_logging(level: str, log_file: Optional[Path]) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(message)s")
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logging.getLogger().addHandler(handler)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=None,
        help="Directory with .txt files (defaults to inputDirectory from inputConfig.yml)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Where to write the word lists (defaults to <input dir name>_ewClassifiers)",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path("."),
        help="Directory holding outputConfig.yml, queryConfig.yml, proxy.yml and inputConfig.yml",
    )
    parser.add_argument(
        "--cache-file",
        type=Path,
        default=DEFAULT_CACHE_PATH,
        help="JSON cache of resolved dictionary entries",
    )
    parser.add_argument(
        "--unknown-file",
        type=Path,
        default=DEFAULT_UNKNOWN_PATH,
        help="JSON cache of words the dictionary could not define",
    )
    parser.add_argument(
        "--max-examples",
        type=int,
        default=None,
        help="Override maxExampleSentences (0 keeps every example)",
    )
    parser.add_argument(
        "--query-unknown",
        action="store_true",
        help="Look up words previously recorded as unknown again",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for example sentence sampling",
    )
    parser.add_argument(
        "--force-model",
        type=str,
        default=None,
        help="Force a specific spaCy model name",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="log.txt",
        help="Also append log records to this file (empty string disables it)",
    )
    args = parser.parse_args(argv)
    if args.max_examples is not None and args.max_examples < 0:
        parser.error("--max-examples must be zero or positive")
    return args


def build_resolver(args: argparse.Namespace, settings: Settings) -> WordResolver:
    cache = WordCache(args.cache_file).load()
    unknown = UnknownWords(args.unknown_file).load(known=cache)
    client = DictionaryClient(
        http_proxy=settings.proxy.http_proxy,
        https_proxy=settings.proxy.https_proxy,
    )
    return WordResolver(
        cache,
        unknown,
        client,
        query_unknown_words=args.query_unknown or settings.query.query_for_unknown_words,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, Path(args.log_file) if args.log_file else None)
    LOGGER.info("Application started")

    settings = load_settings(args.config_dir)
    if args.max_examples is not None:
        settings.output.max_example_sentences = args.max_examples
    input_dir = args.input_dir or Path(settings.input.input_directory)
    if not input_dir.exists():
        try:
            input_dir.mkdir(parents=True)
        except OSError as exc:
            LOGGER.error("Failed to create input directory %s: %s", input_dir, exc)
            return 1
        LOGGER.error(
            "Created input directory %s. Place text files there and run the program again.", input_dir
        )
        return 1

    config = PipelineConfig(
        input_dir=input_dir,
        output_dir=args.output_dir or default_output_dir(input_dir),
        options=settings.output,
        rng=random.Random(args.seed),
    )
    resolver = build_resolver(args, settings)

    tagger = SpacyTagger(load_model(args.force_model))
    try:
        run_pipeline(config, tagger, resolver)
    except PipelineError as exc:
        LOGGER.error("Error during processing: %s", exc)
        return 1
    except OSError as exc:
        LOGGER.error("I/O error during processing: %s", exc)
        return 1
    LOGGER.info("Text analysis complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
