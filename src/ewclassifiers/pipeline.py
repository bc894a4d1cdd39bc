"""Reading .txt files, sorting their words by category and writing the word lists."""
from __future__ import annotations

import logging
import random
from collections import Counter
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Dict, Iterable, List, Optional, Tuple

import pandas as pd
from wordfreq import zipf_frequency

from .categories import ALL_WORDS, CATEGORIES, categorize
from .config import OutputOptions
from .formatting import format_definitions, sample_examples
from .models import WordRecord
from .ranking import count_frequencies, deduplicate, merge_counts, rank
from .resolver import WordResolver
from .text import capitalize_phrase, is_eligible, normalize

LOGGER = logging.getLogger(__name__)
OUTPUT_SUFFIX = "_ewClassifiers"
UNKNOWN_WORDS_FILE = "UnknownWords.txt"
SUMMARY_FILE = "Summary.csv"
SUMMARY_COLUMNS = ["word", "category", "frequency", "zipf", "status", "senses", "examples"]


class PipelineError(RuntimeError):
    """Fatal problem with the input directory or an output file."""


@dataclass
class PipelineConfig:
    input_dir: Path
    output_dir: Path
    options: OutputOptions = field(default_factory=OutputOptions)
    rng: random.Random = field(default_factory=random.Random)


@dataclass
class FileWords:
    categories: Dict[str, List[str]] = field(default_factory=dict)
    counts: Counter[str] = field(default_factory=Counter)


@dataclass
class RunReport:
    output_dir: Path
    files_processed: int = 0
    files_failed: int = 0
    known_words: int = 0
    unknown_words: List[str] = field(default_factory=list)
    fetches: int = 0


def default_output_dir(input_dir: Path) -> Path:
    return Path(f"{input_dir.resolve().name}{OUTPUT_SUFFIX}")


def find_input_files(input_dir: Path) -> List[Path]:
    if not input_dir.exists():
        raise PipelineError(f"Input directory {input_dir} does not exist")
    if not input_dir.is_dir():
        raise PipelineError(f"Input path {input_dir} is not a directory")
    try:
        paths = sorted(
            path for path in input_dir.iterdir() if path.is_file() and path.suffix.lower() == ".txt"
        )
    except OSError as exc:
        raise PipelineError(f"Failed to read input directory {input_dir}: {exc}") from exc
    if not paths:
        raise PipelineError(f"No .txt files found in {input_dir}")
    return paths


def categorize_tokens(tokens: Iterable[Tuple[str, str]]) -> FileWords:
    words = FileWords(categories={category: [] for category in CATEGORIES})
    for text, tag in tokens:
        category = categorize(tag)
        for part in normalize(text):
            if not is_eligible(part):
                continue
            words.counts[part] += 1
            words.categories[category].append(part)
    return words


def process_file(path: Path, tagger) -> FileWords:
    raw_text = path.read_text(encoding="utf-8")
    words = categorize_tokens(tagger.tag(raw_text))
    LOGGER.info("Processed %s (%s eligible tokens)", path.name, sum(words.counts.values()))
    return words


def collect_words(paths: Iterable[Path], tagger, report: RunReport) -> FileWords:
    collected = FileWords(categories={category: [] for category in CATEGORIES})
    for path in paths:
        LOGGER.info("Processing file %s", path)
        try:
            words = process_file(path, tagger)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            LOGGER.error("Skipping %s: %s", path, exc)
            report.files_failed += 1
            continue
        for category, items in words.categories.items():
            collected.categories[category].extend(items)
        merge_counts(collected.counts, words.counts)
        report.files_processed += 1
    return collected


class OutputFiles:
    """The word list plus optional explanation and example files of one category."""

    def __init__(self, stack: ExitStack, output_dir: Path, name: str, options: OutputOptions) -> None:
        self.words = _open_output(stack, output_dir / f"{name}.txt")
        self.explanations: Optional[IO[str]] = None
        self.examples: Optional[IO[str]] = None
        if options.generate_explanations:
            self.explanations = _open_output(stack, output_dir / f"{name}_ex.txt")
        if options.generate_example_sentences:
            self.examples = _open_output(stack, output_dir / f"{name}_es.txt")

    def write(self, word: str, record: WordRecord, config: PipelineConfig) -> None:
        self.words.write(capitalize_phrase(word) + "\n")
        if self.explanations is not None:
            self.explanations.write(format_definitions(word, record, config.options))
        if self.examples is not None:
            content = sample_examples(word, record, config.options.max_example_sentences, config.rng)
            if content:
                self.examples.write(content)


def _open_output(stack: ExitStack, path: Path) -> IO[str]:
    try:
        return stack.enter_context(open(path, "wt", encoding="utf-8"))
    except OSError as exc:
        raise PipelineError(f"Failed to create output file {path}: {exc}") from exc


def write_category(
    category: str,
    items: List[str],
    resolver: WordResolver,
    config: PipelineConfig,
    report: RunReport,
    summary: List[Dict[str, object]],
) -> None:
    counts = count_frequencies(items)
    ranked = deduplicate(rank(counts))
    if not ranked:
        LOGGER.info("No words in category %s", category)
        return
    LOGGER.info("Looking up %s words in category %s", len(ranked), category)
    with ExitStack() as stack:
        files = OutputFiles(stack, config.output_dir, category, config.options)
        for phrase in ranked:
            resolution = resolver.resolve(phrase)
            summary.append(
                {
                    "word": resolution.word,
                    "category": category,
                    "frequency": counts[phrase],
                    "zipf": zipf_frequency(resolution.word, "en"),
                    "status": "known" if resolution.known else "unknown",
                    "senses": len(resolution.record.senses) if resolution.record else 0,
                    "examples": len(resolution.record.examples) if resolution.record else 0,
                }
            )
            if resolution.record is None:
                report.unknown_words.append(capitalize_phrase(phrase))
                continue
            report.known_words += 1
            files.write(resolution.word, resolution.record, config)


def write_all_words(counts: Counter[str], resolver: WordResolver, config: PipelineConfig) -> int:
    written = 0
    with ExitStack() as stack:
        files = OutputFiles(stack, config.output_dir, ALL_WORDS, config.options)
        for word in deduplicate(rank(counts)):
            record = resolver.cached(word)
            if record is None:
                continue
            files.write(word, record, config)
            written += 1
    return written


def write_unknown_words(words: List[str], output_dir: Path) -> None:
    with ExitStack() as stack:
        handle = _open_output(stack, output_dir / UNKNOWN_WORDS_FILE)
        for word in deduplicate(words):
            handle.write(word + "\n")


def write_summary(rows: List[Dict[str, object]], output_dir: Path) -> None:
    frame = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    frame.sort_values(by=["category", "frequency"], ascending=[True, False], inplace=True)
    output_path = output_dir / SUMMARY_FILE
    LOGGER.info("Writing %s summary rows to %s", len(frame), output_path)
    try:
        frame.to_csv(output_path, index=False, encoding="utf-8")
    except OSError as exc:
        raise PipelineError(f"Failed to create output file {output_path}: {exc}") from exc


def run_pipeline(config: PipelineConfig, tagger, resolver: WordResolver) -> RunReport:
    paths = find_input_files(config.input_dir)
    LOGGER.info("Found %s text files to process", len(paths))
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PipelineError(f"Failed to create output directory {config.output_dir}: {exc}") from exc

    report = RunReport(output_dir=config.output_dir)
    collected = collect_words(paths, tagger, report)
    LOGGER.info("Classification complete; starting dictionary lookups")

    summary: List[Dict[str, object]] = []
    for category in CATEGORIES:
        write_category(category, collected.categories[category], resolver, config, report, summary)
    all_words = write_all_words(collected.counts, resolver, config)
    LOGGER.info("Wrote %s words to %s.txt", all_words, ALL_WORDS)
    write_unknown_words(report.unknown_words, config.output_dir)
    if config.options.generate_summary:
        write_summary(summary, config.output_dir)

    report.unknown_words = deduplicate(report.unknown_words)
    report.fetches = resolver.fetches
    LOGGER.info(
        "Results written to %s: %s known, %s unknown, %s dictionary requests",
        config.output_dir,
        report.known_words,
        len(report.unknown_words),
        report.fetches,
    )
    if not config.options.generate_explanations:
        LOGGER.info("Word explanation files were not generated (disabled in config)")
    if not config.options.generate_example_sentences:
        LOGGER.info("Example sentence files were not generated (disabled in config)")
    return report
