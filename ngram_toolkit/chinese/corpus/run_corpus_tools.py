from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

from ngram_toolkit.chinese.dictionary.merge_dictionary import merge_dictionaries

from .accumulator import NGramAccumulator
from .config_loader import CorpusToolsConfig, load_corpus_config
from .errors import (
    ArchiveOpenError,
    EntryReadError,
    ExportWriteError,
    MergeReadError,
    MergeWriteError,
)
from .export import export_grams, export_words
from .reader import iter_corpus_entries

logger = logging.getLogger(__name__)

# Modify this to switch the default config file being used
BASE_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG: Path = BASE_DIR / "config" / "sample.yml"


def analyze_corpus(cfg: CorpusToolsConfig) -> NGramAccumulator:
    """
    Scan every entry of the corpus archive. Each entry is counted on its
    own and folded into the run totals only once it was read completely,
    so an unreadable entry adds nothing.
    """
    total = NGramAccumulator()
    for entry in iter_corpus_entries(cfg.corpus_archive, work_dir=cfg.work_dir):
        logger.info("processing %s", entry.name)
        partial = NGramAccumulator()
        try:
            partial.add_lines(entry.stream)
        except (UnicodeDecodeError, OSError) as e:
            logger.warning("%s, skipped", EntryReadError(entry.name, str(e)))
            continue
        total.merge(partial)
    return total


def run(cfg: CorpusToolsConfig) -> int:
    logger.info("analyzing corpus %s", cfg.corpus_archive)
    start = time.perf_counter()
    try:
        acc = analyze_corpus(cfg)
    except ArchiveOpenError as e:
        logger.error("%s", e)
        return 1
    cost_ms = (time.perf_counter() - start) * 1000
    logger.info("corpus analyzed in %.0f ms", cost_ms)
    for line in acc.render_summary():
        logger.info("%s", line)

    failed = False

    try:
        export_grams(acc.bigrams, cfg.bigram_out, min_count=cfg.min_gram_count)
    except ExportWriteError as e:
        logger.error("bigram export failed: %s", e)
        failed = True
    acc.bigrams.clear()

    try:
        export_grams(acc.trigrams, cfg.trigram_out, min_count=cfg.min_gram_count)
    except ExportWriteError as e:
        logger.error("trigram export failed: %s", e)
        failed = True
    acc.trigrams.clear()

    words_ok = True
    try:
        export_words(acc.words, cfg.words_out)
    except ExportWriteError as e:
        logger.error("word export failed: %s", e)
        words_ok = False
    acc.words.clear()

    if not words_ok:
        # words_out may still hold an earlier run's candidates
        logger.error("dictionary merge skipped: no fresh word list")
        return 1

    try:
        merge_dictionaries([cfg.words_out, cfg.dictionary], cfg.dictionary)
    except (MergeReadError, MergeWriteError) as e:
        logger.error("%s", e)
        failed = True

    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    """
    Build bigram/trigram tables and a word list from a tagged corpus
    archive, then merge the new words into the dictionary.

    Usage:
        python -m ngram_toolkit.chinese.corpus.run_corpus_tools
        python -m ngram_toolkit.chinese.corpus.run_corpus_tools path/to/config.yml
    """
    if argv is None:
        argv = sys.argv[1:]

    config_path = Path(argv[0]) if argv else DEFAULT_CONFIG

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    cfg = load_corpus_config(config_path)
    return run(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
