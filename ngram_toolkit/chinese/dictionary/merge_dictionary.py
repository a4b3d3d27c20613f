#!/usr/bin/env python3
"""
merge_dictionary.py
-------------------

Merge several word lists into one dictionary file.

The result is the set union of every source (exact, case-sensitive
strings), written one word per line in sorted order. The target may also be
one of the sources: all sources are read before the target is rewritten.

Usage:
    python -m ngram_toolkit.chinese.dictionary.merge_dictionary TARGET SOURCE [SOURCE ...]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Set

from ngram_toolkit.chinese.corpus.errors import MergeReadError, MergeWriteError

logger = logging.getLogger(__name__)


def load_wordlist(path: str | Path) -> Set[str]:
    """ Load a word list (one word per line). A missing file yields no words. """
    path = Path(path)
    if not path.is_file():
        logger.warning("dictionary source missing: %s", path)
        return set()
    try:
        with path.open(encoding="utf-8") as f:
            return {line.strip() for line in f if line.strip()}
    except (OSError, UnicodeDecodeError) as e:
        raise MergeReadError(path, str(e)) from e


def merge_dictionaries(sources: Iterable[str | Path], target: str | Path) -> int:
    """ Every source is read before the target is written; a read failure leaves the target as it was. """
    target = Path(target)
    vocab: Set[str] = set()

    for p in sources:
        ws = load_wordlist(p)
        logger.info("dictionary source %s: %s words", p, f"{len(ws):,}")
        vocab |= ws

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            "".join(w + "\n" for w in sorted(vocab)),
            encoding="utf-8",
        )
    except OSError as e:
        raise MergeWriteError(target, str(e)) from e

    logger.info("merged dictionary: %s words -> %s", f"{len(vocab):,}", target)
    return len(vocab)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        print(__doc__.strip().splitlines()[-1].strip(), file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    target, sources = argv[0], argv[1:]
    try:
        merge_dictionaries(sources, target)
    except (MergeReadError, MergeWriteError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
