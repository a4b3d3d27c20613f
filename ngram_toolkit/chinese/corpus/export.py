from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Tuple

from ngram_toolkit.nlp import is_dictionary_eligible

from .errors import ExportWriteError

logger = logging.getLogger(__name__)

MIN_GRAM_COUNT = 2


def prune_grams(table: Mapping[str, int], min_count: int = MIN_GRAM_COUNT) -> Dict[str, int]:
    """ Drop every gram seen fewer than `min_count` times. """
    return {k: v for k, v in table.items() if v >= min_count}


def sorted_grams(table: Mapping[str, int]) -> List[Tuple[str, int]]:
    """ Order by count descending, then key, so output is stable across runs. """
    return sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))


def format_gram(key: str, count: int) -> str:
    return f"{key} -> {count}"


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise ExportWriteError(path, str(e)) from e


def export_grams(
    table: Mapping[str, int],
    path: str | Path,
    min_count: int = MIN_GRAM_COUNT,
) -> int:
    """
    Prune, sort and write a gram table as `KEY -> COUNT` lines,
    replacing whatever was at `path`. Returns the number of lines written.
    """
    path = Path(path)
    kept = prune_grams(table, min_count=min_count)
    items = sorted_grams(kept)
    _write_lines(path, (format_gram(k, v) for k, v in items))
    logger.info(
        "kept %s of %s grams (count >= %d) -> %s",
        f"{len(items):,}", f"{len(table):,}", min_count, path,
    )
    return len(items)


def export_words(words: Iterable[str], path: str | Path) -> int:
    """ Write dictionary candidates (two or more Chinese characters), one per line. """
    path = Path(path)
    kept = sorted(w for w in set(words) if is_dictionary_eligible(w))
    _write_lines(path, kept)
    logger.info("wrote %s candidate words -> %s", f"{len(kept):,}", path)
    return len(kept)
