from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "inputs": {
        "corpus_archive": "input/corpus/corpora.zip",
        "dictionary": "input/dic.txt",
    },
    "output": {
        "bigram": "output/bigram.txt",
        "trigram": "output/trigram.txt",
        "words": "output/words.txt",
    },
    "filters": {
        "min_gram_count": 2,
    },
}


@dataclass
class CorpusToolsConfig:
    corpus_archive: Path
    dictionary: Path
    bigram_out: Path
    trigram_out: Path
    words_out: Path
    min_gram_count: int = 2
    work_dir: Optional[Path] = None


def _resolve(base: Path, raw: str | Path) -> Path:
    p = Path(raw)
    if not p.is_absolute():
        p = (base / p).resolve()
    return p


def _section(data: dict, name: str, path: Path) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping in corpus config YAML: {path}")
    return {**DEFAULTS[name], **section}


def load_corpus_config(path: str | Path) -> CorpusToolsConfig:
    """
    Read a corpus tools YAML config. Relative paths are resolved
    against the directory holding the config file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"corpus config YAML must be a mapping: {path}")

    inputs = _section(data, "inputs", path)
    output = _section(data, "output", path)
    filters = _section(data, "filters", path)

    min_count = filters["min_gram_count"]
    if isinstance(min_count, bool) or not isinstance(min_count, int) or min_count < 1:
        raise ValueError(f"'filters.min_gram_count' must be a positive integer: {path}")

    base = path.parent
    work_dir = data.get("work_dir")

    return CorpusToolsConfig(
        corpus_archive=_resolve(base, inputs["corpus_archive"]),
        dictionary=_resolve(base, inputs["dictionary"]),
        bigram_out=_resolve(base, output["bigram"]),
        trigram_out=_resolve(base, output["trigram"]),
        words_out=_resolve(base, output["words"]),
        min_gram_count=min_count,
        work_dir=_resolve(base, work_dir) if work_dir else None,
    )
