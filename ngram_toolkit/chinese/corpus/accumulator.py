"""
Word, bigram and trigram accounting for a tagged corpus.

Grams are formed only from words that pass `is_gram_eligible`. When a word
inside a window fails, the scan jumps past it instead of sliding by one:

    bigram  : first fails -> +1, second fails -> +2
    trigram : first fails -> +1, second fails -> +2, third fails -> +3

The two scans run independently, so a bad word can be stepped over
differently in each table.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Set

from ngram_toolkit.nlp import is_gram_eligible, make_gram_key, tokenize_tagged_line


@dataclass
class NGramAccumulator:
    line_count: int = 0
    word_count: int = 0
    char_count: int = 0
    words: Set[str] = field(default_factory=set)
    bigrams: Counter = field(default_factory=Counter)
    trigrams: Counter = field(default_factory=Counter)

    def add_line(self, line: str) -> None:
        self.line_count += 1
        tokens = tokenize_tagged_line(line)
        if tokens:
            self.add_tokens(tokens)

    def add_lines(self, lines: Iterable[str]) -> "NGramAccumulator":
        for line in lines:
            self.add_line(line)
        return self

    def add_tokens(self, tokens: Sequence[str]) -> None:
        for word in tokens:
            self.words.add(word)
            self.word_count += 1
            self.char_count += len(word)

        self._scan_bigrams(tokens)
        self._scan_trigrams(tokens)

    def _scan_bigrams(self, tokens: Sequence[str]) -> None:
        n = len(tokens)
        i = 0
        while i < n - 1:
            first, second = tokens[i], tokens[i + 1]
            if not is_gram_eligible(first):
                i += 1
                continue
            if not is_gram_eligible(second):
                i += 2
                continue
            self.bigrams[make_gram_key((first, second))] += 1
            i += 1

    def _scan_trigrams(self, tokens: Sequence[str]) -> None:
        n = len(tokens)
        i = 0
        while i < n - 2:
            first, second, third = tokens[i], tokens[i + 1], tokens[i + 2]
            if not is_gram_eligible(first):
                i += 1
                continue
            if not is_gram_eligible(second):
                i += 2
                continue
            if not is_gram_eligible(third):
                i += 3
                continue
            self.trigrams[make_gram_key((first, second, third))] += 1
            i += 1

    def merge(self, other: "NGramAccumulator") -> "NGramAccumulator":
        """ Fold another accumulator's counts into this one. """
        self.line_count += other.line_count
        self.word_count += other.word_count
        self.char_count += other.char_count
        self.words |= other.words
        self.bigrams.update(other.bigrams)
        self.trigrams.update(other.trigrams)
        return self

    def summary(self) -> Dict[str, int]:
        return {
            "lines": self.line_count,
            "chars": self.char_count,
            "words": self.word_count,
            "distinct_words": len(self.words),
        }

    def render_summary(self) -> List[str]:
        s = self.summary()
        return [
            f"lines          : {s['lines']:,}",
            f"chars          : {s['chars']:,}",
            f"words          : {s['words']:,}",
            f"distinct words : {s['distinct_words']:,}",
        ]
