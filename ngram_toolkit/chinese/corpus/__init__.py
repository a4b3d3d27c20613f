from .accumulator import NGramAccumulator
from .reader import CorpusEntry, iter_corpus_entries
from .export import export_grams, export_words, prune_grams, sorted_grams

__all__ = [
    "NGramAccumulator",
    "CorpusEntry",
    "iter_corpus_entries",
    "export_grams",
    "export_words",
    "prune_grams",
    "sorted_grams",
]
