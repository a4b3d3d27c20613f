from .nlp import (
    is_gram_eligible,
    is_dictionary_eligible,
    tokenize_tagged_line,
)

__all__ = [
    "is_gram_eligible",
    "is_dictionary_eligible",
    "tokenize_tagged_line",
]

__version__ = "0.1.0"
