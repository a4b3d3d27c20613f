from __future__ import annotations
from typing import List, Optional, Sequence

# Target script: CJK Unified Ideographs, basic block
CJK_FIRST = "\u4e00"
CJK_LAST = "\u9fa5"

# Tokens of a tagged line are separated by two spaces: "词/n  词/v"
TOKEN_DELIMITER = "  "
TAG_SEPARATOR = "/"
GRAM_SEPARATOR = ":"

# Entity-span markers, e.g. "[中央/n  人民/n  广播/vn  电台/n]nt"
_BRACKET_TABLE = str.maketrans("", "", "[]")


def is_chinese_char(ch: str) -> bool:
    return CJK_FIRST <= ch <= CJK_LAST


def is_chinese_word(word: str, min_length: int = 1) -> bool:
    """
    True when `word` has at least `min_length` characters and every one
    of them is a Chinese character. The empty string is never a word.
    """
    if not word or len(word) < max(min_length, 1):
        return False
    return all(is_chinese_char(ch) for ch in word)


def is_gram_eligible(word: str) -> bool:
    return is_chinese_word(word, min_length=1)


def is_dictionary_eligible(word: str) -> bool:
    """ Single-character words still count in grams, but are not dictionary candidates. """
    return is_chinese_word(word, min_length=2)


def parse_tagged_token(token: str) -> Optional[str]:
    """
    Return the bare surface word of one `word/TAG` token, or None if the
    token is malformed (empty, no tag separator, empty surface).
    """
    if not token:
        return None
    surface, sep, _tag = token.partition(TAG_SEPARATOR)
    if not sep:
        return None
    surface = surface.translate(_BRACKET_TABLE)
    return surface or None


def tokenize_tagged_line(line: str) -> List[str]:
    """
    Split one pre-segmented, pre-tagged corpus line into surface words.

    Malformed tokens are dropped one by one; the rest of the line survives.
    """
    line = line.strip()
    if not line:
        return []
    words: List[str] = []
    for token in line.split(TOKEN_DELIMITER):
        word = parse_tagged_token(token.strip())
        if word is not None:
            words.append(word)
    return words


def make_gram_key(words: Sequence[str]) -> str:
    return GRAM_SEPARATOR.join(words)
