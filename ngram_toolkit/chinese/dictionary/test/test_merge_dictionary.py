from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import merge_dictionary as mod
from ngram_toolkit.chinese.corpus.errors import MergeReadError, MergeWriteError


def _words(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def test_merge_extracted_words_into_existing_dictionary(tmp_path):
    """
    The usual run: [extracted words, old dictionary] -> old dictionary.
    The dictionary is replaced by the deduplicated union, not appended to.
    """
    extracted = tmp_path / "words.txt"
    extracted.write_text("北京\n天安门\n广场\n", encoding="utf-8")

    dic = tmp_path / "dic.txt"
    dic.write_text("北京\n上海\n\n  广场  \n", encoding="utf-8")

    n = mod.merge_dictionaries([extracted, dic], dic)

    assert n == 4
    words = _words(dic)
    assert sorted(words) == ["上海", "北京", "天安门", "广场"]
    assert len(words) == len(set(words))


def test_merge_is_idempotent(tmp_path):
    dic = tmp_path / "dic.txt"
    dic.write_text("北京\n上海\n", encoding="utf-8")

    mod.merge_dictionaries([dic, dic], dic)
    first = _words(dic)
    mod.merge_dictionaries([dic, dic], dic)

    assert set(first) == {"北京", "上海"}
    assert _words(dic) == first


def test_merge_is_order_independent(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("北京\n上海\n", encoding="utf-8")
    b.write_text("上海\n广州\n", encoding="utf-8")

    ab = tmp_path / "ab.txt"
    ba = tmp_path / "ba.txt"
    mod.merge_dictionaries([a, b], ab)
    mod.merge_dictionaries([b, a], ba)

    assert set(_words(ab)) == set(_words(ba)) == {"北京", "上海", "广州"}


def test_merge_is_case_sensitive(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("Beijing\nbeijing\nBeijing\n", encoding="utf-8")
    out = tmp_path / "out.txt"

    assert mod.merge_dictionaries([a], out) == 2


def test_missing_source_contributes_nothing(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("北京\n", encoding="utf-8")
    target = tmp_path / "out" / "dic.txt"

    n = mod.merge_dictionaries([tmp_path / "missing.txt", a], target)

    assert n == 1
    assert _words(target) == ["北京"]


def test_write_failure_raises(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("北京\n", encoding="utf-8")
    target = tmp_path / "dic.txt"
    target.mkdir()

    with pytest.raises(MergeWriteError):
        mod.merge_dictionaries([a], target)


def test_main_cli(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("北京\n", encoding="utf-8")
    target = tmp_path / "dic.txt"

    assert mod.main([str(target), str(a)]) == 0
    assert _words(target) == ["北京"]
    assert mod.main([str(target)]) == 2


def test_undecodable_source_leaves_target_untouched(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("北京\n", encoding="utf-8")
    dic = tmp_path / "dic.txt"
    dic.write_bytes(b"\xff\xfe\xfa\n")

    with pytest.raises(MergeReadError) as excinfo:
        mod.merge_dictionaries([words, dic], dic)

    assert excinfo.value.path == dic
    assert dic.read_bytes() == b"\xff\xfe\xfa\n"


def test_main_reports_unreadable_source(tmp_path):
    dic = tmp_path / "dic.txt"
    dic.write_bytes(b"\xff\xfe\xfa\n")

    assert mod.main([str(tmp_path / "out.txt"), str(dic)]) == 1
    assert not (tmp_path / "out.txt").exists()
