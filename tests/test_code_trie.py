from __future__ import annotations

from code_trie import CodeTrie


def test_insert_then_search_exact_code(record_factory) -> None:
    trie = CodeTrie()
    rec = record_factory("1022")
    trie.insert("1022", rec)
    assert rec in trie.search("1022")
    assert len(trie) == 1


def test_empty_prefix_returns_nothing(record_factory) -> None:
    trie = CodeTrie()
    trie.insert("1022", record_factory("1022"))
    assert trie.search("") == []


def test_unknown_prefix_returns_nothing(record_factory) -> None:
    trie = CodeTrie()
    trie.insert("1022", record_factory("1022"))
    assert trie.search("2") == []
    assert trie.search("10225") == []


def test_empty_code_insert_is_ignored(record_factory) -> None:
    trie = CodeTrie()
    trie.insert("", record_factory(""))
    assert len(trie) == 0
    assert trie.root.records == []


def test_duplicates_kept_in_insertion_order(record_factory) -> None:
    trie = CodeTrie()
    a = record_factory("4040", "本")
    b = record_factory("4040", "木")
    trie.insert("4040", a)
    trie.insert("4040", b)
    assert trie.search("4040") == [a, b]


def test_prefix_collects_whole_subtree(record_factory) -> None:
    trie = CodeTrie()
    recs = [record_factory(c) for c in ("123", "1234", "12345", "1299", "2000")]
    for r in recs:
        trie.insert(r.code, r)
    codes = sorted(r.code for r in trie.search("12"))
    assert codes == ["123", "1234", "12345", "1299"]
    # own records come before descendants
    assert trie.search("123")[0].code == "123"
