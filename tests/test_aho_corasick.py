import pytest
from hypothesis import given
from hypothesis import strategies as st

from algocollection.aho_corasick import AhoCorasick, find_all


def _naive(pattern, text):
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


def test_worked_example():
    patterns = ["ACC", "ATC", "CAT", "GCG", "C", "T"]
    assert find_all(patterns, "GCATCG") == [[], [2], [1], [], [1, 4], [3]]


def test_overlapping_occurrences():
    assert find_all(["aa"], "aaaa") == [[0, 1, 2]]


def test_nested_patterns_via_output_links():
    result = find_all(["he", "she", "hers"], "ushers")
    assert result[1] == [1]
    assert result[0] == [2]
    assert result[2] == [2]


def test_no_patterns_gives_no_results():
    assert find_all([], "anything") == []


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        AhoCorasick(["ab", ""])


def test_automaton_reusable():
    automaton = AhoCorasick(["ab"])
    assert automaton.search("abab") == [[0, 2]]
    assert automaton.search("xyz") == [[]]


@given(
    st.lists(st.text(alphabet="ab", min_size=1, max_size=4), unique=True, max_size=5),
    st.text(alphabet="ab", max_size=30),
)
def test_matches_naive_search(patterns, text):
    result = find_all(patterns, text)
    assert result == [_naive(pattern, text) for pattern in patterns]