"""Property-based tests for :mod:`oeis_lookup.extend`."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from oeis_lookup.extend import extend, is_prefix

integers = st.lists(st.integers(min_value=-50, max_value=50), max_size=12)
small_integers = st.lists(st.integers(min_value=0, max_value=3), max_size=12)


def test_no_matching_suffix_returns_prefix() -> None:
    assert extend([9, 8, 7], [1, 2, 3, 4, 5]) == [9, 8, 7]


def test_terms_before_the_match_are_dropped() -> None:
    assert extend([5, 7, 11], [2, 3, 5, 7, 11, 13, 17]) == [5, 7, 11, 13, 17]


def test_first_match_wins() -> None:
    assert extend([1, 2], [0, 1, 2, 9, 1, 2, 3]) == [1, 2, 9, 1, 2, 3]


def test_prefix_longer_than_candidate() -> None:
    assert extend([1, 2, 3], [1, 2]) == [1, 2, 3]


def test_result_is_a_new_list() -> None:
    prefix = [4, 5]
    result = extend(prefix, [1, 2])
    assert result == prefix
    assert result is not prefix


def test_accepts_tuples() -> None:
    assert extend((1, 2), (0, 1, 2, 3)) == [1, 2, 3]


@given(integers, integers)
def test_prefix_plus_tail_is_returned_whole(prefix: list[int], tail: list[int]) -> None:
    assert extend(prefix, prefix + tail) == prefix + tail


@given(small_integers, small_integers)
def test_prefix_is_always_a_prefix_of_the_result(prefix: list[int], candidate: list[int]) -> None:
    result = extend(prefix, candidate)

    assert result[: len(prefix)] == prefix
    assert is_prefix(prefix, result)


@given(small_integers, small_integers)
def test_result_is_prefix_or_suffix_of_candidate(prefix: list[int], candidate: list[int]) -> None:
    result = extend(prefix, candidate)
    suffixes = [candidate[start:] for start in range(len(candidate) + 1)]

    assert result == prefix or result in suffixes


@given(small_integers, small_integers)
def test_longest_matching_suffix_is_chosen(prefix: list[int], candidate: list[int]) -> None:
    result = extend(prefix, candidate)
    matching = [
        candidate[start:]
        for start in range(len(candidate) + 1)
        if candidate[start : start + len(prefix)] == prefix
    ]

    if matching:
        assert result == max(matching, key=len)
    else:
        assert result == prefix


@given(integers)
def test_empty_prefix_returns_candidate(candidate: list[int]) -> None:
    assert extend([], candidate) == candidate


def test_is_prefix() -> None:
    assert is_prefix([], [])
    assert is_prefix([1], [1, 2])
    assert not is_prefix([1, 2], [1])
    assert not is_prefix([2], [1, 2])
