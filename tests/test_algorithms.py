import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from editdist.algorithms import (
    ALGORITHMS,
    edit_distance_dp,
    edit_distance_dp_optimized,
    edit_distance_memo,
    edit_distance_recursive,
    get_algorithm,
)

ALL_NAMES = ["recursive", "memo", "dp", "dpopt"]
FAST_NAMES = ["memo", "dp", "dpopt"]

short_text = st.text(alphabet="abc", max_size=7)
text = st.text(alphabet="abcd", max_size=30)


@pytest.mark.parametrize("name", ALL_NAMES)
def test_known_pairs(name):
    func = get_algorithm(name)
    assert func("gato", "perro") == 7
    assert func("kitten", "sitting") == 5


@pytest.mark.parametrize("name", ALL_NAMES)
def test_empty_strings(name):
    func = get_algorithm(name)
    assert func("", "") == 0
    assert func("", "abc") == 3
    assert func("abcd", "") == 4


@pytest.mark.parametrize("name", ALL_NAMES)
def test_identical_strings(name):
    assert get_algorithm(name)("patito", "patito") == 0


@given(short_text, short_text)
@settings(max_examples=150)
def test_all_algorithms_agree(a, b):
    expected = edit_distance_dp(a, b)
    assert edit_distance_recursive(a, b) == expected
    assert edit_distance_memo(a, b) == expected
    assert edit_distance_dp_optimized(a, b) == expected


@pytest.mark.parametrize("name", FAST_NAMES)
@given(a=text, b=text)
@settings(max_examples=80)
def test_bounds_symmetry_and_parity(name, a, b):
    func = get_algorithm(name)
    d = func(a, b)
    assert abs(len(a) - len(b)) <= d <= len(a) + len(b)
    assert (d - len(a) - len(b)) % 2 == 0
    assert d == func(b, a)


@given(text, text, text)
@settings(max_examples=80)
def test_triangle_inequality(a, b, c):
    assert edit_distance_dp(a, c) <= edit_distance_dp(a, b) + edit_distance_dp(b, c)


@given(text, text)
@settings(max_examples=80)
def test_appending_costs_its_length(a, tail):
    assert edit_distance_dp_optimized(a, a + tail) == len(tail)
    assert edit_distance_memo(tail + a, a) == len(tail)


def test_memo_handles_long_inputs_without_recursion_limit():
    s = "a" * 3000
    assert edit_distance_memo(s, s) == 0
    assert edit_distance_memo(s, s + "b") == 1


def test_disjoint_alphabets_cost_sum_of_lengths():
    a, b = "x" * 120, "y" * 90
    assert edit_distance_memo(a, b) == 210
    assert edit_distance_dp(a, b) == 210
    assert edit_distance_dp_optimized(a, b) == 210


def test_works_on_bytes():
    assert edit_distance_dp(b"gato", b"gato") == 0
    assert edit_distance_dp(b"gato", b"perro") == edit_distance_dp("gato", "perro")


@pytest.mark.parametrize(
    "name, func",
    [
        ("recursive", edit_distance_recursive),
        ("memo", edit_distance_memo),
        ("dp", edit_distance_dp),
        ("dpopt", edit_distance_dp_optimized),
    ],
)
def test_get_algorithm(name, func):
    assert get_algorithm(name) is func
    assert ALGORITHMS[name] is func


def test_get_algorithm_unknown():
    with pytest.raises(ValueError, match="unknown algorithm"):
        get_algorithm("levenshtein")