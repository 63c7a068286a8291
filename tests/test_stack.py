import pytest
from hypothesis import given, strategies as st

from pushswap.stack import INT_MAX, INT_MIN, Stack, find_lcost_nb, find_pos_b

unique_ints = st.lists(st.integers(min_value=-1000, max_value=1000), unique=True)


def test_empty_stack_bounds():
    s = Stack()
    assert len(s) == 0
    assert s.max == INT_MIN
    assert s.min == INT_MAX


def test_swap_exchanges_top_two():
    s = Stack([1, 2, 3])
    s.swap()
    assert list(s) == [2, 1, 3]


def test_swap_with_single_element_keeps_it():
    s = Stack([7])
    s.swap()
    assert list(s) == [7]


@given(unique_ints.filter(bool))
def test_rotate_moves_top_to_bottom(values):
    s = Stack(values)
    s.rotate()
    assert s[-1] == values[0]
    assert sorted(s) == sorted(values)


@given(unique_ints.filter(bool))
def test_reverse_rotate_moves_bottom_to_top(values):
    s = Stack(values)
    s.reverse_rotate()
    assert s[0] == values[-1]
    assert sorted(s) == sorted(values)


@given(unique_ints)
def test_rotate_then_reverse_rotate_round_trip(values):
    s = Stack(values)
    s.rotate()
    s.reverse_rotate()
    assert list(s) == values


@given(unique_ints)
def test_rotating_full_length_restores(values):
    s = Stack(values)
    for _ in range(len(values)):
        s.rotate()
    assert list(s) == values


def test_push_to_moves_top_and_updates_bounds():
    a = Stack([5, 1, 9])
    b = Stack()
    a.push_to(b)
    assert list(a) == [1, 9]
    assert list(b) == [5]
    assert b.max == 5 and b.min == 5
    a.push_to(b)
    assert list(b) == [1, 5]
    assert b.min == 1
    assert a.max == 9 and a.min == 9


def test_push_from_empty_does_nothing():
    a = Stack()
    b = Stack([3])
    a.push_to(b)
    assert list(b) == [3]
    assert len(a) == 0


@given(unique_ints)
def test_push_back_and_forth_round_trip(values):
    a = Stack(values)
    b = Stack()
    for _ in values:
        a.push_to(b)
    assert list(b) == values[::-1]
    for _ in values:
        b.push_to(a)
    assert list(a) == values


def test_index_of_and_missing():
    s = Stack([4, 8, 15])
    assert s.index_of(15) == 2
    with pytest.raises(ValueError):
        s.index_of(16)


@given(unique_ints)
def test_is_sorted_matches_sorted_order(values):
    assert Stack(sorted(values)).is_sorted()
    assert Stack(values).is_sorted() == (values == sorted(values))


def test_find_pos_b_between_values():
    b = Stack([5, 3, 1])
    assert find_pos_b(b, 4) == 0
    assert find_pos_b(b, 2) == 1


def test_find_pos_b_outside_range_targets_min():
    b = Stack([1, 5, 3])
    assert find_pos_b(b, 6) == 0
    assert find_pos_b(b, 0) == 0


@given(unique_ints.filter(bool), st.integers(min_value=-2000, max_value=2000))
def test_find_pos_b_never_more_than_half(values, nb):
    b = Stack(values)
    assert 0 <= find_pos_b(b, nb) <= len(b) // 2


def test_find_pos_b_empty_stack():
    assert find_pos_b(Stack(), 10) == 0


def test_find_lcost_nb_prefers_top_on_tie():
    a = Stack([7, 8, 9])
    b = Stack([5, 3, 1])
    assert find_lcost_nb(a, b) == 7


@given(unique_ints.filter(bool), unique_ints.filter(lambda v: len(v) >= 2))
def test_find_lcost_nb_returns_member(a_values, b_values):
    b_values = [v for v in b_values if v not in a_values]
    b = Stack(b_values)
    assert find_lcost_nb(Stack(a_values), b) in a_values


def test_find_lcost_nb_empty_raises():
    with pytest.raises(ValueError):
        find_lcost_nb(Stack(), Stack([1, 2]))