import pytest
from hypothesis import given, strategies as st

from algonotes.matrix_chain import (
    matrix_chain_order,
    optimal_parens,
    optimal_parenthesization,
)


def test_worked_example():
    dims = [10, 5, 1, 10, 2, 10]
    assert optimal_parenthesization(dims) == "A15 = ((A1*A2)*((A3*A4)*A5))"


def test_single_matrix():
    assert optimal_parenthesization([10, 5]) == "A11 = A1"


def test_two_matrices_cost():
    cost, split = matrix_chain_order([10, 5, 1])
    assert cost[1][2] == 10 * 5 * 1
    assert split[1][2] == 1
    assert optimal_parens(split, 1, 2) == "(A1*A2)"


def test_too_few_dimensions():
    with pytest.raises(ValueError):
        matrix_chain_order([5])


@given(st.lists(st.integers(1, 30), min_size=2, max_size=8))
def test_parens_mention_every_matrix_once(dims):
    _, split = matrix_chain_order(dims)
    n = len(dims) - 1
    text = optimal_parens(split, 1, n)
    assert text.count("*") == n - 1
    assert text.count("(") == text.count(")") == n - 1
    for i in range(1, n + 1):
        assert f"A{i}" in text


@given(st.lists(st.integers(1, 30), min_size=3, max_size=8))
def test_cost_not_above_left_to_right(dims):
    cost, _ = matrix_chain_order(dims)
    n = len(dims) - 1
    naive = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, n))
    assert cost[1][n] <= naive
    assert all(cost[i][i] == 0 for i in range(1, n + 1))