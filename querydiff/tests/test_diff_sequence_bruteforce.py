# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from querydiff import apply_script
from querydiff.edit_format import is_valid_script
from querydiff.diffing.comparing import compare_strings_stripped
from querydiff.diffing.lcs import script_from_lcs
from querydiff.diffing.seq_bruteforce import (
    lcs_table, lcs_indices, bruteforce_llcs, diff_sequence_bruteforce)


examples = [
    ([], []),
    ([1], [1]),
    ([1, 2], [1, 2]),
    ([2, 1], [1, 2]),
    ([1, 2, 3], [1, 2]),
    ([2, 1, 3], [1, 2]),
    ([1, 2], [1, 2, 3]),
    ([2, 1], [1, 2, 3]),
    ([1, 2], [1, 2, 1, 2]),
    ([1, 2, 1, 2], [1, 2]),
    ([1, 2, 3, 4, 1, 2], [3, 4, 2, 3]),
    (list("abcab"), list("ayb")),
    (list("xaxcxabc"), list("abcy")),
    ]


@pytest.mark.parametrize("a, b", examples)
def test_diff_sequence_bruteforce(a, b):
    R = lcs_table(a, b)
    assert len(R) == len(a) + 1
    assert all(len(row) == len(b) + 1 for row in R)
    for i in range(len(a)):
        for j in range(len(b)):
            # Lengths grow by at most one per item
            assert 0 <= R[i+1][j+1] - R[i][j] <= 1
            assert 0 <= R[i+1][j] - R[i][j] <= 1
            assert 0 <= R[i][j+1] - R[i][j] <= 1
    llcs = R[-1][-1]
    assert bruteforce_llcs(a, b) == llcs

    A_indices, B_indices = lcs_indices(R)
    assert len(A_indices) == len(B_indices) == llcs
    assert A_indices == sorted(set(A_indices))
    assert B_indices == sorted(set(B_indices))
    assert all(a[A_indices[r]] == b[B_indices[r]] for r in range(llcs))

    d = script_from_lcs(a, b, A_indices, B_indices)
    assert is_valid_script(d)
    assert apply_script(a, d) == b

    # Test combined function (repeats the above pieces)
    assert apply_script(a, diff_sequence_bruteforce(a, b)) == b


def test_bruteforce_llcs_known_values():
    assert bruteforce_llcs(list("abcab"), list("ayb")) == 2
    assert bruteforce_llcs(list("abcabba"), list("cbabac")) == 4
    assert bruteforce_llcs([], [1, 2]) == 0
    assert bruteforce_llcs([1, 2], []) == 0


def test_bruteforce_with_compare():
    a = ["  name", "email"]
    b = ["name", "id"]
    assert bruteforce_llcs(a, b) == 0
    assert bruteforce_llcs(a, b, compare_strings_stripped) == 1


def test_lcs_table_compares_each_pair_once():
    calls = []

    def compare(x, y):
        calls.append((x, y))
        return x == y

    lcs_table("abc", "bd", compare)
    assert sorted(calls) == sorted((x, y) for x in "abc" for y in "bd")
