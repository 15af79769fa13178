# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager
import operator

import pytest

from querydiff import diff, apply_script
from querydiff.edit_format import EditOp, count_ops, edit_distance, is_valid_script
from querydiff.patching import source_of, target_of
from querydiff.diffing.seq_bruteforce import bruteforce_llcs


def check_script_invariants(a, b, script, compare=operator.__eq__):
    "Check that script is a well formed, minimal script from a to b."
    assert is_valid_script(script)
    counts = count_ops(script)
    assert counts[EditOp.KEEP] + counts[EditOp.DELETE] == len(a)
    assert counts[EditOp.KEEP] + counts[EditOp.INSERT] == len(b)
    assert source_of(script) == list(a)
    # Kept tokens match their counterpart in b
    assert all(compare(e.token, b[e.b_index]) for e in script if e.op == EditOp.KEEP)
    llcs = bruteforce_llcs(a, b, compare)
    assert edit_distance(script) == len(a) + len(b) - 2*llcs


def check_diff_and_patch(a, b, compare=operator.__eq__):
    "Check that apply_script(a, diff(a,b)) reproduces b."
    d = diff(a, b, compare)
    check_script_invariants(a, b, d, compare)
    if compare is operator.__eq__:
        assert apply_script(a, d) == (b if isinstance(b, str) else list(b))
        assert target_of(d) == list(b)
    return d


def check_symmetric_diff_and_patch(a, b):
    """Check that apply_script(a, diff(a,b)) reproduces b and vice versa.

    Only the op counts are compared between the two directions. Which of
    several equally short scripts is found depends on the tie-break, so
    the inserted tokens one way need not be the deleted tokens the other
    way, see test_diff_reversed_tie_break.
    """
    d1 = check_diff_and_patch(a, b)
    d2 = check_diff_and_patch(b, a)
    c1 = count_ops(d1)
    c2 = count_ops(d2)
    assert c1[EditOp.INSERT] == c2[EditOp.DELETE]
    assert c1[EditOp.DELETE] == c2[EditOp.INSERT]
    assert c1[EditOp.KEEP] == c2[EditOp.KEEP]


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
