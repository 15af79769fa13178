# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Reference diff from a full longest common subsequence table.

Costs O(NM) time and space regardless of how similar the sequences
are, which makes it a simple check on the Myers implementation.
"""

import operator

from ..log import ResourceLimitExceeded
from .lcs import script_from_lcs

__all__ = ["diff_sequence_bruteforce", "bruteforce_llcs"]


def lcs_table(A, B, compare=operator.__eq__):
    """Table R with R[x][y] == llcs(A[:x], B[:y]).

    compare is called once for each pair of items.
    """
    M = len(B)
    R = [[0]*(M+1)]
    for a in A:
        prev = R[-1]
        row = [0]
        for y, b in enumerate(B):
            if compare(a, b):
                row.append(prev[y] + 1)
            else:
                row.append(max(prev[y+1], row[y]))
        R.append(row)
    return R


def lcs_indices(R):
    """Indices of a longest common subsequence, read from its table.

    Returns two lists (A_indices, B_indices) of length llcs(A, B),
    such that A[A_indices[r]] matches B[B_indices[r]] for each r.
    """
    x = len(R) - 1
    y = len(R[0]) - 1
    A_indices = []
    B_indices = []
    while R[x][y]:
        if R[x][y] == R[x-1][y]:
            x -= 1
        elif R[x][y] == R[x][y-1]:
            y -= 1
        else:
            # Neither neighbour has the same length, so A[x-1] matches B[y-1]
            x -= 1
            y -= 1
            A_indices.append(x)
            B_indices.append(y)
    A_indices.reverse()
    B_indices.reverse()
    return A_indices, B_indices


def bruteforce_llcs(A, B, compare=operator.__eq__):
    "Length of the longest common subsequence of A and B."
    return lcs_table(A, B, compare)[-1][-1]


def diff_sequence_bruteforce(A, B, compare=operator.__eq__, max_distance=None):
    """Compute the edit script of A and B using expensive brute force O(MN) algorithms."""
    A_indices, B_indices = lcs_indices(lcs_table(A, B, compare))
    if max_distance is not None:
        D = len(A) + len(B) - 2*len(A_indices)
        if D > max_distance:
            raise ResourceLimitExceeded(max_distance, len(A), len(B))
    return script_from_lcs(A, B, A_indices, B_indices)
