# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Shortest edit script of two sequences, using the greedy forward
algorithm from Fig. 2 of E. W. Myers, "An O(ND) Difference Algorithm
and Its Variations", Algorithmica 1 (1986).

The article uses 1-based indexing of A and B, while here we use standard
0-based indexing: x, y are edit graph vertex coordinates, meaning how many
items of A and B respectively have been consumed.
"""

import operator

from ..edit_format import op_keep, op_insert, op_delete
from ..log import ResourceLimitExceeded, debug

__all__ = ["search", "reconstruct", "diff_sequence_myers"]


def alloc_V_array(MAX):
    # Size of array should be big enough for MAX edits plus the
    # neighbour diagonals read at the edges, indexing from
    # V[V0-MAX-1] to V[V0+MAX+1], V0=MAX+1
    n = 2*(MAX + 1) + 1

    # Not initializing V with zeros, if the algorithm reads uninitialized values that's a bug
    return [None]*n


def moves_down(V, V0, D, k):
    """Whether the furthest reaching D-path on diagonal k leaves diagonal k+1.

    V holds the furthest reaching (D-1)-path endpoints, diagonal k stored at V[V0+k].
    True means a move down (y+1, an insertion of an item from B),
    False means a move right from diagonal k-1 (x+1, a deletion of an item from A).

    On a tie the move goes right, which lands one step further along k.
    The search and the reconstruction must both decide through this function.
    """
    return k == -D or (k != D and V[V0+k-1] < V[V0+k+1])


def search(A, B, compare=operator.__eq__, max_distance=None):
    """Find the length D of the shortest edit script turning A into B.

    Returns (D, trace) where trace[d] holds the furthest reaching x on
    each diagonal -d <= k <= d after d edits, stored at trace[d][d+k].
    Only the diagonals with the same parity as d are meaningful.

    Raises ResourceLimitExceeded if no script with at most
    max_distance edits exists.
    """
    N, M = len(A), len(B)
    # Parameter to allow bounding the size of an acceptible edit script
    MAX = N + M
    if max_distance is not None:
        MAX = min(MAX, max_distance)
    V = alloc_V_array(MAX)
    # V is indexed from -MAX to +MAX in the algorithm,
    # here indexing using V[V0 + i] to map to 0-based indices
    V0 = MAX + 1
    V[V0+1] = 0 # Seed for first iteration, corresponding to x just outside of range
    trace = []
    for D in range(MAX+1):
        for k in range(-D, D+1, 2):
            if moves_down(V, V0, D, k):
                # Coming from diagonal k+1, the diagonal above k, so keeping x
                x = V[V0+k+1]
            else:
                # Coming from diagonal k-1, the diagonal to the left of k, so incrementing x
                x = V[V0+k-1] + 1
            y = x - k
            # Compare sequence elements along k-diagonal
            while x < N and y < M and compare(A[x], B[y]):
                x += 1
                y += 1
            # Store x coordinate at end of snake for this k-line
            V[V0+k] = x
            if x >= N and y >= M:
                trace.append(V[V0-D:V0+D+1])
                return D, trace
        trace.append(V[V0-D:V0+D+1])
    raise ResourceLimitExceeded(MAX, N, M)


def reconstruct(A, B, trace, D, compare=operator.__eq__):
    """Backtrack the trace of a search to the edit script it found.

    Walks from (N, M) back to (0, 0), one edit per step of D,
    and returns the script in forward order.

    Takes (A, B, trace, D) as returned by search, with compare last as in
    search and the other sequence diffs. The trace already fixes every
    snake, so compare is never called here. It is accepted so a call can
    pass the same predicate to both passes.
    """
    x, y = len(A), len(B)
    script = []
    for d in range(D, 0, -1):
        V = trace[d-1]
        V0 = d - 1
        k = x - y
        down = moves_down(V, V0, d, k)
        prev_k = k + 1 if down else k - 1
        prev_x = V[V0+prev_k]
        prev_y = prev_x - prev_k

        # The snake along k starts where the move from prev_k lands
        x0 = prev_x if down else prev_x + 1
        while x > x0:
            x -= 1
            y -= 1
            script.append(op_keep(x, y, A[x]))
        assert x - y == k, 'Snake unwinding desynchronized from search.'

        if down:
            script.append(op_insert(prev_y, B[prev_y]))
        else:
            script.append(op_delete(prev_x, A[prev_x]))
        x, y = prev_x, prev_y

    # What remains is the snake of the 0-path, starting at the origin
    assert x == y, 'Backtracking ended off the main diagonal.'
    while x > 0:
        x -= 1
        y -= 1
        script.append(op_keep(x, y, A[x]))

    script.reverse()
    return script


def diff_sequence_myers(A, B, compare=operator.__eq__, max_distance=None):
    """Compute the edit script of A and B using Myers' O(ND) algorithm."""
    D, trace = search(A, B, compare, max_distance)
    debug("Myers search found %d edits between sequences of length %d and %d.",
          D, len(A), len(B))
    return reconstruct(A, B, trace, D, compare)
