# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..edit_format import EditScriptBuilder


def script_from_lcs(A, B, A_indices, B_indices):
    """Compute the edit script of A and B, given indices of their lcs."""
    builder = EditScriptBuilder()
    N, M = len(A), len(B)
    llcs = len(A_indices)
    assert llcs == len(B_indices)
    # builder.x, builder.y = how many symbols we have consumed from A and B
    for r in range(llcs):
        i = A_indices[r]
        j = B_indices[r]
        # Deletes before inserts between two common items
        builder.delete(A, i - builder.x)
        builder.insert(B, j - builder.y)
        builder.keep(A)
    builder.delete(A, N - builder.x)
    builder.insert(B, M - builder.y)
    return builder.validated()
