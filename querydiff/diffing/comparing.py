# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Equality predicates for sequence diffs.

A predicate decides when two tokens are the same. It must be pure and
give the same answer for the same pair during a whole diff. Tolerance for
e.g. renamed variables belongs in a predicate, not in the diff algorithm.
"""

import operator

from ..log import InvalidInputError

__all__ = ["compare_exact", "compare_strings_stripped", "predicates", "get_predicate"]


compare_exact = operator.__eq__


def compare_strings_stripped(x, y):
    "Compare strings ignoring leading and trailing whitespace, anything else with ==."
    if isinstance(x, str) and isinstance(y, str):
        return x.strip() == y.strip()
    return x == y


predicates = {
    "exact": compare_exact,
    "stripped": compare_strings_stripped,
}


def get_predicate(name):
    try:
        return predicates[name]
    except KeyError:
        raise InvalidInputError('Unknown compare predicate %r. Valid values are %r.' % (
            name, sorted(predicates.keys())))
