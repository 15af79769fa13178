# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator
from collections.abc import Sequence

from ..log import InvalidInputError, debug
from .seq_bruteforce import diff_sequence_bruteforce
from .seq_myers import diff_sequence_myers

__all__ = ["diff", "diff_sequence", "validate_diff_args"]


# legal_diff_sequence_algorithms = ["bruteforce", "myers"]
diff_sequence_algorithm = "myers"


def validate_diff_args(a, b, compare, max_distance):
    """Check the arguments of a diff before doing any work.

    Raises an InvalidInputError if a or b is not an ordered sequence,
    if either holds an undefined (None) token, if compare is not callable,
    or if max_distance is not a non-negative integer.
    """
    for name, seq in (("a", a), ("b", b)):
        # Sets, mappings and iterators have no stable order to diff
        if not isinstance(seq, Sequence):
            raise InvalidInputError(
                "Argument {} must be an ordered sequence, not {}.".format(
                    name, type(seq).__name__))
        for i, token in enumerate(seq):
            if token is None:
                raise InvalidInputError(
                    "Token {} of argument {} is undefined.".format(i, name))
    if not callable(compare):
        raise InvalidInputError("Compare predicate {!r} is not callable.".format(compare))
    if max_distance is not None:
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise InvalidInputError(
                "max_distance must be an integer, not {!r}.".format(max_distance))
        if max_distance < 0:
            raise InvalidInputError(
                "max_distance must be non-negative, not {}.".format(max_distance))


def diff_sequence(a, b, compare=operator.__eq__, max_distance=None, algorithm=None):
    """Compute a shallow diff of two sequences.

    I.e. these algorithms do not recursively diff elements of the sequences.

    This is a wrapper for alternative diff implementations.
    """
    if algorithm is None:
        algorithm = diff_sequence_algorithm
    validate_diff_args(a, b, compare, max_distance)
    debug("Diffing sequences of length %d and %d using %s.", len(a), len(b), algorithm)
    if algorithm == "myers":
        return diff_sequence_myers(a, b, compare, max_distance)
    elif algorithm == "bruteforce":
        return diff_sequence_bruteforce(a, b, compare, max_distance)
    else:
        raise RuntimeError("Unknown diff_sequence_algorithm {}.".format(algorithm))


def diff(a, b, compare=operator.__eq__, max_distance=None):
    """Compute the shortest edit script turning sequence a into sequence b.

    Parameters
    ----------

    a, b: Sequence
        The token sequences to compare. Tokens are opaque to the diff,
        only compare looks at them.
    compare: callable
        Equality predicate compare(token_a, token_b) -> bool. Exceptions
        raised by it are not caught.
    max_distance: int or None
        Fail rather than search for scripts with more edits than this.

    Returns a list of edit entries with op "keep", "insert" or "delete".

    Raises InvalidInputError for malformed arguments, and
    ResourceLimitExceeded if more than max_distance edits are needed.
    """
    return diff_sequence(a, b, compare=compare, max_distance=max_distance, algorithm="myers")
