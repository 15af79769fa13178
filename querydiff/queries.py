# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Turning GraphQL query documents into token sequences for diffing.

Queries are parsed and printed back with graphql-core, so that formatting
differences (indentation, commas, line breaks) do not show up in the diff.
Each line of the printed query is one token.
"""

import operator

from graphql import GraphQLError, parse, print_ast
from graphql.language import OperationDefinitionNode

from .diffing.sequences import diff_sequence
from .edit_format import EditEntry, op_keep
from .log import InvalidInputError, debug

__all__ = ["parse_query", "query_lines", "operation_type", "tokenize_query", "diff_queries"]


def parse_query(text):
    "Parse query text to a graphql-core document."
    try:
        return parse(text)
    except GraphQLError as e:
        raise InvalidInputError("Invalid query: {}".format(e)) from e


def query_lines(document):
    "The lines of the normalized rendering of a parsed document."
    return print_ast(document).split("\n")


def tokenize_query(text):
    return query_lines(parse_query(text))


def operation_type(document):
    """Return "query", "mutation" or "subscription" for the first definition.

    Returns None if the document starts with something other than an
    operation, e.g. a fragment definition.
    """
    if not document.definitions:
        return None
    definition = document.definitions[0]
    if isinstance(definition, OperationDefinitionNode):
        return definition.operation.value
    return None


def _shifted(e, n):
    "Copy of entry e with both indices moved n places on."
    return EditEntry(
        e,
        a_index=None if e.a_index is None else e.a_index + n,
        b_index=None if e.b_index is None else e.b_index + n,
    )


def diff_queries(expected, actual, compare=operator.__eq__, max_distance=None,
                 ignore_operation_header=True, algorithm=None):
    """Compute the line based edit script between two query texts.

    If ignore_operation_header is set and both queries start with an
    operation of the same type, the first line holding the operation
    name and variables is left out of the diff and reported as kept,
    showing the header of the expected query.
    """
    a_doc = parse_query(expected)
    b_doc = parse_query(actual)
    a = query_lines(a_doc)
    b = query_lines(b_doc)

    a_type = operation_type(a_doc)
    skip = 0
    if ignore_operation_header and a_type is not None and a_type == operation_type(b_doc):
        debug("Both queries are %s operations, ignoring the header line.", a_type)
        skip = 1

    script = diff_sequence(a[skip:], b[skip:], compare=compare,
                           max_distance=max_distance, algorithm=algorithm)
    if skip:
        script = [op_keep(0, 0, a[0])] + [_shifted(e, skip) for e in script]
    return script
