# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing.comparing import get_predicate
from .edit_format import edit_distance
from .log import InvalidInputError, ResourceLimitExceeded, error
from .prettyprint import pretty_print_query_diff
from .queries import diff_queries
from .utils import read_query, setup_std_streams


_description = "Compute the difference between two GraphQL queries."


def main_diff(args):
    """Main handler of diff CLI

    Returns 0 if the queries are equal, 1 if they differ
    and 2 if they could not be diffed.
    """
    output = getattr(args, 'out', None)
    expected_fn = args.expected
    actual_fn = args.actual

    for fn in (expected_fn, actual_fn):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 2

    try:
        script = diff_queries(
            read_query(expected_fn),
            read_query(actual_fn),
            compare=get_predicate(args.compare),
            max_distance=args.max_distance,
            ignore_operation_header=not args.compare_operation_header,
            algorithm=args.algorithm,
        )
    except ResourceLimitExceeded as e:
        error("Queries are too different to diff: %s", e)
        return 2
    except InvalidInputError as e:
        error("Cannot diff %s and %s: %s", expected_fn, actual_fn, e)
        return 2

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "w") as df:
            json.dump(script, df, indent=2, separators=(",", ": "))
    else:
        # Goes through print so the sys.stdout current at write time is used,
        # e.g. the one installed by capsys
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_query_diff(expected_fn, actual_fn, script, config)

    return 1 if edit_distance(script) else 0


def _build_arg_parser(prog="querydiff"):
    """Creates an argument parser for the querydiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["expected", "actual"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the edit script is written to this file as json. "
             "Otherwise the diff is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
