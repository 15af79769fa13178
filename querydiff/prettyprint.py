# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import sys

import colorama

from .edit_format import EditOp, count_ops
from .log import EditScriptFormatError


# Indentation of nested dict levels
IND = "  "


# Line prefixes for each kind of output line, and the code ending a line
LinePrefixes = namedtuple('LinePrefixes', ('KEEP', 'DELETE', 'INSERT', 'INFO', 'RESET'))


line_prefixes = {
    True: LinePrefixes(
        KEEP=IND,
        DELETE=colorama.Fore.RED + '- ',
        INSERT=colorama.Fore.GREEN + '+ ',
        INFO=colorama.Fore.BLUE + colorama.Style.BRIGHT + '## ',
        RESET=colorama.Style.RESET_ALL,
    ),
    False: LinePrefixes(
        KEEP=IND,
        DELETE='- ',
        INSERT='+ ',
        INFO='## ',
        RESET='',
    ),
}


class PrettyPrintConfig:
    """Where and how to print.

    out is anything with a write method, use_color switches ANSI color
    escapes on or off.
    """
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def prefixes(self):
        return line_prefixes[bool(self.use_color)]

    def prefix(self, op):
        "Line prefix for an edit entry with the given op."
        if op not in EditOp.ALL:
            raise EditScriptFormatError("Unknown edit op {}".format(op))
        return getattr(self.prefixes, op.upper())


DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if not os.path.exists(filename):
        return "(no timestamp)"
    mtime = datetime.datetime.fromtimestamp(os.path.getmtime(filename))
    return mtime.isoformat(" ")


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict as sorted "key: value" lines.

    Nested dicts are printed below their key, one level further in.
    Values are printed with str, callers format them first.
    """
    for k in sorted(d):
        v = d[k]
        if isinstance(v, dict):
            config.out.write("%s%s:\n" % (prefix, k))
            pretty_print_dict(v, prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_script(script, config=DefaultConfig):
    "Pretty-print an edit script, one token per line."
    reset = config.prefixes.RESET
    for e in script:
        config.out.write("%s%s%s\n" % (config.prefix(e.op), e.token, reset))


def pretty_print_summary(script, config=DefaultConfig):
    "Print the number of deleted, inserted and unchanged tokens."
    counts = count_ops(script)
    config.out.write("%s%d deleted, %d inserted, %d unchanged%s\n" % (
        config.prefixes.INFO, counts[EditOp.DELETE], counts[EditOp.INSERT],
        counts[EditOp.KEEP], config.prefixes.RESET))


query_diff_header = """\
querydiff {afn} {bfn}
--- {afn}  {atime}
+++ {bfn}  {btime}
"""


def pretty_print_query_diff(afn, bfn, script, config=DefaultConfig):
    """Pretty-print a query diff

    Parameters
    ----------

    afn: str
        Filename of the expected query
    bfn: str
        Filename of the actual query
    script: list
        The edit script describing the transformation from the expected
        to the actual query
    config: PrettyPrintConfig
        Config object determining how and where the diff is printed

    Nothing is printed when the script has no inserts or deletes.
    """
    if all(e.op == EditOp.KEEP for e in script):
        return
    config.out.write(query_diff_header.format(
        afn=afn, bfn=bfn, atime=file_timestamp(afn), btime=file_timestamp(bfn)))
    pretty_print_script(script, config)
    pretty_print_summary(script, config)
