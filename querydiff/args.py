# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
    Global, Diff,
)
from .diffing.comparing import predicates
from .log import init_logging, set_querydiff_log_level


def _trait(cls, name):
    return cls.class_traits()[name]


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the querydiff config.

    The config is looked up by the first word of the program name.
    Programs without a registered config keep the argparse defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default='INFO', **kwargs):
        # Only called when the option is given, so set up logging here
        level = getattr(logging, default)
        init_logging(level=level)
        set_querydiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_querydiff_log_level(getattr(logging, values), True)


def format_config_value(value):
    """Render config values as they would be written in a config file.

    Nested dicts are rendered item by item, unset values as '<unset>'.
    """
    if isinstance(value, dict):
        return {k: format_config_value(v) for k, v in value.items()} or '{}'
    if value is None:
        return '<unset>'
    return json.dumps(value)


class ConfigHelpAction(argparse.Action):
    "Print the effective config of the program to stderr, then exit."

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        section = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, include_none=True)
        pretty_print_dict(
            {section: format_config_value(config)},
            config=PrettyPrintConfig(out=sys.stderr, use_color=False),
        )
        parser.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all querydiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    log_level = _trait(Global, 'log_level')
    parser.add_argument(
        '--log-level',
        default=log_level.default_value,
        choices=log_level.values,
        help=log_level.help,
        action=LogLevelAction,
    )


def non_negative_int(value):
    try:
        n = int(value)
    except ValueError:
        n = -1
    if n < 0:
        raise argparse.ArgumentTypeError("%r is not a non-negative integer" % (value,))
    return n


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.

    Defaults and help texts are those of the Diff config.
    """
    parser.add_argument(
        '--max-distance',
        type=non_negative_int,
        default=None,
        help=_trait(Diff, 'max_distance').help)
    parser.add_argument(
        '--compare',
        default='exact',
        choices=sorted(predicates.keys()),
        help=_trait(Diff, 'compare').help)
    parser.add_argument(
        '--algorithm',
        default='myers',
        choices=_trait(Diff, 'algorithm').values,
        help=_trait(Diff, 'algorithm').help)
    parser.add_argument(
        '--compare-operation-header',
        action='store_true',
        default=False,
        help=_trait(Diff, 'compare_operation_header').help)


filename_help = {
    "expected": "The expected query filename.",
    "actual":   "The actual query filename.",
    }


def add_filename_args(parser, names):
    """Add the expected and actual positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="prevent use of ANSI color code escapes for text output",
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
