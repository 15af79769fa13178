# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.comparing import predicates


CONFIG_BASENAME = 'querydiff_config'


class QueryDiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        "Current values of the config traits defined on cls itself."
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_config_cache = {}
def config_instance(cls):
    if cls not in _config_cache:
        _config_cache[cls] = cls()
    return _config_cache[cls]


def config_search_path():
    """Directories searched for config files, highest priority first.

    The working directory goes before the Jupyter config path.
    """
    return [os.getcwd()] + jupyter_config_path()


def recursive_update(target, new, include_none):
    """Merge dict new into target, descending into nested dicts.

    Unless include_none is set, None values remove their key from
    target, and nested dicts that end up empty are removed too.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            recursive_update(sub, value, include_none)
            if not include_none and not sub:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def load_disk_config(path=None, include_none=False):
    """Merge all config files named querydiff_config.json found on path.

    Files in directories earlier in path win.
    """
    if path is None:
        path = config_search_path()
    merged = {}
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        recursive_update(merged, config, include_none)
    return merged


def build_config(entrypoint, include_none=False):
    """Effective config of an entry point, as a flat dict of trait values.

    Walks the configurable classes of the entry point from the most
    generic one down. Each class contributes its trait defaults, then
    the config file section named after the class.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError('No config is defined for entry point %r. Accepted values are %r.' % (
            entrypoint, sorted(entrypoint_configurables)))

    disk_config = load_disk_config(include_none=include_none)
    config = {}
    for cls in reversed(entrypoint_configurables[entrypoint].mro()):
        if not issubclass(cls, QueryDiffConfigurable):
            continue
        recursive_update(config, config_instance(cls).configured_traits(cls), include_none)
        recursive_update(config, disk_config.get(cls.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(QueryDiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(QueryDiffConfigurable):

    max_distance = Integer(
        None,
        allow_none=True,
        min=0,
        help="give up on queries needing more than this many inserted "
             "and deleted lines. Default is no limit.",
    ).tag(config=True)

    compare = Enum(
        tuple(sorted(predicates.keys())),
        'exact',
        help="the predicate deciding when two query lines are equal.",
    ).tag(config=True)

    algorithm = Enum(
        ('myers', 'bruteforce'),
        'myers',
        help="the sequence diff algorithm to use.",
    ).tag(config=True)

    compare_operation_header = Bool(
        False,
        help="include the operation header line (name and variables) in "
             "the diff even when both queries have the same operation type.",
    ).tag(config=True)


class PrettyPrint(QueryDiffConfigurable):

    use_color = Bool(
        True,
        help="whether to use ANSI color code escapes for text output.",
    ).tag(config=True)


class QueryDiff(Global, Diff, PrettyPrint):
    pass


entrypoint_configurables = {
    'querydiff': QueryDiff,
}
