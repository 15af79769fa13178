# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

import colorama

from .log import InvalidInputError


def read_query(f):
    """Read and return query text from filename

    Parameters:
        f:  The filename to read from.
            Alternatively a file-like object can be passed.

    A JSON document with a top level "query" string, as posted to a
    GraphQL endpoint, gives that string. Any other content is taken
    to be the query text itself.

    Files that cannot be read or decoded as UTF-8 raise an InvalidInputError.
    """
    name = f if isinstance(f, str) else getattr(f, 'name', repr(f))
    try:
        if isinstance(f, str):
            with io.open(f, encoding='utf-8') as fo:
                text = fo.read()
        else:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError('Cannot read query file %s: %s' % (name, e)) from e

    try:
        body = json.loads(text)
    except ValueError:
        return text
    if isinstance(body, dict) and isinstance(body.get('query'), str):
        return body['query']
    raise InvalidInputError(
        'JSON file %s does not hold a "query" string.' % (name,))


def setup_std_streams():
    """Setup sys.stdout/err for printing query diffs.

    Query text may hold characters the terminal encoding cannot show,
    e.g. in string arguments. Those are escaped instead of raising.
    Also enables colorama for ANSI escapes on Windows.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            # Leave captured or redirected streams alone
            if stream is getattr(sys, '__%s__' % name) and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    # After any stream changes, which would undo the colorama wrapping
    if sys.platform.startswith('win'):
        colorama.init()
