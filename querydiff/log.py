# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class QueryDiffError(Exception):
    pass


class InvalidInputError(QueryDiffError, ValueError):
    """Raised when the sequences or options passed to a diff are malformed."""
    pass


class EditScriptFormatError(QueryDiffError, ValueError):
    pass


class ResourceLimitExceeded(QueryDiffError, RuntimeError):
    """Raised when no edit script of at most `max_distance` edits exists.

    This is a recoverable failure: the caller may retry with a higher
    limit or report the inputs as too different to diff.
    """
    def __init__(self, max_distance, len_a, len_b):
        self.max_distance = max_distance
        self.len_a = len_a
        self.len_b = len_b
        super(ResourceLimitExceeded, self).__init__(
            "Shortest edit script length exceeds {} (sequence lengths {} and {}).".format(
                max_distance, len_a, len_b))


def init_logging(level=logging.INFO):
    """Sets up logging for querydiff entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all querydiff loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_querydiff_log_level(level, set_main=True):
    """Set a log level for querydiff loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('querydiff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
