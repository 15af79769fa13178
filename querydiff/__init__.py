# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_sequence
from .edit_format import EditOp
from .log import InvalidInputError, ResourceLimitExceeded, EditScriptFormatError
from .patching import apply_script


__all__ = [
    "__version__",
    "diff", "diff_sequence",
    "apply_script",
    "EditOp",
    "InvalidInputError", "ResourceLimitExceeded", "EditScriptFormatError",
    ]
