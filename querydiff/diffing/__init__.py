# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .sequences import diff, diff_sequence
from .seq_myers import search, reconstruct

__all__ = ["diff", "diff_sequence", "search", "reconstruct"]
