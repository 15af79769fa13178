# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

# Read by setup.py with a regular expression, keep the quoting as is
__version__ = "0.3.0"
