#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

QUERYDIFF_PATH = HERE / "querydiff"


def get_version(fpath):
    with open(fpath) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    return match.group(1)


VERSION = get_version(QUERYDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='querydiff',
      version=VERSION,
      description='Minimal line diffs of GraphQL queries',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(include=['querydiff', 'querydiff.*']),
      package_data={
          'querydiff.tests': ['files/*'],
      },
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'graphql-core>=3.2',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'querydiff = querydiff.querydiffapp:main',
          ],
      },
      )
