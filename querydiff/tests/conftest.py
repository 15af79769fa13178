# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import random

from pytest import fixture, skip

import querydiff.config


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def rng(request):
    "Random generator seeded from --seed, so failures can be reproduced."
    return random.Random(request.config.getoption("--seed", default=1234))


@fixture(autouse=True)
def isolated_config(tmpdir, monkeypatch):
    """Keep config files on the test machine out of the tests.

    Runs every test from an empty working directory with an empty
    Jupyter config path, and with fresh config class instances.
    """
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter_config')))
    monkeypatch.setenv('JUPYTER_CONFIG_PATH', '')
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    monkeypatch.chdir(str(tmpdir))
    querydiff.config._config_cache.clear()
    yield
    querydiff.config._config_cache.clear()
