import pytest


def pytest_addoption(parser):
    group = parser.getgroup("querydiff")
    group.addoption("--quick", action="store_true", default=False,
                    help="skip the exhaustive sequence diff tests")
    group.addoption("--slow", action="store_true", default=False,
                    help="run only the exhaustive sequence diff tests")
    group.addoption("--seed", type=int, default=1234,
                    help="seed for the randomized diff property tests")


def pytest_report_header(config):
    return "querydiff random seed: %d" % config.getoption("--seed")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    # Exhaustive tests are the ones requesting the 'slow' fixture
    skip_quick = pytest.mark.skip(reason="--slow given, skipping quick tests")
    for item in items:
        if 'slow' not in item.fixturenames:
            item.add_marker(skip_quick)
