import os.path

import pytest

_dir = os.path.abspath(os.path.dirname(__file__))
_testdata = os.path.join(_dir, "testdata")


def pytest_configure(config):
    if not os.path.exists(_testdata):
        pytest.exit("testdata not available! The .dat files are expected in %s" % _testdata)
