import os

import pytest

from keycue import strings


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required"):
        if not os.getenv("PYQT_TESTS"):
            pytest.skip("PYQT_TESTS not set; skipping PyQt-dependent test")


@pytest.fixture(autouse=True)
def default_strings():
    """Run every test against the English defaults on a non-Mac keyboard."""

    saved = strings.snapshot()
    strings.PLATFORM.value = "other"
    yield
    strings.restore(saved)
