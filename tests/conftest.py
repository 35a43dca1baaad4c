"""Shared fixtures for tiny-qreg tests."""

import pytest


class FixedSource:
    """Uniform source that replays preset values and counts draws."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)


@pytest.fixture
def fixed_source():
    return FixedSource
