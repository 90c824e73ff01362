"""
Shared test helpers.
"""

import pytest


class FixedRandom:
    """Random source that always draws the same value"""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for random sources pinned to one draw"""
    return FixedRandom
