from datetime import datetime, timedelta

import pytest


class FakeClock:
    """Manually advanced clock for time-dependent tests"""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, milliseconds: int):
        self.now += timedelta(milliseconds=milliseconds)


@pytest.fixture
def clock():
    return FakeClock()
