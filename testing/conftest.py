import pytest
import pytest_asyncio


class TeardownProbe:

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest_asyncio.fixture(scope="session")
def event_loop_policy():
    import uvloop
    return uvloop.EventLoopPolicy()


@pytest.fixture
def teardown():
    return TeardownProbe()
