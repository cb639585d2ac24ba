import pytest

import app as app_module
from meeting_engines.feedback import Feedback
from meeting_engines.session import MeetingSession
from meeting_engines.storage import MemoryStorage


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def session(storage, clock):
    return MeetingSession(storage, feedback=Feedback(seconds=3, clock=clock))


@pytest.fixture
def client(session):
    """Flask test client bound to an in-memory session."""
    app_module.STATE.clear()
    app_module.STATE.update({'session': session, 'loaded': True})
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as c:
        yield c
    app_module.STATE.clear()
    app_module.STATE.update({'session': None, 'loaded': False})
