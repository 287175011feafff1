from pathlib import Path
import pytest
from passprovider.lib.clipboard import ClipboardSession, ClipboardError
from passprovider.lib.secret import SecretText
from passprovider.lib.store import PasswordEntry, EntryNotFound, DecryptError, StoreError


class FakeStore:
    """In-memory stand-in for PasswordStore; `secrets` maps name -> text or exception."""

    def __init__(self, secrets=None, broken=False):
        self.secrets = dict(secrets or {})
        self.broken = broken
        self.handed_out = []

    def list_entries(self):
        if self.broken:
            raise StoreError('store unavailable')
        return [PasswordEntry(name, Path(name + '.gpg')) for name in self.secrets]

    def read_secret(self, name):
        if name not in self.secrets:
            raise EntryNotFound(name)
        value = self.secrets[name]
        if isinstance(value, Exception):
            raise value
        secret = SecretText(value)
        self.handed_out.append(secret)
        return secret


class FakeClipboard:
    def __init__(self, fail=False):
        self.value = None
        self.writes = []
        self.fail = fail

    def __call__(self, text):
        if self.fail:
            raise RuntimeError('no display')
        self.writes.append(text)
        self.value = text


class ManualScheduler:
    """Collects deferred actions so tests decide when they fire."""

    def __init__(self):
        self.pending = []

    def schedule(self, delay, action):
        self.pending.append((delay, action))
        return len(self.pending) - 1

    def fire(self, index):
        _delay, action = self.pending[index]
        return action()

    def fire_all(self):
        return [action() for _delay, action in self.pending]


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def notify(self, summary, body):
        self.sent.append((summary, body))
        return True


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clipboard, scheduler, clock):
    return ClipboardSession(set_text=clipboard, scheduler=scheduler, delay=40, clock=clock)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_store():
    return FakeStore
