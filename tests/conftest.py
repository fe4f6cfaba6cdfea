import pytest


class FakeSource:
    """Deterministic stand-in for SecureRandomSource."""

    def __init__(self, picks=(0,), shuffle=None):
        self.picks = list(picks)
        self.draws = 0
        self.shuffles = 0
        self._shuffle = shuffle

    def randbelow(self, n):
        value = self.picks[self.draws % len(self.picks)] % n
        self.draws += 1
        return value

    def shuffle(self, items):
        self.shuffles += 1
        if self._shuffle:
            self._shuffle(items)


class BrokenSource:
    def __init__(self):
        self.draws = 0

    def randbelow(self, n):
        self.draws += 1
        raise OSError("entropy source unavailable")

    def shuffle(self, items):
        raise AssertionError("shuffle should not be reached")


@pytest.fixture
def fake_source():
    return FakeSource


@pytest.fixture
def broken_source():
    return BrokenSource()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("RULEPASS_CONFIG_DIR", str(tmp_path))
    return tmp_path
