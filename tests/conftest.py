"""Shared fixtures: scripted randomness, a fake clock, headless pygame."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402


class ScriptedSource:
    """Integer source that replays a fixed sequence, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def integers(self, low, high):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert low <= value < high
        return value


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def clock():
    return FakeClock()
