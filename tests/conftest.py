"""Pytest fixtures for Hebrew Tones tests."""

from pathlib import Path

import pytest

from hebrew_tones.config import Settings, configure


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function()


class FakeOutput:
    """Records emissions instead of playing them."""

    def __init__(self, available: bool = True):
        self.available = available
        self.unavailable_reason = None if available else "no device"
        self.volume = 1.0
        self.emitted: list[tuple[float, float, float]] = []

    def set_volume(self, volume: float) -> None:
        self.volume = volume

    def emit(self, frequency: float, duration: float, amplitude: float) -> bool:
        if not self.available:
            return False
        self.emitted.append((frequency, duration, amplitude))
        return True


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Return fresh settings with output under tmp_path."""
    return configure(output_dir=tmp_path / "output")


@pytest.fixture
def genesis_text() -> str:
    """Genesis 1:1 with vowel points."""
    return "בְּרֵאשִׁית בָּרָא אֱלֹהִים אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ"


@pytest.fixture
def timers() -> list[FakeTimer]:
    """List collecting every FakeTimer created through ``timer_factory``."""
    return []


@pytest.fixture
def timer_factory(timers: list[FakeTimer]):
    def factory(interval, function):
        timer = FakeTimer(interval, function)
        timers.append(timer)
        return timer

    return factory


@pytest.fixture
def fake_output() -> FakeOutput:
    return FakeOutput()
