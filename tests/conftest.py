import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from catdash.audio.synth import WaveType  # noqa: E402
from catdash.core.events import EventBus  # noqa: E402
from catdash.game.session import Session  # noqa: E402
from catdash.settings import Settings  # noqa: E402


class FakeToneOutput:
    """Records tones instead of playing them."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.tones: list[tuple[float, WaveType, float]] = []
        self.resumes = 0

    def play_tone(self, frequency: float, wave: WaveType, duration: float) -> None:
        if self.fail:
            raise RuntimeError("no audio device")
        self.tones.append((frequency, wave, duration))

    def resume(self) -> None:
        if self.fail:
            raise RuntimeError("no audio device")
        self.resumes += 1

    def count(self, frequency: float) -> int:
        return sum(1 for tone in self.tones if tone[0] == frequency)


class NeverSpawn:
    """Spawn policy that keeps the field empty."""

    def should_spawn(self, obstacle_field) -> bool:
        return False

    def on_spawn(self, obstacle_field) -> None:
        pass

    def reset(self) -> None:
        pass


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def tones() -> FakeToneOutput:
    return FakeToneOutput()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def session(settings, tones, bus, rng) -> Session:
    return Session(settings=settings, audio=tones, event_bus=bus, rng=rng)


@pytest.fixture
def quiet_session(session) -> Session:
    """Session whose obstacle field never spawns."""
    session.obstacles.policy = NeverSpawn()
    return session
