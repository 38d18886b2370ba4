import pytest

from catdash.core.events import EventType
from catdash.core.state import GamePhase
from catdash.game.input import InputState, Intent
from catdash.game.obstacles import Obstacle
from catdash.game.session import FRAME_MS, Session, dt_factor, format_score

from conftest import FakeToneOutput, NeverSpawn

SCORE_HZ = 1200.0
JUMP_HZ = 600.0
DEATH_HZ = 150.0


def place_obstacle_on_player(session):
    size = session.settings.spawn.obstacle_size
    session.obstacles.obstacles.append(
        Obstacle(x=session.player.x, y=session.ground_y - size, width=size, height=size)
    )


def run_until(session, target_score, elapsed_sequence):
    i = 0
    while session.score < target_score:
        assert session.tick(elapsed_sequence[i % len(elapsed_sequence)])
        i += 1


def test_dt_factor():
    assert dt_factor(FRAME_MS) == pytest.approx(1.0)
    assert dt_factor(FRAME_MS / 2) == pytest.approx(0.5)
    assert dt_factor(-5) == 0.0
    assert dt_factor(1000) == pytest.approx(6.0)


def test_format_score():
    assert format_score(0) == "00000"
    assert format_score(123.9) == "00123"
    assert format_score(99999.5) == "99999"


def test_idle_is_inert(session):
    assert session.phase == GamePhase.IDLE
    assert session.tick(FRAME_MS) is False
    assert session.score == 0.0
    assert not session.frame_requested
    assert len(session.obstacles) == 0


def test_start(session, tones, bus):
    session.score = 42.0
    session.speed = 9.0
    session.backdrop.clouds.append(object())

    assert session.start() is True

    assert session.phase == GamePhase.PLAYING
    assert session.frame_requested
    assert session.score == 0.0
    assert session.speed == session.settings.speed.initial
    assert session.backdrop.entities == []
    assert session.player.grounded
    assert tones.resumes == 1

    phase_events = bus.get_history(EventType.PHASE_CHANGED)
    assert phase_events[-1].data == {"old": GamePhase.IDLE, "new": GamePhase.PLAYING}
    assert bus.get_history(EventType.SCORE_CHANGED)[-1].data["text"] == "00000"


def test_start_while_playing_is_ignored(session):
    session.start()
    session.tick(FRAME_MS)
    score = session.score
    assert session.start() is False
    assert session.score == score


def test_score_increases_strictly_while_playing(quiet_session):
    quiet_session.start()
    previous = quiet_session.score
    for elapsed in (16.7, 5.0, 33.3, 1.0, 100.0, 250.0):
        quiet_session.tick(elapsed)
        assert quiet_session.score > previous
        previous = quiet_session.score


def test_score_rate(quiet_session):
    quiet_session.start()
    for _ in range(10):
        quiet_session.tick(FRAME_MS)
    assert quiet_session.score == pytest.approx(10 * quiet_session.settings.speed.score_rate)


def test_speed_increases_and_caps(quiet_session):
    quiet_session.start()
    quiet_session.tick(FRAME_MS)
    assert quiet_session.speed == pytest.approx(6.0 + 0.001)

    quiet_session.speed = 14.9995
    quiet_session.tick(FRAME_MS)
    quiet_session.tick(FRAME_MS)
    assert quiet_session.speed == 15.0


@pytest.mark.parametrize("elapsed_sequence", [
    [FRAME_MS],
    [5.0, 50.0, 33.0],
    [100.0],
    [1.0, 2.0, 97.0, 16.0],
])
def test_milestone_fires_once_per_crossing(quiet_session, tones, bus, elapsed_sequence):
    quiet_session.start()

    run_until(quiet_session, 150, elapsed_sequence)
    assert tones.count(SCORE_HZ) == 1

    run_until(quiet_session, 250, elapsed_sequence)
    assert tones.count(SCORE_HZ) == 2
    assert len(bus.get_history(EventType.MILESTONE)) == 2


def test_collision_ends_game(session, tones, bus):
    session.obstacles.policy = NeverSpawn()
    session.start()
    for _ in range(20):
        session.tick(FRAME_MS)
    place_obstacle_on_player(session)
    score_before = session.score

    assert session.tick(FRAME_MS) is True

    assert session.phase == GamePhase.OVER
    assert not session.frame_requested
    assert session.final_score == int(score_before)
    assert tones.count(DEATH_HZ) == 1
    assert bus.get_history(EventType.GAME_OVER)[-1].data == {"final_score": session.final_score}


def test_over_is_frozen(session):
    session.obstacles.policy = NeverSpawn()
    session.start()
    place_obstacle_on_player(session)
    session.tick(FRAME_MS)
    assert session.phase == GamePhase.OVER

    score = session.score
    for _ in range(10):
        assert session.tick(FRAME_MS) is False
    assert session.score == score


def test_restart_after_game_over(session, tones):
    session.obstacles.policy = NeverSpawn()
    session.start()
    for _ in range(30):
        session.tick(FRAME_MS)
    place_obstacle_on_player(session)
    session.tick(FRAME_MS)

    assert session.restart() is True

    assert session.phase == GamePhase.PLAYING
    assert session.score == 0.0
    assert len(session.obstacles) == 0
    assert session.final_score is None
    assert tones.resumes == 2


def test_start_intent(session):
    assert session.handle_input(InputState.of(Intent.START)) is True
    assert session.phase == GamePhase.PLAYING
    assert session.handle_input(InputState.of(Intent.START)) is False


def test_jump_plays_cue(quiet_session, tones, bus):
    quiet_session.start()
    quiet_session.tick(FRAME_MS, InputState.of(Intent.JUMP))

    assert tones.count(JUMP_HZ) == 1
    assert len(bus.get_history(EventType.JUMP)) == 1
    assert not quiet_session.player.grounded


def test_input_provider_is_polled(settings, rng):
    class HoldJump:
        def sample(self):
            return InputState.of(Intent.JUMP)

    session = Session(settings=settings, rng=rng, input_provider=HoldJump())
    session.obstacles.policy = NeverSpawn()
    session.start()
    session.tick(FRAME_MS)
    assert not session.player.grounded


def test_broken_audio_never_breaks_gameplay(settings, rng):
    session = Session(settings=settings, audio=FakeToneOutput(fail=True), rng=rng)
    session.obstacles.policy = NeverSpawn()

    assert session.start()
    assert session.tick(FRAME_MS, InputState.of(Intent.JUMP))
    place_obstacle_on_player(session)
    session.player.reset()
    session.tick(FRAME_MS)
    assert session.phase == GamePhase.OVER


def test_session_without_audio(settings, rng):
    session = Session(settings=settings, rng=rng)
    session.start()
    assert session.tick(FRAME_MS)


def test_backdrop_does_not_affect_game_state(settings):
    import random

    with_scenery = Session(settings=settings, rng=random.Random(5))
    without = Session(settings=settings, rng=random.Random(5))
    without.backdrop.settings = settings.backdrop.model_copy(
        update={"cloud_chance": 0.0, "tree_chance": 0.0}
    )
    for s in (with_scenery, without):
        s.obstacles.policy = NeverSpawn()
        s.start()
        for _ in range(300):
            s.tick(FRAME_MS)

    assert with_scenery.score == without.score
    assert with_scenery.speed == without.speed
    assert with_scenery.player.y == without.player.y


def test_score_events_are_zero_padded(quiet_session, bus):
    quiet_session.start()
    for _ in range(110):
        quiet_session.tick(FRAME_MS)
    event = bus.get_history(EventType.SCORE_CHANGED)[-1]
    assert event.data == {"score": 16, "text": "00016"}
