import pygame

from catdash.core.state import GamePhase
from catdash.desktop.window import GameWindow
from catdash.game.session import FRAME_MS


def test_step_is_idle_until_start(quiet_session):
    window = GameWindow(quiet_session)
    assert window.step(FRAME_MS) is False
    assert quiet_session.phase == GamePhase.IDLE


def test_enter_starts_with_zero_length_frame(quiet_session):
    window = GameWindow(quiet_session)
    window.keyboard.press(pygame.K_RETURN)

    assert window.step(FRAME_MS) is True

    assert quiet_session.phase == GamePhase.PLAYING
    assert quiet_session.score == 0.0
    assert quiet_session.last_elapsed_ms == 0.0


def test_space_jumps_while_playing(quiet_session):
    window = GameWindow(quiet_session)
    window.keyboard.press(pygame.K_RETURN)
    window.step(FRAME_MS)

    window.keyboard.press(pygame.K_SPACE)
    window.step(FRAME_MS)

    assert not quiet_session.player.grounded


def test_hud_follows_session_events(quiet_session):
    window = GameWindow(quiet_session)
    quiet_session.start()
    for _ in range(22):
        quiet_session.tick(FRAME_MS)
    assert window._score_text == "00003"

    quiet_session.game_over()
    assert window._final_score == 3

    quiet_session.restart()
    assert window._final_score is None


def test_jump_held_through_start_plays_one_cue(quiet_session, tones):
    window = GameWindow(quiet_session)
    window.keyboard.press(pygame.K_SPACE)
    window.keyboard.press(pygame.K_RETURN)

    window.step(FRAME_MS)
    assert quiet_session.player.grounded
    assert tones.count(600.0) == 0

    window.step(FRAME_MS)
    assert not quiet_session.player.grounded
    assert tones.count(600.0) == 1
