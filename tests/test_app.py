import pytest

from yorutris.app import Screen, Trigger, next_screen


def test_trigger_waits_for_interval():
    trigger = Trigger(interval=0.5)
    assert trigger.ready(0.2) is False
    assert trigger.ready(0.5) is True
    assert trigger.last_time == 0.5


def test_trigger_restarts_wait_after_firing():
    trigger = Trigger(interval=0.5)
    assert trigger.ready(1.0) is True
    assert trigger.ready(1.2) is False
    assert trigger.ready(1.5) is True


def test_trigger_does_not_move_last_time_when_not_ready():
    trigger = Trigger(interval=2.0, last_time=1.0)
    assert trigger.ready(2.5) is False
    assert trigger.last_time == 1.0


@pytest.mark.parametrize("current", list(Screen))
def test_splash_shown_until_done(current):
    assert next_screen(current, False, True, True, True, True) is Screen.SPLASH


def test_splash_done_goes_to_welcome():
    assert next_screen(Screen.SPLASH, True, False, False, False, False) is Screen.WELCOME


def test_enter_after_splash_starts_play():
    assert next_screen(Screen.WELCOME, True, True, False, False, False) is Screen.PLAYING


def test_started_game_keeps_playing():
    assert next_screen(Screen.PLAYING, True, False, True, False, False) is Screen.PLAYING


def test_game_over_screen_when_game_ends():
    assert next_screen(Screen.PLAYING, True, False, True, True, False) is Screen.GAME_OVER


def test_restart_from_game_over_returns_to_play():
    assert next_screen(Screen.GAME_OVER, True, True, True, False, False) is Screen.PLAYING


def test_leaderboard_click_on_welcome_opens_leaderboard():
    assert next_screen(Screen.WELCOME, True, False, False, False, True) is Screen.LEADERBOARD


def test_leaderboard_stays_without_enter():
    assert next_screen(Screen.LEADERBOARD, True, False, False, False, False) is Screen.LEADERBOARD


def test_enter_on_leaderboard_starts_play():
    assert next_screen(Screen.LEADERBOARD, True, True, False, False, False) is Screen.PLAYING


def test_click_outside_welcome_ignored():
    assert next_screen(Screen.SPLASH, True, False, False, False, True) is Screen.WELCOME