from __future__ import annotations

import pygame
import pytest

import main
from entities.stats import Archetype, Gender


def test_parser_defaults() -> None:
    args = main.build_parser().parse_args([])
    assert args.simulate == 0
    assert args.seed is None
    assert args.ticks is None
    assert not args.verbose


def test_parser_simulation_flags() -> None:
    args = main.build_parser().parse_args(["--simulate", "5", "--seed", "9", "--ticks", "100", "-v"])
    assert (args.simulate, args.seed, args.ticks, args.verbose) == (5, 9, 100, True)


def test_headless_simulation_from_the_command_line(capsys) -> None:
    assert main.main(["--simulate", "2", "--seed", "4", "--ticks", "60"]) == 0
    assert "Simulation Results  (2 runs)" in capsys.readouterr().out


# ── Window controller ─────────────────────────────────────

@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window = main.Game(seed=1)
    yield window
    pygame.quit()


def test_window_resize_reaches_the_session(game) -> None:
    game._handle_window_event(
        pygame.event.Event(pygame.VIDEORESIZE, size=(400, 300), w=400, h=300),
    )
    assert game.screen.get_size() == (400, 300)
    assert game.session.bounds == (400, 300)


def test_close_button_stops_the_loop(game) -> None:
    assert game._handle_window_event(pygame.event.Event(pygame.QUIT))
    assert not game.running


def test_quitting_mid_run_still_writes_the_report(game, tmp_path, capsys) -> None:
    game._start_run(Archetype.WARRIOR, Gender.MALE)
    game.session.run_ticks(3)

    game._shutdown()

    assert (tmp_path / "run_trend.png").exists()
    assert "RUN SUMMARY" in capsys.readouterr().out


def test_quitting_from_the_title_writes_nothing(game, tmp_path, capsys) -> None:
    game._shutdown()
    assert not (tmp_path / "run_trend.png").exists()
    assert "RUN SUMMARY" not in capsys.readouterr().out
