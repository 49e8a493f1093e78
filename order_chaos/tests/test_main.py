"""Settings loading, CLI parsing, and player wiring."""

import pytest

from order_chaos import main as main_mod
from order_chaos.Player import CHAOS, ORDER, HumanPlayer, RandomPlayer
from order_chaos.utils.cli import parse_args


def test_default_settings_file():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["ai_vs_ai_demo"] is False
    assert settings["early_chaos_detection"] is False
    assert settings["seed"] is None
    assert settings["move_delay_seconds"] is None


def test_empty_settings_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert main_mod.load_settings(path) == {}


def test_parse_args_defaults():
    args = parse_args([])
    assert args.mode == "human-vs-human"
    assert args.gui is False
    assert args.ai_vs_ai_demo is None
    assert args.early_detection is None


def test_parse_args_flags():
    args = parse_args(["--mode", "ai-vs-human", "--seed", "5", "--ai-vs-ai-demo", "--early-detection"])
    assert args.mode == "ai-vs-human"
    assert args.seed == 5
    assert args.ai_vs_ai_demo is True
    assert args.early_detection is True


def test_build_players_modes():
    order, chaos = main_mod.build_players("human-vs-ai", automated=False)
    assert isinstance(order, HumanPlayer) and order.role == ORDER
    assert isinstance(chaos, RandomPlayer) and chaos.role == CHAOS


def test_automated_mode_overrides_mode():
    order, chaos = main_mod.build_players("human-vs-human", automated=True, seed=1)
    assert isinstance(order, RandomPlayer)
    assert isinstance(chaos, RandomPlayer)


def test_unsupported_mode():
    with pytest.raises(ValueError):
        main_mod.build_players("spectator", automated=False)


def test_main_automated_game(tmp_path, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("ai_vs_ai_demo: true\nseed: 11\n", encoding="utf-8")

    result = main_mod.main(["--settings", str(settings)])

    out = capsys.readouterr().out
    assert result in (ORDER, CHAOS)
    assert out.strip().endswith(("Order wins", "Chaos wins"))
    assert "Move 1: Order" in out


@pytest.mark.parametrize(
    "settings, gui, automated, expected",
    [
        ({}, True, True, main_mod.GUI_DEMO_MOVE_DELAY),
        ({"move_delay_seconds": None}, True, True, main_mod.GUI_DEMO_MOVE_DELAY),
        ({}, False, True, 0.0),
        ({}, True, False, 0.0),
        ({"move_delay_seconds": 0}, True, True, 0.0),
        ({"move_delay_seconds": 1.5}, False, False, 1.5),
    ],
)
def test_resolve_move_delay(settings, gui, automated, expected):
    assert main_mod.resolve_move_delay(settings, gui, automated) == expected


def test_main_exits_cleanly_when_input_closes(tmp_path, monkeypatch, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("ai_vs_ai_demo: false\n", encoding="utf-8")

    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)
    assert main_mod.main(["--settings", str(settings)]) is None
    assert "Input closed" in capsys.readouterr().out
