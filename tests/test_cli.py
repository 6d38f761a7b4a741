from snake.__main__ import build_config, main, parse_args
from snake.geometry import Direction


def test_defaults():
    args = parse_args([])
    assert args.frontend == "curses"
    config = build_config(args)
    assert (config.width, config.height, config.inset) == (10, 10, 0)
    assert config.tick_ms == 100
    assert config.initial_direction is Direction.SOUTH


def test_text_frontend_runs_to_game_over(capsys):
    code = main(
        ["--frontend", "text", "--width", "5", "--height", "5", "--tick-ms", "1", "--seed", "4"]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "Score:" in out
    assert "Game over (out of bounds)" in out


def test_bad_config_reports_error(capsys):
    assert main(["--frontend", "text", "--inset", "5"]) == 2
    assert "Inset 5" in capsys.readouterr().err


def test_log_file_option():
    assert parse_args([]).log_file is None
    assert parse_args(["--log-file", "snake.log"]).log_file == "snake.log"
