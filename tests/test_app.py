import re

from rally_pong.app import main, run


def test_run_returns_simulator_after_frames() -> None:
    sim = run(frames=600, dt=1 / 60, seed=3)
    assert re.fullmatch(r"\d+ : \d+", sim.score_text)


def test_run_is_repeatable_with_seed() -> None:
    a = run(frames=4000, dt=0.05, seed=8, preset="frantic")
    b = run(frames=4000, dt=0.05, seed=8, preset="frantic")
    assert a.snapshot() == b.snapshot()


def test_main_prints_score(capsys) -> None:
    assert main(["--frames", "0", "--seed", "1"]) == 0
    assert capsys.readouterr().out.strip() == "0 : 0"
