import pytest

from anneal import TSPInstance, SAConfig
from anneal.experiments import run_repeated_trials

import run_experiments

TINY = SAConfig(t0=10.0, cooling_rate=0.9, t_min=1e-2, seed=0, record_every=5)


@pytest.fixture
def inst():
    return TSPInstance.random_euclidean(8, seed=2, name="tiny")


def test_build_configs_cool_from_fast_to_slow():
    configs = run_experiments.build_configs(t0=50.0, t_min=1e-3)
    rates = [cfg.cooling_rate for cfg in configs.values()]
    assert list(configs) == ["fast", "medium", "slow"]
    assert rates == sorted(rates)
    assert all(cfg.t0 == 50.0 and cfg.t_min == 1e-3 for cfg in configs.values())


def test_plot_scatter(inst, tmp_path):
    _, details = run_repeated_trials(inst, TINY, n_runs=2)
    out = tmp_path / "plots" / "scatter.png"
    run_experiments.plot_scatter({"tiny": details}, str(out))
    assert out.stat().st_size > 0


def test_plot_convergence_uses_recorded_iterations(inst, tmp_path):
    out = tmp_path / "conv.png"
    res = run_experiments.plot_convergence(inst, "tiny", TINY, str(out))
    assert out.stat().st_size > 0
    assert res.history_iterations[-1] == res.n_iterations


def test_make_gif_cleans_temporary_frames(inst, tmp_path, monkeypatch):
    frames_root = tmp_path / "tmp"
    frames_root.mkdir()
    monkeypatch.setattr(run_experiments.tempfile, "tempdir", str(frames_root))
    gif = run_experiments.make_gif(inst, "tiny", TINY, str(tmp_path / "tiny.gif"), step=2)
    assert (tmp_path / "tiny.gif").stat().st_size > 0
    assert gif.endswith("tiny.gif")
    assert list(frames_root.iterdir()) == []


def test_make_gif_keeps_frames_when_asked(inst, tmp_path, capsys):
    frames = tmp_path / "frames"
    run_experiments.make_gif(inst, "tiny", TINY, str(tmp_path / "tiny.gif"), step=2,
                             frames_dir=str(frames), keep_frames=True)
    assert len(list(frames.glob("tiny_*.png"))) > 0
    assert "Frames saved in:" in capsys.readouterr().out
