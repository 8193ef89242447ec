import os

import main


def test_main_end_to_end(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    outdir = tmp_path / "out"
    status = main.main(["--n", "12", "--seed", "3", "--outdir", str(outdir)])

    assert status == 0
    assert os.path.exists(outdir / "observations.csv")
    assert os.path.exists(outdir / "posterior_summary.csv")
    assert os.path.exists(outdir / "posterior_slope.png")
    assert "Posterior Mean β₁" in capsys.readouterr().out


def test_zero_noise_reports_failure_and_skips_outputs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    outdir = tmp_path / "out"
    status = main.main(["--sigma-noise", "0", "--outdir", str(outdir)])

    assert status == 1
    assert not os.path.exists(outdir)


def test_invalid_prior_returns_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    status = main.main(["--prior-std1", "-2", "--no-plots", "--outdir", str(tmp_path / "o")])
    assert status == 1
