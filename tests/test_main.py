import os

import pandas as pd

import main


def test_main_generates_and_exports(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    outdir = tmp_path / "out"
    code = main.main(["--generate", "poisson", "--size", "40", "--seed", "1", "--outdir", str(outdir)])
    assert code == 0
    assert os.path.exists(outdir / "parameter_estimates.csv")
    ci = pd.read_csv(outdir / "confidence_intervals.csv")
    assert ci.loc[0, "Method"] == "large sample, z-approximation"


def test_main_reads_csv_with_known_variance(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    csv_path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0]}).to_csv(csv_path, index=False)
    code = main.main(["--input", str(csv_path), "--variance", "1.5", "--outdir", str(tmp_path / "o")])
    assert code == 0
    ci = pd.read_csv(tmp_path / "o" / "confidence_intervals.csv")
    assert ci.loc[0, "Method"] == "known variance, z"


def test_main_reports_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    csv_path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1.0, 2.0, 3.0]}).to_csv(csv_path, index=False)
    code = main.main(["--input", str(csv_path), "--distribution", "weibull"])
    assert code == 1


def test_main_reports_missing_input_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = main.main(["--input", str(tmp_path / "absent.csv")])
    assert code == 1


def test_main_reports_empty_csv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("")
    code = main.main(["--input", str(csv_path)])
    assert code == 1
