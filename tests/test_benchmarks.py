import json

import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest

from aima_search.benchmarks import plot_results, run_all


@pytest.fixture(scope="module")
def romania_rows():
    return run_all.run_all("romania", seed=3, trials=2)


def test_run_all_covers_every_strategy(romania_rows):
    names = [r["algo"] for r in romania_rows]
    assert "A*" in names and "Bidirectional UCS" in names and "Simulated Annealing" in names
    by_name = {r["algo"]: r for r in romania_rows}
    assert by_name["A*"]["cost"] == 418.0
    assert by_name["Bidirectional UCS"]["cost"] == 418.0
    assert by_name["Simulated Annealing"]["trials"] == 2
    assert all(r["error"] is None for r in romania_rows)


def test_write_results_and_plot(romania_rows, tmp_path):
    json_path, csv_path = run_all.write_results(romania_rows, tmp_path, "romania")
    data = json.loads(json_path.read_text())
    assert data["problem"] == "romania"
    assert len(data["results"]) == len(romania_rows)
    assert len(pd.read_csv(csv_path)) == len(romania_rows)

    written = plot_results.plot(json_path, tmp_path)
    assert (tmp_path / "results.md").exists()
    assert (tmp_path / "nodes_expanded.png").exists()
    assert len(written) == 1 + len(plot_results.METRICS)


def test_main_writes_to_out_dir(tmp_path):
    assert run_all.main(["--problem", "romania", "--seed", "1", "--trials", "1", "--out", str(tmp_path)]) == 0
    assert json.loads((tmp_path / "results.json").read_text())["problem"] == "romania"
    assert (tmp_path / "results.csv").exists()


def test_unknown_problem():
    with pytest.raises(ValueError):
        run_all._load_problem("chess")
