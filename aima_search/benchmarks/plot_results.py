# aima_search/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import List, Optional
import matplotlib.pyplot as plt

HERE = Path(__file__).parent

METRICS = (
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
    ("time_s", "Wall Time (lower is better)", "seconds"),
    ("cost", "Path Cost (lower is better)", "cost"),
    ("max_queue_size", "Max Queue Size (lower is better)", "nodes"),
)

def _load_rows(results_json: Path):
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m aima_search.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]
    top = max((v for v in vals if v is not None), default=1) or 1

    x = list(range(len(algos)))
    ax.bar(x, [v or 0 for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    # value labels on top of bars
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float) and v < 0.01:
            label, y = f"{v:.4f}", v
        elif isinstance(v, float):
            label, y = f"{v:.3f}", v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Cost | Nodes Expanded | Max Queue | Time (s) | Peak KB | Success rate |",
        "|---|---:|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('max_queue_size'))} | {fnum(r.get('time_s'))} | "
            f"{fnum(r.get('peak_kb'))} | {fnum(r.get('success_rate'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def plot(results_json: Path, out_dir: Path) -> List[Path]:
    rows = _load_rows(results_json)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    written.append(md_path)

    # one bar chart per metric, sorted for readability
    for metric, title, ylabel in METRICS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / f"{metric}.png"
        path.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        written.append(path)
    return written

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Plot a results.json written by run_all.")
    parser.add_argument("--results", type=Path, default=HERE / "results.json")
    parser.add_argument("--out", type=Path, default=None, help="defaults to the results file's directory")
    args = parser.parse_args(argv)
    out_dir = args.out or args.results.parent
    out_dir.mkdir(parents=True, exist_ok=True)
    for path in plot(args.results, out_dir):
        print(f"Wrote {path}")

if __name__ == "__main__":
    main()
