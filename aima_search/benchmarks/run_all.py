# aima_search/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import math
import random
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..algorithms.bidirectional import bidirectional_search
from ..algorithms.registry import STOCHASTIC, algorithm_registry
from ..config import get_settings, setup_logging
from ..core.metrics import MAX_QUEUE_SIZE, SearchResult
from ..problems.eight_puzzle import BOARDS, EightPuzzleProblem
from ..problems.grid import make_grid_problem
from ..problems.romania import romania_bidirectional, romania_problem

logger = logging.getLogger(__name__)

HERE = Path(__file__).parent
PROBLEMS = ("romania", "grid", "puzzle")

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    if x is None:
        return "n/a"
    return f"{float(x):.4f}"

def _finite(x: Optional[float]) -> Optional[float]:
    if x is None or math.isinf(x):
        return None
    return float(x)

def _load_problem(name: str):
    if name == "romania":
        return romania_problem()
    if name == "grid":
        return make_grid_problem()
    if name == "puzzle":
        return EightPuzzleProblem(BOARDS["medium"])
    raise ValueError(f"unknown problem {name!r}; choose from {', '.join(PROBLEMS)}")

def _load_algos(problem_name: str, seed: Optional[int]) -> Dict[str, Callable[..., SearchResult]]:
    algos = algorithm_registry(seed=seed)
    if problem_name == "romania":
        algos["Bidirectional UCS"] = lambda p, **kw: bidirectional_search(romania_bidirectional(), **kw)
    return algos

def _row(name: str, results: List[SearchResult]) -> Dict[str, Any]:
    """One table row; repeated (stochastic) runs are summarised."""
    first = results[0]
    ok = [r for r in results if r.success]
    row = {
        "algo": first.algo if len(results) == 1 else name,
        "success": bool(ok),
        "outcome": first.outcome.value,
        "trials": len(results),
        "success_rate": float(np.mean([r.success for r in results])),
        "cost": float(np.mean([r.cost for r in ok])) if ok else None,
        "nodes_expanded": int(np.mean([r.nodes_expanded for r in results])),
        "max_queue_size": first.metrics.get(MAX_QUEUE_SIZE),
        "time_s": float(np.mean([r.time_s or 0.0 for r in results])),
        "peak_kb": int(np.max([r.peak_kb or 0 for r in results])),
        "error": None,
    }
    if len(results) == 1:
        row["cost"] = _finite(first.cost)
    return row

def run_all(problem_name: str = "romania", seed: Optional[int] = None,
            trials: int = 5) -> List[Dict[str, Any]]:
    problem = _load_problem(problem_name)
    rows: List[Dict[str, Any]] = []
    for name, fn in _load_algos(problem_name, seed).items():
        print(f"→ Running {name} ...")
        try:
            if name in STOCHASTIC:
                runs = [fn(problem, rng=random.Random(None if seed is None else seed + i))
                        for i in range(max(1, trials))]
            else:
                runs = [fn(problem)]
            row = _row(name, runs)
            print(
                f"  {row['algo']}: "
                f"{'OK' if row['success'] else runs[0].outcome.value.upper()} "
                f"cost={row['cost']} "
                f"expanded={row['nodes_expanded']}, "
                f"time={_fmt_time(row['time_s'])}s"
            )
        except Exception as e:
            logger.warning("%s raised %r", name, e)
            print(f"  {name}: ERROR {repr(e)}")
            row = {
                "algo": name, "success": False, "outcome": "error", "trials": 0,
                "success_rate": 0.0, "cost": None, "nodes_expanded": None,
                "max_queue_size": None, "time_s": None, "peak_kb": None, "error": repr(e),
            }
        rows.append(row)
    return rows

def write_results(rows: List[Dict[str, Any]], out_dir: Path, problem_name: str) -> Tuple[Path, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    out = {"problem": problem_name, "results": rows, "ts": time.time()}
    json_path = out_dir / "results.json"
    json_path.write_text(json.dumps(out, indent=2))
    csv_path = out_dir / "results.csv"
    pd.DataFrame(rows).to_csv(csv_path, index=False)
    return json_path, csv_path

def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run every search strategy on a sample problem.")
    parser.add_argument("--problem", choices=PROBLEMS, default="romania")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="seed for stochastic strategies (env AIMA_SEED)")
    parser.add_argument("--trials", type=int, default=5, help="repeats for stochastic strategies")
    parser.add_argument("--out", type=Path, default=HERE, help="directory for results.json/results.csv")
    parser.add_argument("--log-level", default=None, help="overrides AIMA_LOG_LEVEL")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    rows = run_all(args.problem, seed=args.seed, trials=args.trials)
    json_path, csv_path = write_results(rows, args.out, args.problem)
    print(f"Wrote {json_path}")
    print(f"Wrote {csv_path}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
