#!/usr/bin/env python
"""Simulation harness cross-checking quantile_seq against numpy.quantile.

numpy's default ("linear") method uses the same definition
Q(p) = (1 - f) * x[k] + f * x[k + 1] with k + f = p * (n - 1), so on random
data the two must agree to floating point tolerance.

Run:
    python scripts/sim_quantiles.py --trials 200 --max-size 5000 --scenario heavy
"""
from __future__ import annotations
import argparse
import json
import random
from dataclasses import dataclass
from typing import List, Dict, Any

import numpy as np

from quantseq import quantile_seq


@dataclass
class ScenarioConfig:
    name: str
    trials: int
    max_size: int
    quantiles: List[float]


def draw(rng: random.Random, scenario: str, n: int) -> List[float]:
    if scenario == "uniform":
        return [rng.random() for _ in range(n)]
    if scenario == "heavy":
        return [rng.paretovariate(1.5) for _ in range(n)]
    # ties: few distinct values exercise equal-key partitioning
    return [float(rng.randint(0, 5)) for _ in range(n)]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser("sim-quantiles", description="Cross-check quantile_seq against numpy")
    p.add_argument("--trials", type=int, default=100, help="Number of random datasets")
    p.add_argument("--max-size", type=int, default=2000, help="Largest dataset size")
    p.add_argument("--quantiles", nargs="*", type=float, default=[0.0, 0.25, 0.5, 0.9, 0.99, 1.0])
    p.add_argument("--scenario", choices=["uniform", "heavy", "ties"], default="uniform")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--out", help="Write JSON results to this file")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    rng = random.Random(args.seed)
    cfg = ScenarioConfig(name=args.scenario, trials=args.trials, max_size=args.max_size, quantiles=args.quantiles)
    worst = 0.0
    mismatches = 0
    for _ in range(cfg.trials):
        values = draw(rng, cfg.name, rng.randint(1, cfg.max_size))
        ours = quantile_seq(values, cfg.quantiles)
        ref = np.quantile(np.asarray(values), cfg.quantiles)
        for a, b in zip(ours, ref):
            err = abs(a - b)
            worst = max(worst, err)
            if err > 1e-9 * max(1.0, abs(b)):
                mismatches += 1
    summary: Dict[str, Any] = {
        "scenario": cfg.name,
        "trials": cfg.trials,
        "quantiles": cfg.quantiles,
        "max_abs_error": worst,
        "mismatches": mismatches,
    }
    if args.out:
        with open(args.out, "w", encoding="utf-8") as fh:
            json.dump(summary, fh, indent=2)
        print(f"Wrote results to {args.out}")
    else:
        print(json.dumps(summary, indent=2))
    return 1 if mismatches else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
