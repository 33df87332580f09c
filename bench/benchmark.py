"""Simple benchmarking harness for quantseq.

Times partial selection (quantile_seq) against a full sort and against
numpy.quantile on the same random data, and reports peak memory of the
selection path. For deeper profiling integrate with py-spy or scalene
externally.
"""
from __future__ import annotations

import argparse
import random
import time
import tracemalloc
from typing import Callable, List

import numpy as np

from quantseq import quantile_seq

PROBS = [0.5, 0.9, 0.99]


def sorted_quantile(values: List[float], q: float) -> float:
    data = sorted(values)
    position = q * (len(data) - 1)
    lower = int(position)
    fraction = position - lower
    if fraction == 0:
        return data[lower]
    return data[lower] + (data[lower + 1] - data[lower]) * fraction


def _time(fn: Callable[[], object], repeat: int) -> float:
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def run(size: int, repeat: int, seed: int = 0) -> None:
    rng = random.Random(seed)
    values = [rng.gauss(0.0, 1.0) for _ in range(size)]
    arr = np.asarray(values)

    t_select = _time(lambda: [quantile_seq(values, q) for q in PROBS], repeat)
    t_sort = _time(lambda: [sorted_quantile(values, q) for q in PROBS], repeat)
    t_numpy = _time(lambda: np.quantile(arr, PROBS), repeat)

    tracemalloc.start()
    quantile_seq(values, PROBS)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    print(f"Values: {size}  probabilities: {PROBS}  best of {repeat}")
    print(f"selection  {t_select * 1000:9.2f} ms")
    print(f"full sort  {t_sort * 1000:9.2f} ms")
    print(f"numpy      {t_numpy * 1000:9.2f} ms")
    print(f"Peak mem (selection) ~{peak/1024/1024:.2f} MB")


def main() -> int:
    ap = argparse.ArgumentParser(description="Benchmark quantseq selection against a full sort")
    ap.add_argument("--size", type=int, default=100000, help="Number of random values")
    ap.add_argument("--repeat", type=int, default=5, help="Timed repetitions")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()
    run(args.size, args.repeat, args.seed)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual use
    raise SystemExit(main())
