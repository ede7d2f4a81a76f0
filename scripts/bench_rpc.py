"""
Benchmark Fuel RPC providers over several runs (median and p95 latency).

Run from repo root:
  python -m scripts.bench_rpc

Each sample is one full node benchmark (connect, block height, gas price,
latest transactions). Failed samples are counted, not timed.
"""
from __future__ import annotations

import logging
import statistics
from typing import Callable, Dict, List, Optional

from benchmark import benchmark_node
from config import BENCH_SAMPLES, get_provider_urls
from core.errors import BenchmarkError

logger = logging.getLogger(__name__)


def sample(url: str, n: int = BENCH_SAMPLES, node_fn: Callable[[str], float] = benchmark_node) -> tuple[list[float], int]:
    """Run node_fn n times; returns (successful times in ms, failure count)."""
    times_ms: list[float] = []
    failures = 0
    for _ in range(n):
        try:
            times_ms.append(node_fn(url) * 1000)
        except BenchmarkError as e:
            logger.debug("%s sample failed: %s", url, e)
            failures += 1
    return times_ms, failures


def summarize(times_ms: List[float]) -> Optional[Dict[str, float]]:
    if not times_ms:
        return None
    p95_idx = max(0, int(len(times_ms) * 0.95) - 1)
    return {
        "median_ms": round(statistics.median(times_ms), 1),
        "p95_ms": round(sorted(times_ms)[p95_idx], 1),
    }


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    for url in get_provider_urls():
        t, failures = sample(url)
        stats = summarize(t)
        print(url)
        if stats is None:
            print("  FAILED: all", failures, "samples failed")
        else:
            print("  median_ms:", stats["median_ms"])
            print("  p95_ms   :", stats["p95_ms"])
            print("  failures :", failures)
        print()


if __name__ == "__main__":
    main()
