"""
Fuel RPC latency benchmark: run node (and optionally contract) benchmarks
against each configured provider in order and log one outcome per endpoint.
Run: python bench.py [--contract] [URL ...]
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence

from benchmark import benchmark_contract, benchmark_node, format_duration
from config import (
    BENCH_CONTRACT,
    LOG_LEVEL,
    get_contract_id,
    get_mnemonic,
    get_provider_urls,
)
from core.errors import BenchmarkError
from core.types import BenchmarkOutcome

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _log_outcome(outcome: BenchmarkOutcome) -> None:
    if outcome.ok:
        logger.info("%s Request: Response Time: %s", outcome.routine, format_duration(outcome.duration or 0.0))
    else:
        logger.info("%s Request: Error: %s", outcome.routine, outcome.error)


def run_benchmarks(
    urls: Sequence[str],
    mnemonic: Optional[str] = None,
    contract_id: Optional[str] = None,
    bench_contract: bool = False,
    node_fn: Optional[Callable[[str], float]] = None,
    contract_fn: Optional[Callable[[str, str, str], float]] = None,
) -> List[BenchmarkOutcome]:
    """
    Benchmark every url once, in order. Per-endpoint BenchmarkErrors are
    logged and never stop the loop. Returns the outcomes in run order.
    """
    node_fn = node_fn or benchmark_node
    contract_fn = contract_fn or benchmark_contract
    if bench_contract and (mnemonic is None or contract_id is None):
        raise ValueError("contract benchmark needs mnemonic and contract_id")

    outcomes: List[BenchmarkOutcome] = []
    logger.info("Starting benchmarks...")

    for url in urls:
        logger.info("Benchmarking provider: %s", url)

        try:
            outcome = BenchmarkOutcome(endpoint=url, routine="Node", duration=node_fn(url))
        except BenchmarkError as e:
            outcome = BenchmarkOutcome(endpoint=url, routine="Node", error=e)
        _log_outcome(outcome)
        outcomes.append(outcome)

        if bench_contract:
            try:
                outcome = BenchmarkOutcome(
                    endpoint=url,
                    routine="Contract",
                    duration=contract_fn(url, mnemonic, contract_id),
                )
            except BenchmarkError as e:
                outcome = BenchmarkOutcome(endpoint=url, routine="Contract", error=e)
            _log_outcome(outcome)
            outcomes.append(outcome)

    return outcomes


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark Fuel RPC providers.")
    parser.add_argument("urls", nargs="*", help="Provider urls (default: PROVIDER_URLS from env)")
    parser.add_argument("--contract", action="store_true", help="Also benchmark a contract read (matcher_fee)")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        mnemonic = get_mnemonic()
    except ValueError as e:
        logger.error("%s (set it in the environment or .env)", e)
        return 1

    urls = list(args.urls) or get_provider_urls()
    run_benchmarks(
        urls,
        mnemonic=mnemonic,
        contract_id=get_contract_id(),
        bench_contract=args.contract or BENCH_CONTRACT,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
