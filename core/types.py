from __future__ import annotations

"""
Core value types for node and contract latency benchmarks.

These are logic-free containers shared across:
1) provider adapters (pagination requests, transaction pages)
2) benchmark routines (timing)
3) the driver loop (per-endpoint outcomes)
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .errors import BenchmarkError


class PageDirection(str, Enum):
    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"


@dataclass(frozen=True)
class PaginationRequest:
    """
    Page shape for history queries.

    BACKWARD walks from the newest entry towards older ones, so with
    cursor=None the first page holds the most recent results.
    """

    cursor: Optional[str]
    results: int
    direction: PageDirection


@dataclass
class TransactionSummary:
    """One transaction as reported by the node; status is e.g. "Success"."""

    id: str
    status: Optional[str] = None


@dataclass
class TransactionPage:
    results: List[TransactionSummary] = field(default_factory=list)
    cursor: Optional[str] = None
    has_next_page: bool = False
    has_previous_page: bool = False


@dataclass
class TimingMeasurement:
    """
    Wall-clock timer for one benchmark run.

    Created at routine entry; stop() finalises elapsed once and later
    calls return the same value.
    """

    start: float = field(default_factory=time.perf_counter)
    elapsed: Optional[float] = None

    def stop(self) -> float:
        if self.elapsed is None:
            self.elapsed = max(0.0, time.perf_counter() - self.start)
        return self.elapsed


@dataclass
class BenchmarkOutcome:
    """Result of one routine against one endpoint: a duration or an error."""

    endpoint: str
    routine: str  # "Node" or "Contract"
    duration: Optional[float] = None  # seconds
    error: Optional["BenchmarkError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None
