"""Micro-benchmarks for apply().

Three shapes are measured: strings to ints, records to strings and records to
records. Each case builds its input once and times repeated apply() calls with
time.perf_counter_ns; numpy summarizes the per-call samples.
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from collect.core.sequences import apply

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10000
DEFAULT_SIZE = 4


@dataclass(frozen=True)
class Foo:
    bar: str


@dataclass(frozen=True)
class Out:
    baz: str


def _strings(size: int) -> List[str]:
    # "a", "bb", "ccc", ... repeating every four lengths
    return ["abcd"[i % 4] * (i % 4 + 1) for i in range(size)]


def _string_to_int(size: int) -> Tuple[List[Any], Callable[[Any], Any]]:
    return _strings(size), len


def _struct_to_string(size: int) -> Tuple[List[Any], Callable[[Any], Any]]:
    return [Foo(bar=s) for s in _strings(size)], lambda foo: foo.bar + "a"


def _struct_to_struct(size: int) -> Tuple[List[Any], Callable[[Any], Any]]:
    return [Foo(bar=s) for s in _strings(size)], lambda foo: Out(baz=foo.bar + "a")


CASES: Dict[str, Callable[[int], Tuple[List[Any], Callable[[Any], Any]]]] = {
    "string_to_int": _string_to_int,
    "struct_to_string": _struct_to_string,
    "struct_to_struct": _struct_to_struct,
}


@dataclass
class BenchResult:
    """Timing summary for one benchmark case.

    Attributes:
        case: Case name (key of CASES)
        iterations: Number of timed apply() calls
        size: Number of elements per call
        mean_ns: Mean nanoseconds per call
        median_ns: Median nanoseconds per call
        p95_ns: 95th percentile nanoseconds per call
    """

    case: str
    iterations: int
    size: int
    mean_ns: float
    median_ns: float
    p95_ns: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a JSON-serializable dict."""
        return asdict(self)

    def format_line(self) -> str:
        """One-line human readable summary."""
        return (
            f"{self.case:<18} n={self.size:<6} iters={self.iterations:<8} "
            f"mean={self.mean_ns:10.1f}ns median={self.median_ns:10.1f}ns "
            f"p95={self.p95_ns:10.1f}ns"
        )


def run_case(name: str, iterations: int = DEFAULT_ITERATIONS, size: int = DEFAULT_SIZE) -> BenchResult:
    """Time repeated apply() calls for one case.

    Args:
        name: Case name, one of CASES
        iterations: Number of timed calls (must be positive)
        size: Number of input elements per call

    Returns:
        BenchResult with per-call statistics

    Raises:
        KeyError: If name is not a known case
        ValueError: If iterations is not positive or size is negative
    """
    if name not in CASES:
        raise KeyError(f"Unknown benchmark case: {name}")
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    items, fn = CASES[name](size)
    samples = np.empty(iterations, dtype=np.int64)
    for i in range(iterations):
        start = time.perf_counter_ns()
        apply(items, fn)
        samples[i] = time.perf_counter_ns() - start

    result = BenchResult(
        case=name,
        iterations=iterations,
        size=size,
        mean_ns=float(np.mean(samples)),
        median_ns=float(np.median(samples)),
        p95_ns=float(np.percentile(samples, 95)),
    )
    logger.debug("Finished case %s: mean=%.1fns", name, result.mean_ns)
    return result


def run_cases(
    names: Optional[List[str]] = None,
    iterations: int = DEFAULT_ITERATIONS,
    size: int = DEFAULT_SIZE,
) -> List[BenchResult]:
    """Run several cases in order (all cases when names is None)."""
    selected = list(CASES) if names is None else names
    logger.info(f"Running {len(selected)} benchmark case(s), {iterations} iterations each")
    return [run_case(name, iterations=iterations, size=size) for name in selected]
