"""Micro-benchmarks for the collect operations."""

from collect.bench.runner import CASES, BenchResult, run_case, run_cases
from collect.bench.settings import BenchSettings

__all__ = ["BenchResult", "BenchSettings", "CASES", "run_case", "run_cases"]
