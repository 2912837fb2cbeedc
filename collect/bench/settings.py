"""Benchmark settings.

`collect bench` reads its defaults from the "bench" section of config.json in
the working directory, e.g. {"bench": {"iterations": 50000, "size": 16}}. A
setting missing from the file is taken from BENCH_<NAME> in the environment,
then from the built-in default. Command-line flags override all of these.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from collect.bench.runner import DEFAULT_ITERATIONS, DEFAULT_SIZE

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
ENV_PREFIX = "BENCH_"


def read_bench_section(path: Path) -> Dict[str, Any]:
    """Return the "bench" object of a JSON config file.

    A missing file, unreadable JSON, or a file without a "bench" object all
    yield an empty dict so the remaining sources apply.
    """
    if not path.exists():
        return {}
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return {}

    section = data.get("bench") if isinstance(data, dict) else None
    return section if isinstance(section, dict) else {}


def _int_setting(name: str, default: int, section: Mapping[str, Any], environ: Mapping[str, str]) -> int:
    raw = section.get(name)
    source = f"config.json bench.{name}"
    if raw is None:
        raw = environ.get(ENV_PREFIX + name.upper())
        source = ENV_PREFIX + name.upper()
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-integer {source}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class BenchSettings:
    """Resolved defaults for a benchmark run.

    Attributes:
        iterations: Timed apply() calls per case
        size: Elements per call
    """

    iterations: int = DEFAULT_ITERATIONS
    size: int = DEFAULT_SIZE

    @classmethod
    def load(
        cls, config_path: str = CONFIG_FILE, environ: Optional[Mapping[str, str]] = None
    ) -> "BenchSettings":
        """Resolve settings from config file, then environment, then defaults.

        Args:
            config_path: JSON config file (default: config.json in the working directory)
            environ: Environment mapping (default: os.environ)

        Returns:
            BenchSettings with integer fields
        """
        section = read_bench_section(Path(config_path))
        env = os.environ if environ is None else environ
        return cls(
            iterations=_int_setting("iterations", DEFAULT_ITERATIONS, section, env),
            size=_int_setting("size", DEFAULT_SIZE, section, env),
        )
