"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the
analytics metrics the UI needs for the Analytics panel and Comparison
Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="quickSort", array=[5, 3, 8, 1])
    rec.run_to_completion()          # drains the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME array, then calls compare(rec1, rec2) → ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Optional, List, Dict, Any

from algorithms import get_algorithm, generate, AlgoInfo
from algorithms.step import Step
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str           = ""
    algo_name:     str           = ""
    category:      str           = ""
    array_size:    int           = 0
    target:        Optional[int] = None
    total_steps:   int           = 0          # number of Steps yielded
    comparisons:   int           = 0          # as counted by the Stepper at the last step
    swaps:         int           = 0
    wall_time_ms:  float         = 0.0        # wall-clock time to run to completion
    memory_bytes:  int           = 0          # approx size of the step buffer
    found:         bool          = False      # searching only
    found_index:   Optional[int] = None


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_swaps:       str = ""
    winner_steps:       str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : The underlying Stepper (if you want live step-by-step access).
    """

    def __init__(self):
        self.steps:     List[Step]           = []
        self.metrics:   Optional[RunMetrics] = None
        self.stepper:   Optional[Stepper]    = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._array:      List[int]          = []
        self._target:     Optional[int]      = None
        self._wall_ms:    float              = 0.0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, array: List[int], target: Optional[int] = None) -> None:
        """Build the trace for this run and load it into a Stepper."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._array     = list(array)
        self._target    = target if info.is_search else None
        self.steps      = []
        self.metrics    = None

        t0 = time.monotonic()
        self.stepper = Stepper()
        self.stepper.start(generate(algo_key, self._array, self._target))
        self._wall_ms = (time.monotonic() - t0) * 1000

    def run_to_completion(self) -> RunMetrics:
        """Play through every step, record them, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)

        self.metrics = self._compute_metrics()
        logger.info(
            "%s on %d values: %d steps, %d comparisons, %d swaps (%.2f ms)",
            self.metrics.algo_key, self.metrics.array_size, self.metrics.total_steps,
            self.metrics.comparisons, self.metrics.swaps, self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "array":    list(self._array),
            "target":   self._target,
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        found = False
        found_index = None
        if info and info.is_search and last and last.highlight:
            found = True
            found_index = last.highlight[0]

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.array)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_name=info.name if info else "",
            category=info.category.value if info else "",
            array_size=len(self._array),
            target=self._target,
            total_steps=len(self.steps),
            comparisons=self.stepper.comparisons if self.stepper else 0,
            swaps=self.stepper.swaps if self.stepper else 0,
            wall_time_ms=round(self._wall_ms, 2),
            memory_bytes=mem,
            found=found,
            found_index=found_index,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_name if l_val < r_val else r.algo_name

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
        winner_steps=winner(l.total_steps, r.total_steps),
    )
