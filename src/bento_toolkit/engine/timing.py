"""
Module: engine.timing

Purpose:
    Timing instrumentation for the placement engine to spot slow phases.
    Timings are logged only; they never become part of a LayoutResult,
    so results stay comparable between runs.

Key Classes:
    - TimingLog: Collects run-level and per-breakpoint phase timings

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - engine.controller: Single placement run
    - engine.responsive: Per-breakpoint runs
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, Optional

from bento_toolkit.common.thresholds import PERFORMANCE_THRESHOLDS

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Phase timings for one engine invocation.

    Attributes:
        run_timings: Dict of phase_name -> duration_seconds
        breakpoint_timings: Dict of breakpoint -> {phase_name -> duration_seconds}

    Example:
        >>> log = TimingLog()
        >>> log.log_run("sorting", 0.0004)
        >>> log.log_breakpoint("narrow", "placement", 0.002)
        >>> print(log.summary())
    """
    run_timings: Dict[str, float] = field(default_factory=dict)
    breakpoint_timings: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def log_run(self, phase: str, duration: float) -> None:
        """Log a run-level timing metric."""
        self.run_timings[phase] = duration

    def log_breakpoint(self, breakpoint: str, phase: str, duration: float) -> None:
        """Log a breakpoint-level timing metric."""
        self.breakpoint_timings.setdefault(breakpoint, {})[phase] = duration

    @property
    def total_ms(self) -> float:
        """Total recorded time in milliseconds."""
        total = sum(self.run_timings.values())
        total += sum(sum(p.values()) for p in self.breakpoint_timings.values())
        return total * 1000

    def exceeds_budget(self) -> bool:
        """True when the total exceeds the layout calculation budget."""
        return self.total_ms > PERFORMANCE_THRESHOLDS.layout_calculation_ms

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Placement Timing Summary ==="]

        if self.run_timings:
            for phase, duration in sorted(self.run_timings.items()):
                lines.append(f"  {phase:25s} {duration * 1000:.2f}ms")

        for bp, phases in sorted(self.breakpoint_timings.items()):
            lines.append(f"{bp}:")
            for phase, duration in sorted(phases.items()):
                lines.append(f"  {phase:25s} {duration * 1000:.2f}ms")

        lines.append(f"Total: {self.total_ms:.2f}ms")
        lines.append("")
        return "\n".join(lines)

    def report(self) -> None:
        """Log the summary, at warning level when over budget."""
        if self.exceeds_budget():
            logger.warning(
                f"Layout calculation took {self.total_ms:.1f}ms "
                f"(budget {PERFORMANCE_THRESHOLDS.layout_calculation_ms:.0f}ms)"
            )
        logger.debug(self.summary())


@contextmanager
def timed_phase(
    log: TimingLog,
    phase: str,
    breakpoint: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed
        breakpoint: If provided, records as breakpoint-level metric;
                    otherwise records as run-level metric

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "sorting"):
        ...     ranked = sort_by_priority(items)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if breakpoint:
            log.log_breakpoint(breakpoint, phase, elapsed)
        else:
            log.log_run(phase, elapsed)
