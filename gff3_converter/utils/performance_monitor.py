#!/usr/bin/env python3

"""
Performance monitoring for conversion runs.

Each conversion phase (input parsing, GFF3 output) gets its own wall clock
time, resident memory peak and operation count: inputs read while parsing,
genes written while generating output. The configured memory limit is
enforced between inputs.
"""

import time
import logging
import psutil
from dataclasses import dataclass
from typing import Optional, Dict, Any
from contextlib import contextmanager

from ..core.exceptions import MemoryLimitError


@dataclass
class PhaseMetrics:
    """Timing, memory and operation counts for one phase."""
    phase_name: str
    start_time: float
    end_time: Optional[float] = None
    peak_memory_mb: float = 0.0
    operations_count: int = 0

    @property
    def elapsed_time(self) -> float:
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time

    @property
    def operations_per_second(self) -> float:
        elapsed = self.elapsed_time
        return self.operations_count / elapsed if elapsed > 0 else 0.0


class PerformanceMonitor:
    """Per-phase time and memory monitoring for one conversion run."""

    def __init__(self, memory_limit_mb: int = 4096):
        self.memory_limit_mb = memory_limit_mb
        self.start_time = time.time()
        self.phase_metrics: Dict[str, PhaseMetrics] = {}
        self.current_phase: Optional[PhaseMetrics] = None
        self.process = psutil.Process()

    def get_memory_usage(self) -> float:
        """Resident memory of this process in MB; also updates the phase peak."""
        try:
            memory_mb = self.process.memory_info().rss / (1024 * 1024)
        except psutil.Error as e:
            logging.warning(f"Error getting memory usage: {e}")
            return 0.0

        if self.current_phase is not None:
            self.current_phase.peak_memory_mb = max(self.current_phase.peak_memory_mb, memory_mb)
        return memory_mb

    def check_memory_limit(self) -> None:
        """Raise MemoryLimitError once resident memory is above the limit."""
        current_memory = self.get_memory_usage()
        if current_memory > self.memory_limit_mb:
            logging.warning(f"Memory usage {current_memory:.1f}MB is above the "
                            f"{self.memory_limit_mb}MB limit")
            raise MemoryLimitError("Memory usage exceeded limit", current_memory, self.memory_limit_mb)

    def record_operations(self, count: int) -> None:
        """Add count to the operations of the running phase."""
        if self.current_phase is not None:
            self.current_phase.operations_count += count

    @contextmanager
    def phase_context(self, phase_name: str):
        """Monitor the enclosed block as one named phase."""
        metrics = PhaseMetrics(phase_name=phase_name, start_time=time.time())
        self.phase_metrics[phase_name] = metrics
        self.current_phase = metrics
        self.get_memory_usage()
        logging.info(f"Started phase: {phase_name}")
        try:
            yield metrics
        finally:
            self.get_memory_usage()
            metrics.end_time = time.time()
            self.current_phase = None
            logging.info(f"Completed phase {phase_name} in {metrics.elapsed_time:.2f}s "
                         f"(peak memory: {metrics.peak_memory_mb:.1f}MB)")

    def get_peak_memory(self) -> float:
        if not self.phase_metrics:
            return self.get_memory_usage()
        return max(metrics.peak_memory_mb for metrics in self.phase_metrics.values())

    def get_performance_summary(self) -> Dict[str, Any]:
        return {
            "total_elapsed_time": time.time() - self.start_time,
            "peak_memory_mb": self.get_peak_memory(),
            "memory_limit_mb": self.memory_limit_mb,
            "phases": {
                name: {
                    "elapsed_time": metrics.elapsed_time,
                    "operations_count": metrics.operations_count,
                    "operations_per_second": metrics.operations_per_second,
                    "peak_memory_mb": metrics.peak_memory_mb,
                }
                for name, metrics in self.phase_metrics.items()
            },
        }

    def log_performance_report(self) -> None:
        """Log a summary of all phases."""
        summary = self.get_performance_summary()

        logging.info(f"Total time: {summary['total_elapsed_time']:.2f} seconds, "
                     f"peak memory: {summary['peak_memory_mb']:.1f} MB "
                     f"(limit {summary['memory_limit_mb']} MB)")
        for phase_name, phase_data in summary['phases'].items():
            logging.info(f"  {phase_name}: {phase_data['elapsed_time']:.2f}s, "
                         f"{phase_data['operations_count']} ops "
                         f"({phase_data['operations_per_second']:.1f}/s), "
                         f"{phase_data['peak_memory_mb']:.1f}MB")
