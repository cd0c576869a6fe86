"""Competitive intelligence analyzer.

Deterministic landscape and benchmark analysis over creator profiles.
"""

from creator_intel.analyzer.benchmark import InvalidInputError, benchmark_creator
from creator_intel.analyzer.landscape import analyze_landscape

__all__ = ["InvalidInputError", "analyze_landscape", "benchmark_creator"]
