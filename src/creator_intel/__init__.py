"""Competitive intelligence for social-media creators."""

from creator_intel.analyzer import (
    InvalidInputError,
    analyze_landscape,
    benchmark_creator,
)
from creator_intel.cli import main

__all__ = ["InvalidInputError", "analyze_landscape", "benchmark_creator", "main"]
