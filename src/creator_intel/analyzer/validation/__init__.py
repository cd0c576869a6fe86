"""Validation modules for the competitive intelligence analyzer."""

from creator_intel.analyzer.validation.data_quality import (
    check_data_quality,
    check_profile,
)

__all__ = ["check_data_quality", "check_profile"]
