"""Normalization module for alteration names.

This module provides tools to:
- Expand abbreviations and parse exclusion clauses in curated names
- Detect and reverse fusion names
- Classify alteration names into variant consequences and protein positions

Example usage:
    >>> from oncomatch.normalization import ConsequenceClassifier
    >>> classifier = ConsequenceClassifier()
    >>> classifier.classify("R248*").term
    'stop_gained'
"""

from oncomatch.normalization.naming import (
    expand,
    get_excluded_names,
    get_full_name,
    get_reverse_fusion_name,
    has_abbreviation,
    has_exclusion_criteria,
    is_fusion,
    remove_exclusion_criteria,
)
from oncomatch.normalization.alteration_parser import (
    ConsequenceClassifier,
    ParsedAlteration,
    parse_alteration,
)

__all__ = [
    # Naming
    "expand",
    "get_excluded_names",
    "get_full_name",
    "get_reverse_fusion_name",
    "has_abbreviation",
    "has_exclusion_criteria",
    "is_fusion",
    "remove_exclusion_criteria",
    # Classification
    "ConsequenceClassifier",
    "ParsedAlteration",
    "parse_alteration",
]
