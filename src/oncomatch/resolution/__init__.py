"""Relevant alteration resolution engine."""

from oncomatch.resolution.categorical import CategoricalResolver, categorical_term
from oncomatch.resolution.exclusion import ExclusionFilter
from oncomatch.resolution.oncogenicity import OncogenicityHeuristic
from oncomatch.resolution.orchestrator import RelevantAlterationResolver

__all__ = [
    "CategoricalResolver",
    "categorical_term",
    "ExclusionFilter",
    "OncogenicityHeuristic",
    "RelevantAlterationResolver",
]
