"""Categorical (umbrella) alteration terms."""

from enum import Enum

from oncomatch.config.constants import (
    FUSIONS,
    GAIN_OF_FUNCTION_MUTATIONS,
    LOSS_OF_FUNCTION_MUTATIONS,
    ONCOGENIC_MUTATIONS,
    SWITCH_OF_FUNCTION_MUTATIONS,
    TRUNCATING_MUTATIONS,
    VUS,
)


class CategoricalAlteration(str, Enum):
    """Umbrella terms that stand for a computed set of alterations."""
    ONCOGENIC_MUTATIONS = ONCOGENIC_MUTATIONS
    GAIN_OF_FUNCTION_MUTATIONS = GAIN_OF_FUNCTION_MUTATIONS
    LOSS_OF_FUNCTION_MUTATIONS = LOSS_OF_FUNCTION_MUTATIONS
    SWITCH_OF_FUNCTION_MUTATIONS = SWITCH_OF_FUNCTION_MUTATIONS
    TRUNCATING_MUTATIONS = TRUNCATING_MUTATIONS
    FUSIONS = FUSIONS
    VUS = VUS

    @classmethod
    def from_name(cls, name: str | None) -> "CategoricalAlteration | None":
        """Match a name (without exclusion clause) case-insensitively."""
        if not name:
            return None
        value = name.strip().lower()
        for term in cls:
            if term.value.lower() == value:
                return term
        return None

    @property
    def mutation_effect(self) -> str | None:
        """Normalized mutation effect for function buckets (e.g. 'gain-of-function')."""
        if self in (
            CategoricalAlteration.GAIN_OF_FUNCTION_MUTATIONS,
            CategoricalAlteration.LOSS_OF_FUNCTION_MUTATIONS,
            CategoricalAlteration.SWITCH_OF_FUNCTION_MUTATIONS,
        ):
            return self.value.lower().replace("mutations", "").strip()
        return None
