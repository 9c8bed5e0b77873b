"""Evidence and oncogenicity models."""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field

from oncomatch.models.alteration import Alteration
from oncomatch.models.gene import Gene


class EvidenceType(str, Enum):
    """Kinds of curated evidence linked to alterations."""
    ONCOGENIC = "ONCOGENIC"
    MUTATION_EFFECT = "MUTATION_EFFECT"
    VUS = "VUS"
    MUTATION_SUMMARY = "MUTATION_SUMMARY"


class Oncogenicity(str, Enum):
    """Curated oncogenicity, declared strongest first."""
    ONCOGENIC = "Oncogenic"
    LIKELY_ONCOGENIC = "Likely Oncogenic"
    RESISTANCE = "Resistance"
    LIKELY_NEUTRAL = "Likely Neutral"
    INCONCLUSIVE = "Inconclusive"
    UNKNOWN = "Unknown"

    @classmethod
    def from_effect(cls, effect: str | None) -> "Oncogenicity | None":
        """Parse an evidence known effect (e.g. "Likely Oncogenic").

        Legacy curation values "Yes" and "Likely" are accepted.
        """
        if not effect:
            return None
        value = effect.strip().lower()
        if value in _LEGACY_EFFECTS:
            return _LEGACY_EFFECTS[value]
        for oncogenicity in cls:
            if oncogenicity.value.lower() == value:
                return oncogenicity
        return None

    @property
    def rank(self) -> int:
        """Position in strength order, 0 is strongest."""
        return list(Oncogenicity).index(self)

    @property
    def is_oncogenic(self) -> bool:
        return self in (Oncogenicity.ONCOGENIC, Oncogenicity.LIKELY_ONCOGENIC, Oncogenicity.RESISTANCE)

    @property
    def is_important(self) -> bool:
        """Stronger than inconclusive/unknown."""
        return self not in (Oncogenicity.INCONCLUSIVE, Oncogenicity.UNKNOWN)


_LEGACY_EFFECTS = {
    "yes": Oncogenicity.ONCOGENIC,
    "likely": Oncogenicity.LIKELY_ONCOGENIC,
}


def strongest_oncogenicity(oncogenicities: Iterable[Oncogenicity]) -> Oncogenicity | None:
    """Get the strongest grade from a collection, or None if empty."""
    return min(oncogenicities, key=lambda o: o.rank, default=None)


def normalize_known_effect(effect: str) -> str:
    """Normalize a mutation effect for bucket naming.

    Examples:
        >>> normalize_known_effect("Likely Gain-of-function")
        'gain-of-function'
    """
    return effect.lower().replace("likely", "").replace(" ", "").strip()


class Evidence(BaseModel):
    """A curated evidence record linked to one or more alterations."""

    id: int | None = Field(default=None, description="Evidence record id")
    evidence_type: EvidenceType = Field(..., description="Kind of evidence")
    gene: Gene = Field(..., description="Gene the evidence is curated for")
    alterations: list[Alteration] = Field(default_factory=list)
    known_effect: str | None = Field(
        default=None, description="Free-text effect (e.g., 'Likely Oncogenic', 'Gain-of-function')"
    )

    @property
    def oncogenicity(self) -> Oncogenicity | None:
        return Oncogenicity.from_effect(self.known_effect)


class Hotspot(BaseModel):
    """A recurrent mutational hotspot over a protein range."""

    hugo_symbol: str = Field(..., description="Gene symbol")
    protein_start: int = Field(..., description="First hotspot residue")
    protein_end: int = Field(..., description="Last hotspot residue")

    def covers(self, alteration: Alteration) -> bool:
        if alteration.gene.hugo_symbol.upper() != self.hugo_symbol.upper() or not alteration.has_position:
            return False
        return self.protein_start <= alteration.protein_start and alteration.protein_end <= self.protein_end
