"""Variant consequence and reference genome models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from oncomatch.config.constants import (
    CONSEQUENCE_COMPATIBILITY_GROUPS,
    CONSEQUENCE_SYNONYMS,
    NA,
    VARIANT_CONSEQUENCES,
)


class ReferenceGenome(str, Enum):
    """Genome builds an alteration can be curated under."""
    GRCH37 = "GRCh37"
    GRCH38 = "GRCh38"

    @classmethod
    def from_name(cls, name: str) -> "ReferenceGenome":
        """Look up a build by name, case-insensitively (e.g. "grch38")."""
        for genome in cls:
            if genome.value.lower() == name.strip().lower():
                return genome
        raise ValueError(f"Unknown reference genome: {name}. Must be one of: GRCh37, GRCh38")


class VariantConsequence(BaseModel):
    """A Sequence Ontology consequence term."""

    model_config = ConfigDict(frozen=True)

    term: str = Field(..., description="Consequence term (e.g., missense_variant)")
    is_generally_truncating: bool = Field(
        default=False, description="Whether variants with this consequence usually truncate the protein"
    )
    description: str | None = Field(default=None, description="Human readable description")

    @property
    def is_na(self) -> bool:
        return self.term == NA

    def __str__(self) -> str:
        return self.term


_CONSEQUENCES: dict[str, VariantConsequence] = {
    term: VariantConsequence(term=term, is_generally_truncating=truncating, description=description)
    for term, (truncating, description) in VARIANT_CONSEQUENCES.items()
}


def find_consequence_by_term(term: str | None) -> VariantConsequence | None:
    """Get the consequence for a term, accepting legacy spellings.

    Returns:
        The matching VariantConsequence, or None for unknown terms.
    """
    if not term:
        return None
    term = term.strip()
    term = CONSEQUENCE_SYNONYMS.get(term, term)
    if term in _CONSEQUENCES:
        return _CONSEQUENCES[term]
    # Terms are lower case apart from NA
    return _CONSEQUENCES.get(term.lower()) or _CONSEQUENCES.get(term.upper())


def get_consequence(term: str) -> VariantConsequence:
    """Get a consequence from the vocabulary. Raises KeyError for unknown terms."""
    consequence = find_consequence_by_term(term)
    if consequence is None:
        raise KeyError(f"Unknown variant consequence: {term}")
    return consequence


def consequence_related(
    consequence: VariantConsequence | None,
    compare_to: VariantConsequence | None,
) -> bool:
    """Check whether a query consequence is compatible with a curated one.

    Args:
        consequence: Consequence of the query alteration
        compare_to: Consequence of the curated (catalogue) alteration

    Returns:
        True when the terms are equal or belong to the same compatibility
        group. NA is only related to NA. Curated `any` entries are only
        reached by an `any` query.
    """
    if consequence is None or compare_to is None:
        return consequence is compare_to

    if consequence.is_na or compare_to.is_na:
        return consequence.is_na and compare_to.is_na

    if consequence.term == compare_to.term:
        return True

    return any(
        consequence.term in group and compare_to.term in group
        for group in CONSEQUENCE_COMPATIBILITY_GROUPS
    )
