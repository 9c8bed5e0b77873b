"""Alteration model.

An alteration is either a physical change (V600E, 746_750del, an EML4-ALK
fusion) or a categorical term (Oncogenic Mutations, Truncating Mutations)
curated for one gene.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from oncomatch.config.constants import MISSENSE_VARIANT, NA, POSITION_NOT_APPLICABLE
from oncomatch.models.consequence import ReferenceGenome, VariantConsequence
from oncomatch.models.gene import Gene


class AlterationType(str, Enum):
    """Broad class of an alteration."""
    MUTATION = "MUTATION"
    FUSION = "FUSION"
    STRUCTURAL_VARIANT = "STRUCTURAL_VARIANT"
    COPY_NUMBER_ALTERATION = "COPY_NUMBER_ALTERATION"
    UNKNOWN = "UNKNOWN"


class Alteration(BaseModel):
    """A curated or queried alteration of one gene.

    Equality and hashing use (gene, alteration, reference genomes) so a query
    built ad hoc deduplicates against the catalogue row it names, while two
    catalogue rows curated under different builds stay distinct.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "gene": {"entrez_gene_id": 673, "hugo_symbol": "BRAF"},
                "alteration": "V600E",
                "consequence": {"term": "missense_variant"},
                "protein_start": 600,
                "protein_end": 600,
                "ref_residues": "V",
                "variant_residues": "E",
            }
        },
    )

    id: int | None = Field(default=None, description="Catalogue row id")
    gene: Gene = Field(..., description="Gene the alteration belongs to")
    alteration: str = Field(..., description="Raw alteration string (e.g., V600E)")
    name: str | None = Field(default=None, description="Display name, defaults to the raw alteration")
    alteration_type: AlterationType = Field(default=AlterationType.MUTATION)
    consequence: VariantConsequence | None = Field(default=None)
    protein_start: int | None = Field(default=None, description="First affected residue, -1 if not applicable")
    protein_end: int | None = Field(default=None, description="Last affected residue")
    ref_residues: str | None = Field(default=None, description="Reference residues over the protein range")
    variant_residues: str | None = Field(default=None, description="Substituted residues")
    reference_genomes: frozenset[ReferenceGenome] = Field(
        default_factory=frozenset,
        description="Builds the alteration is curated under; empty means any build",
    )

    @model_validator(mode="after")
    def _default_name(self) -> "Alteration":
        if self.name is None:
            # object.__setattr__ bypasses assignment validation (no recursion)
            object.__setattr__(self, "name", self.alteration)
        return self

    def _identity(self) -> tuple:
        return (self.gene.entrez_gene_id, self.alteration, self.reference_genomes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alteration):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return f"{self.gene.hugo_symbol} {self.alteration}"

    def is_valid_for(self, reference_genome: ReferenceGenome | None) -> bool:
        """Check whether the alteration applies to the given build.

        No build (None) on the query side, or no builds on the alteration,
        matches anything.
        """
        if reference_genome is None or not self.reference_genomes:
            return True
        return reference_genome in self.reference_genomes

    @property
    def has_position(self) -> bool:
        return self.protein_start is not None and self.protein_end is not None

    @property
    def is_single_residue(self) -> bool:
        return (
            self.has_position
            and self.protein_start == self.protein_end
            and self.protein_start != POSITION_NOT_APPLICABLE
        )

    @property
    def is_positioned(self) -> bool:
        """A bare residue position such as V600, with no substituted residue."""
        return (
            self.is_single_residue
            and self.ref_residues is not None
            and len(self.ref_residues) == 1
            and not self.variant_residues
            and self.consequence is not None
            and self.consequence.term in (NA, MISSENSE_VARIANT)
        )

    @property
    def is_generally_truncating(self) -> bool:
        return self.consequence is not None and self.consequence.is_generally_truncating

    def has_consequence(self, term: str) -> bool:
        return self.consequence is not None and self.consequence.term == term
