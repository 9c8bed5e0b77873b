"""Collaborator interfaces used by the resolution engine.

The engine only reads through these narrow interfaces. Storage, caching
and cache invalidation belong to the implementations.
"""

from abc import ABC, abstractmethod
from typing import Collection, Iterable

from oncomatch.errors import UnknownGeneError
from oncomatch.models.alteration import Alteration
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.evidence import Evidence, EvidenceType, Oncogenicity
from oncomatch.models.gene import Gene


class CatalogueProvider(ABC):
    """Source of per-gene alteration catalogue snapshots."""

    @abstractmethod
    def alterations_for_gene(
        self, gene: Gene, reference_genome: ReferenceGenome | None = None
    ) -> tuple[Alteration, ...]:
        """Get a consistent snapshot of the gene's curated alterations.

        The snapshot must not change while a caller holds it.
        """
        pass

    @abstractmethod
    def invalidate(self, gene: Gene) -> None:
        """Drop any cached snapshot for the gene after a write."""
        pass


class EvidenceProvider(ABC):
    """Source of curated evidence records."""

    @abstractmethod
    def evidence_for_alterations(
        self, alterations: Iterable[Alteration], evidence_types: Collection[EvidenceType]
    ) -> list[Evidence]:
        """Evidence of the given types linked to any of the alterations."""
        pass

    @abstractmethod
    def evidence_for_gene(self, gene: Gene, evidence_types: Collection[EvidenceType]) -> list[Evidence]:
        """Evidence of the given types curated for the gene."""
        pass


class OncogenicityProvider(ABC):
    """Curated oncogenicity, hotspot and VUS lookups."""

    @abstractmethod
    def curated_oncogenicities(self, alteration: Alteration) -> set[Oncogenicity]:
        """Grades from the alteration's own ONCOGENIC evidence."""
        pass

    @abstractmethod
    def is_hotspot(self, alteration: Alteration) -> bool:
        pass

    @abstractmethod
    def vus_alterations(self, gene: Gene) -> set[Alteration]:
        """Alterations curated as variants of unknown significance for the gene."""
        pass


class GeneProvider(ABC):
    """Gene lookup by symbol."""

    @abstractmethod
    def gene_by_hugo_symbol(self, hugo_symbol: str) -> Gene | None:
        pass

    def require_gene(self, hugo_symbol: str) -> Gene:
        """Look up a gene, raising UnknownGeneError when it is missing."""
        gene = self.gene_by_hugo_symbol(hugo_symbol)
        if gene is None:
            raise UnknownGeneError(f"Unknown gene: {hugo_symbol}")
        return gene
