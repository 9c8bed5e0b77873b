"""In-memory knowledge base implementing every collaborator interface.

Holds genes, curated alterations, evidence and hotspots. Catalogue
snapshots are cached per gene as immutable tuples; any write for a gene
invalidates its snapshot.

Example:
    >>> kb = KnowledgeBase(genes=[braf], alterations=[v600e], evidence=[oncogenic_ev])
    >>> catalogue = kb.alterations_for_gene(braf)
"""

from typing import Collection, Iterable

from oncomatch.config.constants import IN_FRAME_DELETION, IN_FRAME_INSERTION, MISSENSE_VARIANT
from oncomatch.config.debug import get_logger
from oncomatch.models.alteration import Alteration
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.evidence import Evidence, EvidenceType, Hotspot, Oncogenicity
from oncomatch.models.gene import Gene
from oncomatch.providers.base import (
    CatalogueProvider,
    EvidenceProvider,
    GeneProvider,
    OncogenicityProvider,
)

logger = get_logger(__name__)

# Consequences eligible for hotspot membership
HOTSPOT_CONSEQUENCES = {MISSENSE_VARIANT, IN_FRAME_DELETION, IN_FRAME_INSERTION}


class KnowledgeBase(CatalogueProvider, EvidenceProvider, OncogenicityProvider, GeneProvider):
    """Curated genes, alterations, evidence and hotspots held in memory."""

    def __init__(
        self,
        genes: Iterable[Gene] = (),
        alterations: Iterable[Alteration] = (),
        evidence: Iterable[Evidence] = (),
        hotspots: Iterable[Hotspot] = (),
    ):
        self._genes: dict[str, Gene] = {}
        self._alterations: list[Alteration] = []
        self._evidence: list[Evidence] = []
        self._hotspots: list[Hotspot] = list(hotspots)
        self._snapshots: dict[int, tuple[Alteration, ...]] = {}

        for gene in genes:
            self.add_gene(gene)
        for alteration in alterations:
            self.add_alteration(alteration)
        for record in evidence:
            self.add_evidence(record)

    # === Writes ===

    def add_gene(self, gene: Gene) -> None:
        self._genes[gene.hugo_symbol.upper()] = gene

    def add_alteration(self, alteration: Alteration) -> None:
        """Add or replace a curated alteration and invalidate its gene snapshot."""
        self._alterations = [alt for alt in self._alterations if alt != alteration]
        self._alterations.append(alteration)
        if alteration.gene.hugo_symbol.upper() not in self._genes:
            self.add_gene(alteration.gene)
        self.invalidate(alteration.gene)

    def add_evidence(self, evidence: Evidence) -> None:
        self._evidence.append(evidence)

    def add_hotspot(self, hotspot: Hotspot) -> None:
        self._hotspots.append(hotspot)

    # === CatalogueProvider ===

    def alterations_for_gene(
        self, gene: Gene, reference_genome: ReferenceGenome | None = None
    ) -> tuple[Alteration, ...]:
        snapshot = self._snapshots.get(gene.entrez_gene_id)
        if snapshot is None:
            snapshot = tuple(alt for alt in self._alterations if alt.gene.entrez_gene_id == gene.entrez_gene_id)
            self._snapshots[gene.entrez_gene_id] = snapshot
            logger.debug(f"Built catalogue snapshot for {gene}: {len(snapshot)} alterations")
        if reference_genome is None:
            return snapshot
        return tuple(alt for alt in snapshot if alt.is_valid_for(reference_genome))

    def invalidate(self, gene: Gene) -> None:
        self._snapshots.pop(gene.entrez_gene_id, None)

    # === EvidenceProvider ===

    def evidence_for_alterations(
        self, alterations: Iterable[Alteration], evidence_types: Collection[EvidenceType]
    ) -> list[Evidence]:
        wanted = set(alterations)
        return [
            evidence for evidence in self._evidence
            if evidence.evidence_type in evidence_types
            and any(alt in wanted for alt in evidence.alterations)
        ]

    def evidence_for_gene(self, gene: Gene, evidence_types: Collection[EvidenceType]) -> list[Evidence]:
        return [
            evidence for evidence in self._evidence
            if evidence.evidence_type in evidence_types
            and evidence.gene.entrez_gene_id == gene.entrez_gene_id
        ]

    # === OncogenicityProvider ===

    def curated_oncogenicities(self, alteration: Alteration) -> set[Oncogenicity]:
        oncogenicities = set()
        for evidence in self.evidence_for_alterations([alteration], {EvidenceType.ONCOGENIC}):
            if evidence.oncogenicity is not None:
                oncogenicities.add(evidence.oncogenicity)
        return oncogenicities

    def is_hotspot(self, alteration: Alteration) -> bool:
        if alteration.consequence is None or alteration.consequence.term not in HOTSPOT_CONSEQUENCES:
            return False
        return any(hotspot.covers(alteration) for hotspot in self._hotspots)

    def vus_alterations(self, gene: Gene) -> set[Alteration]:
        vus = set()
        for evidence in self.evidence_for_gene(gene, {EvidenceType.VUS}):
            vus.update(evidence.alterations)
        return vus

    # === GeneProvider ===

    def gene_by_hugo_symbol(self, hugo_symbol: str) -> Gene | None:
        return self._genes.get(hugo_symbol.strip().upper())

    @property
    def genes(self) -> list[Gene]:
        return list(self._genes.values())

    @property
    def evidence(self) -> list[Evidence]:
        return list(self._evidence)

    @property
    def hotspots(self) -> list[Hotspot]:
        return list(self._hotspots)
