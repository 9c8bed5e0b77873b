"""Expansion of umbrella terms into their member alterations.

Example:
    >>> resolver = CategoricalResolver(kb, kb)
    >>> resolver.resolve(GRCh37, oncogenic_mutations_query, catalogue).names()
    ['V600E', 'V600K']
"""

from typing import Collection

from oncomatch.config.constants import FUSION
from oncomatch.config.debug import get_logger
from oncomatch.models.alteration import Alteration
from oncomatch.models.categorical import CategoricalAlteration
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.evidence import EvidenceType, normalize_known_effect
from oncomatch.models.gene import Gene
from oncomatch.models.relevant import RelevantAlterations
from oncomatch.normalization.alteration_parser import ConsequenceClassifier
from oncomatch.normalization.naming import expand, remove_exclusion_criteria
from oncomatch.providers.base import EvidenceProvider, OncogenicityProvider
from oncomatch.resolution.exclusion import ExclusionFilter

logger = get_logger(__name__)


def categorical_term(alteration: Alteration | str) -> CategoricalAlteration | None:
    """Umbrella term named by an alteration, ignoring any exclusion clause.

    Abbreviations are expanded ("gof" names Gain-of-function Mutations).
    """
    text = alteration.alteration if isinstance(alteration, Alteration) else alteration
    return CategoricalAlteration.from_name(expand(remove_exclusion_criteria(text)))


class CategoricalResolver:
    """Computes umbrella bucket membership from evidence and the catalogue."""

    def __init__(
        self,
        evidence_provider: EvidenceProvider,
        oncogenicity_provider: OncogenicityProvider,
        classifier: ConsequenceClassifier | None = None,
    ):
        self.evidence_provider = evidence_provider
        self.oncogenicity_provider = oncogenicity_provider
        self.exclusion = ExclusionFilter(classifier)

    def oncogenic_members(self, gene: Gene, reference_genome: ReferenceGenome | None) -> RelevantAlterations:
        """Alterations with oncogenic-like ONCOGENIC evidence."""
        members = RelevantAlterations()
        for evidence in self.evidence_provider.evidence_for_gene(gene, {EvidenceType.ONCOGENIC}):
            if evidence.oncogenicity is not None and evidence.oncogenicity.is_oncogenic:
                members.update(alt for alt in evidence.alterations if alt.is_valid_for(reference_genome))
        return members

    def mutation_effect_members(
        self, gene: Gene, reference_genome: ReferenceGenome | None, term: CategoricalAlteration
    ) -> RelevantAlterations:
        """Alterations whose MUTATION_EFFECT evidence matches the bucket's effect."""
        members = RelevantAlterations()
        for evidence in self.evidence_provider.evidence_for_gene(gene, {EvidenceType.MUTATION_EFFECT}):
            if evidence.known_effect and normalize_known_effect(evidence.known_effect) == term.mutation_effect:
                members.update(alt for alt in evidence.alterations if alt.is_valid_for(reference_genome))
        return members

    @staticmethod
    def truncating_members(
        reference_genome: ReferenceGenome | None, catalogue: Collection[Alteration]
    ) -> RelevantAlterations:
        return RelevantAlterations(
            alt for alt in catalogue
            if alt.is_generally_truncating and alt.is_valid_for(reference_genome)
        )

    @staticmethod
    def fusion_members(
        reference_genome: ReferenceGenome | None, catalogue: Collection[Alteration]
    ) -> RelevantAlterations:
        return RelevantAlterations(
            alt for alt in catalogue
            if FUSION in alt.alteration.lower() and alt.is_valid_for(reference_genome)
        )

    def vus_members(self, gene: Gene, reference_genome: ReferenceGenome | None) -> RelevantAlterations:
        vus = sorted(self.oncogenicity_provider.vus_alterations(gene), key=lambda alt: alt.alteration)
        return RelevantAlterations(alt for alt in vus if alt.is_valid_for(reference_genome))

    def members(
        self,
        term: CategoricalAlteration,
        gene: Gene,
        reference_genome: ReferenceGenome | None,
        catalogue: Collection[Alteration],
    ) -> RelevantAlterations:
        """Bucket membership for an umbrella term, before exclusions."""
        if term == CategoricalAlteration.ONCOGENIC_MUTATIONS:
            return self.oncogenic_members(gene, reference_genome)
        if term.mutation_effect is not None:
            return self.mutation_effect_members(gene, reference_genome, term)
        if term == CategoricalAlteration.TRUNCATING_MUTATIONS:
            return self.truncating_members(reference_genome, catalogue)
        if term == CategoricalAlteration.FUSIONS:
            return self.fusion_members(reference_genome, catalogue)
        if term == CategoricalAlteration.VUS:
            return self.vus_members(gene, reference_genome)
        raise ValueError(f"Unhandled categorical alteration: {term}")

    @staticmethod
    def umbrella_entries(
        term: CategoricalAlteration,
        reference_genome: ReferenceGenome | None,
        catalogue: Collection[Alteration],
    ) -> list[Alteration]:
        """Catalogue entries curated under the umbrella name, with or without exclusions."""
        return [
            alt for alt in catalogue
            if categorical_term(alt) == term and alt.is_valid_for(reference_genome)
        ]

    def resolve(
        self,
        reference_genome: ReferenceGenome | None,
        alteration: Alteration,
        catalogue: Collection[Alteration],
    ) -> RelevantAlterations:
        """Relevant alterations for an umbrella query, exclusions applied.

        A name that is not an umbrella term yields an empty result.
        """
        term = categorical_term(alteration)
        if term is None:
            return RelevantAlterations()

        relevant = self.members(term, alteration.gene, reference_genome, catalogue)
        logger.debug(f"{term.value} bucket for {alteration.gene}: {relevant.names()}")
        return self.exclusion.subtract(reference_genome, alteration, relevant, catalogue)
