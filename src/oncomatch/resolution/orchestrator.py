"""Relevant alteration resolution.

Given a query alteration and its gene's curated catalogue, builds the ordered
set of catalogue alterations whose curation applies to the query: the exact
match first, then allele, positional and range matches, then umbrella buckets
(Truncating Mutations, Oncogenic Mutations, function buckets, VUS).

Example:
    >>> resolver = RelevantAlterationResolver.from_knowledge_base(kb)
    >>> resolver.resolve_query("BRAF", "V600E").names()
    ['V600E', 'V600K', 'Oncogenic Mutations']
"""

import re
from typing import Collection

from oncomatch.config.constants import (
    ANY,
    DELETION,
    EGFR,
    EGFR_CTD,
    EGFR_CTD_PATTERN,
    EGFR_INS_FQEA,
    EGFR_INS_RANGE,
    FEATURE_TRUNCATION,
    FUSION,
    MISSENSE_VARIANT,
    NON_TRUNCATING_VARIANT,
    POSITION_NOT_APPLICABLE,
    SYNONYMOUS_VARIANT,
    VUS,
)
from oncomatch.config.debug import get_logger
from oncomatch.config.settings import ResolverConfig
from oncomatch.matching.allele import get_allele_alterations, get_positioned_alterations, get_range_alterations
from oncomatch.matching.exact import find_alteration, find_exactly_matched_alteration
from oncomatch.matching.range import find_mutations_by_consequence_and_position
from oncomatch.models.alteration import Alteration, AlterationType
from oncomatch.models.categorical import CategoricalAlteration
from oncomatch.models.consequence import ReferenceGenome, get_consequence
from oncomatch.models.evidence import EvidenceType, normalize_known_effect
from oncomatch.models.gene import Gene
from oncomatch.models.relevant import RelevantAlterations
from oncomatch.normalization.alteration_parser import ConsequenceClassifier
from oncomatch.normalization.naming import get_reverse_fusion_name, is_fusion
from oncomatch.providers.base import CatalogueProvider, EvidenceProvider, GeneProvider, OncogenicityProvider
from oncomatch.resolution.categorical import CategoricalResolver, categorical_term
from oncomatch.resolution.exclusion import ExclusionFilter
from oncomatch.resolution.oncogenicity import OncogenicityHeuristic

logger = get_logger(__name__)


class RelevantAlterationResolver:
    """Resolves queries into ordered relevant catalogue alterations.

    The resolver keeps no state between calls. Catalogue snapshots come from
    the catalogue provider, or from the caller, and are only read.
    """

    def __init__(
        self,
        catalogue_provider: CatalogueProvider,
        evidence_provider: EvidenceProvider,
        oncogenicity_provider: OncogenicityProvider,
        gene_provider: GeneProvider | None = None,
        classifier: ConsequenceClassifier | None = None,
        config: ResolverConfig | None = None,
    ):
        self.catalogue_provider = catalogue_provider
        self.evidence_provider = evidence_provider
        self.gene_provider = gene_provider
        self.classifier = classifier or ConsequenceClassifier()
        self.config = config or ResolverConfig()
        self.heuristic = OncogenicityHeuristic(oncogenicity_provider)
        self.categorical = CategoricalResolver(evidence_provider, oncogenicity_provider, self.classifier)
        self.exclusion = ExclusionFilter(self.classifier)

    @classmethod
    def from_knowledge_base(cls, knowledge_base, config: ResolverConfig | None = None) -> "RelevantAlterationResolver":
        """Build a resolver backed by one store implementing every provider."""
        return cls(knowledge_base, knowledge_base, knowledge_base, knowledge_base, config=config)

    # === Entry points ===

    def resolve_query(
        self,
        hugo_symbol: str,
        alteration: str,
        consequence: str | None = None,
        reference_genome: ReferenceGenome | None = None,
        include_alternative_allele: bool | None = None,
    ) -> RelevantAlterations:
        """Resolve a gene symbol and alteration text.

        Raises:
            UnknownGeneError: If no gene provider knows the symbol
            ValueError: If the resolver was built without a gene provider
        """
        if self.gene_provider is None:
            raise ValueError("resolve_query needs a gene provider")
        gene = self.gene_provider.require_gene(hugo_symbol)
        query = self.classifier.build(gene, alteration, consequence=consequence)
        return self.resolve(
            query,
            reference_genome=reference_genome,
            include_alternative_allele=include_alternative_allele,
        )

    def resolve(
        self,
        alteration: Alteration,
        catalogue: Collection[Alteration] | None = None,
        reference_genome: ReferenceGenome | None = None,
        include_alternative_allele: bool | None = None,
    ) -> RelevantAlterations:
        """Resolve a query, sending umbrella terms to the categorical resolver."""
        genome = reference_genome or self.config.reference_genome
        if catalogue is None:
            catalogue = self.catalogue_provider.alterations_for_gene(alteration.gene, genome)

        if categorical_term(alteration) is not None:
            return self.find_relevant_alterations_for_categorical_alt(genome, alteration, catalogue)
        return self.find_relevant_alterations(genome, alteration, catalogue, include_alternative_allele)

    def find_relevant_alterations_for_categorical_alt(
        self,
        reference_genome: ReferenceGenome | None,
        alteration: Alteration,
        catalogue: Collection[Alteration],
    ) -> RelevantAlterations:
        catalogue = self._with_consequences(catalogue)
        return self.categorical.resolve(reference_genome, alteration, catalogue)

    # === Pipeline ===

    def find_relevant_alterations(
        self,
        reference_genome: ReferenceGenome | None,
        alteration: Alteration,
        catalogue: Collection[Alteration],
        include_alternative_allele: bool | None = None,
    ) -> RelevantAlterations:
        """Run the relevance pipeline for a non-umbrella query.

        Args:
            reference_genome: Build to restrict matches to, None for any
            alteration: Query alteration; a missing consequence is classified in place
            catalogue: The gene's curated alterations
            include_alternative_allele: Widen missense queries with alleles and
                agreeing range entries (defaults to the resolver config)

        Returns:
            Relevant catalogue alterations in priority order
        """
        if include_alternative_allele is None:
            include_alternative_allele = self.config.include_alternative_allele

        relevant = RelevantAlterations()
        add_truncating = False
        add_deletion = False

        if alteration.consequence is None:
            self.classifier.annotate(alteration)
        catalogue = self._with_consequences(catalogue)

        if alteration.has_consequence(SYNONYMOUS_VARIANT):
            logger.debug(f"{alteration} is synonymous, nothing is relevant")
            return relevant

        matched = find_exactly_matched_alteration(reference_genome, alteration, catalogue)
        if matched is None and is_fusion(alteration.alteration):
            matched = self._find_reverse_fusion(reference_genome, alteration, catalogue)

        if matched is not None:
            logger.debug(f"Exact match for {alteration}: {matched.alteration}")
            alteration = matched
            relevant.add(matched)

            oncogenicity = self.heuristic.curated_oncogenicity(matched)
            if oncogenicity is not None and not oncogenicity.is_oncogenic:
                logger.debug(f"{matched} is curated {oncogenicity.value}, skipping expansion")
                return relevant

        if self._is_egfr(alteration.gene) and self._is_ctd_family(alteration):
            ctd = find_alteration(reference_genome, EGFR_CTD, catalogue)
            if ctd is not None:
                relevant.add(ctd)

        if self._is_fusion_alteration(alteration):
            fusions = self.categorical.fusion_members(reference_genome, catalogue)
            if fusions:
                relevant.update(fusions)
            else:
                logger.debug(f"No curated fusions for {alteration.gene}, falling back to truncating")
                add_truncating = True

        if alteration.has_consequence(MISSENSE_VARIANT) and not alteration.is_positioned:
            included = []
            if include_alternative_allele:
                relevant.update(get_allele_alterations(reference_genome, alteration, catalogue))
                included.extend(get_range_alterations(reference_genome, alteration, catalogue))
            included.extend(get_positioned_alterations(reference_genome, alteration, catalogue))
            relevant.update(included)
        else:
            relevant.update(self._range_matches(reference_genome, alteration, alteration.consequence, catalogue))

        if alteration.is_generally_truncating:
            add_truncating = True
        else:
            relevant.update(self._range_matches(
                reference_genome, alteration, get_consequence(NON_TRUNCATING_VARIANT), catalogue
            ))

        relevant.update(self._range_matches(reference_genome, alteration, get_consequence(ANY), catalogue))

        relevant = self._filter_oncogene_truncating(alteration, relevant)

        if alteration.alteration.strip().lower() == DELETION.lower():
            add_deletion = True
            add_truncating = True

        if add_deletion:
            deletion = find_alteration(reference_genome, DELETION, catalogue)
            if deletion is not None:
                relevant.add(deletion)
                add_truncating = False

        if add_truncating:
            relevant.update(self._range_matches(
                reference_genome, alteration, get_consequence(FEATURE_TRUNCATION), catalogue
            ))

        if self.heuristic.should_add(alteration, relevant):
            umbrella = self.categorical.umbrella_entries(
                CategoricalAlteration.ONCOGENIC_MUTATIONS, reference_genome, catalogue
            )
            relevant.update(umbrella)

        relevant.update(self._mutation_effect_buckets(reference_genome, relevant, catalogue))

        if self._is_egfr(alteration.gene) and alteration.alteration == EGFR_INS_FQEA:
            relevant = relevant.filter(lambda alt: alt.alteration != EGFR_INS_RANGE)

        if not self.heuristic.should_add(alteration, relevant) \
                and self.heuristic.should_add_vus(alteration, matched is not None):
            vus = find_alteration(reference_genome, VUS, catalogue)
            if vus is not None:
                relevant.add(vus)

        names = self.exclusion.names_to_match(
            alteration,
            relevant,
            matched is not None,
            get_allele_alterations(reference_genome, alteration, catalogue),
        )
        relevant = self.exclusion.prune(relevant, names)

        logger.debug(f"Relevant alterations for {alteration}: {relevant.names()}")
        return relevant

    # === Stages ===

    def _with_consequences(self, catalogue: Collection[Alteration]) -> Collection[Alteration]:
        """Catalogue with missing consequences classified on copies; the snapshot is left as is."""
        if all(alt.consequence is not None for alt in catalogue):
            return catalogue
        logger.debug("Classifying catalogue entries that have no consequence")
        return tuple(
            alt if alt.consequence is not None else self.classifier.annotate(alt.model_copy())
            for alt in catalogue
        )

    def _range_matches(self, reference_genome, alteration, consequence, catalogue) -> list[Alteration]:
        return find_mutations_by_consequence_and_position(
            alteration.gene,
            reference_genome,
            consequence,
            alteration.protein_start,
            alteration.protein_end,
            catalogue,
        )

    def _find_reverse_fusion(
        self,
        reference_genome: ReferenceGenome | None,
        alteration: Alteration,
        catalogue: Collection[Alteration],
    ) -> Alteration | None:
        reverse = get_reverse_fusion_name(alteration.alteration)
        if reverse is None:
            return None
        matched = find_alteration(reference_genome, reverse, catalogue)
        if matched is None and not reverse.lower().endswith(FUSION):
            matched = find_alteration(reference_genome, f"{reverse} Fusion", catalogue)
        if matched is not None:
            logger.debug(f"Fusion {alteration.alteration} matched reverse name {matched.alteration}")
        return matched

    def _is_egfr(self, gene: Gene) -> bool:
        if self.gene_provider is not None:
            egfr = self.gene_provider.gene_by_hugo_symbol(EGFR)
            if egfr is not None:
                return egfr.entrez_gene_id == gene.entrez_gene_id
        return gene.hugo_symbol == EGFR

    @staticmethod
    def _is_ctd_family(alteration: Alteration) -> bool:
        name = alteration.alteration.strip()
        return name == EGFR_CTD or re.match(EGFR_CTD_PATTERN, name) is not None

    @staticmethod
    def _is_fusion_alteration(alteration: Alteration) -> bool:
        return (
            FUSION in alteration.alteration.lower()
            or alteration.alteration_type == AlterationType.FUSION
            or (alteration.alteration_type == AlterationType.STRUCTURAL_VARIANT and alteration.has_consequence(FUSION))
        )

    @staticmethod
    def _filter_oncogene_truncating(alteration: Alteration, relevant: RelevantAlterations) -> RelevantAlterations:
        """Truncating queries on pure oncogenes keep only truncating, point or whole-gene members."""
        if not alteration.gene.is_pure_oncogene or not alteration.is_generally_truncating:
            return relevant

        def keep(alt: Alteration) -> bool:
            return (
                alt.is_generally_truncating
                or (alt.has_position and alt.protein_start == alt.protein_end)
                or alt.protein_start == POSITION_NOT_APPLICABLE
            )

        filtered = relevant.filter(keep)
        if len(filtered) != len(relevant):
            logger.debug(f"Oncogene truncating filter removed {len(relevant) - len(filtered)} from {alteration}")
        return filtered

    def _mutation_effect_buckets(
        self,
        reference_genome: ReferenceGenome | None,
        relevant: RelevantAlterations,
        catalogue: Collection[Alteration],
    ) -> list[Alteration]:
        """Function buckets (e.g. "Gain-of-function Mutations") for effects curated on relevant members."""
        effects = []
        for evidence in self.evidence_provider.evidence_for_alterations(relevant, {EvidenceType.MUTATION_EFFECT}):
            if evidence.known_effect:
                effect = normalize_known_effect(evidence.known_effect)
                if effect not in effects:
                    effects.append(effect)

        buckets = []
        for effect in effects:
            label = f"{effect} mutations"
            bucket = find_alteration(reference_genome, label, catalogue, name=label) \
                or find_alteration(reference_genome, label, catalogue)
            if bucket is not None:
                buckets.append(bucket)
        return buckets
