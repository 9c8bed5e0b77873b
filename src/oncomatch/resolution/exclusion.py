"""Exclusion clause handling.

A curated name such as "Oncogenic Mutations {excluding V600E}" carves V600E
out of the umbrella. Two passes use it: categorical queries subtract the
excluded names from their bucket, and the relevance pipeline drops any
member whose clause names the query.
"""

from typing import Collection, Iterable

from oncomatch.config.constants import IN_FRAME_DELETION, IN_FRAME_INSERTION
from oncomatch.config.debug import get_logger
from oncomatch.matching.allele import get_all_missense_alleles
from oncomatch.models.alteration import Alteration
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.relevant import RelevantAlterations
from oncomatch.normalization.alteration_parser import ConsequenceClassifier
from oncomatch.normalization.naming import get_excluded_names, has_exclusion_criteria

logger = get_logger(__name__)


class ExclusionFilter:
    """Applies exclusion clauses to relevant alteration sets."""

    def __init__(self, classifier: ConsequenceClassifier | None = None):
        self.classifier = classifier or ConsequenceClassifier()

    def excluded_names(
        self,
        reference_genome: ReferenceGenome | None,
        alteration: Alteration,
        catalogue: Collection[Alteration],
    ) -> set[str]:
        """Lower-cased names excluded by the alteration's own clause.

        A single-residue exclusion also excludes every curated missense
        allele at that residue.
        """
        excluded = self.classifier.exclusion_alterations(alteration.gene, alteration.alteration)
        expanded = list(excluded)
        for alt in excluded:
            if alt.is_single_residue:
                expanded.extend(get_all_missense_alleles(reference_genome, alt.protein_start, catalogue))
        return {alt.alteration.lower() for alt in expanded}

    def subtract(
        self,
        reference_genome: ReferenceGenome | None,
        alteration: Alteration,
        relevant: RelevantAlterations,
        catalogue: Collection[Alteration],
    ) -> RelevantAlterations:
        """Remove members named by the clause on a categorical query."""
        if not has_exclusion_criteria(alteration.alteration):
            return relevant
        names = self.excluded_names(reference_genome, alteration, catalogue)
        logger.debug(f"Excluding {sorted(names)} from {alteration}")
        return relevant.filter(lambda alt: alt.alteration.lower() not in names)

    @staticmethod
    def names_to_match(
        alteration: Alteration,
        relevant: RelevantAlterations,
        exact_match_found: bool,
        alleles: Iterable[Alteration],
    ) -> set[str]:
        """Lower-cased names that clauses on relevant members are checked against.

        In-frame insertions and deletions only check their own name. Otherwise
        every relevant member counts, plus the query when it is not curated,
        minus its alternative alleles.
        """
        if alteration.consequence is not None and alteration.consequence.term in (IN_FRAME_DELETION, IN_FRAME_INSERTION):
            return {alteration.alteration.lower()}

        candidates = set(relevant)
        if not exact_match_found:
            candidates.add(alteration)
        candidates.difference_update(alleles)
        return {alt.alteration.lower() for alt in candidates}

    @staticmethod
    def prune(relevant: RelevantAlterations, names: set[str]) -> RelevantAlterations:
        """Drop members whose exclusion clause names any of the given names."""
        def excluded(alt: Alteration) -> bool:
            if not has_exclusion_criteria(alt.alteration):
                return False
            return any(name.lower() in names for name in get_excluded_names(alt.alteration))

        removed = [alt for alt in relevant if excluded(alt)]
        if removed:
            logger.debug(f"Exclusion clauses removed {[alt.alteration for alt in removed]}")
        return relevant.without(removed)
