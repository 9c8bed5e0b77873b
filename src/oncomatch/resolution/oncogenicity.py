"""Decides whether the Oncogenic Mutations umbrella applies to a match."""

from typing import Iterable

from oncomatch.config.constants import AMPLIFICATION
from oncomatch.config.debug import get_logger
from oncomatch.models.alteration import Alteration
from oncomatch.models.evidence import Oncogenicity, strongest_oncogenicity
from oncomatch.providers.base import OncogenicityProvider

logger = get_logger(__name__)


class OncogenicityHeuristic:
    """Oncogenic Mutations inclusion rule.

    Curated grades win, then hotspots, then any oncogenic non-VUS member of
    the relevant set.
    """

    def __init__(self, provider: OncogenicityProvider):
        self.provider = provider

    def curated_oncogenicity(self, alteration: Alteration) -> Oncogenicity | None:
        """Strongest curated grade of an alteration, or None."""
        return strongest_oncogenicity(self.provider.curated_oncogenicities(alteration))

    def is_oncogenic_alteration(self, alteration: Alteration) -> bool:
        oncogenicity = self.curated_oncogenicity(alteration)
        return oncogenicity is not None and oncogenicity.is_oncogenic

    def should_add(self, alteration: Alteration, relevant: Iterable[Alteration]) -> bool:
        if alteration.alteration.strip().lower() == AMPLIFICATION.lower():
            return False

        oncogenicities = self.provider.curated_oncogenicities(alteration)
        if any(o.is_important for o in oncogenicities):
            return any(o.is_oncogenic for o in oncogenicities)

        if self.provider.is_hotspot(alteration):
            logger.debug(f"{alteration} is a hotspot")
            return True

        vus = self.provider.vus_alterations(alteration.gene)
        for alt in relevant:
            if alt not in vus and self.is_oncogenic_alteration(alt):
                logger.debug(f"{alt} is oncogenic, {alteration} inherits Oncogenic Mutations")
                return True
        return False

    def should_add_vus(self, alteration: Alteration, exact_match_found: bool) -> bool:
        """VUS applies to uncurated queries and to curated VUS members."""
        return not exact_match_found or alteration in self.provider.vus_alterations(alteration.gene)
