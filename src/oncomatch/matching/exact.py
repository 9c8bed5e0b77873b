"""Exact matching of a query against the curated catalogue."""

from typing import Collection

from oncomatch.config.constants import IN_FRAME_DELETION
from oncomatch.config.debug import get_logger
from oncomatch.matching.range import find_mutations_by_consequence_and_position
from oncomatch.models.alteration import Alteration
from oncomatch.models.consequence import ReferenceGenome, consequence_related
from oncomatch.normalization.naming import get_full_name, has_abbreviation

logger = get_logger(__name__)


def find_alteration(
    reference_genome: ReferenceGenome | None,
    alteration: str | None,
    catalogue: Collection[Alteration],
    name: str | None = None,
) -> Alteration | None:
    """Find a catalogue alteration by name, case-insensitively.

    Raw alteration strings are tried first, then display names, then the
    expansion of a known abbreviation. When `name` is given the raw string
    and the display name must both match the same entry.

    Args:
        reference_genome: Build to restrict to, or None for any
        alteration: Alteration text (e.g., "V600E", "Amp")
        catalogue: Curated alterations of one gene
        name: Optional display name that must also match

    Returns:
        The first matching catalogue alteration, or None
    """
    if alteration is None:
        return None
    text = alteration.lower()

    if name is not None:
        for alt in catalogue:
            if alt.alteration.lower() == text and (alt.name or "").lower() == name.lower() \
                    and alt.is_valid_for(reference_genome):
                return alt
        return None

    for alt in catalogue:
        if alt.alteration.lower() == text and alt.is_valid_for(reference_genome):
            return alt

    for alt in catalogue:
        if alt.name is not None and alt.name.lower() == text and alt.is_valid_for(reference_genome):
            return alt

    if has_abbreviation(alteration):
        return find_alteration(reference_genome, get_full_name(alteration), catalogue)
    return None


def find_exactly_matched_alteration(
    reference_genome: ReferenceGenome | None,
    alteration: Alteration,
    catalogue: Collection[Alteration],
) -> Alteration | None:
    """Find the catalogue entry a query names, respecting its consequence.

    A name match is rejected when both sides carry a consequence other than
    NA and the two are not related. Unmatched in-frame deletions fall back to
    the closest curated in-frame deletion over the same protein range.
    """
    matched = find_alteration(reference_genome, alteration.alteration, catalogue)
    if matched is not None:
        if matched.consequence is None or alteration.consequence is None \
                or matched.consequence.is_na or alteration.consequence.is_na:
            return matched
        if consequence_related(alteration.consequence, matched.consequence):
            return matched
        logger.debug(
            f"{matched} matched by name but consequence {matched.consequence} "
            f"is unrelated to query consequence {alteration.consequence}"
        )
        return None

    if alteration.has_consequence(IN_FRAME_DELETION):
        matches = find_mutations_by_consequence_and_position(
            alteration.gene,
            reference_genome,
            alteration.consequence,
            alteration.protein_start,
            alteration.protein_end,
            catalogue,
        )
        if matches:
            logger.debug(f"In-frame deletion {alteration} matched {matches[0]} by position")
            return matches[0]

    return None
