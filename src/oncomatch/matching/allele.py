"""Same-position widening for missense queries.

Allele family: other point missense alterations at the query's residue.
Positioned: bare residue entries such as V600.
Range inclusion: multi-residue entries whose reference sequence agrees with
the query residue at its offset.
"""

from typing import Collection

from oncomatch.config.constants import MISSENSE_VARIANT, NA
from oncomatch.matching.range import (
    find_mutations_by_consequence_and_position,
    find_mutations_by_consequence_and_position_on_same_position,
)
from oncomatch.models.alteration import Alteration
from oncomatch.models.consequence import ReferenceGenome, get_consequence


def _is_point_missense(alteration: Alteration) -> bool:
    return alteration.has_consequence(MISSENSE_VARIANT) and alteration.is_single_residue


def get_all_missense_alleles(
    reference_genome: ReferenceGenome | None,
    position: int | None,
    catalogue: Collection[Alteration],
) -> list[Alteration]:
    """All curated point missense alterations at a residue, whatever the reference."""
    if position is None:
        return []
    return [
        alt for alt in catalogue
        if _is_point_missense(alt)
        and alt.protein_start == position
        and alt.is_valid_for(reference_genome)
    ]


def get_allele_alterations(
    reference_genome: ReferenceGenome | None,
    alteration: Alteration,
    catalogue: Collection[Alteration],
) -> list[Alteration]:
    """Alternative alleles of a point missense alteration.

    V600K and V600D are alleles of V600E. The query itself, positioned
    entries (V600) and entries with the same substituted residue are not.
    """
    if not _is_point_missense(alteration):
        return []

    alleles = []
    for alt in get_all_missense_alleles(reference_genome, alteration.protein_start, catalogue):
        if alt == alteration or alt.is_positioned:
            continue
        if alt.ref_residues and alteration.ref_residues and alt.ref_residues != alteration.ref_residues:
            continue
        if alt.variant_residues and alt.variant_residues == alteration.variant_residues:
            continue
        alleles.append(alt)
    return alleles


def get_positioned_alterations(
    reference_genome: ReferenceGenome | None,
    alteration: Alteration,
    catalogue: Collection[Alteration],
) -> list[Alteration]:
    """Bare residue entries (V600) at the query position."""
    if not alteration.is_single_residue:
        return []

    reference_residue = alteration.ref_residues[0] if alteration.ref_residues else None
    matches = find_mutations_by_consequence_and_position_on_same_position(
        alteration.gene,
        reference_genome,
        get_consequence(NA),
        alteration.protein_start,
        alteration.protein_end,
        reference_residue,
        catalogue,
    )
    # Bare positions curated with an explicit missense consequence
    matches.extend(
        alt for alt in find_mutations_by_consequence_and_position_on_same_position(
            alteration.gene,
            reference_genome,
            get_consequence(MISSENSE_VARIANT),
            alteration.protein_start,
            alteration.protein_end,
            reference_residue,
            catalogue,
        )
        if alt.is_positioned and alt not in matches
    )
    return [alt for alt in matches if alt != alteration and alt.is_positioned]


def residue_agrees(range_alteration: Alteration, alteration: Alteration) -> bool:
    """Check the range entry's reference residue at the query offset.

    Without reference residues on either side the range is accepted. An
    offset past the end of the range's reference string rejects it.
    """
    if not range_alteration.ref_residues or not alteration.ref_residues:
        return True
    offset = abs(alteration.protein_start - range_alteration.protein_start)
    if offset >= len(range_alteration.ref_residues):
        return False
    return range_alteration.ref_residues[offset] == alteration.ref_residues[0]


def get_range_alterations(
    reference_genome: ReferenceGenome | None,
    alteration: Alteration,
    catalogue: Collection[Alteration],
) -> list[Alteration]:
    """Multi-residue entries spanning the query whose sequence context agrees."""
    return [
        alt for alt in find_mutations_by_consequence_and_position(
            alteration.gene,
            reference_genome,
            alteration.consequence,
            alteration.protein_start,
            alteration.protein_end,
            catalogue,
        )
        if alt.protein_start != alt.protein_end and residue_agrees(alt, alteration)
    ]
