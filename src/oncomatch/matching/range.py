"""Consequence and protein-range matching."""

from typing import Collection, Iterable

from oncomatch.models.alteration import Alteration
from oncomatch.models.consequence import ReferenceGenome, VariantConsequence, consequence_related
from oncomatch.models.gene import Gene


def _same_gene(alteration: Alteration, gene: Gene) -> bool:
    return alteration.gene.entrez_gene_id == gene.entrez_gene_id


def find_overlap_alterations(
    catalogue: Iterable[Alteration],
    gene: Gene,
    reference_genome: ReferenceGenome | None,
    consequence: VariantConsequence,
    start: int,
    end: int,
) -> list[Alteration]:
    """Catalogue alterations with a related consequence whose range intersects [start, end]."""
    return [
        alt for alt in catalogue
        if _same_gene(alt, gene)
        and alt.is_valid_for(reference_genome)
        and alt.consequence is not None
        and consequence_related(consequence, alt.consequence)
        and alt.has_position
        and alt.protein_start <= end
        and alt.protein_end >= start
    ]


def sort_alterations_by_range(alterations: list[Alteration], start: int, end: int) -> list[Alteration]:
    """Sort alterations closest to the query range first.

    Closeness is the distance between range midpoints, ties broken by
    ascending start. Alterations without a position sort last.
    """
    midpoint = (start + end) / 2

    def closeness(alt: Alteration) -> tuple:
        if not alt.has_position:
            return (1, 0.0, 0, alt.alteration)
        distance = abs((alt.protein_start + alt.protein_end) / 2 - midpoint)
        return (0, distance, alt.protein_start, alt.alteration)

    return sorted(alterations, key=closeness)


def find_mutations_by_consequence_and_position(
    gene: Gene | None,
    reference_genome: ReferenceGenome | None,
    consequence: VariantConsequence | None,
    start: int | None,
    end: int | None,
    catalogue: Collection[Alteration],
) -> list[Alteration]:
    """Find curated alterations overlapping a consequence and protein range.

    Returns:
        Matching alterations ordered by range closeness; empty for a missing
        gene, consequence or range, and for NA consequence.
    """
    if gene is None or consequence is None or consequence.is_na or start is None or end is None:
        return []

    matches = list(dict.fromkeys(
        find_overlap_alterations(catalogue, gene, reference_genome, consequence, start, end)
    ))
    return sort_alterations_by_range(matches, start, end)


def find_mutations_by_consequence_and_position_on_same_position(
    gene: Gene | None,
    reference_genome: ReferenceGenome | None,
    consequence: VariantConsequence | None,
    start: int | None,
    end: int | None,
    reference_residue: str | None,
    catalogue: Collection[Alteration],
) -> list[Alteration]:
    """Find single-residue alterations within [start, end].

    When both sides have reference residues they must be identical.
    """
    if gene is None or consequence is None or start is None or end is None:
        return []

    matches = [
        alt for alt in catalogue
        if _same_gene(alt, gene)
        and alt.consequence is not None
        and consequence_related(consequence, alt.consequence)
        and alt.has_position
        and alt.is_valid_for(reference_genome)
        and alt.protein_start == alt.protein_end
        and start <= alt.protein_start <= end
        and (alt.ref_residues is None or reference_residue is None or alt.ref_residues == reference_residue)
    ]
    return list(dict.fromkeys(matches))
