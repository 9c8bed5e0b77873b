"""Catalogue matchers: exact name, consequence/range and same-position."""

from oncomatch.matching.allele import (
    get_all_missense_alleles,
    get_allele_alterations,
    get_positioned_alterations,
    get_range_alterations,
    residue_agrees,
)
from oncomatch.matching.exact import find_alteration, find_exactly_matched_alteration
from oncomatch.matching.range import (
    find_mutations_by_consequence_and_position,
    find_mutations_by_consequence_and_position_on_same_position,
    sort_alterations_by_range,
)

__all__ = [
    "find_alteration",
    "find_exactly_matched_alteration",
    "find_mutations_by_consequence_and_position",
    "find_mutations_by_consequence_and_position_on_same_position",
    "sort_alterations_by_range",
    "get_all_missense_alleles",
    "get_allele_alterations",
    "get_positioned_alterations",
    "get_range_alterations",
    "residue_agrees",
]
