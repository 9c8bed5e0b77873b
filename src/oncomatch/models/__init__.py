"""Data models for OncoMatch."""

from oncomatch.models.consequence import (
    ReferenceGenome,
    VariantConsequence,
    consequence_related,
    find_consequence_by_term,
    get_consequence,
)
from oncomatch.models.gene import Gene
from oncomatch.models.alteration import Alteration, AlterationType
from oncomatch.models.evidence import (
    Evidence,
    EvidenceType,
    Hotspot,
    Oncogenicity,
    normalize_known_effect,
    strongest_oncogenicity,
)
from oncomatch.models.categorical import CategoricalAlteration
from oncomatch.models.relevant import RelevantAlterations

__all__ = [
    "Gene",
    "Alteration",
    "AlterationType",
    "ReferenceGenome",
    "VariantConsequence",
    "consequence_related",
    "find_consequence_by_term",
    "get_consequence",
    "Evidence",
    "EvidenceType",
    "Hotspot",
    "Oncogenicity",
    "normalize_known_effect",
    "strongest_oncogenicity",
    "CategoricalAlteration",
    "RelevantAlterations",
]
