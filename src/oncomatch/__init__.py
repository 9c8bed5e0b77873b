"""OncoMatch - relevant alteration resolution for curated cancer knowledge bases.

Public API:
    >>> from oncomatch import KnowledgeBase, RelevantAlterationResolver
    >>> resolver = RelevantAlterationResolver.from_knowledge_base(kb)
    >>> resolver.resolve_query("BRAF", "V600E").names()

Loading curated files:
    >>> from oncomatch import load_knowledge_base
    >>> kb = load_knowledge_base("catalogue.tsv", evidence_path="evidence.tsv")
"""

__version__ = "0.1.0"

# Public API
from oncomatch.config.settings import ResolverConfig
from oncomatch.errors import CatalogueLoadError, OncomatchError, UnknownGeneError
from oncomatch.providers import KnowledgeBase, load_knowledge_base
from oncomatch.resolution import RelevantAlterationResolver

# Core models
from oncomatch.models import (
    Alteration,
    Evidence,
    Gene,
    Oncogenicity,
    ReferenceGenome,
    RelevantAlterations,
    VariantConsequence,
)
from oncomatch.normalization import ConsequenceClassifier

__all__ = [
    # Version
    "__version__",
    # Public API
    "KnowledgeBase",
    "RelevantAlterationResolver",
    "ResolverConfig",
    "load_knowledge_base",
    # Errors
    "OncomatchError",
    "CatalogueLoadError",
    "UnknownGeneError",
    # Core models
    "Alteration",
    "Evidence",
    "Gene",
    "Oncogenicity",
    "ReferenceGenome",
    "RelevantAlterations",
    "VariantConsequence",
    "ConsequenceClassifier",
]
