"""Collaborators for the resolution engine: interfaces, memory store and file loaders."""

from oncomatch.providers.base import (
    CatalogueProvider,
    EvidenceProvider,
    GeneProvider,
    OncogenicityProvider,
)
from oncomatch.providers.memory import KnowledgeBase
from oncomatch.providers.loader import (
    load_catalogue,
    load_evidence,
    load_hotspots,
    load_knowledge_base,
)

__all__ = [
    "CatalogueProvider",
    "EvidenceProvider",
    "GeneProvider",
    "OncogenicityProvider",
    "KnowledgeBase",
    "load_catalogue",
    "load_evidence",
    "load_hotspots",
    "load_knowledge_base",
]
