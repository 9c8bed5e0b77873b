"""Pytest configuration and fixtures."""

import pytest

from oncomatch.models.evidence import Evidence, EvidenceType, Hotspot
from oncomatch.models.gene import Gene
from oncomatch.normalization.alteration_parser import ConsequenceClassifier
from oncomatch.providers.memory import KnowledgeBase
from oncomatch.resolution.orchestrator import RelevantAlterationResolver


@pytest.fixture
def classifier():
    """Default consequence classifier."""
    return ConsequenceClassifier()


@pytest.fixture
def braf():
    return Gene(entrez_gene_id=673, hugo_symbol="BRAF", oncogene=True, tsg=False)


@pytest.fixture
def egfr():
    return Gene(entrez_gene_id=1956, hugo_symbol="EGFR", oncogene=True, tsg=False)


@pytest.fixture
def tp53():
    return Gene(entrez_gene_id=7157, hugo_symbol="TP53", oncogene=False, tsg=True)


@pytest.fixture
def make_catalogue(classifier):
    """Build {name: Alteration} for a gene from alteration names or (name, fields) pairs."""
    def _make(gene, *entries):
        catalogue = {}
        for entry in entries:
            if isinstance(entry, tuple):
                name, fields = entry
            else:
                name, fields = entry, {}
            catalogue[name] = classifier.build(gene, name, **fields)
        return catalogue
    return _make


@pytest.fixture
def make_evidence():
    """Build an evidence record for some alterations."""
    def _make(evidence_type, gene, alterations, known_effect=None):
        return Evidence(
            evidence_type=evidence_type,
            gene=gene,
            alterations=list(alterations),
            known_effect=known_effect,
        )
    return _make


@pytest.fixture
def braf_catalogue(braf, make_catalogue):
    """BRAF catalogue with point mutations, a bare position and umbrella entries."""
    return make_catalogue(
        braf,
        "V600E",
        "V600K",
        "V600",
        "K601E",
        "G469A",
        "Oncogenic Mutations",
        "Truncating Mutations",
        "Gain-of-function Mutations",
        "Amplification",
        "VUS",
    )


@pytest.fixture
def braf_kb(braf, braf_catalogue, make_evidence):
    """In-memory BRAF knowledge base.

    V600E Oncogenic, V600K and G469A Likely Oncogenic, K601E Likely Neutral.
    V600E and V600K carry gain-of-function mutation effects.
    """
    c = braf_catalogue
    evidence = [
        make_evidence(EvidenceType.ONCOGENIC, braf, [c["V600E"]], "Oncogenic"),
        make_evidence(EvidenceType.ONCOGENIC, braf, [c["V600K"]], "Likely Oncogenic"),
        make_evidence(EvidenceType.ONCOGENIC, braf, [c["G469A"]], "Likely Oncogenic"),
        make_evidence(EvidenceType.ONCOGENIC, braf, [c["K601E"]], "Likely Neutral"),
        make_evidence(EvidenceType.MUTATION_EFFECT, braf, [c["V600E"]], "Gain-of-function"),
        make_evidence(EvidenceType.MUTATION_EFFECT, braf, [c["V600K"]], "Likely Gain-of-function"),
    ]
    return KnowledgeBase(genes=[braf], alterations=c.values(), evidence=evidence)


@pytest.fixture
def egfr_catalogue(egfr, make_catalogue):
    return make_catalogue(
        egfr,
        "A763_Y764insFQEA",
        "762_823ins",
        "CTD",
        "vIVa",
        "E746_A750del",
        "L858R",
        "Truncating Mutations",
    )


@pytest.fixture
def egfr_kb(egfr, egfr_catalogue):
    return KnowledgeBase(genes=[egfr], alterations=egfr_catalogue.values())


@pytest.fixture
def tp53_catalogue(tp53, make_catalogue):
    return make_catalogue(
        tp53,
        "R248Q",
        "R248W",
        "200_300mut",
        "Deletion",
        "Truncating Mutations",
        "Oncogenic Mutations",
        "VUS",
    )


@pytest.fixture
def tp53_kb(tp53, tp53_catalogue, make_evidence):
    c = tp53_catalogue
    evidence = [
        make_evidence(EvidenceType.ONCOGENIC, tp53, [c["R248Q"]], "Oncogenic"),
        make_evidence(EvidenceType.ONCOGENIC, tp53, [c["Truncating Mutations"]], "Likely Oncogenic"),
    ]
    return KnowledgeBase(
        genes=[tp53],
        alterations=c.values(),
        evidence=evidence,
        hotspots=[Hotspot(hugo_symbol="TP53", protein_start=273, protein_end=273)],
    )


@pytest.fixture
def knowledge_base(braf_kb, egfr_kb, tp53_kb):
    """One knowledge base holding the BRAF, EGFR and TP53 fixtures."""
    kb = KnowledgeBase()
    for source in (braf_kb, egfr_kb, tp53_kb):
        for gene in source.genes:
            kb.add_gene(gene)
            for alteration in source.alterations_for_gene(gene):
                kb.add_alteration(alteration)
        for evidence in source.evidence:
            kb.add_evidence(evidence)
        for hotspot in source.hotspots:
            kb.add_hotspot(hotspot)
    return kb


@pytest.fixture
def resolver(knowledge_base):
    return RelevantAlterationResolver.from_knowledge_base(knowledge_base)
