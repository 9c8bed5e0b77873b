"""Tests for the in-memory knowledge base."""

import pytest

from oncomatch.errors import UnknownGeneError
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.evidence import EvidenceType, Hotspot, Oncogenicity
from oncomatch.providers.memory import KnowledgeBase


class TestCatalogueSnapshots:
    """Tests for catalogue snapshots and invalidation."""

    def test_snapshot_is_cached(self, braf_kb, braf):
        assert braf_kb.alterations_for_gene(braf) is braf_kb.alterations_for_gene(braf)

    def test_snapshot_is_immutable(self, braf_kb, braf):
        assert isinstance(braf_kb.alterations_for_gene(braf), tuple)

    def test_write_invalidates_snapshot(self, braf_kb, braf, classifier):
        before = braf_kb.alterations_for_gene(braf)
        braf_kb.add_alteration(classifier.build(braf, "V600D"))
        after = braf_kb.alterations_for_gene(braf)
        assert len(after) == len(before) + 1
        assert "V600D" not in [alt.alteration for alt in before]

    def test_add_replaces_equal_alteration(self, braf_kb, braf, classifier):
        count = len(braf_kb.alterations_for_gene(braf))
        braf_kb.add_alteration(classifier.build(braf, "V600E", name="BRAF V600E"))
        snapshot = braf_kb.alterations_for_gene(braf)
        assert len(snapshot) == count
        assert [alt.name for alt in snapshot if alt.alteration == "V600E"] == ["BRAF V600E"]

    def test_reference_genome_filter(self, braf, classifier):
        grch38 = classifier.build(braf, "V600E", reference_genomes=frozenset({ReferenceGenome.GRCH38}))
        kb = KnowledgeBase(alterations=[grch38, classifier.build(braf, "V600K")])
        names = [alt.alteration for alt in kb.alterations_for_gene(braf, ReferenceGenome.GRCH37)]
        assert names == ["V600K"]

    def test_other_gene_empty(self, braf_kb, tp53):
        assert braf_kb.alterations_for_gene(tp53) == ()


class TestEvidenceLookups:
    """Tests for evidence, oncogenicity, hotspot and VUS lookups."""

    def test_evidence_for_alterations(self, braf_kb, braf_catalogue):
        evidence = braf_kb.evidence_for_alterations([braf_catalogue["V600E"]], {EvidenceType.MUTATION_EFFECT})
        assert [e.known_effect for e in evidence] == ["Gain-of-function"]

    def test_evidence_for_gene(self, braf_kb, braf):
        assert len(braf_kb.evidence_for_gene(braf, {EvidenceType.ONCOGENIC})) == 4

    def test_curated_oncogenicities(self, braf_kb, braf_catalogue):
        assert braf_kb.curated_oncogenicities(braf_catalogue["V600K"]) == {Oncogenicity.LIKELY_ONCOGENIC}
        assert braf_kb.curated_oncogenicities(braf_catalogue["V600"]) == set()

    def test_hotspot_needs_eligible_consequence(self, braf, classifier):
        kb = KnowledgeBase(genes=[braf], hotspots=[Hotspot(hugo_symbol="BRAF", protein_start=600, protein_end=600)])
        assert kb.is_hotspot(classifier.build(braf, "V600E"))
        assert not kb.is_hotspot(classifier.build(braf, "V600*"))
        assert not kb.is_hotspot(classifier.build(braf, "K601E"))

    def test_vus_alterations(self, braf, classifier, make_evidence):
        t599i = classifier.build(braf, "T599I")
        kb = KnowledgeBase(genes=[braf], alterations=[t599i], evidence=[make_evidence(EvidenceType.VUS, braf, [t599i])])
        assert kb.vus_alterations(braf) == {t599i}


class TestGeneLookup:
    """Tests for gene lookup."""

    def test_by_symbol(self, braf_kb, braf):
        assert braf_kb.gene_by_hugo_symbol(" braf ") == braf
        assert braf_kb.gene_by_hugo_symbol("KRAS") is None

    def test_require_gene(self, braf_kb):
        with pytest.raises(UnknownGeneError, match="KRAS"):
            braf_kb.require_gene("KRAS")

    def test_alteration_registers_gene(self, tp53, classifier):
        kb = KnowledgeBase(alterations=[classifier.build(tp53, "R248Q")])
        assert kb.gene_by_hugo_symbol("TP53") == tp53
