"""Tests for exclusion clause filtering."""

from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.relevant import RelevantAlterations
from oncomatch.resolution.exclusion import ExclusionFilter

GRCH37 = ReferenceGenome.GRCH37


class TestExcludedNames:
    """Tests for categorical exclusion name expansion."""

    def test_single_residue_expands_to_alleles(self, braf, classifier, braf_catalogue):
        query = classifier.build(braf, "Oncogenic Mutations {excluding V600E}")
        names = ExclusionFilter(classifier).excluded_names(GRCH37, query, braf_catalogue.values())
        assert names == {"v600e", "v600k"}

    def test_range_not_expanded(self, egfr, classifier, egfr_catalogue):
        query = classifier.build(egfr, "Oncogenic Mutations {excluding 762_823ins}")
        names = ExclusionFilter(classifier).excluded_names(GRCH37, query, egfr_catalogue.values())
        assert names == {"762_823ins"}

    def test_subtract_without_clause(self, braf, classifier, braf_catalogue):
        relevant = RelevantAlterations([braf_catalogue["V600E"]])
        query = classifier.build(braf, "Oncogenic Mutations")
        assert ExclusionFilter(classifier).subtract(GRCH37, query, relevant, braf_catalogue.values()) is relevant


class TestNamesToMatch:
    """Tests for the names checked against member clauses."""

    def test_alleles_removed(self, braf_catalogue):
        c = braf_catalogue
        relevant = RelevantAlterations([c["V600K"], c["V600E"], c["Oncogenic Mutations"]])
        names = ExclusionFilter.names_to_match(c["V600K"], relevant, True, [c["V600E"]])
        assert names == {"v600k", "oncogenic mutations"}

    def test_uncurated_query_included(self, braf, classifier, braf_catalogue):
        query = classifier.build(braf, "V600M")
        relevant = RelevantAlterations([braf_catalogue["V600"]])
        names = ExclusionFilter.names_to_match(query, relevant, False, [])
        assert names == {"v600m", "v600"}

    def test_in_frame_indel_uses_own_name(self, egfr_catalogue):
        c = egfr_catalogue
        relevant = RelevantAlterations([c["A763_Y764insFQEA"], c["762_823ins"]])
        names = ExclusionFilter.names_to_match(c["A763_Y764insFQEA"], relevant, True, [])
        assert names == {"a763_y764insfqea"}


class TestPrune:
    """Tests for dropping members whose clause names the query."""

    def test_prune(self, braf, make_catalogue):
        c = make_catalogue(braf, "V600E", "Oncogenic Mutations {excluding V600E}", "Oncogenic Mutations")
        relevant = RelevantAlterations(c.values())
        pruned = ExclusionFilter.prune(relevant, {"v600e"})
        assert pruned.names() == ["V600E", "Oncogenic Mutations"]

    def test_prune_case_insensitive(self, braf, make_catalogue):
        c = make_catalogue(braf, "Oncogenic Mutations (excluding v600E)")
        assert not ExclusionFilter.prune(RelevantAlterations(c.values()), {"v600e"})

    def test_no_overlap_keeps_members(self, braf, make_catalogue):
        c = make_catalogue(braf, "Oncogenic Mutations {excluding V600E}")
        relevant = RelevantAlterations(c.values())
        assert ExclusionFilter.prune(relevant, {"v600k"}).names() == ["Oncogenic Mutations {excluding V600E}"]
