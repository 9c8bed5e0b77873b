"""Tests for alteration naming utilities."""

import logging

from oncomatch.normalization.naming import (
    expand,
    get_excluded_names,
    get_full_name,
    get_reverse_fusion_name,
    has_abbreviation,
    has_exclusion_criteria,
    is_fusion,
    remove_exclusion_criteria,
)


class TestAbbreviations:
    """Tests for abbreviation expansion."""

    def test_known_abbreviations(self):
        assert has_abbreviation("Amp")
        assert get_full_name("amp") == "Amplification"
        assert expand("trunc") == "Truncating Mutations"

    def test_unknown_text_unchanged(self):
        assert not has_abbreviation("V600E")
        assert get_full_name("V600E") is None
        assert expand("V600E") == "V600E"

    def test_egfr_names_are_not_abbreviations(self):
        assert not has_abbreviation("CTD")
        assert expand("CTD") == "CTD"

    def test_empty(self):
        assert not has_abbreviation(None)
        assert not has_abbreviation("")


class TestExclusionClauses:
    """Tests for exclusion clause parsing."""

    def test_braces_with_semicolons(self):
        text = "Oncogenic Mutations {excluding V600E; V600K}"
        assert has_exclusion_criteria(text)
        assert remove_exclusion_criteria(text) == "Oncogenic Mutations"
        assert get_excluded_names(text) == ["V600E", "V600K"]

    def test_parentheses_with_commas(self):
        text = "Truncating Mutations (exclude R213*, Q136fs)"
        assert remove_exclusion_criteria(text) == "Truncating Mutations"
        assert get_excluded_names(text) == ["R213*", "Q136fs"]

    def test_keyword_case_insensitive(self):
        assert get_excluded_names("Oncogenic Mutations {Excluding V600E}") == ["V600E"]

    def test_no_clause(self):
        assert not has_exclusion_criteria("V600E")
        assert remove_exclusion_criteria("V600E") == "V600E"
        assert get_excluded_names("V600E") == []
        assert get_excluded_names(None) == []

    def test_malformed_clause_degrades(self, caplog):
        """Unterminated clauses are treated as having no exclusions."""
        text = "Oncogenic Mutations {excluding V600E"
        with caplog.at_level(logging.WARNING, logger="oncomatch.normalization.naming"):
            assert not has_exclusion_criteria(text)
        assert remove_exclusion_criteria(text) == text
        assert get_excluded_names(text) == []

    def test_empty_clause_degrades(self):
        assert get_excluded_names("Oncogenic Mutations {excluding }") == []


class TestFusionNames:
    """Tests for fusion detection and reversal."""

    def test_fusion_keyword(self):
        assert is_fusion("EML4-ALK Fusion")
        assert is_fusion("Fusions")

    def test_gene_pair(self):
        assert is_fusion("BCR-ABL1")

    def test_not_fusion(self):
        assert not is_fusion("V600E")
        assert not is_fusion("V600-K601")
        assert not is_fusion(None)

    def test_reverse(self):
        assert get_reverse_fusion_name("ALK-EML4 Fusion") == "EML4-ALK Fusion"
        assert get_reverse_fusion_name("BCR-ABL1") == "ABL1-BCR"
        assert get_reverse_fusion_name("V600E") is None
