"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from oncomatch import __version__
from oncomatch.cli import app

runner = CliRunner()


@pytest.fixture
def files(tmp_path):
    catalogue = tmp_path / "catalogue.tsv"
    catalogue.write_text(
        "gene\tentrez_gene_id\talteration\toncogene\ttsg\n"
        "BRAF\t673\tV600E\tyes\tno\n"
        "BRAF\t673\tV600K\tyes\tno\n"
        "BRAF\t673\tOncogenic Mutations\tyes\tno\n"
    )
    evidence = tmp_path / "evidence.tsv"
    evidence.write_text(
        "gene\talteration\tevidence_type\tknown_effect\n"
        "BRAF\tV600E\tONCOGENIC\tOncogenic\n"
        "BRAF\tV600K\tONCOGENIC\tLikely Oncogenic\n"
    )
    return catalogue, evidence


class TestResolveCommand:
    """Tests for the resolve command."""

    def test_json(self, files):
        catalogue, evidence = files
        result = runner.invoke(app, [
            "resolve", "BRAF", "V600E", "-c", str(catalogue), "-e", str(evidence), "--json", "-l", "ERROR",
        ])
        assert result.exit_code == 0
        names = [row["alteration"] for row in json.loads(result.stdout)]
        assert names == ["V600E", "V600K", "Oncogenic Mutations"]

    def test_no_allele(self, files):
        catalogue, evidence = files
        result = runner.invoke(app, [
            "resolve", "BRAF", "V600E", "-c", str(catalogue), "-e", str(evidence),
            "--no-allele", "--json", "-l", "ERROR",
        ])
        assert result.exit_code == 0
        names = [row["alteration"] for row in json.loads(result.stdout)]
        assert names == ["V600E", "Oncogenic Mutations"]

    def test_table(self, files):
        catalogue, evidence = files
        result = runner.invoke(app, ["resolve", "braf", "V600E", "-c", str(catalogue), "-e", str(evidence), "-l", "ERROR"])
        assert result.exit_code == 0
        assert "V600K" in result.stdout

    def test_unknown_gene(self, files):
        catalogue, _ = files
        result = runner.invoke(app, ["resolve", "KRAS", "G12D", "-c", str(catalogue), "-l", "ERROR"])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_missing_catalogue(self, tmp_path):
        result = runner.invoke(app, ["resolve", "BRAF", "V600E", "-c", str(tmp_path / "missing.tsv"), "-l", "ERROR"])
        assert result.exit_code == 1

    def test_bad_genome(self, files):
        catalogue, _ = files
        result = runner.invoke(app, ["resolve", "BRAF", "V600E", "-c", str(catalogue), "-g", "hg19", "-l", "ERROR"])
        assert result.exit_code == 1


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_nonsense(self):
        result = runner.invoke(app, ["classify", "R248*", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["consequence"] == "stop_gained"
        assert data["is_generally_truncating"] is True
        assert data["protein_start"] == 248

    def test_in_frame_deletion(self):
        result = runner.invoke(app, ["classify", "746_750del", "--json"])
        data = json.loads(result.stdout)
        assert data["consequence"] == "in_frame_deletion"
        assert (data["protein_start"], data["protein_end"]) == (746, 750)


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
