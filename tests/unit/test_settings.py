"""Tests for resolver configuration."""

import pytest

from oncomatch.config.settings import (
    INCLUDE_ALTERNATIVE_ALLELE_ENV,
    REFERENCE_GENOME_ENV,
    ResolverConfig,
)
from oncomatch.models.consequence import ReferenceGenome


class TestResolverConfig:
    """Tests for ResolverConfig defaults and environment loading."""

    def test_defaults(self):
        config = ResolverConfig()
        assert config.reference_genome == ReferenceGenome.GRCH37
        assert config.include_alternative_allele is True
        assert config.log_level == "INFO"

    def test_from_env_empty(self, monkeypatch):
        monkeypatch.delenv(REFERENCE_GENOME_ENV, raising=False)
        monkeypatch.delenv(INCLUDE_ALTERNATIVE_ALLELE_ENV, raising=False)
        monkeypatch.delenv("ONCOMATCH_LOG_LEVEL", raising=False)
        assert ResolverConfig.from_env() == ResolverConfig()

    def test_from_env_values(self, monkeypatch):
        monkeypatch.setenv(REFERENCE_GENOME_ENV, "grch38")
        monkeypatch.setenv(INCLUDE_ALTERNATIVE_ALLELE_ENV, "false")
        monkeypatch.setenv("ONCOMATCH_LOG_LEVEL", "debug")

        config = ResolverConfig.from_env()
        assert config.reference_genome == ReferenceGenome.GRCH38
        assert config.include_alternative_allele is False
        assert config.log_level == "DEBUG"

    def test_from_env_unknown_genome(self, monkeypatch):
        monkeypatch.setenv(REFERENCE_GENOME_ENV, "hg19")
        with pytest.raises(ValueError):
            ResolverConfig.from_env()
