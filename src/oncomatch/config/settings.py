"""Resolver configuration.

Values can be set programmatically or from the environment:
    ONCOMATCH_REFERENCE_GENOME=GRCh37|GRCh38
    ONCOMATCH_INCLUDE_ALTERNATIVE_ALLELE=true|false
    ONCOMATCH_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
"""

import os
from dataclasses import dataclass

from oncomatch.config.debug import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from oncomatch.models.consequence import ReferenceGenome

REFERENCE_GENOME_ENV = "ONCOMATCH_REFERENCE_GENOME"
INCLUDE_ALTERNATIVE_ALLELE_ENV = "ONCOMATCH_INCLUDE_ALTERNATIVE_ALLELE"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ResolverConfig:
    """Configuration for relevant-alteration resolution.

    Example:
        >>> config = ResolverConfig(reference_genome=ReferenceGenome.GRCH38)
        >>> resolver = RelevantAlterationResolver.from_knowledge_base(kb, config=config)
    """

    reference_genome: ReferenceGenome | None = ReferenceGenome.GRCH37
    include_alternative_allele: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """Build a config from ONCOMATCH_* environment variables."""
        config = cls()

        genome = os.environ.get(REFERENCE_GENOME_ENV)
        if genome:
            config.reference_genome = ReferenceGenome.from_name(genome)

        allele = os.environ.get(INCLUDE_ALTERNATIVE_ALLELE_ENV)
        if allele is not None:
            config.include_alternative_allele = allele.strip().lower() in _TRUE_VALUES

        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            config.log_level = level.upper()

        return config
