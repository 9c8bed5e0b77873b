"""Naming utilities for curated alteration names.

Handles:
- Abbreviation expansion ("Amp" -> "Amplification")
- Exclusion clauses ("Oncogenic Mutations {excluding V600E; V600K}")
- Fusion names ("EML4-ALK Fusion", "BCR-ABL1")
"""

import re

from oncomatch.config.constants import ABBREVIATIONS
from oncomatch.config.debug import get_logger

logger = get_logger(__name__)

# Trailing clause in braces or parentheses: {excluding A; B} or (exclude A, B)
EXCLUSION_PATTERN = re.compile(
    r'^(?P<base>.*?)\s*[\{\(]\s*(?:excluding|exclude)\b(?P<excluded>.*?)[\}\)]\s*$',
    re.IGNORECASE
)
EXCLUSION_SEPARATOR = re.compile(r'\s*[;,]\s*')

FUSION_PATTERN = re.compile(
    r'^(?P<first>[A-Za-z0-9.]+)-(?P<second>[A-Za-z0-9.]+)(?P<suffix>\s+fusion)?$',
    re.IGNORECASE
)


def has_abbreviation(text: str | None) -> bool:
    """Check if the text is a known abbreviation."""
    return bool(text) and text.strip().lower() in ABBREVIATIONS


def get_full_name(text: str) -> str | None:
    """Get the full name for an abbreviation, or None."""
    return ABBREVIATIONS.get(text.strip().lower())


def expand(text: str) -> str:
    """Expand an abbreviation, returning the text unchanged if it is not one."""
    return get_full_name(text) or text


def _parse_exclusion(text: str | None) -> tuple[str, list[str]] | None:
    if not text:
        return None
    match = EXCLUSION_PATTERN.match(text.strip())
    if not match:
        if "exclud" in text.lower():
            logger.warning(f"Ignoring malformed exclusion clause in '{text}'")
        return None
    excluded = [name for name in EXCLUSION_SEPARATOR.split(match.group("excluded").strip()) if name]
    base = match.group("base").strip()
    if not excluded or not base:
        logger.warning(f"Ignoring malformed exclusion clause in '{text}'")
        return None
    return base, excluded


def has_exclusion_criteria(text: str | None) -> bool:
    """Check if an alteration name carries a well-formed exclusion clause."""
    return _parse_exclusion(text) is not None


def remove_exclusion_criteria(text: str) -> str:
    """Strip the exclusion clause from a name.

    Examples:
        >>> remove_exclusion_criteria("Oncogenic Mutations {excluding V600E}")
        'Oncogenic Mutations'
    """
    parsed = _parse_exclusion(text)
    return parsed[0] if parsed else text


def get_excluded_names(text: str | None) -> list[str]:
    """Get the alteration names listed in an exclusion clause, in order.

    Malformed clauses yield an empty list.
    """
    parsed = _parse_exclusion(text)
    return parsed[1] if parsed else []


def is_fusion(text: str | None) -> bool:
    """Check if the text names a fusion (contains 'fusion' or is GENE1-GENE2)."""
    if not text:
        return False
    text = text.strip()
    if "fusion" in text.lower():
        return True
    match = FUSION_PATTERN.match(text)
    return bool(match) and _is_gene_symbol(match.group("first")) and _is_gene_symbol(match.group("second"))


def get_reverse_fusion_name(text: str) -> str | None:
    """Swap fusion partners: "ALK-EML4 Fusion" -> "EML4-ALK Fusion"."""
    match = FUSION_PATTERN.match(text.strip())
    if not match:
        return None
    return f"{match.group('second')}-{match.group('first')}{match.group('suffix') or ''}"


def _is_gene_symbol(token: str) -> bool:
    # Residue positions (V600, 746) are not fusion partners
    return token[0].isalpha() and not re.match(r'^[A-Z*]\d+[A-Z]?$', token)
