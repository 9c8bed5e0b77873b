"""Alteration annotation: consequence and protein position from a name.

Curated alterations and queries arrive as free text ("V600E",
"746_750del", "Truncating Mutations"). This module classifies them into a
VariantConsequence and fills protein start/end and residues so the matchers
can compare them.

Examples:
    >>> classifier = ConsequenceClassifier()
    >>> classifier.classify("V600E").term
    'missense_variant'
    >>> parsed = parse_alteration("L747_P753delinsS")
    >>> parsed.consequence, parsed.protein_start, parsed.protein_end
    ('in_frame_deletion', 747, 753)
"""

import re
from dataclasses import dataclass

from oncomatch.config.constants import (
    AMINO_ACID_3TO1,
    AMPLIFICATION,
    ANY,
    DELETION,
    FEATURE_TRUNCATION,
    FRAMESHIFT_VARIANT,
    FUSION,
    FUSIONS,
    GAIN_OF_FUNCTION_MUTATIONS,
    IN_FRAME_DELETION,
    IN_FRAME_INSERTION,
    LOSS_OF_FUNCTION_MUTATIONS,
    MISSENSE_VARIANT,
    NA,
    ONCOGENIC_MUTATIONS,
    POSITION_NOT_APPLICABLE,
    PROTEIN_END_MAX,
    SPLICE_REGION_VARIANT,
    START_LOST,
    STOP_GAINED,
    STOP_LOST,
    SWITCH_OF_FUNCTION_MUTATIONS,
    SYNONYMOUS_VARIANT,
    TRUNCATING_MUTATIONS,
    VUS,
    WILDTYPE,
)
from oncomatch.config.debug import get_logger
from oncomatch.models.alteration import Alteration, AlterationType
from oncomatch.models.consequence import VariantConsequence, find_consequence_by_term, get_consequence
from oncomatch.models.gene import Gene
from oncomatch.normalization.naming import (
    expand,
    get_excluded_names,
    has_abbreviation,
    is_fusion,
    remove_exclusion_criteria,
)

logger = get_logger(__name__)


@dataclass
class ParsedAlteration:
    """Annotation derived from an alteration name."""
    consequence: str = NA
    alteration_type: AlterationType = AlterationType.MUTATION
    protein_start: int | None = None
    protein_end: int | None = None
    ref_residues: str | None = None
    variant_residues: str | None = None


# Whole-gene names: (consequence, alteration type)
NAMED_ALTERATIONS: dict[str, tuple[str, AlterationType]] = {
    TRUNCATING_MUTATIONS.lower(): (FEATURE_TRUNCATION, AlterationType.MUTATION),
    FUSIONS.lower(): (FUSION, AlterationType.FUSION),
    ONCOGENIC_MUTATIONS.lower(): (NA, AlterationType.MUTATION),
    GAIN_OF_FUNCTION_MUTATIONS.lower(): (NA, AlterationType.MUTATION),
    LOSS_OF_FUNCTION_MUTATIONS.lower(): (NA, AlterationType.MUTATION),
    SWITCH_OF_FUNCTION_MUTATIONS.lower(): (NA, AlterationType.MUTATION),
    VUS.lower(): (NA, AlterationType.MUTATION),
    AMPLIFICATION.lower(): (NA, AlterationType.COPY_NUMBER_ALTERATION),
    DELETION.lower(): (NA, AlterationType.COPY_NUMBER_ALTERATION),
    WILDTYPE.lower(): (NA, AlterationType.MUTATION),
}

# V600E, V600, V600*, V600=, *757L, M1?, KV600_601EE-style multi-residue substitutions
SUBSTITUTION_PATTERN = re.compile(r'^([A-Z*]+)(\d+)([A-Z*?=]*)$')
# L747_P753delinsS, 746_750del, V600_K601insE, 762_823ins, 600_610mut, 40_60trunc
RANGE_PATTERN = re.compile(
    r'^([A-Z*])?(\d+)(?:_([A-Z*])?(\d+))?'
    r'(delins|del|ins|dup|mut|missense|trunc|splice)([A-Z*]*)$',
    re.IGNORECASE
)
# R248fs, R248Pfs*12, Q61fs*?
FRAMESHIFT_PATTERN = re.compile(r'^([A-Z*])(\d+)[A-Z*]?fs(?:\*?\d*|\*\?)?$', re.IGNORECASE)
THREE_LETTER_PATTERN = re.compile(r'([A-Z][a-z]{2})')

_RANGE_KEYWORD_CONSEQUENCES = {
    "del": IN_FRAME_DELETION,
    "ins": IN_FRAME_INSERTION,
    "dup": IN_FRAME_INSERTION,
    "mut": ANY,
    "missense": MISSENSE_VARIANT,
    "trunc": FEATURE_TRUNCATION,
    "splice": SPLICE_REGION_VARIANT,
}


def _to_one_letter(text: str) -> str:
    """Convert three-letter residues (Val600Glu) to one-letter (V600E)."""
    if not re.match(r'^[A-Z][a-z]{2}\d', text):
        return text

    def replace(match: re.Match) -> str:
        return AMINO_ACID_3TO1.get(match.group(1).upper(), match.group(1))

    return THREE_LETTER_PATTERN.sub(replace, text)


def _whole_gene(consequence: str, alteration_type: AlterationType) -> ParsedAlteration:
    return ParsedAlteration(
        consequence=consequence,
        alteration_type=alteration_type,
        protein_start=POSITION_NOT_APPLICABLE,
        protein_end=PROTEIN_END_MAX,
    )


def _parse_substitution(match: re.Match) -> ParsedAlteration:
    ref, position, var = match.group(1), int(match.group(2)), match.group(3)
    parsed = ParsedAlteration(
        protein_start=position,
        protein_end=position + len(ref) - 1,
        ref_residues=ref,
        variant_residues=var or None,
    )

    if not var:
        parsed.consequence = NA
    elif var == "=" or var == ref:
        parsed.consequence = SYNONYMOUS_VARIANT
    elif ref == "M" and position == 1:
        parsed.consequence = START_LOST
    elif ref.startswith("*"):
        parsed.consequence = STOP_LOST
    elif "*" in var:
        parsed.consequence = STOP_GAINED
    elif var == "?":
        parsed.consequence = NA
    elif len(var) == len(ref):
        parsed.consequence = MISSENSE_VARIANT
    return parsed


def _parse_range(match: re.Match) -> ParsedAlteration:
    ref_start, start, ref_end, end = match.group(1), int(match.group(2)), match.group(3), match.group(4)
    keyword, inserted = match.group(5).lower(), match.group(6)
    end = int(end) if end else start

    parsed = ParsedAlteration(protein_start=start, protein_end=end, variant_residues=inserted or None)
    if ref_start and start == end:
        parsed.ref_residues = ref_start.upper()
    elif ref_start and ref_end and end == start + 1:
        parsed.ref_residues = (ref_start + ref_end).upper()

    if keyword == "delins":
        deleted_length = end - start + 1
        if len(inserted) < deleted_length:
            parsed.consequence = IN_FRAME_DELETION
        elif len(inserted) > deleted_length:
            parsed.consequence = IN_FRAME_INSERTION
        else:
            parsed.consequence = MISSENSE_VARIANT
    else:
        parsed.consequence = _RANGE_KEYWORD_CONSEQUENCES[keyword]
    return parsed


def parse_alteration(text: str | None) -> ParsedAlteration:
    """Derive consequence and position from an alteration name.

    Unrecognized names get consequence NA and no position.
    """
    if not text:
        return ParsedAlteration()

    name = remove_exclusion_criteria(text.strip())
    if has_abbreviation(name):
        name = expand(name)
    if name.lower().startswith("p."):
        name = name[2:]

    named = NAMED_ALTERATIONS.get(name.lower())
    if named:
        return _whole_gene(*named)

    if is_fusion(name):
        return _whole_gene(FUSION, AlterationType.FUSION)

    name = _to_one_letter(name)
    name = re.sub(r"_splice$", "splice", name, flags=re.IGNORECASE)

    match = SUBSTITUTION_PATTERN.match(name)
    if match:
        return _parse_substitution(match)

    match = RANGE_PATTERN.match(name)
    if match:
        return _parse_range(match)

    match = FRAMESHIFT_PATTERN.match(name)
    if match:
        position = int(match.group(2))
        return ParsedAlteration(
            consequence=FRAMESHIFT_VARIANT,
            protein_start=position,
            protein_end=position,
            ref_residues=match.group(1).upper(),
        )

    # Lower case residues (v600e)
    match = SUBSTITUTION_PATTERN.match(name.upper())
    if match:
        return _parse_substitution(match)

    logger.debug(f"No consequence pattern for '{text}', using {NA}")
    return ParsedAlteration()


class ConsequenceClassifier:
    """Default consequence classifier backed by the curated vocabulary."""

    def consequence_by_term(self, term: str) -> VariantConsequence | None:
        return find_consequence_by_term(term)

    def classify(self, text: str | None) -> VariantConsequence:
        """Classify raw alteration text into a consequence (NA if unknown)."""
        return get_consequence(parse_alteration(text).consequence)

    def annotate(self, alteration: Alteration) -> Alteration:
        """Fill a missing consequence and position on an alteration, in place.

        Only empty fields are set; curated values are kept.
        """
        parsed = parse_alteration(alteration.alteration)
        if alteration.consequence is None:
            alteration.consequence = get_consequence(parsed.consequence)
        if alteration.protein_start is None and alteration.protein_end is None:
            alteration.protein_start = parsed.protein_start
            alteration.protein_end = parsed.protein_end
        if alteration.ref_residues is None:
            alteration.ref_residues = parsed.ref_residues
        if alteration.variant_residues is None:
            alteration.variant_residues = parsed.variant_residues
        if alteration.alteration_type == AlterationType.MUTATION and parsed.alteration_type != AlterationType.MUTATION:
            alteration.alteration_type = parsed.alteration_type
        return alteration

    def build(self, gene: Gene, text: str, consequence: str | None = None, **fields) -> Alteration:
        """Create an annotated alteration for a gene from text.

        Args:
            gene: Gene of the alteration
            text: Alteration name (e.g., "V600E")
            consequence: Optional explicit consequence term, overriding classification
            **fields: Other Alteration fields (reference_genomes, name, ...)
        """
        alteration = Alteration(gene=gene, alteration=text.strip(), **fields)
        if consequence:
            explicit = self.consequence_by_term(consequence)
            if explicit is None:
                logger.warning(f"Unknown consequence term '{consequence}' for {gene} {text}, classifying from name")
            alteration.consequence = explicit
        return self.annotate(alteration)

    def exclusion_alterations(self, gene: Gene, text: str) -> list[Alteration]:
        """Annotated alterations named in the exclusion clause of text."""
        return [self.build(gene, name) for name in get_excluded_names(text)]
