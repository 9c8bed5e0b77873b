"""Centralized constants and vocabularies for OncoMatch.

This module consolidates the hardcoded vocabularies used across the codebase:
- Variant consequence terms and their truncating flags
- Consequence compatibility groups
- Umbrella (categorical) alteration names
- Abbreviations used in curated alteration names
- Amino acid codes
- Gene-specific special cases

Centralizing these makes maintenance easier and ensures consistency.
"""

# =============================================================================
# VARIANT CONSEQUENCES
# =============================================================================
# Sequence Ontology terms used by the curated catalogue, mapped to
# (is_generally_truncating, description)

ANY = "any"
NA = "NA"
MISSENSE_VARIANT = "missense_variant"
IN_FRAME_DELETION = "in_frame_deletion"
IN_FRAME_INSERTION = "in_frame_insertion"
FEATURE_TRUNCATION = "feature_truncation"
NON_TRUNCATING_VARIANT = "non_truncating_variant"
SYNONYMOUS_VARIANT = "synonymous_variant"
FUSION = "fusion"
FRAMESHIFT_VARIANT = "frameshift_variant"
STOP_GAINED = "stop_gained"
STOP_LOST = "stop_lost"
START_LOST = "start_lost"
SPLICE_REGION_VARIANT = "splice_region_variant"
SPLICE_DONOR_VARIANT = "splice_donor_variant"
SPLICE_ACCEPTOR_VARIANT = "splice_acceptor_variant"

VARIANT_CONSEQUENCES: dict[str, tuple[bool, str]] = {
    ANY: (False, "Any variant consequence"),
    NA: (False, "Not applicable"),
    MISSENSE_VARIANT: (False, "A sequence variant that changes one or more bases, resulting in a different amino acid sequence"),
    IN_FRAME_DELETION: (False, "An inframe non synonymous variant that deletes bases from the coding sequence"),
    IN_FRAME_INSERTION: (False, "An inframe non synonymous variant that inserts bases into the coding sequence"),
    FEATURE_TRUNCATION: (True, "A sequence variant that causes the reduction of a genomic feature"),
    NON_TRUNCATING_VARIANT: (False, "Any variant that does not truncate the protein"),
    SYNONYMOUS_VARIANT: (False, "A sequence variant where there is no resulting change to the encoded amino acid"),
    FUSION: (False, "A sequence variant whereby two genes have become joined"),
    FRAMESHIFT_VARIANT: (True, "A sequence variant which causes a disruption of the translational reading frame"),
    STOP_GAINED: (True, "A sequence variant whereby at least one base of a codon is changed, resulting in a premature stop codon"),
    STOP_LOST: (False, "A sequence variant where at least one base of the terminator codon is changed"),
    START_LOST: (True, "A codon variant that changes at least one base of the canonical start codon"),
    SPLICE_REGION_VARIANT: (True, "A sequence variant in which a change has occurred within the region of the splice site"),
    SPLICE_DONOR_VARIANT: (True, "A splice variant that changes the 2 base region at the 5' end of an intron"),
    SPLICE_ACCEPTOR_VARIANT: (True, "A splice variant that changes the 2 base region at the 3' end of an intron"),
}

# Legacy spellings seen in curated files
CONSEQUENCE_SYNONYMS: dict[str, str] = {
    "inframe_deletion": IN_FRAME_DELETION,
    "inframe_insertion": IN_FRAME_INSERTION,
    "splice_site_variant": SPLICE_REGION_VARIANT,
}

# Terms inside one group are interchangeable when comparing a query
# against a curated alteration
CONSEQUENCE_COMPATIBILITY_GROUPS: list[frozenset[str]] = [
    frozenset({SPLICE_REGION_VARIANT, SPLICE_DONOR_VARIANT, SPLICE_ACCEPTOR_VARIANT}),
]


# =============================================================================
# PROTEIN POSITIONS
# =============================================================================
# Non-positional alterations (Amplification, Fusions, Truncating Mutations...)
# span the whole protein: [POSITION_NOT_APPLICABLE, PROTEIN_END_MAX]

POSITION_NOT_APPLICABLE = -1
PROTEIN_END_MAX = 100000


# =============================================================================
# UMBRELLA ALTERATION NAMES
# =============================================================================

ONCOGENIC_MUTATIONS = "Oncogenic Mutations"
TRUNCATING_MUTATIONS = "Truncating Mutations"
FUSIONS = "Fusions"
GAIN_OF_FUNCTION_MUTATIONS = "Gain-of-function Mutations"
LOSS_OF_FUNCTION_MUTATIONS = "Loss-of-function Mutations"
SWITCH_OF_FUNCTION_MUTATIONS = "Switch-of-function Mutations"
VUS = "VUS"

AMPLIFICATION = "Amplification"
DELETION = "Deletion"
WILDTYPE = "Wildtype"


# =============================================================================
# ABBREVIATIONS
# =============================================================================
# Short forms found in queries, mapped to the curated full name

ABBREVIATIONS: dict[str, str] = {
    "amp": AMPLIFICATION,
    "del": DELETION,
    "wt": WILDTYPE,
    "trunc": TRUNCATING_MUTATIONS,
    "truncating": TRUNCATING_MUTATIONS,
    "gof": GAIN_OF_FUNCTION_MUTATIONS,
    "lof": LOSS_OF_FUNCTION_MUTATIONS,
    "sof": SWITCH_OF_FUNCTION_MUTATIONS,
    "itd": "Internal Tandem Duplication",
    "kdd": "Kinase Domain Duplication",
}


# =============================================================================
# AMINO ACID CODES
# =============================================================================

AMINO_ACID_3TO1: dict[str, str] = {
    'ALA': 'A', 'ARG': 'R', 'ASN': 'N', 'ASP': 'D', 'CYS': 'C',
    'GLN': 'Q', 'GLU': 'E', 'GLY': 'G', 'HIS': 'H', 'ILE': 'I',
    'LEU': 'L', 'LYS': 'K', 'MET': 'M', 'PHE': 'F', 'PRO': 'P',
    'SER': 'S', 'THR': 'T', 'TRP': 'W', 'TYR': 'Y', 'VAL': 'V',
    'TER': '*', 'SEC': 'U', 'PYL': 'O',
}


# =============================================================================
# GENE-SPECIFIC SPECIAL CASES
# =============================================================================

EGFR = "EGFR"
EGFR_CTD = "CTD"
EGFR_CTD_PATTERN = r"^vIV(a|b|c)?$"
# A763_Y764insFQEA is curated on its own; the broad 762_823ins range is a known false positive for it
EGFR_INS_FQEA = "A763_Y764insFQEA"
EGFR_INS_RANGE = "762_823ins"
