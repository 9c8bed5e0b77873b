"""Load a knowledge base from tabular catalogue, evidence and hotspot files.

Supported formats, chosen by file suffix:
- .tsv / .txt: tab separated
- .csv: comma separated
- .json: list of records

Catalogue columns:
    gene, entrez_gene_id, alteration, [name, consequence, protein_start,
    protein_end, ref_residues, variant_residues, reference_genomes,
    alteration_type, oncogene, tsg]

Evidence columns:
    gene, alteration, evidence_type, [known_effect, evidence_id]
    Rows sharing an evidence_id form one evidence record.

Hotspot columns:
    gene, protein_start, [protein_end]
"""

import math
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from oncomatch.config.debug import get_logger
from oncomatch.errors import CatalogueLoadError
from oncomatch.models.alteration import Alteration, AlterationType
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.models.evidence import Evidence, EvidenceType, Hotspot
from oncomatch.models.gene import Gene
from oncomatch.normalization.alteration_parser import ConsequenceClassifier
from oncomatch.providers.memory import KnowledgeBase

logger = get_logger(__name__)

_TRUE_VALUES = {"true", "yes", "y", "1"}
_FALSE_VALUES = {"false", "no", "n", "0"}

CATALOGUE_REQUIRED_COLUMNS = ("gene", "entrez_gene_id", "alteration")
EVIDENCE_REQUIRED_COLUMNS = ("gene", "alteration", "evidence_type")
HOTSPOT_REQUIRED_COLUMNS = ("gene", "protein_start")


def read_table(path: str | Path, required: tuple[str, ...] = ()) -> pd.DataFrame:
    """Read a TSV/CSV/JSON table into a DataFrame.

    Raises:
        CatalogueLoadError: If the file is missing, unreadable or lacks required columns
    """
    path = Path(path)
    if not path.exists():
        raise CatalogueLoadError(f"File not found: {path}", path=str(path))

    suffix = path.suffix.lower()
    try:
        if suffix in (".tsv", ".txt"):
            df = pd.read_csv(path, sep="\t", dtype=str)
        elif suffix == ".csv":
            df = pd.read_csv(path, dtype=str)
        elif suffix == ".json":
            df = pd.read_json(path, orient="records", dtype=False)
        else:
            raise CatalogueLoadError(f"Unsupported file type '{suffix}': {path}", path=str(path))
    except (ValueError, pd.errors.ParserError) as e:
        raise CatalogueLoadError(f"Could not parse {path}: {e}", path=str(path)) from e

    df.columns = [str(column).strip().lower() for column in df.columns]
    missing = [column for column in required if column not in df.columns]
    if missing:
        raise CatalogueLoadError(f"{path} is missing columns: {', '.join(missing)}", path=str(path))

    logger.info(f"Loaded {len(df)} rows from {path}")
    return df


def _text(value: Any) -> str | None:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    text = str(value).strip()
    return text or None


def _int(value: Any) -> int | None:
    text = _text(value)
    return int(float(text)) if text is not None else None


def _bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = _text(value)
    if text is None:
        return None
    if text.lower() in _TRUE_VALUES:
        return True
    if text.lower() in _FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean: {value}")


def _reference_genomes(value: Any) -> frozenset[ReferenceGenome]:
    text = _text(value)
    if text is None:
        return frozenset()
    return frozenset(ReferenceGenome.from_name(name) for name in text.replace(";", ",").split(",") if name.strip())


def load_catalogue(
    path: str | Path,
    classifier: ConsequenceClassifier | None = None,
) -> tuple[list[Gene], list[Alteration]]:
    """Load genes and curated alterations from a catalogue file.

    Missing consequences and positions are filled by the classifier.

    Returns:
        Tuple of (genes, alterations)

    Raises:
        CatalogueLoadError: If the file cannot be read or a row is invalid
    """
    classifier = classifier or ConsequenceClassifier()
    df = read_table(path, CATALOGUE_REQUIRED_COLUMNS)

    genes: dict[str, Gene] = {}
    alterations: list[Alteration] = []

    for index, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            symbol = _text(row["gene"])
            gene = genes.get(symbol.upper())
            if gene is None:
                gene = Gene(
                    entrez_gene_id=_int(row["entrez_gene_id"]),
                    hugo_symbol=symbol,
                    oncogene=_bool(row.get("oncogene")),
                    tsg=_bool(row.get("tsg")),
                )
                genes[symbol.upper()] = gene

            alteration_type = _text(row.get("alteration_type"))
            fields = dict(
                id=_int(row.get("id")),
                name=_text(row.get("name")),
                protein_start=_int(row.get("protein_start")),
                protein_end=_int(row.get("protein_end")),
                ref_residues=_text(row.get("ref_residues")),
                variant_residues=_text(row.get("variant_residues")),
                reference_genomes=_reference_genomes(row.get("reference_genomes")),
            )
            if alteration_type:
                fields["alteration_type"] = AlterationType(alteration_type.upper())

            alterations.append(classifier.build(
                gene,
                _text(row["alteration"]),
                consequence=_text(row.get("consequence")),
                **fields,
            ))
        except (ValidationError, ValueError, AttributeError, TypeError) as e:
            raise CatalogueLoadError(f"Invalid catalogue row {index} in {path}: {e}", path=str(path), row=index) from e

    logger.info(f"Loaded {len(alterations)} alterations for {len(genes)} genes")
    return list(genes.values()), alterations


def load_evidence(
    path: str | Path,
    alterations: list[Alteration],
    classifier: ConsequenceClassifier | None = None,
) -> list[Evidence]:
    """Load evidence records and link them to catalogue alterations.

    Alterations not found in the catalogue are built from their name.

    Raises:
        CatalogueLoadError: If the file cannot be read or a row is invalid
    """
    classifier = classifier or ConsequenceClassifier()
    df = read_table(path, EVIDENCE_REQUIRED_COLUMNS)

    by_name = {(alt.gene.hugo_symbol.upper(), alt.alteration.lower()): alt for alt in alterations}
    genes = {alt.gene.hugo_symbol.upper(): alt.gene for alt in alterations}
    grouped: dict[str, Evidence] = {}
    evidence: list[Evidence] = []

    for index, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            symbol = _text(row["gene"]).upper()
            name = _text(row["alteration"])
            gene = genes.get(symbol)
            if gene is None:
                raise ValueError(f"gene {symbol} is not in the catalogue")

            alteration = by_name.get((symbol, name.lower()))
            if alteration is None:
                logger.debug(f"Evidence alteration {symbol} {name} not in catalogue, building from name")
                alteration = classifier.build(gene, name)
                by_name[(symbol, name.lower())] = alteration

            evidence_id = _text(row.get("evidence_id"))
            if evidence_id is not None and evidence_id in grouped:
                grouped[evidence_id].alterations.append(alteration)
                continue

            record = Evidence(
                id=_int(evidence_id) if evidence_id and evidence_id.isdigit() else None,
                evidence_type=EvidenceType(_text(row["evidence_type"]).upper()),
                gene=gene,
                alterations=[alteration],
                known_effect=_text(row.get("known_effect")),
            )
            if evidence_id is not None:
                grouped[evidence_id] = record
            evidence.append(record)
        except (ValidationError, ValueError, AttributeError) as e:
            raise CatalogueLoadError(f"Invalid evidence row {index} in {path}: {e}", path=str(path), row=index) from e

    logger.info(f"Loaded {len(evidence)} evidence records")
    return evidence


def load_hotspots(path: str | Path) -> list[Hotspot]:
    """Load hotspot ranges.

    Raises:
        CatalogueLoadError: If the file cannot be read or a row is invalid
    """
    df = read_table(path, HOTSPOT_REQUIRED_COLUMNS)
    hotspots = []
    for index, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            start = _int(row["protein_start"])
            end = _int(row.get("protein_end"))
            hotspots.append(Hotspot(
                hugo_symbol=_text(row["gene"]),
                protein_start=start,
                protein_end=end if end is not None else start,
            ))
        except (ValidationError, ValueError) as e:
            raise CatalogueLoadError(f"Invalid hotspot row {index} in {path}: {e}", path=str(path), row=index) from e
    return hotspots


def load_knowledge_base(
    catalogue_path: str | Path,
    evidence_path: str | Path | None = None,
    hotspot_path: str | Path | None = None,
    classifier: ConsequenceClassifier | None = None,
) -> KnowledgeBase:
    """Build an in-memory knowledge base from files."""
    classifier = classifier or ConsequenceClassifier()
    genes, alterations = load_catalogue(catalogue_path, classifier)
    evidence = load_evidence(evidence_path, alterations, classifier) if evidence_path else []
    hotspots = load_hotspots(hotspot_path) if hotspot_path else []
    return KnowledgeBase(genes=genes, alterations=alterations, evidence=evidence, hotspots=hotspots)
