"""Command-line interface for OncoMatch.

ARCHITECTURE:
    CLI Commands → KnowledgeBase (catalogue/evidence files) → RelevantAlterationResolver

Main command:
    oncomatch resolve GENE ALTERATION --catalogue FILE [--evidence FILE] [--hotspots FILE] [--json]

Logging:
    --log-level  Set log level (DEBUG, INFO, WARN, ERROR). Default: INFO
    Environment: ONCOMATCH_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
"""

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from oncomatch.config.debug import get_logger, set_log_level
from oncomatch.config.settings import ResolverConfig
from oncomatch.errors import OncomatchError
from oncomatch.models.consequence import ReferenceGenome
from oncomatch.normalization.alteration_parser import ConsequenceClassifier, parse_alteration
from oncomatch.providers.loader import load_knowledge_base
from oncomatch.resolution.orchestrator import RelevantAlterationResolver

load_dotenv()

app = typer.Typer(
    name="oncomatch",
    help="Resolve genomic alterations to relevant curated alterations",
    add_completion=False,
)

console = Console()


def _alteration_row(alteration) -> dict:
    return {
        "alteration": alteration.alteration,
        "name": alteration.name,
        "consequence": alteration.consequence.term if alteration.consequence else None,
        "protein_start": alteration.protein_start,
        "protein_end": alteration.protein_end,
    }


@app.command()
def resolve(
    gene: str = typer.Argument(..., help="Gene symbol (e.g., BRAF)"),
    alteration: str = typer.Argument(..., help="Alteration (e.g., V600E, Truncating Mutations)"),
    catalogue: Path = typer.Option(..., "--catalogue", "-c", help="Catalogue file (TSV, CSV or JSON)"),
    evidence: Optional[Path] = typer.Option(None, "--evidence", "-e", help="Evidence file"),
    hotspots: Optional[Path] = typer.Option(None, "--hotspots", help="Hotspot file"),
    genome: Optional[str] = typer.Option(None, "--genome", "-g", help="Reference genome: GRCh37 or GRCh38"),
    allele: Optional[bool] = typer.Option(None, "--allele/--no-allele", help="Include alternative alleles"),
    consequence: Optional[str] = typer.Option(None, "--consequence", help="Explicit consequence term"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Log level: DEBUG, INFO, WARN, ERROR"),
) -> None:
    """Resolve an alteration to its ordered relevant catalogue alterations.

    Examples:
        oncomatch resolve BRAF V600E --catalogue braf.tsv --evidence evidence.tsv
        oncomatch resolve EGFR "Oncogenic Mutations" -c egfr.tsv -e evidence.tsv --json
        oncomatch resolve TP53 R248* -c tp53.tsv --no-allele --log-level DEBUG
    """
    set_log_level(log_level)
    logger = get_logger(__name__)

    try:
        config = ResolverConfig.from_env()
        if genome:
            config.reference_genome = ReferenceGenome.from_name(genome)
        if allele is not None:
            config.include_alternative_allele = allele
        logger.debug(f"ResolverConfig: {config}")

        kb = load_knowledge_base(catalogue, evidence_path=evidence, hotspot_path=hotspots)
        resolver = RelevantAlterationResolver.from_knowledge_base(kb, config=config)
        relevant = resolver.resolve_query(gene, alteration, consequence=consequence)
    except (OncomatchError, ValueError) as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        print(json.dumps([_alteration_row(alt) for alt in relevant], indent=2))
        return

    if not relevant:
        console.print(f"[dim]No relevant alterations for {gene} {alteration}[/dim]")
        return

    table = Table(title=f"{gene.upper()} {alteration}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Alteration", style="bold")
    table.add_column("Name")
    table.add_column("Consequence")
    table.add_column("Position")
    for index, alt in enumerate(relevant, start=1):
        row = _alteration_row(alt)
        position = "" if alt.protein_start is None else f"{alt.protein_start}-{alt.protein_end}"
        table.add_row(str(index), row["alteration"], row["name"] or "", row["consequence"] or "", position)
    console.print(table)


@app.command()
def classify(
    alteration: str = typer.Argument(..., help="Alteration text (e.g., R248*, 746_750del)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Show the consequence and position derived from an alteration name."""
    parsed = parse_alteration(alteration)
    consequence = ConsequenceClassifier().classify(alteration)
    result = {
        "alteration": alteration,
        "consequence": consequence.term,
        "is_generally_truncating": consequence.is_generally_truncating,
        "alteration_type": parsed.alteration_type.value,
        "protein_start": parsed.protein_start,
        "protein_end": parsed.protein_end,
        "ref_residues": parsed.ref_residues,
        "variant_residues": parsed.variant_residues,
    }
    if as_json:
        print(json.dumps(result, indent=2))
        return
    for key, value in result.items():
        console.print(f"[dim]{key}:[/dim] {value}")


@app.command()
def version() -> None:
    """Show version information."""
    from oncomatch import __version__
    print(f"OncoMatch version {__version__}")


if __name__ == "__main__":
    app()
