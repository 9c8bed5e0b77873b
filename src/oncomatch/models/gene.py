"""Gene model."""

from pydantic import BaseModel, ConfigDict, Field


class Gene(BaseModel):
    """A gene with its curated cancer role.

    Oncogene and tumor suppressor flags are independent; both may be set,
    and either may be unknown (None).
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "entrez_gene_id": 673,
                "hugo_symbol": "BRAF",
                "oncogene": True,
                "tsg": False,
            }
        },
    )

    entrez_gene_id: int = Field(..., description="Entrez gene id")
    hugo_symbol: str = Field(..., description="HUGO gene symbol (e.g., BRAF)")
    oncogene: bool | None = Field(default=None, description="Gene is a curated oncogene")
    tsg: bool | None = Field(default=None, description="Gene is a curated tumor suppressor")

    @property
    def is_pure_oncogene(self) -> bool:
        """Oncogene that is known not to be a tumor suppressor."""
        return self.oncogene is True and self.tsg is False

    def __str__(self) -> str:
        return self.hugo_symbol
