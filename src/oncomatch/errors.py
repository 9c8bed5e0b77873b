"""Exceptions raised by OncoMatch outside the resolution engine."""


class OncomatchError(Exception):
    """Base exception for OncoMatch errors."""
    pass


class CatalogueLoadError(OncomatchError):
    """Raised when a catalogue or evidence file cannot be read.

    Attributes:
        path: File that failed to load
        row: 1-based data row that failed validation, if known
    """

    def __init__(self, message: str, path: str | None = None, row: int | None = None):
        super().__init__(message)
        self.path = path
        self.row = row


class UnknownGeneError(OncomatchError):
    """Raised when a gene symbol is not known to the gene provider."""
    pass
