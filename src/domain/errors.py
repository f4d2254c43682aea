"""Domain exceptions for ledger computation."""


class LedgerError(Exception):
    """Base class for ledger domain errors."""


class LedgerDataIntegrityError(LedgerError):
    """Raised when a source record would corrupt the running balance.

    Attributes:
        document_id: Identifier of the offending document, when known.
        reason: Short description of what is wrong with the record.
    """

    user_message = "Ledger data is inconsistent for this record"

    def __init__(self, reason: str, document_id: str | None = None) -> None:
        self.document_id = document_id
        self.reason = reason
        location = f" (document {document_id})" if document_id else ""
        super().__init__(f"{reason}{location}")


__all__ = ["LedgerError", "LedgerDataIntegrityError"]
