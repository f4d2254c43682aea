"""Use case to build a counterparty ledger from the data service."""

from src.application.ports.documents_repository import DocumentsRepositoryPort
from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.ledger import LedgerType, LedgerView
from src.domain.policies.ledger_filters import (
    LedgerFilter,
    apply_ledger_filters,
)
from src.domain.services.events import extract_events
from src.domain.services.ledger import (
    balance_status,
    compute_totals,
    reduce_to_ledger,
)
from src.domain.services.normalization import normalize_counterparty_id
from src.infrastructure.logging.logger import get_app_logger


class GetLedgerUseCase:
    """Compute the ledger of one customer, vendor or employee."""

    def __init__(
        self,
        documents_repository: DocumentsRepositoryPort,
        ledger_type: LedgerType,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            documents_repository: Port providing source documents.
            ledger_type: Ledger to build; drives the balance label.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._documents_repository = documents_repository
        self._ledger_type = ledger_type
        self._logger = logger or get_app_logger()

    def execute(
        self,
        counterparty_id: object,
        ledger_filter: LedgerFilter | None = None,
    ) -> LedgerView:
        """Return the ledger view for a counterparty.

        The ledger is recomputed from a fresh fetch on every call. Filters
        only select rows; balances always come from the full ledger.

        Args:
            counterparty_id: Id string or embedded object of the counterparty.
            ledger_filter: Optional view filter for the returned rows.

        Returns:
            LedgerView: Full ledger, filtered rows, totals and balance label.

        Raises:
            ValueError: If the counterparty reference carries no id.
            DocumentsFetchError: If the data service cannot be reached.
            LedgerDataIntegrityError: If a record would corrupt the balance.
        """
        canonical_id = normalize_counterparty_id(counterparty_id)
        if canonical_id is None:
            raise ValueError(
                f"Invalid counterparty reference: {counterparty_id!r}"
            )

        documents = self._documents_repository.fetch_documents(
            self._ledger_type,
            canonical_id,
        )
        self._logger.info(
            f"Fetched {len(documents)} {self._ledger_type.value} documents "
            f"for counterparty {canonical_id}"
        )
        try:
            events = extract_events(
                documents,
                canonical_id,
                logger=self._logger,
            )
            ledger = reduce_to_ledger(events)
        except LedgerDataIntegrityError as exc:
            self._logger.error(
                f"Ledger aborted for {self._ledger_type.value} "
                f"{canonical_id}: {exc}"
            )
            raise

        entries = apply_ledger_filters(ledger.entries, ledger_filter)
        status = balance_status(ledger.final_balance, self._ledger_type)
        self._logger.info(
            f"Ledger computed: entries={len(ledger.entries)}, "
            f"shown={len(entries)}, balance={ledger.final_balance}, "
            f"status={status.label}"
        )
        return LedgerView(
            ledger_type=self._ledger_type,
            counterparty_id=canonical_id,
            ledger=ledger,
            entries=entries,
            totals=compute_totals(entries),
            status=status,
        )


__all__ = ["GetLedgerUseCase", "LedgerView"]
