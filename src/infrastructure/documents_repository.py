"""REST-backed repository for ledger source documents."""

from collections.abc import Callable, Mapping
from urllib.parse import quote

import requests

from src.application.ports.documents_repository import (
    DocumentNotFoundError,
    DocumentsFetchError,
    DocumentsRepositoryPort,
)
from src.domain.models.documents import DocumentDetail
from src.domain.models.ledger import LedgerType, SourceDocument
from src.infrastructure.document_mapping import (
    map_advance,
    map_advance_detail,
    map_gate_entry,
    map_gate_entry_detail,
    map_invoice,
    map_invoice_detail,
    raw_document_id,
)
from src.infrastructure.settings import LedgerApiSettings

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "ledger-dashboard/0.1",
}

INVOICES_PATH = "invoices"
GATE_IN_PATH = "gate-in"
ADVANCES_PATH = "hrm/advances"


class RestDocumentsRepository(DocumentsRepositoryPort):
    """Repository reading invoices, gate entries and advances over HTTP."""

    def __init__(
        self,
        settings: LedgerApiSettings,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            settings: API location and timeout.
            session: Optional preconfigured HTTP session.
        """
        self._settings = settings
        self._session = session or requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)

    def fetch_documents(
        self,
        ledger_type: LedgerType,
        counterparty_id: str,
    ) -> list[SourceDocument]:
        """Return the documents feeding the requested ledger."""
        if ledger_type == LedgerType.CUSTOMER:
            payload = self._get_json(
                f"{INVOICES_PATH}/customer/{quote(counterparty_id, safe='')}"
            )
            return self._map_list(payload, map_invoice, key="invoices")
        if ledger_type == LedgerType.VENDOR:
            payload = self._get_json(GATE_IN_PATH)
            return self._map_list(payload, map_gate_entry)
        if ledger_type == LedgerType.EMPLOYEE:
            payload = self._get_json(ADVANCES_PATH)
            return self._map_list(payload, map_advance)
        raise RuntimeError(f"Unsupported ledger type: {ledger_type}")

    def fetch_document_detail(
        self,
        ledger_type: LedgerType,
        document_id: str,
    ) -> DocumentDetail:
        """Return the detail of one invoice, gate entry or advance."""
        encoded_id = quote(document_id, safe="")
        if ledger_type == LedgerType.CUSTOMER:
            payload = self._get_json(f"{INVOICES_PATH}/{encoded_id}")
            return map_invoice_detail(self._expect_object(payload))
        if ledger_type == LedgerType.VENDOR:
            payload = self._get_json(f"{GATE_IN_PATH}/{encoded_id}")
            return map_gate_entry_detail(self._expect_object(payload))
        if ledger_type == LedgerType.EMPLOYEE:
            # The advances API has no single-item endpoint.
            payload = self._get_json(ADVANCES_PATH)
            for raw in self._expect_list(payload):
                if raw_document_id(raw) == document_id:
                    return map_advance_detail(raw)
            raise DocumentNotFoundError(f"Advance not found: {document_id}")
        raise RuntimeError(f"Unsupported ledger type: {ledger_type}")

    def _get_json(self, path: str):
        """Fetch a JSON payload from the API.

        Args:
            path: Path relative to the API base URL.

        Returns:
            Decoded JSON payload.

        Raises:
            DocumentNotFoundError: If the API answers 404.
            DocumentsFetchError: On connection, HTTP or decoding failures.
        """
        url = f"{self._settings.api_url}/{path}"
        try:
            response = self._session.get(url, timeout=self._settings.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            if status == 404:
                raise DocumentNotFoundError(f"Not found: {url}") from exc
            raise DocumentsFetchError(
                f"Data service returned {status} for {url}"
            ) from exc
        except requests.RequestException as exc:
            raise DocumentsFetchError(
                f"Data service request failed for {url}: {exc}"
            ) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise DocumentsFetchError(
                f"Data service returned invalid JSON for {url}"
            ) from exc

    @staticmethod
    def _expect_list(payload, key: str | None = None) -> list[Mapping]:
        if key and isinstance(payload, Mapping):
            payload = payload.get(key)
        if not isinstance(payload, list):
            raise DocumentsFetchError(
                f"Expected a list of documents, got {type(payload).__name__}"
            )
        for item in payload:
            if not isinstance(item, Mapping):
                raise DocumentsFetchError(
                    f"Expected document objects, got {type(item).__name__}"
                )
        return payload

    @staticmethod
    def _expect_object(payload) -> Mapping:
        if not isinstance(payload, Mapping):
            raise DocumentsFetchError(
                f"Expected a document object, got {type(payload).__name__}"
            )
        return payload

    def _map_list(
        self,
        payload,
        mapper: Callable[[Mapping], SourceDocument],
        key: str | None = None,
    ) -> list[SourceDocument]:
        return [mapper(raw) for raw in self._expect_list(payload, key=key)]


__all__ = ["RestDocumentsRepository"]
