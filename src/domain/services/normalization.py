"""Domain normalization helpers."""

from collections.abc import Mapping


def normalize_counterparty_id(reference: object) -> str | None:
    """Normalize a counterparty reference to its canonical id.

    The data service returns counterparties either as a bare id string or as
    an embedded object carrying ``_id`` (or ``id`` once serialized by the
    front end).

    Args:
        reference: Raw reference from a document payload.

    Returns:
        str | None: Stripped id string, or None when no id is present.
    """
    if reference is None:
        return None
    if isinstance(reference, Mapping):
        raw = reference.get("_id")
        if raw is None:
            raw = reference.get("id")
        return normalize_counterparty_id(raw)
    cleaned = str(reference).strip()
    return cleaned or None


__all__ = ["normalize_counterparty_id"]
