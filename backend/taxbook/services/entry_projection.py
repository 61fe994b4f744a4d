from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from taxbook.models import TransactionKind

if TYPE_CHECKING:
    from taxbook.schemas import TransactionRecord


def _payload_fields(payload: Any) -> dict[str, Any]:
    # Legacy rows may hold a non-object payload: lists and strings spread by
    # index ("0", "1", ...), other scalars contribute no fields.
    if isinstance(payload, dict):
        return dict(payload)
    if isinstance(payload, (list, str)):
        return {str(index): value for index, value in enumerate(payload)}
    return {}


def project_to_entry(record: "TransactionRecord") -> dict[str, Any]:
    """
    Flatten a stored transaction into the entry shape the client edits.

    Payload fields come first; ``id`` and ``date`` are then overwritten with the
    transaction's own values, so a payload key of the same name never wins.
    """
    entry = _payload_fields(record.payload)
    entry["id"] = record.id
    entry["date"] = record.date
    return entry


def partition_entries(
    records: Iterable["TransactionRecord"],
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Split records into (sales, expenses) entries, keeping their stored order."""
    sales: list[dict[str, Any]] = []
    expenses: list[dict[str, Any]] = []
    for record in records:
        if record.kind == TransactionKind.SALE.value:
            sales.append(project_to_entry(record))
        elif record.kind == TransactionKind.EXPENSE.value:
            expenses.append(project_to_entry(record))
    return sales, expenses
