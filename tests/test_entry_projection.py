"""Tests for flattening stored transactions into client entries."""

from __future__ import annotations

from taxbook.schemas import TransactionRecord
from taxbook.services.entry_projection import partition_entries, project_to_entry


def _record(**overrides) -> TransactionRecord:
    defaults = dict(id=7, kind="sale", date="2024-03-01", payload={"amount": 500, "customer": "Acme"})
    defaults.update(overrides)
    return TransactionRecord(**defaults)


class TestProjectToEntry:
    def test_merges_payload_with_id_and_date(self):
        assert project_to_entry(_record()) == {"amount": 500, "customer": "Acme", "id": 7, "date": "2024-03-01"}

    def test_own_id_and_date_override_payload_fields(self):
        entry = project_to_entry(_record(payload={"id": "client-id", "date": "1999-12-31", "amount": 1}))
        assert entry["id"] == 7
        assert entry["date"] == "2024-03-01"
        assert entry["amount"] == 1

    def test_null_payload_yields_only_id_and_date(self):
        assert project_to_entry(_record(payload=None)) == {"id": 7, "date": "2024-03-01"}

    def test_does_not_mutate_stored_payload(self):
        record = _record()
        project_to_entry(record)
        assert record.payload == {"amount": 500, "customer": "Acme"}


class TestPartitionEntries:
    def test_splits_by_kind_in_order(self):
        records = [
            _record(id=1, kind="sale"),
            _record(id=2, kind="expense", payload={"vendor": "Shell"}),
            _record(id=3, kind="sale"),
        ]
        sales, expenses = partition_entries(records)
        assert [e["id"] for e in sales] == [1, 3]
        assert expenses == [{"vendor": "Shell", "id": 2, "date": "2024-03-01"}]

    def test_empty_input(self):
        assert partition_entries([]) == ([], [])


class TestLegacyPayloads:
    def test_list_payload_spreads_by_index(self):
        entry = project_to_entry(_record(payload=["a", "b"]))
        assert entry == {"0": "a", "1": "b", "id": 7, "date": "2024-03-01"}

    def test_string_payload_spreads_by_character(self):
        assert project_to_entry(_record(payload="ab")) == {"0": "a", "1": "b", "id": 7, "date": "2024-03-01"}

    def test_number_payload_contributes_nothing(self):
        assert project_to_entry(_record(payload=42)) == {"id": 7, "date": "2024-03-01"}
