"""
Persistence layer for the tax tracker.

LedgerStore owns the SQLAlchemy engine for one database file and exposes the
CRUD operations the API needs. Payloads are stored as JSON text and decoded on
read; the store never looks inside them.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Iterator, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taxbook.db import Base, make_engine, make_session_factory, session_scope
from taxbook.models import BusinessInfo, Transaction, TransactionKind
from taxbook.schemas import BusinessInfoOut, TransactionRecord


logger = logging.getLogger(__name__)

PROFILE_ID = 1


class StoreError(Exception):
    """Raised for any storage failure; the message is the underlying engine/codec message."""


def default_fiscal_year_start(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{today.year}-01-01"


def encode_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise StoreError(f"Could not serialize transaction data: {exc}") from exc


def decode_payload(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise StoreError(f"Could not parse stored transaction data: {exc}") from exc


def _error_message(exc: Exception) -> str:
    # Prefer the driver's own message ("CHECK constraint failed: ...") over SQLAlchemy's wrapper text.
    orig = getattr(exc, "orig", None) if isinstance(exc, SQLAlchemyError) else None
    if orig is not None:
        return str(orig)
    return str(exc) or type(exc).__name__


class LedgerStore:
    """Business profile plus transaction log, backed by one SQL database."""

    def __init__(self, db_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            if db_url is None:
                raise ValueError("LedgerStore needs either db_url or engine")
            engine = make_engine(db_url)
        self.engine = engine
        self._sessions = make_session_factory(engine)

    @contextmanager
    def _scope(self) -> Iterator[Session]:
        """Session scope that reports every failure as StoreError, after rollback."""
        try:
            with session_scope(self._sessions) as session:
                yield session
        except StoreError:
            raise
        except Exception as exc:
            # Driver errors outside SQLAlchemy's wrapping too, e.g. OverflowError on an id past int64.
            raise StoreError(_error_message(exc)) from exc

    # -- lifecycle -------------------------------------------------------------

    def initialize(self) -> None:
        """Create tables and the blank profile row if missing. Safe to call on every start."""
        with self._scope() as session:
            Base.metadata.create_all(bind=self.engine)
            if session.get(BusinessInfo, PROFILE_ID) is None:
                session.add(
                    BusinessInfo(
                        id=PROFILE_ID,
                        name="",
                        rc_number="",
                        tin="",
                        fiscal_year_start=default_fiscal_year_start(),
                    )
                )
                logger.info("Created blank business profile")
        logger.info("Ledger store ready at %s", self.engine.url)

    # -- business profile ------------------------------------------------------

    def read_profile(self) -> BusinessInfoOut:
        with self._scope() as session:
            row = session.get(BusinessInfo, PROFILE_ID)
            if row is None:
                raise StoreError("Business profile is missing; call initialize() first")
            return BusinessInfoOut(
                id=row.id,
                name=row.name,
                rcNumber=row.rc_number,
                tin=row.tin,
                fiscalYearStart=row.fiscal_year_start,
            )

    def write_profile(
        self,
        name: Optional[str],
        rc_number: Optional[str],
        tin: Optional[str],
        fiscal_year_start: Optional[str],
    ) -> None:
        """Overwrite all four profile fields; None is stored as NULL."""
        with self._scope() as session:
            session.execute(
                update(BusinessInfo)
                .where(BusinessInfo.id == PROFILE_ID)
                .values(
                    {
                        BusinessInfo.name: name,
                        BusinessInfo.rc_number: rc_number,
                        BusinessInfo.tin: tin,
                        BusinessInfo.fiscal_year_start: fiscal_year_start,
                    }
                )
            )
        logger.debug("Business profile updated")

    # -- transactions ----------------------------------------------------------

    def list_transactions(self) -> list[TransactionRecord]:
        with self._scope() as session:
            rows = session.execute(select(Transaction).order_by(Transaction.id)).scalars().all()
            return [
                TransactionRecord(
                    id=row.id,
                    kind=row.kind,
                    date=row.date,
                    payload=decode_payload(row.data),
                    created_at=row.created_at,
                )
                for row in rows
            ]

    def add_transaction(self, kind: TransactionKind | str, date: Optional[str], payload: Any) -> int:
        """Insert a transaction and return its id. Unknown kinds fail on the table constraint."""
        kind_value = kind.value if isinstance(kind, TransactionKind) else kind
        encoded = encode_payload(payload)
        with self._scope() as session:
            tx = Transaction(kind=kind_value, date=date, data=encoded)
            session.add(tx)
            session.flush()
            new_id = tx.id
        logger.debug("Added %s transaction %s", kind_value, new_id)
        return new_id

    def update_transaction(self, transaction_id: int, date: Optional[str], payload: Any) -> int:
        """Overwrite date and payload. Returns the affected row count; an unknown id affects 0 rows."""
        encoded = encode_payload(payload)
        with self._scope() as session:
            result = session.execute(
                update(Transaction)
                .where(Transaction.id == transaction_id)
                .values({Transaction.date: date, Transaction.data: encoded})
            )
            count = result.rowcount
        logger.debug("Updated transaction %s (%d row(s))", transaction_id, count)
        return count

    def delete_transaction(self, transaction_id: int) -> int:
        with self._scope() as session:
            result = session.execute(delete(Transaction).where(Transaction.id == transaction_id))
            count = result.rowcount
        logger.debug("Deleted transaction %s (%d row(s))", transaction_id, count)
        return count

    def clear_all(self) -> None:
        """Delete every transaction and blank the profile in a single database transaction."""
        with self._scope() as session:
            session.execute(delete(Transaction))
            session.execute(
                update(BusinessInfo)
                .where(BusinessInfo.id == PROFILE_ID)
                .values(
                    {
                        BusinessInfo.name: "",
                        BusinessInfo.rc_number: "",
                        BusinessInfo.tin: "",
                        BusinessInfo.fiscal_year_start: default_fiscal_year_start(),
                    }
                )
            )
        logger.info("Cleared all transactions and reset business profile")
