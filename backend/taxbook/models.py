from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from taxbook.db import Base


class TransactionKind(str, enum.Enum):
    SALE = "sale"
    EXPENSE = "expense"


class BusinessInfo(Base):
    __tablename__ = "business_info"
    # Singleton row: the profile always lives at id 1.
    __table_args__ = (CheckConstraint("id = 1", name="ck_business_info_singleton"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Column names keep the camelCase on-disk schema so existing tax_tracker.db files load unchanged.
    rc_number: Mapped[str | None] = mapped_column("rcNumber", Text, nullable=True)
    tin: Mapped[str | None] = mapped_column(Text, nullable=True)
    fiscal_year_start: Mapped[str | None] = mapped_column("fiscalYearStart", Text, nullable=True)


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("type IN ('sale', 'expense')", name="ck_transactions_type"),
        # AUTOINCREMENT: ids are never reused after a delete or clear.
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column("type", String(20))
    date: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Caller-owned payload, JSON-encoded; never inspected here.
    data: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())
