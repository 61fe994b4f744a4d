from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class BusinessInfoOut(BaseModel):
    id: int
    name: Optional[str] = None
    rcNumber: Optional[str] = None
    tin: Optional[str] = None
    fiscalYearStart: Optional[str] = None


class BusinessInfoIn(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Every field is written as sent; an omitted field is stored as null.
    name: Optional[str] = None
    rcNumber: Optional[str] = None
    tin: Optional[str] = None
    fiscalYearStart: Optional[str] = None


class TransactionCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: str  # "sale" or "expense", enforced by the table constraint
    date: Optional[str] = None
    data: Optional[dict[str, Any]] = None


class TransactionUpdate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    date: Optional[str] = None
    data: Optional[dict[str, Any]] = None


class TransactionRecord(BaseModel):
    """A stored transaction with its payload decoded."""
    id: int
    kind: str
    date: Optional[str] = None
    payload: Any = None
    created_at: Optional[datetime] = None


class InitialState(BaseModel):
    businessInfo: BusinessInfoOut
    salesEntries: list[dict[str, Any]]
    expenseEntries: list[dict[str, Any]]


class SuccessOut(BaseModel):
    success: bool = True


class TransactionCreatedOut(BaseModel):
    id: int
    success: bool = True


class ErrorOut(BaseModel):
    error: str
