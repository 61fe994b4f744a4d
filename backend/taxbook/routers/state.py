from __future__ import annotations

from fastapi import APIRouter, Depends

from taxbook.deps import get_store
from taxbook.schemas import InitialState, SuccessOut
from taxbook.services.entry_projection import partition_entries
from taxbook.store import LedgerStore


router = APIRouter()


@router.get("/init", response_model=InitialState)
async def get_initial_state(store: LedgerStore = Depends(get_store)) -> InitialState:
    """
    Initial load for the client: business profile plus every transaction,
    split into sales and expense entries.
    """
    profile = store.read_profile()
    sales, expenses = partition_entries(store.list_transactions())
    return InitialState(businessInfo=profile, salesEntries=sales, expenseEntries=expenses)


@router.post("/clear", response_model=SuccessOut)
async def reset_all(store: LedgerStore = Depends(get_store)) -> SuccessOut:
    """Delete all transactions and blank the business profile."""
    store.clear_all()
    return SuccessOut()
