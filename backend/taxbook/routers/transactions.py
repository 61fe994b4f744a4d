from __future__ import annotations

from fastapi import APIRouter, Depends

from taxbook.deps import get_store
from taxbook.schemas import SuccessOut, TransactionCreate, TransactionCreatedOut, TransactionUpdate
from taxbook.store import LedgerStore


router = APIRouter()


@router.post("", response_model=TransactionCreatedOut)
async def create_transaction(
    payload: TransactionCreate,
    store: LedgerStore = Depends(get_store),
) -> TransactionCreatedOut:
    new_id = store.add_transaction(payload.type, payload.date, payload.data)
    return TransactionCreatedOut(id=new_id)


@router.put("/{transaction_id}", response_model=SuccessOut)
async def replace_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    store: LedgerStore = Depends(get_store),
) -> SuccessOut:
    """
    Overwrite date and data of a transaction. Its type cannot change.
    An unknown id still reports success.
    """
    store.update_transaction(transaction_id, payload.date, payload.data)
    return SuccessOut()


@router.delete("/{transaction_id}", response_model=SuccessOut)
async def remove_transaction(
    transaction_id: int,
    store: LedgerStore = Depends(get_store),
) -> SuccessOut:
    store.delete_transaction(transaction_id)
    return SuccessOut()
