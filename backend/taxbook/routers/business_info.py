from __future__ import annotations

from fastapi import APIRouter, Depends

from taxbook.deps import get_store
from taxbook.schemas import BusinessInfoIn, SuccessOut
from taxbook.store import LedgerStore


router = APIRouter()


@router.post("", response_model=SuccessOut)
async def set_business_info(payload: BusinessInfoIn, store: LedgerStore = Depends(get_store)) -> SuccessOut:
    """Replace the business profile. Fields missing from the body are written as null."""
    store.write_profile(
        name=payload.name,
        rc_number=payload.rcNumber,
        tin=payload.tin,
        fiscal_year_start=payload.fiscalYearStart,
    )
    return SuccessOut()
