from __future__ import annotations

from fastapi import Request

from taxbook.store import LedgerStore


def get_store(request: Request) -> LedgerStore:
    """Return the LedgerStore the application was built with."""
    return request.app.state.store
