"""
Tax Tracker backend package.

A single-user bookkeeping API: one business profile plus a log of sales and
expenses, persisted in a local SQLite file.

- store: LedgerStore, the persistence layer injected into the API
- routers: HTTP endpoints grouped by resource
  - state: initial load and full reset
  - business_info: the singleton business profile
  - transactions: create/update/delete of sales and expenses
- services: shaping of stored transactions into client entries
"""
