"""Task-tracker workflow reconciliation.

Responsibilities:
  - Identity tokens, required-set generation, and store reconciliation.
  - Must not open connections or manage transactions; callers own both.
"""
