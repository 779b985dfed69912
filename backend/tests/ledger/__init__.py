"""
Ledger Kernel Tests

Test suite for the ledger kernel including:
- Meta filtering and the reserved-field registry
- Entry building and double-entry validation
- Journal voiding and void memo rotation
- Approval cascade
- PostgreSQL document store
"""
