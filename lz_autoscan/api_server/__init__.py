"""
API server package — HTTP interface over the pending-message service.

Read-only: GET /pending, GET / banner, GET /health. No keys, no writes.
"""
