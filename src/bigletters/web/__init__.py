"""HTTP layer for bigletters.

A FastAPI application serving the static letter pages and the JSON grid
API backed by a shared GridStore.
"""
