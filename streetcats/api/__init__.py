"""
API layer for the StreetCats backend.

Exposes HTTP endpoints under /api/v1 (auth, cats, comments).
"""
