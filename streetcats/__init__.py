"""
StreetCats backend root package.

FastAPI app entry point (main.py), API routes, domain logic and MongoDB
infrastructure for sharing geotagged street cat sightings.
"""
