"""
Pydantic schema definitions for API payloads.

Request and response models are kept apart from the storage rows so
that internal identifiers never leak into API responses.
"""
