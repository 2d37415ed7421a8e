"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Schemas convert to and from core/ dataclasses; they never touch the DB

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
