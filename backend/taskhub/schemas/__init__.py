"""Pydantic Schemas — form and list view models exchanged at the API boundary.

Invariants:
    - Schemas are projections of ORM entities, never persisted directly
    - Field rules that need accumulated messages live in core/validate_save.py,
      so form fields here are permissive (Optional, no range checks)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - camelCase aliases on the wire, snake_case attributes in Python
"""
