"""Services Layer — scope resolution, projections and the two CRUD services.

Invariants:
    - Services receive an AsyncSession; they never create engines or sessions
    - Store failures propagate uncaught to the API layer

Design Decisions:
    - One service per entity, plus shared scope and projection modules
"""
