"""TaskHub Application Package — users and their task items over a REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
