"""
Users API Backend — Application Package Initializer
===================================================

What:  Marks the `app` directory as a Python package.
Who:   Used by uvicorn (`uvicorn app.main:app`), `python -m app`, and pytest.

Architecture Note:
    The backend is a thin layered service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, ID assignment
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← User record + Pydantic contracts
    ├─────────────────────────────────────┤
    │         Store (In-Memory)           │  ← Ordered collection, one per app
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
