"""
Feature modules for the Users API backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py / repository.py: Implementation
- routes.py: FastAPI route handlers (where the module exposes any)

Modules communicate through interfaces, not concrete implementations.
"""
