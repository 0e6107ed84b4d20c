"""
Notes API: Application Package
===============================

A small FastAPI service exposing CRUD over an in-memory collection of notes.

Architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, CRUD rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclass record + Pydantic
    ├─────────────────────────────────────┤
    │         Store (In-Memory)           │  ← Ordered list, process lifetime
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
