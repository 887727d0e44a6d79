"""
Humans API — Application Package Initializer
==============================================

A small HTTP service for creating, listing, fetching, updating and deleting
"human" records (first name, last name) in a relational table.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      HumanStore (Persistence)       │  ← one SQL statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Engine/Pool)       │  ← Async SQLAlchemy
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
