# Services package init
"""
Humans API — Services Layer
=============================

What:  Persistence logic sitting between routes (HTTP) and the database.

Service Inventory:
    - HumanStore: the only component that issues SQL; five CRUD operations
      plus table bootstrap, health ping and pool disposal.

Why the store is separate from routes:
    1. Testability: the store can be exercised against SQLite without HTTP
    2. Replaceability: routes receive the store through a dependency, so a
       test can hand the app a mock instead
"""
