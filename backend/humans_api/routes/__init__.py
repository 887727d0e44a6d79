# Routes package init
"""
Humans API — Routes Package
=============================

Route Inventory:
    - root.py:    GET    /                (discovery document)
    - humans.py:  GET    /humans          (list)
                  GET    /humans/{id}     (fetch one)
                  POST   /humans          (create)
                  PUT    /humans/{id}     (replace names)
                  DELETE /humans/{id}     (delete)
    - health.py:  GET    /health          (database connectivity)

Routes are thin: they read the path/body, call HumanStore, and shape the
response. Error responses come from the global handlers in main.py.
"""
