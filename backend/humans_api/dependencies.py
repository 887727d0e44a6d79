"""
FastAPI dependencies shared by the route modules.
"""

from fastapi import Request

from humans_api.services.human_store import HumanStore


def get_store(request: Request) -> HumanStore:
    """
    The HumanStore attached to the running application.

    create_app() stores it on app.state (or the lifespan builds one from
    settings), so tests can inject their own store or override this
    dependency entirely.
    """
    store = request.app.state.store
    if store is None:
        raise RuntimeError("HumanStore is not initialized. Pass one to create_app() or run the lifespan.")
    return store
