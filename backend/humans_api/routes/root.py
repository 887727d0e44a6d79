"""
Humans API — Discovery Route
==============================

What:  GET / returns a static map of the CRUD operations and their routes.
Who:   Humans poking at the API and clients that want a quick index.
"""

from typing import Dict

from fastapi import APIRouter

from humans_api.schemas.human import ROUTE_INDEX

router = APIRouter(tags=["Discovery"])


@router.get(
    "/",
    summary="List the available operations",
)
async def route_index() -> Dict[str, str]:
    return dict(ROUTE_INDEX)
