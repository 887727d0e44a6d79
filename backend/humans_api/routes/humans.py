"""
Humans API — /humans Route Handlers
=====================================

What:  The five CRUD routes over the humans table.
Why:   Maps HTTP verbs and paths to HumanStore operations.
How:   FastAPI validates bodies against HumanIn, handlers call the injected
       store, and "no row matched" outcomes are raised as NotFoundError so the
       global handler answers 404.
Who:   Called by the browser UI and any other HTTP client.

Route Table:
    GET    /humans        → list every record
    GET    /humans/{id}   → one record, or 404
    POST   /humans        → create, returns the record with its new id
    PUT    /humans/{id}   → overwrite both names, or 404
    DELETE /humans/{id}   → remove, or 404

The {id} segment is passed to the store as an opaque string. The store
decides whether it can name a row at all, so "/humans/abc" is a 404, not a
validation error.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from humans_api.dependencies import get_store
from humans_api.exceptions import NotFoundError
from humans_api.schemas.human import DeleteResponse, ErrorResponse, HumanIn, HumanOut
from humans_api.services.human_store import HumanStore, parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/humans", tags=["Humans"])

_ERRORS = {
    500: {"description": "Database error", "model": ErrorResponse},
}
_NOT_FOUND = {
    404: {"description": "User not found", "model": ErrorResponse},
}
_BAD_BODY = {
    400: {"description": "Invalid request body", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[HumanOut],
    responses=_ERRORS,
    summary="List all humans",
)
async def list_humans(store: HumanStore = Depends(get_store)) -> List[HumanOut]:
    humans = await store.list_humans()
    return [HumanOut.from_record(human) for human in humans]


@router.get(
    "/{human_id}",
    response_model=HumanOut,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Get one human by id",
)
async def get_human(human_id: str, store: HumanStore = Depends(get_store)) -> HumanOut:
    human = await store.get_human(human_id)
    if human is None:
        raise NotFoundError(resource_id=human_id)
    return HumanOut.from_record(human)


@router.post(
    "",
    response_model=HumanOut,
    responses={**_BAD_BODY, **_ERRORS},
    summary="Create a human",
    description="Creates a record from F_name / L_name. Any id in the body is ignored.",
)
async def create_human(body: HumanIn, store: HumanStore = Depends(get_store)) -> HumanOut:
    human = await store.create_human(body.first_name, body.last_name)
    logger.info("Created human %s", human.id)
    return HumanOut.from_record(human)


@router.put(
    "/{human_id}",
    response_model=HumanOut,
    responses={**_BAD_BODY, **_NOT_FOUND, **_ERRORS},
    summary="Replace both names of a human",
    description="The id in the path is authoritative; an id in the body is ignored.",
)
async def update_human(
    human_id: str,
    body: HumanIn,
    store: HumanStore = Depends(get_store),
) -> HumanOut:
    affected = await store.update_human(human_id, body.first_name, body.last_name)
    if not affected:
        raise NotFoundError(resource_id=human_id)
    # A matched row implies the path id parsed
    return HumanOut(id=parse_id(human_id), first_name=body.first_name, last_name=body.last_name)


@router.delete(
    "/{human_id}",
    response_model=DeleteResponse,
    responses={**_NOT_FOUND, **_ERRORS},
    summary="Delete a human",
)
async def delete_human(human_id: str, store: HumanStore = Depends(get_store)) -> DeleteResponse:
    affected = await store.delete_human(human_id)
    if not affected:
        raise NotFoundError(resource_id=human_id)
    logger.info("Deleted human %s", human_id)
    return DeleteResponse(message="User deleted")
