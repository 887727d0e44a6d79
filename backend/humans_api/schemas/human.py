"""
Humans API — Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the wire contract of the /humans routes.
Why:   Structural validation at the boundary (a body that is not a JSON object
       with string F_name / L_name never reaches the store) and a single place
       where the wire field names are spelled out.
How:   Python attribute names are snake_case; the wire names (F_name, L_name)
       are aliases. FastAPI parses request bodies by alias and serializes
       response_model output by alias.

Field names are part of the wire contract and must not change:
    {"id": 1, "F_name": "Ada", "L_name": "Lovelace"}
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from humans_api.models.human import Human


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class HumanIn(BaseModel):
    """
    Body of POST /humans and PUT /humans/{id}.

    Both names are required; there are no length or charset rules. Any other
    key, including a client-supplied "id", is ignored: on create the database
    assigns the id, on update the path is authoritative.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="F_name", description="First name")
    last_name: str = Field(alias="L_name", description="Last name")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class HumanOut(BaseModel):
    """A stored human, as returned by every read and write route."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Identifier assigned by the store")
    first_name: Optional[str] = Field(alias="F_name", description="First name")
    last_name: Optional[str] = Field(alias="L_name", description="Last name")

    @classmethod
    def from_record(cls, record: Human) -> "HumanOut":
        return cls(id=record.id, first_name=record.first_name, last_name=record.last_name)


class DeleteResponse(BaseModel):
    message: str = Field(default="User deleted")


class ErrorResponse(BaseModel):
    """
    Error body produced by the global exception handlers.

    Example:
        {"error": "not_found", "message": "User not found", "request_id": "1a2b3c4d"}
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Short human-readable description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# Discovery document served at GET /
ROUTE_INDEX: Dict[str, str] = {
    "Create": "POST: /humans",
    "ReadAll": "GET: /humans",
    "ReadOne": "GET: /humans/{id}",
    "Update": "PUT: /humans/{id}",
    "Delete": "DELETE: /humans/{id}",
}
