"""
Portfolio Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract with the portfolio frontend.
Why:   Request bodies used to be read field by field without any declared
       shape. These records make every endpoint's input and output explicit
       so tests (and the OpenAPI docs) can assert on structure.
How:   Request records are permissive: every field is optional and no format
       checks are applied (an empty title or a malformed email passes through
       to the store unchanged). Response records mirror the exact JSON bodies
       the frontend already consumes.

Design Decision:
    Schemas are separate from SQLAlchemy models so the wire format stays
    stable even if columns are added to the tables.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class SkillForm(BaseModel):
    """Form fields of POST /api/skills and PUT /api/skills/{id}."""
    title: Optional[str] = Field(default=None, description="Skill name")


class ProjectForm(BaseModel):
    """Form fields of POST /api/projects and PUT /api/projects/{id}."""
    title: Optional[str] = Field(default=None, description="Project name")
    description: Optional[str] = Field(default=None, description="Project description")


class MessageCreate(BaseModel):
    """
    JSON body of POST /api/messages (contact form).

    No email validation on purpose: values are stored exactly as submitted.
    """
    name: Optional[str] = Field(default=None, description="Sender name")
    email: Optional[str] = Field(default=None, description="Sender email address")
    message: Optional[str] = Field(default=None, description="Message text")


# ══════════════════════════════════════════════════════════════════════════
# Record Models — Rows returned by the list endpoints
# ══════════════════════════════════════════════════════════════════════════


class SkillRecord(BaseModel):
    """One row of GET /api/skills."""
    id: int = Field(description="Store-assigned identifier")
    title: Optional[str] = Field(description="Skill name")
    image_path: Optional[str] = Field(
        default=None,
        description="Relative image path (e.g. uploads/1700000000000.png) or null",
    )

    model_config = {"from_attributes": True}


class ProjectRecord(BaseModel):
    """One row of GET /api/projects."""
    id: int = Field(description="Store-assigned identifier")
    title: Optional[str] = Field(description="Project name")
    description: Optional[str] = Field(description="Project description")
    image_path: Optional[str] = Field(default=None, description="Relative image path or null")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models — Mutation results
# ══════════════════════════════════════════════════════════════════════════


class StatusMessage(BaseModel):
    """Body of successful updates, project deletion and message submission."""
    message: str = Field(description="Human-readable success message")


class CreatedResponse(StatusMessage):
    """Body of 201 responses for skill and project creation."""
    id: int = Field(description="Identifier of the inserted row")


class DeleteSkillResponse(BaseModel):
    """
    Body of DELETE /api/skills/{id}.

    Skill deletion is the only endpoint reporting an explicit success flag;
    its error body uses the same shape with success=false.
    """
    success: bool = Field(description="Whether the skill row was deleted")
    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """
    Error body shared by every endpoint except skill deletion.

    Example:
        {"error": "Error adding skill"}
    """
    error: str = Field(description="Operation-specific error message")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
