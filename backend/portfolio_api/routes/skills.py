"""
Portfolio Backend — Skill Route Handlers
==========================================

What:  POST/GET /api/skills, PUT/DELETE /api/skills/{skill_id}.
How:   Multipart form fields are collected into a SkillForm, the optional
       `image` file is read into memory, and SkillService does the rest.
       Errors propagate to the global handlers in main.py.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from portfolio_api.dependencies import get_skill_service, has_upload
from portfolio_api.schemas.portfolio import (
    CreatedResponse,
    DeleteSkillResponse,
    ErrorResponse,
    SkillForm,
    SkillRecord,
    StatusMessage,
)
from portfolio_api.services.skill_service import SkillService

router = APIRouter(prefix="/api", tags=["Skills"])


@router.post(
    "/skills",
    status_code=201,
    response_model=CreatedResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Create a skill",
)
async def create_skill(
    title: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None, description="Optional skill icon"),
    service: SkillService = Depends(get_skill_service),
) -> CreatedResponse:
    content, filename = None, None
    if has_upload(image):
        content, filename = await image.read(), image.filename
        await image.close()

    skill_id = await service.create_skill(SkillForm(title=title), content, filename)
    return CreatedResponse(message="Skill added successfully", id=skill_id)


@router.get(
    "/skills",
    response_model=List[SkillRecord],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all skills",
)
async def list_skills(service: SkillService = Depends(get_skill_service)) -> List[SkillRecord]:
    return await service.list_skills()


@router.put(
    "/skills/{skill_id}",
    response_model=StatusMessage,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Update a skill",
    description=(
        "Replaces the title. The stored image path changes only when a new "
        "image file is attached; the previous file is kept on disk."
    ),
)
async def update_skill(
    skill_id: int,
    title: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    service: SkillService = Depends(get_skill_service),
) -> StatusMessage:
    content, filename = None, None
    if has_upload(image):
        content, filename = await image.read(), image.filename
        await image.close()

    await service.update_skill(skill_id, SkillForm(title=title), content, filename)
    return StatusMessage(message="Skill updated successfully")


@router.delete(
    "/skills/{skill_id}",
    response_model=DeleteSkillResponse,
    responses={500: {"description": "Store error", "model": DeleteSkillResponse}},
    summary="Delete a skill and its image",
)
async def delete_skill(
    skill_id: int,
    service: SkillService = Depends(get_skill_service),
) -> DeleteSkillResponse:
    await service.delete_skill(skill_id)
    return DeleteSkillResponse(success=True, message="Skill deleted successfully")
