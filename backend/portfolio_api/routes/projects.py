"""
Portfolio Backend — Project Route Handlers
============================================

What:  POST/GET /api/projects, PUT/DELETE /api/projects/{project_id}.
Why a separate module: projects carry a description and their deletion
       leaves the image file alone, so the handlers differ in small ways.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from portfolio_api.dependencies import get_project_service, has_upload
from portfolio_api.schemas.portfolio import (
    CreatedResponse,
    ErrorResponse,
    ProjectForm,
    ProjectRecord,
    StatusMessage,
)
from portfolio_api.services.project_service import ProjectService

router = APIRouter(prefix="/api", tags=["Projects"])


@router.post(
    "/projects",
    status_code=201,
    response_model=CreatedResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Create a project",
)
async def create_project(
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None, description="Optional project image"),
    service: ProjectService = Depends(get_project_service),
) -> CreatedResponse:
    content, filename = None, None
    if has_upload(image):
        content, filename = await image.read(), image.filename
        await image.close()

    project_id = await service.create_project(
        ProjectForm(title=title, description=description), content, filename
    )
    return CreatedResponse(message="Project added successfully", id=project_id)


@router.get(
    "/projects",
    response_model=List[ProjectRecord],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all projects",
)
async def list_projects(
    service: ProjectService = Depends(get_project_service),
) -> List[ProjectRecord]:
    return await service.list_projects()


@router.put(
    "/projects/{project_id}",
    response_model=StatusMessage,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Update a project",
)
async def update_project(
    project_id: int,
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    service: ProjectService = Depends(get_project_service),
) -> StatusMessage:
    content, filename = None, None
    if has_upload(image):
        content, filename = await image.read(), image.filename
        await image.close()

    await service.update_project(
        project_id, ProjectForm(title=title, description=description), content, filename
    )
    return StatusMessage(message="Project updated successfully")


@router.delete(
    "/projects/{project_id}",
    response_model=StatusMessage,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Delete a project",
    description="Removes the row only. Unknown ids also report success.",
)
async def delete_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> StatusMessage:
    await service.delete_project(project_id)
    return StatusMessage(message="Project deleted successfully")
