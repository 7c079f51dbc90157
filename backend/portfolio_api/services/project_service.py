"""
Portfolio Backend — Project Service
=====================================

What:  Business logic for the project endpoints.
How:   Same shape as SkillService: optional upload, then a single store call,
       with store failures translated into operation-specific DatabaseErrors.

Project deletion only removes the row. The image file, if any, stays in the
upload directory (unlike skills).
"""

import logging
from typing import List, Optional

from portfolio_api.exceptions import DatabaseError
from portfolio_api.schemas.portfolio import ProjectForm, ProjectRecord
from portfolio_api.services.file_service import FileService
from portfolio_api.store import PortfolioStore

logger = logging.getLogger(__name__)


class ProjectService:
    """Business logic for projects."""

    def __init__(self, store: PortfolioStore, files: FileService):
        self.store = store
        self.files = files

    async def create_project(
        self,
        form: ProjectForm,
        image: Optional[bytes] = None,
        image_filename: Optional[str] = None,
    ) -> int:
        image_path = None
        if image is not None:
            image_path = (await self.files.save(image, image_filename)).relative_path
        logger.info("Saving image path: %s", image_path)

        try:
            return await self.store.insert_project(form.title, form.description, image_path)
        except Exception as e:
            logger.error("Error adding project: %s", str(e))
            raise DatabaseError(
                message="Error adding project",
                context={"error_type": type(e).__name__},
            )

    async def list_projects(self) -> List[ProjectRecord]:
        try:
            rows = await self.store.list_projects()
        except Exception as e:
            logger.error("Error fetching projects: %s", str(e))
            raise DatabaseError(
                message="Error fetching projects",
                context={"error_type": type(e).__name__},
            )
        return [ProjectRecord.model_validate(row) for row in rows]

    async def update_project(
        self,
        project_id: int,
        form: ProjectForm,
        image: Optional[bytes] = None,
        image_filename: Optional[str] = None,
    ) -> None:
        image_path = None
        if image is not None:
            image_path = (await self.files.save(image, image_filename)).relative_path

        try:
            await self.store.update_project(
                project_id, form.title, form.description, image_path
            )
        except Exception as e:
            logger.error("Error updating project %s: %s", project_id, str(e))
            raise DatabaseError(
                message="Error updating project",
                context={"project_id": project_id, "error_type": type(e).__name__},
            )

    async def delete_project(self, project_id: int) -> None:
        try:
            await self.store.delete_project(project_id)
        except Exception as e:
            logger.error("Error deleting project %s: %s", project_id, str(e))
            raise DatabaseError(
                message="Error deleting project",
                context={"project_id": project_id, "error_type": type(e).__name__},
            )
