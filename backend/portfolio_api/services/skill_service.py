"""
Portfolio Backend — Skill Service
===================================

What:  Orchestrates the skill endpoints: optional image upload + one store call.
Why:   Keeps route handlers thin and makes the upload/store coupling testable
       without HTTP.
How:   Composes FileService (disk) and PortfolioStore (database), both
       injected by the constructor.

Orchestration Flow (POST /api/skills):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐
    │  Form +  │───▶│ FileService │───▶│ INSERT skill │
    │  image   │    │ (optional)  │    │  (store)     │
    └──────────┘    └─────────────┘    └──────────────┘

Deletion Flow (DELETE /api/skills/{id}), strictly sequential:
    1. SELECT image_path FROM skills WHERE id = ?
    2. If a path is stored: remove the file (failure logged, not raised)
    3. DELETE FROM skills WHERE id = ?

Error Handling:
    Any store exception becomes a DatabaseError carrying the operation's
    client-facing message ("Error adding skill", ...). Upload failures keep
    their FileStorageError type. An unknown id is not an error.
"""

import logging
from typing import List, Optional

from portfolio_api.exceptions import DatabaseError, SkillDeletionError
from portfolio_api.schemas.portfolio import SkillForm, SkillRecord
from portfolio_api.services.file_service import FileService
from portfolio_api.store import PortfolioStore

logger = logging.getLogger(__name__)


class SkillService:
    """Business logic for skills."""

    def __init__(self, store: PortfolioStore, files: FileService):
        self.store = store
        self.files = files

    async def _store_image(
        self, content: Optional[bytes], filename: Optional[str]
    ) -> Optional[str]:
        """Write the upload if one was sent; returns the relative path or None."""
        if content is None:
            return None
        uploaded = await self.files.save(content, filename)
        return uploaded.relative_path

    async def create_skill(
        self,
        form: SkillForm,
        image: Optional[bytes] = None,
        image_filename: Optional[str] = None,
    ) -> int:
        """
        Insert a skill, storing the image first when present.

        Returns:
            The store-assigned id.

        Raises:
            FileStorageError: The image could not be written
            DatabaseError: The insert failed ("Error adding skill")
        """
        image_path = await self._store_image(image, image_filename)
        logger.info("Saving image path: %s", image_path)

        try:
            return await self.store.insert_skill(form.title, image_path)
        except Exception as e:
            logger.error("Error adding skill: %s", str(e))
            raise DatabaseError(
                message="Error adding skill",
                context={"error_type": type(e).__name__},
            )

    async def list_skills(self) -> List[SkillRecord]:
        try:
            rows = await self.store.list_skills()
        except Exception as e:
            logger.error("Error fetching skills: %s", str(e))
            raise DatabaseError(
                message="Error fetching skills",
                context={"error_type": type(e).__name__},
            )
        return [SkillRecord.model_validate(row) for row in rows]

    async def update_skill(
        self,
        skill_id: int,
        form: SkillForm,
        image: Optional[bytes] = None,
        image_filename: Optional[str] = None,
    ) -> None:
        """
        Update title and, only when a new image arrived, image_path.

        The previously stored image is left on disk.
        """
        image_path = await self._store_image(image, image_filename)

        try:
            await self.store.update_skill(skill_id, form.title, image_path)
        except Exception as e:
            logger.error("Error updating skill %s: %s", skill_id, str(e))
            raise DatabaseError(
                message="Error updating skill",
                context={"skill_id": skill_id, "error_type": type(e).__name__},
            )

    async def delete_skill(self, skill_id: int) -> None:
        """
        Remove the skill's image file (best-effort), then its row.

        Raises:
            SkillDeletionError: Either store statement failed
        """
        try:
            image_path = await self.store.get_skill_image_path(skill_id)
        except Exception as e:
            logger.error("Error looking up skill %s: %s", skill_id, str(e))
            raise SkillDeletionError(
                context={"skill_id": skill_id, "error_type": type(e).__name__},
            )

        if image_path:
            # Outcome ignored: the row goes either way
            await self.files.remove(image_path)

        try:
            await self.store.delete_skill(skill_id)
        except Exception as e:
            logger.error("Error deleting skill %s: %s", skill_id, str(e))
            raise SkillDeletionError(
                context={"skill_id": skill_id, "error_type": type(e).__name__},
            )
