"""
Portfolio Backend — Data Access Layer
=======================================

What:  PortfolioStore issues every statement the API needs against the
       relational store: insert, select-all, update-by-id, delete-by-id and
       select-single-column-by-id for skills, projects and messages.
Why:   One injectable object owns the process's only database handle.
       Handlers receive it through FastAPI's dependency injection instead of
       reaching for a module-level connection.
How:   SQLAlchemy constructs with bound parameters. User input never becomes
       part of the SQL text. Each call runs in its own short session and
       commits immediately; there are no multi-statement transactions.
Who:   Constructed by create_app(); used by the services layer.
When:  Built once at process start; disposed on shutdown.

Error Handling:
    The store does not catch anything. Driver errors (including "no
    connection" after a failed startup) propagate to the services, which
    translate them into operation-specific DatabaseErrors.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, text, update
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from portfolio_api.models import Message, Project, Skill

logger = logging.getLogger(__name__)


class PortfolioStore:
    """
    Thin async wrapper around the store's single connection.

    Row affected counts are returned by the mutation methods for logging
    only; callers never treat zero affected rows as an error.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        # expire_on_commit=False: rows stay readable after the session closes
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> None:
        """Run SELECT 1; raises whatever the driver raises when unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close the pooled connection (application shutdown)."""
        await self.engine.dispose()

    # ── Skills ────────────────────────────────────────────────────────────

    async def insert_skill(self, title: Optional[str], image_path: Optional[str]) -> int:
        async with self._session_factory() as session:
            skill = Skill(title=title, image_path=image_path)
            session.add(skill)
            # Flush assigns the auto-increment id before commit
            await session.flush()
            skill_id = skill.id
            await session.commit()
        return skill_id

    async def list_skills(self) -> List[Skill]:
        async with self._session_factory() as session:
            result = await session.execute(select(Skill).order_by(Skill.id))
            return list(result.scalars().all())

    async def update_skill(
        self,
        skill_id: int,
        title: Optional[str],
        image_path: Optional[str] = None,
    ) -> int:
        """
        UPDATE skills SET title = ?[, image_path = ?] WHERE id = ?

        The image_path assignment is only part of the statement when a new
        image was stored; otherwise the existing path is left untouched.
        """
        values: Dict[str, Any] = {"title": title}
        if image_path:
            values["image_path"] = image_path
        return await self._execute_mutation(
            update(Skill).where(Skill.id == skill_id).values(**values)
        )

    async def get_skill_image_path(self, skill_id: int) -> Optional[str]:
        """SELECT image_path FROM skills WHERE id = ?; None for no row or NULL."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(Skill.image_path).where(Skill.id == skill_id)
            )
            return result.scalar_one_or_none()

    async def delete_skill(self, skill_id: int) -> int:
        return await self._execute_mutation(delete(Skill).where(Skill.id == skill_id))

    # ── Projects ──────────────────────────────────────────────────────────

    async def insert_project(
        self,
        title: Optional[str],
        description: Optional[str],
        image_path: Optional[str],
    ) -> int:
        async with self._session_factory() as session:
            project = Project(title=title, description=description, image_path=image_path)
            session.add(project)
            await session.flush()
            project_id = project.id
            await session.commit()
        return project_id

    async def list_projects(self) -> List[Project]:
        async with self._session_factory() as session:
            result = await session.execute(select(Project).order_by(Project.id))
            return list(result.scalars().all())

    async def update_project(
        self,
        project_id: int,
        title: Optional[str],
        description: Optional[str],
        image_path: Optional[str] = None,
    ) -> int:
        """UPDATE projects SET title = ?, description = ?[, image_path = ?] WHERE id = ?"""
        values: Dict[str, Any] = {"title": title, "description": description}
        if image_path:
            values["image_path"] = image_path
        return await self._execute_mutation(
            update(Project).where(Project.id == project_id).values(**values)
        )

    async def delete_project(self, project_id: int) -> int:
        return await self._execute_mutation(delete(Project).where(Project.id == project_id))

    # ── Messages ──────────────────────────────────────────────────────────

    async def insert_message(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
    ) -> int:
        async with self._session_factory() as session:
            row = Message(name=name, email=email, message=message)
            session.add(row)
            await session.flush()
            message_id = row.id
            await session.commit()
        return message_id

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _execute_mutation(self, statement) -> int:
        async with self._session_factory() as session:
            result = await session.execute(statement)
            rowcount = result.rowcount
            await session.commit()
        logger.debug("Statement affected %d row(s)", rowcount)
        return rowcount
