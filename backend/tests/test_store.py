"""
Portfolio Backend — Data Access Layer Tests
=============================================

What:  Runs PortfolioStore statements against a real SQLite store.
Why:   The conditional UPDATE and the single-column lookup are the parts of
       the data layer with behavior worth pinning down.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from portfolio_api.config import Settings
from portfolio_api.database import create_engine
from portfolio_api.store import PortfolioStore


class TestSkillStatements:

    @pytest.mark.asyncio
    async def test_insert_assigns_increasing_ids(self, store):
        first = await store.insert_skill("Python", None)
        second = await store.insert_skill("SQL", "uploads/1.png")

        assert isinstance(first, int)
        assert second > first

    @pytest.mark.asyncio
    async def test_update_without_image_keeps_path(self, store):
        skill_id = await store.insert_skill("Python", "uploads/1.png")

        await store.update_skill(skill_id, "Python 3")

        [skill] = await store.list_skills()
        assert skill.title == "Python 3"
        assert skill.image_path == "uploads/1.png"

    @pytest.mark.asyncio
    async def test_update_with_image_replaces_path(self, store):
        skill_id = await store.insert_skill("Python", "uploads/1.png")

        await store.update_skill(skill_id, "Python", "uploads/2.png")

        assert await store.get_skill_image_path(skill_id) == "uploads/2.png"

    @pytest.mark.asyncio
    async def test_image_path_lookup_for_unknown_id_is_none(self, store):
        assert await store.get_skill_image_path(404) is None

    @pytest.mark.asyncio
    async def test_mutations_on_unknown_id_affect_zero_rows(self, store):
        assert await store.update_skill(404, "x") == 0
        assert await store.delete_skill(404) == 0

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, store):
        skill_id = await store.insert_skill("Python", None)

        assert await store.delete_skill(skill_id) == 1
        assert await store.list_skills() == []


class TestProjectAndMessageStatements:

    @pytest.mark.asyncio
    async def test_project_round_trip(self, store):
        project_id = await store.insert_project("Site", "Portfolio", None)
        await store.update_project(project_id, "Site v2", "Rewritten")

        [project] = await store.list_projects()
        assert (project.title, project.description, project.image_path) == (
            "Site v2",
            "Rewritten",
            None,
        )

    @pytest.mark.asyncio
    async def test_insert_message_returns_id(self, store):
        assert await store.insert_message("Ada", "ada@example.com", "Hello") >= 1

    @pytest.mark.asyncio
    async def test_missing_required_column_raises(self, store):
        """NOT NULL violations surface as driver errors for the services to translate."""
        with pytest.raises(SQLAlchemyError):
            await store.insert_skill(None, None)


class TestUnreachableStore:

    @pytest.mark.asyncio
    async def test_ping_raises_when_database_cannot_be_opened(self, tmp_path):
        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}",
            upload_dir=str(tmp_path / "uploads"),
        )
        store = PortfolioStore(create_engine(settings))

        with pytest.raises(SQLAlchemyError):
            await store.ping()
        await store.dispose()
