"""
Portfolio Backend — Skill Service Unit Tests
==============================================

What:  Tests for SkillService orchestration with a mocked store.
How:   mock_store (conftest) replaces the database; a real FileService
       writes to tmp_path so file effects can be asserted.

What we test:
    ✅ Image is stored before the insert and its relative path is persisted
    ✅ Update only passes an image path when a new file arrived
    ✅ Delete order: read path → remove file → delete row
    ✅ File removal failure does not stop the row deletion
    ✅ Store failures become operation-specific errors
"""

import pytest
from unittest.mock import AsyncMock

from portfolio_api.exceptions import DatabaseError, SkillDeletionError
from portfolio_api.schemas.portfolio import SkillForm
from portfolio_api.services.file_service import FileService
from portfolio_api.services.skill_service import SkillService


@pytest.fixture
def files(tmp_path):
    return FileService(str(tmp_path / "uploads"))


@pytest.fixture
def service(mock_store, files):
    return SkillService(mock_store, files)


class TestSkillServiceCreate:

    @pytest.mark.asyncio
    async def test_create_without_image_stores_null_path(self, service, mock_store):
        mock_store.insert_skill.return_value = 3

        skill_id = await service.create_skill(SkillForm(title="Python"))

        assert skill_id == 3
        mock_store.insert_skill.assert_awaited_once_with("Python", None)

    @pytest.mark.asyncio
    async def test_create_with_image_persists_relative_path(
        self, service, mock_store, files, sample_image_bytes
    ):
        mock_store.insert_skill.return_value = 1

        await service.create_skill(SkillForm(title="Docker"), sample_image_bytes, "docker.png")

        title, image_path = mock_store.insert_skill.await_args.args
        assert title == "Docker"
        assert image_path.startswith("uploads/")
        assert image_path.endswith(".png")
        assert files.resolve(image_path).exists()

    @pytest.mark.asyncio
    async def test_create_store_failure_raises_database_error(self, service, mock_store):
        mock_store.insert_skill.side_effect = RuntimeError("connection lost")

        with pytest.raises(DatabaseError, match="Error adding skill"):
            await service.create_skill(SkillForm(title="Go"))


class TestSkillServiceListAndUpdate:

    @pytest.mark.asyncio
    async def test_list_maps_rows_to_records(self, service, mock_store):
        from portfolio_api.models import Skill
        mock_store.list_skills.return_value = [
            Skill(id=1, title="Python", image_path="uploads/1.png"),
            Skill(id=2, title="SQL", image_path=None),
        ]

        records = await service.list_skills()

        assert [r.model_dump() for r in records] == [
            {"id": 1, "title": "Python", "image_path": "uploads/1.png"},
            {"id": 2, "title": "SQL", "image_path": None},
        ]

    @pytest.mark.asyncio
    async def test_list_store_failure(self, service, mock_store):
        mock_store.list_skills.side_effect = RuntimeError("boom")

        with pytest.raises(DatabaseError, match="Error fetching skills"):
            await service.list_skills()

    @pytest.mark.asyncio
    async def test_update_without_image_leaves_path_untouched(self, service, mock_store):
        await service.update_skill(5, SkillForm(title="Rust"))

        mock_store.update_skill.assert_awaited_once_with(5, "Rust", None)

    @pytest.mark.asyncio
    async def test_update_with_image_passes_new_path(self, service, mock_store, sample_image_bytes):
        await service.update_skill(5, SkillForm(title="Rust"), sample_image_bytes, "rust.png")

        skill_id, title, image_path = mock_store.update_skill.await_args.args
        assert skill_id == 5
        assert image_path.startswith("uploads/")

    @pytest.mark.asyncio
    async def test_update_store_failure(self, service, mock_store):
        mock_store.update_skill.side_effect = RuntimeError("boom")

        with pytest.raises(DatabaseError, match="Error updating skill"):
            await service.update_skill(5, SkillForm(title="Rust"))


class TestSkillServiceDelete:

    @pytest.mark.asyncio
    async def test_delete_runs_lookup_unlink_delete_in_order(self, mock_store):
        calls = []
        files = AsyncMock(spec=FileService)

        async def lookup(skill_id):
            calls.append("lookup")
            return "uploads/1.png"

        async def remove(path):
            calls.append("remove")
            return True

        async def delete(skill_id):
            calls.append("delete")
            return 1

        mock_store.get_skill_image_path.side_effect = lookup
        files.remove.side_effect = remove
        mock_store.delete_skill.side_effect = delete

        await SkillService(mock_store, files).delete_skill(1)

        assert calls == ["lookup", "remove", "delete"]
        files.remove.assert_awaited_once_with("uploads/1.png")

    @pytest.mark.asyncio
    async def test_delete_without_image_skips_unlink(self, mock_store):
        files = AsyncMock(spec=FileService)
        mock_store.get_skill_image_path.return_value = None

        await SkillService(mock_store, files).delete_skill(2)

        files.remove.assert_not_awaited()
        mock_store.delete_skill.assert_awaited_once_with(2)

    @pytest.mark.asyncio
    async def test_delete_proceeds_when_file_is_missing(self, service, mock_store):
        """Unlink failure is logged; the row is deleted regardless."""
        mock_store.get_skill_image_path.return_value = "uploads/gone.png"

        await service.delete_skill(4)

        mock_store.delete_skill.assert_awaited_once_with(4)

    @pytest.mark.asyncio
    async def test_delete_lookup_failure_raises_skill_deletion_error(self, service, mock_store):
        mock_store.get_skill_image_path.side_effect = RuntimeError("boom")

        with pytest.raises(SkillDeletionError, match="Error deleting skill"):
            await service.delete_skill(1)
        mock_store.delete_skill.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_statement_failure_raises_skill_deletion_error(self, service, mock_store):
        mock_store.get_skill_image_path.return_value = None
        mock_store.delete_skill.side_effect = RuntimeError("boom")

        with pytest.raises(SkillDeletionError):
            await service.delete_skill(1)
