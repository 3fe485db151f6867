"""Tests for the project service."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from workboard.core.errors import ForbiddenError, NotFoundError, PersistenceError, ValidationError


class TestCreateProject:

    @pytest.mark.asyncio
    async def test_create(self, project_service, owner):
        project = await project_service.create_project(
            {"name": "Website", "description": "Public site"}, owner.id
        )
        assert project.name == "Website"
        assert project.description == "Public site"
        assert project.owner_id == owner.id
        assert project.status == "active"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data,message", [
        ({}, "Project name is required"),
        ({"name": "  "}, "Project name is required"),
        ({"name": "x" * 201}, "less than 200"),
        ({"name": "ok", "description": "x" * 1001}, "less than 1000"),
    ])
    async def test_validation(self, project_service, owner, data, message):
        with pytest.raises(ValidationError, match=message):
            await project_service.create_project(data, owner.id)

    @pytest.mark.asyncio
    async def test_storage_failure(self, project_service, owner):
        with patch.object(
            project_service.project_repository,
            "create",
            new=AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("locked"))),
        ):
            with pytest.raises(PersistenceError, match="Failed to create project"):
                await project_service.create_project({"name": "Website"}, owner.id)


class TestGetAndList:

    @pytest.mark.asyncio
    async def test_owner_reads(self, project_service, project, owner):
        fetched = await project_service.get_project(project.id, owner.id)
        assert fetched.id == project.id

    @pytest.mark.asyncio
    async def test_missing(self, project_service, owner):
        with pytest.raises(NotFoundError, match="Project not found"):
            await project_service.get_project("missing", owner.id)

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, project_service, project, outsider):
        with pytest.raises(ForbiddenError):
            await project_service.get_project(project.id, outsider.id)

    @pytest.mark.asyncio
    async def test_list_only_own_projects(self, project_service, project, owner, outsider, project_factory):
        project_factory(outsider, name="Not mine")
        projects = await project_service.list_user_projects(owner.id)
        assert [p.id for p in projects] == [project.id]


class TestUpdateAndDelete:

    @pytest.mark.asyncio
    async def test_update(self, project_service, project, owner):
        updated = await project_service.update_project(
            project.id, {"name": "Renamed", "status": "archived"}, owner.id
        )
        assert updated.name == "Renamed"
        assert updated.status == "archived"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data,message", [
        ({"status": "paused"}, "Invalid project status"),
        ({"name": ""}, "cannot be empty"),
        ({"owner_id": "someone"}, "cannot be updated"),
    ])
    async def test_update_validation(self, project_service, project, owner, data, message):
        with pytest.raises(ValidationError, match=message):
            await project_service.update_project(project.id, data, owner.id)

    @pytest.mark.asyncio
    async def test_update_non_owner(self, project_service, project, outsider):
        with pytest.raises(ForbiddenError):
            await project_service.update_project(project.id, {"name": "x"}, outsider.id)

    @pytest.mark.asyncio
    async def test_delete_cascades_to_work_items(self, project_service, work_item_service, project, owner, work_item_repository):
        item = await work_item_service.create_work_item({"title": "T", "type": "task"}, project.id, owner.id)

        await project_service.delete_project(project.id, owner.id)

        with pytest.raises(NotFoundError):
            await project_service.get_project(project.id, owner.id)
        assert await work_item_repository.find_by_id(item.id) is None

    @pytest.mark.asyncio
    async def test_delete_non_owner(self, project_service, project, outsider):
        with pytest.raises(ForbiddenError):
            await project_service.delete_project(project.id, outsider.id)


class TestValidateProjectAccess:

    @pytest.mark.asyncio
    async def test_owner_has_access(self, project_service, project, owner):
        assert await project_service.validate_project_access(project.id, owner.id) is True

    @pytest.mark.asyncio
    async def test_others_do_not(self, project_service, project, outsider):
        assert await project_service.validate_project_access(project.id, outsider.id) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("project_id,user_id", [("", "u"), ("p", ""), ("missing", "u")])
    async def test_blank_or_unknown(self, project_service, project_id, user_id):
        assert await project_service.validate_project_access(project_id, user_id) is False

    @pytest.mark.asyncio
    async def test_storage_failure_never_raises(self, project_service, project, owner):
        with patch.object(
            project_service.project_repository,
            "find_by_id",
            new=AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("locked"))),
        ):
            assert await project_service.validate_project_access(project.id, owner.id) is False
