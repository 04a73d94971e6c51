"""Unit tests for CategoryService."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as ModelValidationError

from twk.domain.error import NotFoundError, ValidationError
from twk.domain.service import CategoryService
from twk.domain.value import CategoryId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCategory:
    @pytest.mark.asyncio
    async def test_create_and_get(self, unit_env):
        service = await unit_env.get(CategoryService)

        category = await service.create_category("Science")

        assert await service.get_category(category.id) == category
        assert await service.get_by_name("Science") == category

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, unit_env):
        service = await unit_env.get(CategoryService)
        await service.create_category("Science")

        with pytest.raises(ValidationError):
            await service.create_category("Science")

    @pytest.mark.asyncio
    async def test_empty_name_rejected(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(ModelValidationError):
            await service.create_category("")


class TestLookup:
    @pytest.mark.asyncio
    async def test_missing_id(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_category(CategoryId(uuid4()))

        assert exc_info.value.resource == "Category"

    @pytest.mark.asyncio
    async def test_missing_name(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_name("Astrology")

        assert exc_info.value.identifier == "Astrology"

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_name(self, unit_env):
        service = await unit_env.get(CategoryService)
        for name in ("Sports", "Politics", "Science"):
            await service.create_category(name)

        categories = await service.list_categories()

        assert [c.name for c in categories] == ["Politics", "Science", "Sports"]
        assert len(await service.list_categories(limit=2)) == 2
