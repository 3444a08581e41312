"""Tests for the owner-scoped design store."""

import uuid

import pytest

from matty.db.repositories.design_repository import DesignRepository
from matty.domains.designs.entities import Design
from matty.domains.designs.services import DesignNotFound, DesignService


async def add_design(session, owner_id, title="Poster"):
    repo = DesignRepository(session)
    return await repo.create(Design.create_design(owner_id, title, {"shapes": []}))


class TestDesignRepository:
    @pytest.mark.asyncio
    async def test_get_requires_matching_owner(self, session, alice, bob):
        design = await add_design(session, alice)
        repo = DesignRepository(session)

        assert (await repo.get_owned(design.id, alice)).title == "Poster"
        assert await repo.get_owned(design.id, bob) is None

    @pytest.mark.asyncio
    async def test_list_is_owner_only_newest_first(self, session, alice, bob):
        first = await add_design(session, alice, "first")
        second = await add_design(session, alice, "second")
        await add_design(session, bob, "foreign")

        designs = await DesignRepository(session).list_by_owner(alice)

        assert [d.id for d in designs] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_update_scoped_and_ignores_identity_fields(self, session, alice, bob):
        design = await add_design(session, alice)
        repo = DesignRepository(session)

        assert await repo.update_owned(design.id, bob, {"title": "stolen"}) is None

        updated = await repo.update_owned(
            design.id,
            alice,
            {"title": "Renamed", "owner_id": bob, "id": uuid.uuid4()},
        )

        assert updated.id == design.id
        assert updated.owner_id == alice
        assert updated.title == "Renamed"
        assert updated.canvas_data == {"shapes": []}

    @pytest.mark.asyncio
    async def test_delete_scoped(self, session, alice, bob):
        design = await add_design(session, alice)
        repo = DesignRepository(session)

        assert await repo.delete_owned(design.id, bob) is False
        assert await repo.delete_owned(design.id, alice) is True
        assert await repo.delete_owned(design.id, alice) is False


class TestDesignService:
    @pytest.mark.asyncio
    async def test_create_forces_owner(self, session, alice, bob):
        service = DesignService(session)

        design = await service.create_design(
            alice,
            {"title": "Card", "canvas_data": {"bg": "#fff"}, "ownerId": str(bob)},
        )

        assert design.owner_id == alice
        assert design.thumbnail == ""

    @pytest.mark.asyncio
    async def test_foreign_design_is_not_found(self, session, alice, bob):
        service = DesignService(session)
        design = await service.create_design(alice, {"title": "Card", "canvas_data": {}})

        with pytest.raises(DesignNotFound):
            await service.get_design(design.id, bob)
        with pytest.raises(DesignNotFound):
            await service.update_design(design.id, bob, {"title": "x"})
        with pytest.raises(DesignNotFound):
            await service.delete_design(design.id, bob)

        assert (await service.get_design(design.id, alice)).title == "Card"
