"""
tests.test_adoption_service

AdoptionService rules exercised directly against the repositories.
"""

from __future__ import annotations

import pytest
from sqlalchemy import select

from animal_rescue.auth.models import Principal
from animal_rescue.db.models import AdoptionRequest
from animal_rescue.schemas import AdoptionRequestBody
from animal_rescue.services.adoption_service import AdoptionService, RejectionKind
from animal_rescue.settings import Settings

ALICE = Principal(name="alice")
BOB = Principal(name="bob")
CAROL = Principal(name="carol")


def _service(session, settings: Settings, **overrides) -> AdoptionService:
    return AdoptionService(session=session, settings=settings.model_copy(update=overrides))


async def _requests_of(session, adopter_name: str) -> list[AdoptionRequest]:
    stmt = select(AdoptionRequest).where(AdoptionRequest.adopter_name == adopter_name)
    return list((await session.execute(stmt)).scalars().all())


def test_whoami() -> None:
    assert AdoptionService.whoami(ALICE) == "alice"
    assert AdoptionService.whoami(None) == ""


@pytest.mark.asyncio
async def test_quota_blocks_second_request_with_limit_one(
    sessionmaker, settings, add_request
) -> None:
    await add_request(5, "alice")

    async with sessionmaker() as session:
        svc = _service(session, settings, adoption_request_limit=1)
        rejection = await svc.submit_adoption_request(
            principal=ALICE, animal_id=7, body=AdoptionRequestBody(email="alice@example.com")
        )
        assert rejection is not None
        assert rejection.kind is RejectionKind.quota_exceeded

    async with sessionmaker() as session:
        stored = await _requests_of(session, "alice")
        assert [ar.animal_id for ar in stored] == [5]


@pytest.mark.asyncio
async def test_zero_limit_rejects_every_submission(sessionmaker, settings) -> None:
    async with sessionmaker() as session:
        svc = _service(session, settings, adoption_request_limit=0)
        rejection = await svc.submit_adoption_request(
            principal=ALICE, animal_id=3, body=AdoptionRequestBody()
        )
        assert rejection is not None
        assert rejection.kind is RejectionKind.quota_exceeded


@pytest.mark.asyncio
async def test_quota_is_checked_before_animal_lookup(sessionmaker, settings, add_request) -> None:
    await add_request(5, "alice")

    async with sessionmaker() as session:
        svc = _service(session, settings, adoption_request_limit=1)
        rejection = await svc.submit_adoption_request(
            principal=ALICE, animal_id=999, body=AdoptionRequestBody()
        )
        assert rejection is not None
        assert rejection.kind is RejectionKind.quota_exceeded


@pytest.mark.asyncio
async def test_unknown_animal_creates_nothing(sessionmaker, settings) -> None:
    async with sessionmaker() as session:
        svc = _service(session, settings)
        for action in (
            svc.submit_adoption_request(principal=ALICE, animal_id=999, body=AdoptionRequestBody()),
            svc.edit_adoption_request(
                principal=ALICE, animal_id=999, adoption_request_id=1, body=AdoptionRequestBody()
            ),
            svc.delete_adoption_request(principal=ALICE, animal_id=999, adoption_request_id=1),
        ):
            rejection = await action
            assert rejection is not None
            assert rejection.kind is RejectionKind.not_found
            assert rejection.message == "Animal with id 999 doesn't exist!"

    async with sessionmaker() as session:
        assert await _requests_of(session, "alice") == []


@pytest.mark.asyncio
async def test_submit_overrides_client_owned_fields(sessionmaker, settings) -> None:
    body = AdoptionRequestBody(email="a@example.com", notes="n", adopter_name="mallory", animal=7)

    async with sessionmaker() as session:
        assert (
            await _service(session, settings).submit_adoption_request(
                principal=ALICE, animal_id=3, body=body
            )
            is None
        )

    async with sessionmaker() as session:
        [stored] = await _requests_of(session, "alice")
        assert stored.animal_id == 3
        assert await _requests_of(session, "mallory") == []


@pytest.mark.asyncio
async def test_non_owner_cannot_delete(sessionmaker, settings, add_request) -> None:
    r = await add_request(3, "bob")

    async with sessionmaker() as session:
        rejection = await _service(session, settings).delete_adoption_request(
            principal=CAROL, animal_id=3, adoption_request_id=r.id
        )
        assert rejection is not None
        assert rejection.kind is RejectionKind.forbidden
        assert "carol" in rejection.message
        assert "bob" not in rejection.message

    async with sessionmaker() as session:
        assert [ar.id for ar in await _requests_of(session, "bob")] == [r.id]


@pytest.mark.asyncio
async def test_non_owner_cannot_edit(sessionmaker, settings, add_request) -> None:
    r = await add_request(3, "bob", email="bob@example.com", notes="mine")

    async with sessionmaker() as session:
        rejection = await _service(session, settings).edit_adoption_request(
            principal=CAROL,
            animal_id=3,
            adoption_request_id=r.id,
            body=AdoptionRequestBody(email="carol@example.com", notes="now mine"),
        )
        assert rejection is not None
        assert rejection.kind is RejectionKind.forbidden

    async with sessionmaker() as session:
        [stored] = await _requests_of(session, "bob")
        assert (stored.email, stored.notes) == ("bob@example.com", "mine")


@pytest.mark.asyncio
async def test_edit_keeps_identity_fields(sessionmaker, settings, add_request) -> None:
    r = await add_request(5, "bob", email="old@example.com", notes=None)

    async with sessionmaker() as session:
        rejection = await _service(session, settings).edit_adoption_request(
            principal=BOB,
            animal_id=5,
            adoption_request_id=r.id,
            body=AdoptionRequestBody(email="new@example.com", notes="call after 5"),
        )
        assert rejection is None

    async with sessionmaker() as session:
        [stored] = await _requests_of(session, "bob")
        assert (stored.id, stored.animal_id, stored.adopter_name) == (r.id, 5, "bob")
        assert (stored.email, stored.notes) == ("new@example.com", "call after 5")


@pytest.mark.asyncio
async def test_request_is_only_found_under_its_own_animal(
    sessionmaker, settings, add_request
) -> None:
    r = await add_request(5, "bob")

    async with sessionmaker() as session:
        rejection = await _service(session, settings).delete_adoption_request(
            principal=BOB, animal_id=7, adoption_request_id=r.id
        )
        assert rejection is not None
        assert rejection.kind is RejectionKind.not_found
        assert rejection.message == f"AdoptionRequest with id {r.id} doesn't exist!"


@pytest.mark.asyncio
async def test_list_animals_matches_requests_by_animal(sessionmaker, settings, add_request) -> None:
    a = await add_request(3, "alice")
    b = await add_request(7, "bob")
    c = await add_request(7, "carol")

    async with sessionmaker() as session:
        listings = await _service(session, settings).list_animals()

    got = {listing.animal.id: {ar.id for ar in listing.adoption_requests} for listing in listings}
    assert got == {3: {a.id}, 5: set(), 7: {b.id, c.id}}
