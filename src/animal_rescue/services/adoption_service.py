"""
animal_rescue.services.adoption_service

Adoption request handling (transaction + persistence owner).

Responsibilities:
- List animals together with their adoption requests.
- Submit, edit and delete adoption requests on behalf of an adopter.
- Enforce the per-adopter request limit and request ownership.

Mutating operations return `None` on success or a `Rejection` describing why
nothing was written; callers decide how to surface it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from animal_rescue.auth.models import Principal
from animal_rescue.db.models import AdoptionRequest, Animal
from animal_rescue.db.repositories.adoption_requests import AdoptionRequestRepo
from animal_rescue.db.repositories.animals import AnimalRepo
from animal_rescue.observability.logging import LogEvent, get_logger
from animal_rescue.schemas import AdoptionRequestBody
from animal_rescue.settings import Settings

log = get_logger(__name__)


class RejectionKind(enum.StrEnum):
    not_found = "NOT_FOUND"
    quota_exceeded = "QUOTA_EXCEEDED"
    forbidden = "FORBIDDEN"


@dataclass(frozen=True, slots=True)
class Rejection:
    kind: RejectionKind
    message: str


@dataclass(frozen=True, slots=True)
class AnimalListing:
    animal: Animal
    adoption_requests: list[AdoptionRequest]


def _animal_not_found(animal_id: int) -> Rejection:
    return Rejection(RejectionKind.not_found, f"Animal with id {animal_id} doesn't exist!")


def _request_not_found(adoption_request_id: int) -> Rejection:
    return Rejection(
        RejectionKind.not_found,
        f"AdoptionRequest with id {adoption_request_id} doesn't exist!",
    )


class AdoptionService:
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings

        self._animals = AnimalRepo(session)
        self._requests = AdoptionRequestRepo(session)

    @staticmethod
    def whoami(principal: Principal | None) -> str:
        return principal.name if principal is not None else ""

    async def list_animals(self) -> list[AnimalListing]:
        log.info(LogEvent.list_animals)
        animals = await self._animals.find_all()
        # One request lookup per animal (N+1 selects). Switch to a single IN query if
        # the animal list grows large.
        listings: list[AnimalListing] = []
        for animal in animals:
            requests = await self._requests.find_by_animal(animal.id)
            listings.append(AnimalListing(animal=animal, adoption_requests=requests))
        return listings

    async def submit_adoption_request(
        self,
        *,
        principal: Principal,
        animal_id: int,
        body: AdoptionRequestBody,
    ) -> Rejection | None:
        log.info(LogEvent.submit_adoption_request, adopter=principal.name, animal_id=animal_id)

        existing = await self._requests.count_by_adopter_name(principal.name)
        if existing >= self._settings.adoption_request_limit:
            return self._reject(
                Rejection(RejectionKind.quota_exceeded, "Too many existing adoption requests"),
                adopter=principal.name,
                existing=existing,
            )

        if await self._animals.find_by_id(animal_id) is None:
            return self._reject(_animal_not_found(animal_id), adopter=principal.name)

        # Bind whatever the client sent, then override the server-owned fields.
        entity = AdoptionRequest(
            animal_id=body.animal,
            adopter_name=body.adopter_name,
            email=body.email,
            notes=body.notes,
        )
        entity.animal_id = animal_id
        entity.adopter_name = principal.name

        await self._requests.save(entity)
        await self._session.commit()
        log.info(LogEvent.adoption_request_created, adoption_request_id=entity.id)
        return None

    async def edit_adoption_request(
        self,
        *,
        principal: Principal,
        animal_id: int,
        adoption_request_id: int,
        body: AdoptionRequestBody,
    ) -> Rejection | None:
        log.info(
            LogEvent.edit_adoption_request,
            adopter=principal.name,
            animal_id=animal_id,
            adoption_request_id=adoption_request_id,
        )
        found = await self._find_owned_request(principal, animal_id, adoption_request_id)
        if isinstance(found, Rejection):
            return found

        found.email = body.email
        found.notes = body.notes
        await self._requests.save(found)
        await self._session.commit()
        return None

    async def delete_adoption_request(
        self,
        *,
        principal: Principal,
        animal_id: int,
        adoption_request_id: int,
    ) -> Rejection | None:
        log.info(
            LogEvent.delete_adoption_request,
            adopter=principal.name,
            animal_id=animal_id,
            adoption_request_id=adoption_request_id,
        )
        found = await self._find_owned_request(principal, animal_id, adoption_request_id)
        if isinstance(found, Rejection):
            return found

        await self._requests.delete(found)
        await self._session.commit()
        return None

    async def _find_owned_request(
        self,
        principal: Principal,
        animal_id: int,
        adoption_request_id: int,
    ) -> AdoptionRequest | Rejection:
        if await self._animals.find_by_id(animal_id) is None:
            return self._reject(_animal_not_found(animal_id), adopter=principal.name)

        candidates = await self._requests.find_by_animal(animal_id)
        existing = next((ar for ar in candidates if ar.id == adoption_request_id), None)
        if existing is None:
            return self._reject(_request_not_found(adoption_request_id), adopter=principal.name)

        if existing.adopter_name != principal.name:
            # The owner is logged for operators but kept out of the client message.
            return self._reject(
                Rejection(
                    RejectionKind.forbidden,
                    f"User {principal.name} cannot modify another adopter's adoption request",
                ),
                adopter=principal.name,
                owner=existing.adopter_name,
            )
        return existing

    @staticmethod
    def _reject(rejection: Rejection, **context: object) -> Rejection:
        log.warning(
            LogEvent.adoption_request_rejected,
            kind=rejection.kind.value,
            reason=rejection.message,
            **context,
        )
        return rejection


# --- Module Notes -----------------------------------------------------------
# Concurrent edits of the same request are not serialized; the last commit wins.
