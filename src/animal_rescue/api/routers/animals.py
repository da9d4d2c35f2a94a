"""
animal_rescue.api.routers.animals

Public endpoints of the adoption backend.

Responsibilities:
- Report the caller identity (`/whoami`).
- List animals with their adoption requests.
- Submit, edit and delete adoption requests for the authenticated adopter.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from animal_rescue.api.deps import adoption_service
from animal_rescue.api.errors import raise_for_rejection
from animal_rescue.auth.deps import get_optional_principal, get_principal
from animal_rescue.auth.models import Principal
from animal_rescue.schemas import AdoptionRequestBody, AdoptionRequestOut, AnimalOut
from animal_rescue.services.adoption_service import AdoptionService

router = APIRouter(tags=["pet adoption"])


@router.get("/whoami", response_class=PlainTextResponse)
async def whoami(principal: Principal | None = Depends(get_optional_principal)) -> str:
    return AdoptionService.whoami(principal)


@router.get("/animals", response_model=list[AnimalOut])
async def list_animals(svc: AdoptionService = Depends(adoption_service)) -> list[AnimalOut]:
    listings = await svc.list_animals()
    return [
        AnimalOut.model_validate(listing.animal).model_copy(
            update={
                "adoption_requests": [
                    AdoptionRequestOut.model_validate(ar) for ar in listing.adoption_requests
                ]
            }
        )
        for listing in listings
    ]


@router.post("/animals/{animal_id}/adoption-requests", status_code=HTTP_201_CREATED)
async def submit_adoption_request(
    animal_id: int,
    body: AdoptionRequestBody,
    principal: Principal = Depends(get_principal),
    svc: AdoptionService = Depends(adoption_service),
) -> Response:
    raise_for_rejection(
        await svc.submit_adoption_request(principal=principal, animal_id=animal_id, body=body)
    )
    return Response(status_code=HTTP_201_CREATED)


@router.put("/animals/{animal_id}/adoption-requests/{adoption_request_id}")
async def edit_adoption_request(
    animal_id: int,
    adoption_request_id: int,
    body: AdoptionRequestBody,
    principal: Principal = Depends(get_principal),
    svc: AdoptionService = Depends(adoption_service),
) -> Response:
    raise_for_rejection(
        await svc.edit_adoption_request(
            principal=principal,
            animal_id=animal_id,
            adoption_request_id=adoption_request_id,
            body=body,
        )
    )
    return Response(status_code=HTTP_200_OK)


@router.delete("/animals/{animal_id}/adoption-requests/{adoption_request_id}")
async def delete_adoption_request(
    animal_id: int,
    adoption_request_id: int,
    principal: Principal = Depends(get_principal),
    svc: AdoptionService = Depends(adoption_service),
) -> Response:
    raise_for_rejection(
        await svc.delete_adoption_request(
            principal=principal,
            animal_id=animal_id,
            adoption_request_id=adoption_request_id,
        )
    )
    return Response(status_code=HTTP_200_OK)


# --- Module Notes -----------------------------------------------------------
# The gateway mounts these paths under /api (see gateway/routes.json).
