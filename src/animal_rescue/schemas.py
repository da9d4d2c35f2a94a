"""
animal_rescue.schemas

Wire models shared by the API layer and the adoption service.

Responsibilities:
- Bind adoption request bodies (camelCase or snake_case keys).
- Shape the animal listing returned to the frontend.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AdoptionRequestBody(CamelModel):
    """
    Client payload for submitting or editing an adoption request.

    `adopter_name` and `animal` are accepted so existing clients keep working,
    but the server always replaces them.
    """

    email: str | None = Field(default=None, max_length=320)
    notes: str | None = None
    adopter_name: str | None = Field(default=None, max_length=256)
    animal: int | None = None


class AdoptionRequestOut(CamelModel):
    id: int
    animal: int = Field(validation_alias="animal_id")
    adopter_name: str
    email: str | None = None
    notes: str | None = None


class AnimalOut(CamelModel):
    id: int
    name: str
    avatar_url: str | None = None
    description: str | None = None
    rescue_date: date | None = None
    adoption_requests: list[AdoptionRequestOut] = Field(default_factory=list)
