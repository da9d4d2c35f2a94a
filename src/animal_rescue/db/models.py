"""
animal_rescue.db.models

Persistence schema for the adoption backend.

Responsibilities:
- Define ORM models:
  - Animal: an animal up for adoption (read-only for the API)
  - AdoptionRequest: an adopter's request for one animal
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from animal_rescue.db.base import Base


class Animal(Base):
    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rescue_date: Mapped[date | None] = mapped_column(nullable=True)


class AdoptionRequest(Base):
    __tablename__ = "adoption_requests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Plain many-to-one reference; no ORM relationship so animals are never
    # loaded with their requests implicitly.
    animal_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("animals.id"), nullable=False, index=True
    )
    adopter_name: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


# --- Module Notes -----------------------------------------------------------
# `Animal` deliberately has no `adoption_requests` relationship: the list endpoint
# attaches requests at read time (see services.adoption_service).
