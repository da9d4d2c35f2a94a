"""
animal_rescue.db.seed

Sample animals for local development and demos.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from animal_rescue.db.models import Animal

SAMPLE_ANIMALS: tuple[dict, ...] = (
    {
        "name": "Chocobo",
        "avatar_url": "/images/chocobo.jpg",
        "description": "A bright yellow chick who loves running laps around the yard.",
        "rescue_date": date(2020, 1, 1),
    },
    {
        "name": "Sir Fluffinton",
        "avatar_url": "/images/sir-fluffinton.jpg",
        "description": "Distinguished long-haired cat. Accepts chin scratches by appointment.",
        "rescue_date": date(2020, 1, 23),
    },
    {
        "name": "Pancake",
        "avatar_url": "/images/pancake.jpg",
        "description": "Flat-faced bulldog, champion napper, snores softly.",
        "rescue_date": date(2020, 2, 14),
    },
    {
        "name": "Mochi",
        "avatar_url": "/images/mochi.jpg",
        "description": "Shy rabbit who warms up quickly when offered parsley.",
        "rescue_date": date(2020, 3, 2),
    },
    {
        "name": "Captain Whiskers",
        "avatar_url": "/images/captain-whiskers.jpg",
        "description": "One-eyed tabby with a sailor's swagger and a gentle purr.",
        "rescue_date": date(2020, 3, 18),
    },
)


async def seed_sample_animals(session: AsyncSession) -> int:
    """
    Insert the sample animals when the table is empty.

    Returns the number of rows inserted.
    """

    existing = (await session.execute(select(func.count()).select_from(Animal))).scalar_one()
    if existing:
        return 0

    session.add_all(Animal(**row) for row in SAMPLE_ANIMALS)
    await session.commit()
    return len(SAMPLE_ANIMALS)
