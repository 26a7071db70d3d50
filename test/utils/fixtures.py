"""
Reusable database fixtures for integration tests

Mirrors a small slice of production data: two sources, a handful of
posts and the users who mention each other in them.
"""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from postline.models import Keyword, PostKeyword, Post, Source, User

sources_fixture = [
    {"id": "a", "name": "A", "image": "http://image.com/a", "handle": "a"},
    {"id": "b", "name": "B", "image": "http://image.com/b", "handle": "b"},
    {"id": "squad", "name": "Squad", "image": "http://image.com/squad", "handle": "squad", "private": True},
]

posts_fixture = [
    {
        "id": "p1",
        "short_id": "sp1",
        "title": "P1",
        "url": "http://p1.com",
        "image": "https://daily.dev/image.jpg",
        "source_id": "a",
        "score": 1,
        "created_at": datetime(2021, 1, 1, 12),
    },
    {"id": "p2", "short_id": "sp2", "title": "P2", "url": "http://p2.com", "source_id": "b", "score": 7},
    {"id": "p3", "short_id": "sp3", "title": "P3", "url": "http://p3.com", "source_id": "a", "score": 4},
    {"id": "p4", "short_id": "sp4", "title": "P4", "url": "http://p4.com", "source_id": "squad", "score": 0},
]

users_fixture = [
    {"id": "1", "name": "Ido", "username": "idoshamun", "image": "https://daily.dev/ido.jpg"},
    {"id": "2", "name": "Tsahi", "username": "tsahidaily", "image": "https://daily.dev/tsahi.jpg"},
    {"id": "3", "name": "Nimrod", "username": "nimroddaily", "image": "https://daily.dev/nimrod.jpg"},
]


async def save_fixtures(db: AsyncSession, model, rows: list[dict]) -> None:
    db.add_all([model(**row) for row in rows])
    await db.commit()


async def save_content_fixtures(db: AsyncSession) -> None:
    await save_fixtures(db, Source, sources_fixture)
    await save_fixtures(db, Post, posts_fixture)
    await save_fixtures(db, User, users_fixture)


async def fetch_keywords(db: AsyncSession) -> list[tuple]:
    """(value, status, occurrences) of every keyword, as stored right now."""
    result = await db.execute(
        select(Keyword).order_by(Keyword.value.asc()).execution_options(populate_existing=True)
    )
    return [(k.value, k.status, k.occurrences) for k in result.scalars().all()]


async def fetch_post_keywords(db: AsyncSession) -> list[tuple]:
    result = await db.execute(
        select(PostKeyword.post_id, PostKeyword.keyword).order_by(PostKeyword.post_id.asc(), PostKeyword.keyword.asc())
    )
    return [tuple(row) for row in result.all()]
