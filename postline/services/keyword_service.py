"""
Keyword moderation

Keywords are extracted from posts and queue up as ``pending`` until a
moderator allows, denies, or folds them into another keyword as a synonym.
"""

import logging
from datetime import datetime

from sqlalchemy import delete, func, literal, select, String
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from postline.database import dialect_insert
from postline.exceptions import ValidationError
from postline.models.keyword import Keyword, KeywordStatus
from postline.models.post_keyword import PostKeyword

logger = logging.getLogger(__name__)


def _clean(value: str, field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError("Keyword must not be empty", field=field)
    return cleaned


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _pending_clause(min_occurrences: int):
    return (Keyword.status == KeywordStatus.PENDING) & (Keyword.occurrences >= min_occurrences)


async def get_keyword(db: AsyncSession, value: str) -> Keyword | None:
    result = await db.execute(select(Keyword).where(Keyword.value == _clean(value, "value")))
    return result.scalars().first()


async def get_random_pending_keyword(db: AsyncSession, min_occurrences: int) -> Keyword | None:
    """Pick one pending keyword that has shown up often enough to moderate."""
    result = await db.execute(
        select(Keyword).where(_pending_clause(min_occurrences)).order_by(func.random()).limit(1)
    )
    return result.scalars().first()


async def count_pending_keywords(db: AsyncSession, min_occurrences: int) -> int:
    result = await db.execute(select(func.count()).select_from(Keyword).where(_pending_clause(min_occurrences)))
    return result.scalar_one()


async def search_keywords(db: AsyncSession, query: str, limit: int) -> list[Keyword]:
    """
    Case-insensitive substring search over keyword values.

    Results are ordered by popularity first, then alphabetically.
    """
    pattern = f"%{_escape_like(query)}%"
    result = await db.execute(
        select(Keyword)
        .where(Keyword.value.ilike(pattern, escape="\\"))
        .order_by(Keyword.occurrences.desc(), Keyword.value.asc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def _upsert_statuses(db: AsyncSession, rows: list[dict]) -> None:
    now = datetime.utcnow()
    values = [
        {
            "value": row["value"],
            "status": row["status"],
            "synonym": row.get("synonym"),
            "occurrences": 1,
            "created_at": now,
            "updated_at": now,
        }
        for row in rows
    ]
    stmt = dialect_insert(db, Keyword).values(values)
    # Existing rows keep their occurrences
    stmt = stmt.on_conflict_do_update(
        index_elements=[Keyword.value],
        set_={
            "status": stmt.excluded.status,
            "synonym": stmt.excluded.synonym,
            "updated_at": stmt.excluded.updated_at,
        },
    )
    await db.execute(stmt)


async def set_keyword_status(db: AsyncSession, value: str, status: KeywordStatus) -> Keyword:
    """Allow or deny a keyword, creating it when it was never seen."""
    value = _clean(value, "keyword")
    try:
        await _upsert_statuses(db, [{"value": value, "status": status}])
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to set keyword '{value}' to {status.value}: {e}")
        raise

    logger.info(f"Keyword '{value}' set to {status.value}")
    keyword = await db.get(Keyword, value, populate_existing=True)
    return keyword


async def set_keyword_as_synonym(db: AsyncSession, keyword_to_update: str, original_keyword: str) -> int:
    """
    Merge ``keyword_to_update`` into ``original_keyword``.

    The replaced keyword is marked as a synonym of the original, the original
    is allowed, and every post tagged with the replaced keyword is re-tagged
    with the original one. Posts that already carry both keep a single row.

    Returns:
        int: number of post occurrences that were re-tagged
    """
    keyword_to_update = _clean(keyword_to_update, "keywordToUpdate")
    original_keyword = _clean(original_keyword, "originalKeyword")
    if keyword_to_update == original_keyword:
        raise ValidationError("A keyword cannot be a synonym of itself", field="originalKeyword")

    try:
        await _upsert_statuses(
            db,
            [
                {"value": keyword_to_update, "status": KeywordStatus.SYNONYM, "synonym": original_keyword},
                {"value": original_keyword, "status": KeywordStatus.ALLOW},
            ],
        )

        retag = dialect_insert(db, PostKeyword).from_select(
            ["post_id", "keyword"],
            select(PostKeyword.post_id, literal(original_keyword, type_=String)).where(
                PostKeyword.keyword == keyword_to_update
            ),
        )
        retag = retag.on_conflict_do_nothing(index_elements=[PostKeyword.post_id, PostKeyword.keyword])
        await db.execute(retag)

        removed = await db.execute(delete(PostKeyword).where(PostKeyword.keyword == keyword_to_update))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to merge keyword '{keyword_to_update}' into '{original_keyword}': {e}")
        raise

    logger.info(
        f"Keyword '{keyword_to_update}' merged into '{original_keyword}' ({removed.rowcount} occurrences)"
    )
    return removed.rowcount
