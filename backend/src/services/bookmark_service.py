"""Service layer for bookmark persistence and retrieval."""
import logging
from dataclasses import dataclass

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.fingerprint import derive_device_hash
from models.bookmark import Bookmark
from schemas.bookmark import normalize_limit, normalize_offset
from services.exceptions import PersistenceError
from services.utils import escape_ilike

logger = logging.getLogger(__name__)

# Largest value of the integer primary key column
MAX_BOOKMARK_ID = 2_147_483_647


@dataclass
class BookmarkPage:
    """One page of bookmarks plus the normalized paging values used to fetch it."""

    items: list[Bookmark]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        """True if rows exist beyond this page."""
        return self.total > self.offset + self.limit


def _search_filters(search: str | None) -> list[ColumnElement[bool]]:
    """Case-insensitive substring filter on text. Shared by the count and page queries."""
    if not search:
        return []
    return [Bookmark.text.ilike(f"%{escape_ilike(search)}%", escape="\\")]


async def create_bookmark(
    db: AsyncSession,
    text: str,
    ip_address: str,
    user_agent: str,
) -> Bookmark:
    """
    Create a bookmark and return it with its server-generated id and created_at.

    The text is expected to be validated by the caller. Identical calls create
    distinct rows; device_hash is never used for deduplication.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        PersistenceError: If the insert fails.
    """
    bookmark = Bookmark(
        text=text,
        user_agent=user_agent,
        ip_address=ip_address,
        device_hash=derive_device_hash(ip_address, user_agent),
    )
    try:
        db.add(bookmark)
        await db.flush()
        await db.refresh(bookmark)
    except SQLAlchemyError as e:
        raise PersistenceError("create_bookmark") from e

    logger.info(
        "bookmark_created",
        extra={"bookmark_id": bookmark.id, "device_hash": bookmark.device_hash},
    )
    return bookmark


async def list_bookmarks(
    db: AsyncSession,
    limit: str | int | None = None,
    offset: str | int | None = None,
    search: str | None = None,
) -> BookmarkPage:
    """
    List bookmarks newest first with offset pagination and optional text search.

    Args:
        db: Database session.
        limit: Page size; defaults to 50, capped at 100. Malformed values use the default.
        offset: Rows to skip; malformed or negative values use 0.
        search: Case-insensitive substring to match anywhere in text.

    Returns:
        BookmarkPage with the page items, the total matching count and the
        normalized limit/offset.

    The count and the page are two statements in the same transaction. Under
    READ COMMITTED, total can drift by rows created or deleted concurrently
    between them.

    Raises:
        PersistenceError: If either query fails.
    """
    page_limit = normalize_limit(limit)
    page_offset = normalize_offset(offset)
    filters = _search_filters(search)

    count_query = select(func.count()).select_from(Bookmark).where(*filters)
    page_query = (
        select(Bookmark)
        .where(*filters)
        .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
        .offset(page_offset)
        .limit(page_limit)
    )

    try:
        count_result = await db.execute(count_query)
        total = count_result.scalar() or 0
        # Past the last row: nothing to fetch, and huge offsets never reach the driver
        items: list[Bookmark] = []
        if page_offset < total:
            result = await db.execute(page_query)
            items = list(result.scalars().all())
    except SQLAlchemyError as e:
        raise PersistenceError("list_bookmarks") from e

    return BookmarkPage(items=items, total=total, limit=page_limit, offset=page_offset)


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """
    Get a bookmark by ID. Returns None if not found.

    Raises:
        PersistenceError: If the query fails.
    """
    if bookmark_id < 1 or bookmark_id > MAX_BOOKMARK_ID:
        return None
    try:
        result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        raise PersistenceError("get_bookmark") from e


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> int | None:
    """
    Permanently delete a bookmark. Returns the deleted id, or None if not found.

    A single DELETE ... RETURNING statement, so of two concurrent deletes of the
    same id only one sees it.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        PersistenceError: If the delete fails.
    """
    if bookmark_id < 1 or bookmark_id > MAX_BOOKMARK_ID:
        return None
    try:
        result = await db.execute(
            delete(Bookmark).where(Bookmark.id == bookmark_id).returning(Bookmark.id),
        )
        deleted_id = result.scalar_one_or_none()
    except SQLAlchemyError as e:
        raise PersistenceError("delete_bookmark") from e

    if deleted_id is not None:
        logger.info("bookmark_deleted", extra={"bookmark_id": deleted_id})
    return deleted_id
