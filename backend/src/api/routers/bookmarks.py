"""Bookmark endpoints: create, list/search, get and delete."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import ClientInfo, get_async_session, get_client_info
from schemas.bookmark import (
    BookmarkCreate,
    BookmarkCreatedResponse,
    BookmarkDeleteResponse,
    BookmarkListResponse,
    BookmarkResponse,
    PaginationInfo,
    parse_bookmark_id,
)
from services import bookmark_service

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


def _parse_id_or_400(bookmark_id: str) -> int:
    """Reject non-digit ids before the service is called."""
    try:
        return parse_bookmark_id(bookmark_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("", response_model=BookmarkCreatedResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    client_info: ClientInfo = Depends(get_client_info),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkCreatedResponse:
    """Create a new bookmark from the submitted text."""
    bookmark = await bookmark_service.create_bookmark(
        db, data.text, client_info.ip_address, client_info.user_agent,
    )
    return BookmarkCreatedResponse(id=bookmark.id, created_at=bookmark.created_at)


@router.get("", response_model=BookmarkListResponse)
async def list_bookmarks(
    # Raw strings: malformed paging values fall back to defaults instead of 422
    limit: str | None = Query(default=None, description="Page size (default 50, max 100)"),
    offset: str | None = Query(default=None, description="Pagination offset (default 0)"),
    search: str | None = Query(
        default=None, description="Case-insensitive substring to match in text",
    ),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListResponse:
    """List bookmarks newest first, optionally filtered by a text search."""
    page = await bookmark_service.list_bookmarks(db, limit=limit, offset=offset, search=search)
    return BookmarkListResponse(
        bookmarks=[BookmarkResponse.model_validate(b) for b in page.items],
        pagination=PaginationInfo(
            total=page.total,
            limit=page.limit,
            offset=page.offset,
            has_more=page.has_more,
        ),
    )


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: str,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    parsed_id = _parse_id_or_400(bookmark_id)
    bookmark = await bookmark_service.get_bookmark(db, parsed_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", response_model=BookmarkDeleteResponse)
async def delete_bookmark(
    bookmark_id: str,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkDeleteResponse:
    """Permanently delete a bookmark."""
    parsed_id = _parse_id_or_400(bookmark_id)
    deleted_id = await bookmark_service.delete_bookmark(db, parsed_id)
    if deleted_id is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return BookmarkDeleteResponse(id=deleted_id)
