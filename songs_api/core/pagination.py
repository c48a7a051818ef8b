# ============================================================================
# FILE: songs_api/core/pagination.py
# ============================================================================
import math
from typing import Any, Dict, Optional, Type
from pydantic import BaseModel
from sqlalchemy.orm import Query
from starlette.datastructures import URL


def resolve_page(raw: Optional[str]) -> int:
    """Missing, non-numeric or non-positive page values fall back to page 1"""
    try:
        page = int(raw) if raw is not None else 1
    except ValueError:
        return 1
    return page if page >= 1 else 1


def _page_url(url: URL, page: int) -> str:
    return str(url.include_query_params(page=page))


def paginate(
    query: Query,
    url: URL,
    page: int,
    per_page: int,
    item_schema: Type[BaseModel],
) -> Dict[str, Any]:
    """
    Build a length-aware page envelope for a SQLAlchemy query

    Navigation URLs keep the request's other query parameters so that
    filters survive page changes. Pages past the end are answered without
    querying rows, so the offset never leaves the database integer range.
    """
    total = query.order_by(None).count()
    last_page = max(1, math.ceil(total / per_page))
    offset = (page - 1) * per_page
    items = query.offset(offset).limit(per_page).all() if page <= last_page else []

    first: Optional[int] = offset + 1 if items else None
    last: Optional[int] = offset + len(items) if items else None

    return {
        "current_page": page,
        "data": [item_schema.model_validate(item).model_dump(mode="json") for item in items],
        "first_page_url": _page_url(url, 1),
        "from": first,
        "last_page": last_page,
        "last_page_url": _page_url(url, last_page),
        "next_page_url": _page_url(url, page + 1) if page < last_page else None,
        "path": str(url.replace(query="")),
        "per_page": per_page,
        "prev_page_url": _page_url(url, page - 1) if page > 1 else None,
        "to": last,
        "total": total,
    }
