"""Page/offset helpers shared by list queries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query


@dataclass(frozen=True)
class PageParams:
    """Query-string pagination state shared by every list endpoint."""

    page: int = 1
    page_size: int = 10
    filter: str | None = None
    search_query: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def paginate(query: Query[Any], params: PageParams) -> tuple[int, list[Any]]:
    """Return the unpaged total and the requested page of ``query``."""
    total = query.order_by(None).count()
    rows = query.offset(params.offset).limit(params.page_size).all()
    return total, rows


LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Make ``text`` match literally inside a LIKE pattern."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_any(search_query: str, *columns: Any) -> Any:
    """Build a case-insensitive "contains" match across ``columns``.

    ``%`` and ``_`` in ``search_query`` are matched as plain characters.
    """
    pattern = f"%{escape_like(search_query)}%"
    return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns))
