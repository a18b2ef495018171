import math
from dataclasses import dataclass

from advocate_directory.config import Settings, settings as default_settings
from advocate_directory.schemas.advocate import (
    AdvocateResponse,
    PaginationInfo,
    SearchAdvocatesResponse,
)


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int
    offset: int


def parse_optional_int(value: str | int | None) -> int | None:
    """Lenient integer parsing for query parameters; junk becomes ``None``."""
    if value is None or isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return None


def validate_pagination(
    page: int | None,
    limit: int | None,
    settings: Settings = default_settings,
) -> PageWindow:
    # 0 and None both fall back to the defaults; anything else is clamped
    valid_page = max(1, page or settings.default_page)
    valid_limit = min(settings.max_limit, max(1, limit or settings.default_limit))
    return PageWindow(
        page=valid_page,
        limit=valid_limit,
        offset=(valid_page - 1) * valid_limit,
    )


def total_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit)


def assemble_response(
    records: list[AdvocateResponse],
    page: int,
    limit: int,
    total_count: int,
) -> SearchAdvocatesResponse:
    return SearchAdvocatesResponse(
        data=records,
        pagination=PaginationInfo(
            page=page,
            limit=limit,
            total_count=total_count,
            total_pages=total_pages(total_count, limit),
        ),
    )
