import asyncio
import logging

from advocate_directory.config import Settings, settings as default_settings
from advocate_directory.repositories.contracts import AdvocateStore
from advocate_directory.schemas.advocate import (
    AdvocateResponse,
    SearchAdvocatesRequest,
    SearchAdvocatesResponse,
    SortField,
    SortOrder,
)
from advocate_directory.services.errors import RetrievalFailure
from advocate_directory.services.pagination import assemble_response, validate_pagination
from advocate_directory.services.query_builder import Predicate, build_predicate
from advocate_directory.services.sorting import apply_secondary_sort
from advocate_directory.services.transform import transform_advocate

logger = logging.getLogger("advocates.search")

# SQLite INTEGER is a signed 64-bit value; larger offsets cannot be bound
MAX_SQL_OFFSET = 2**63 - 1


async def _no_rows():
    return []


class AdvocateService:
    def __init__(self, store: AdvocateStore, settings: Settings = default_settings):
        self._store = store
        self._settings = settings

    async def _fetch(
        self, predicate: Predicate, limit: int, offset: int
    ) -> tuple[list[AdvocateResponse], int]:
        if offset > MAX_SQL_OFFSET:
            # No page can start this far out, but the total is still reported
            page_task = asyncio.ensure_future(_no_rows())
        else:
            page_task = asyncio.ensure_future(
                self._store.fetch_page(predicate, predicate.order, limit, offset)
            )
        count_task = asyncio.ensure_future(self._store.fetch_count(predicate))
        try:
            rows, total_count = await asyncio.gather(page_task, count_task)
        except asyncio.CancelledError:
            logger.warning("Search cancelled (%s)", predicate.strategy.value)
            raise
        except Exception as exc:
            # Never hand back a page without its matching count
            for task in (page_task, count_task):
                task.cancel()
            await asyncio.gather(page_task, count_task, return_exceptions=True)
            if isinstance(exc, RetrievalFailure):
                raise
            logger.exception("Search failed (%s)", predicate.strategy.value)
            raise RetrievalFailure() from exc

        if isinstance(total_count, bool) or not isinstance(total_count, int) or total_count < 0:
            logger.error("Store returned an invalid count: %r", total_count)
            raise RetrievalFailure()

        try:
            records = [transform_advocate(row) for row in rows]
        except (TypeError, ValueError) as exc:
            logger.exception("Could not transform advocate rows")
            raise RetrievalFailure() from exc
        return records, total_count

    async def search_advocates(self, request: SearchAdvocatesRequest) -> SearchAdvocatesResponse:
        window = validate_pagination(request.page, request.limit, self._settings)
        predicate = build_predicate(request.search, request.specialties)

        records, total_count = await self._fetch(predicate, window.limit, window.offset)
        logger.debug(
            "Search strategy=%s page=%d limit=%d total=%d",
            predicate.strategy.value,
            window.page,
            window.limit,
            total_count,
        )

        records = apply_secondary_sort(records, request.sort_by, request.sort_order)
        return assemble_response(records, window.page, window.limit, total_count)

    async def search(
        self,
        term: str | None = None,
        tags: list[str] | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort_by: SortField | str | None = None,
        sort_order: SortOrder | str | None = None,
    ) -> SearchAdvocatesResponse:
        fields = {"search": term, "specialties": tags, "page": page, "limit": limit}
        if sort_by is not None:
            fields["sort_by"] = sort_by
        if sort_order is not None:
            fields["sort_order"] = sort_order
        return await self.search_advocates(SearchAdvocatesRequest(**fields))

    async def get_advocates_by_specialty(
        self,
        specialty: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> SearchAdvocatesResponse:
        window = validate_pagination(page, limit, self._settings)
        predicate = build_predicate(None, [specialty])
        records, total_count = await self._fetch(predicate, window.limit, window.offset)
        return assemble_response(records, window.page, window.limit, total_count)

    async def get_advocate_by_id(self, advocate_id: int) -> AdvocateResponse | None:
        try:
            row = await self._store.fetch_by_id(advocate_id)
        except RetrievalFailure:
            raise
        except Exception as exc:
            logger.exception("Lookup of advocate %s failed", advocate_id)
            raise RetrievalFailure("Failed to fetch advocate") from exc
        if row is None:
            return None
        try:
            return transform_advocate(row)
        except (TypeError, ValueError) as exc:
            logger.exception("Could not transform advocate %s", advocate_id)
            raise RetrievalFailure("Failed to fetch advocate") from exc
