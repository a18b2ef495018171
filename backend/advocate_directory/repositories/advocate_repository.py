"""
SQLite Repository - advocate lookups with FTS5 ranking and JSON1 tag filters.

Both the page query and the count query are built from one compiled
predicate, and every user-supplied value (match expression and tags) is a
bound parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from advocate_directory.models.advocate import Advocate
from advocate_directory.services.errors import RetrievalFailure
from advocate_directory.services.query_builder import Order, Predicate

logger = logging.getLogger("advocates.repository")

__all__ = ["AdvocateRepository"]

_COLUMNS = """
    a.id, a.first_name, a.last_name, a.city, a.degree, a.specialties,
    a.years_of_experience, a.phone_number, a.created_at
"""

# first_name, last_name, city, degree, specialties
_BM25_WEIGHTS = (10.0, 10.0, 4.0, 2.0, 1.0)
_RELEVANCE = f"-bm25(advocates_fts, {', '.join(str(w) for w in _BM25_WEIGHTS)}) AS relevance"


@dataclass(frozen=True)
class _CompiledPredicate:
    source: str
    where: str
    params: dict[str, Any] = field(default_factory=dict)


def _compile_predicate(predicate: Predicate) -> _CompiledPredicate:
    source = "advocates a"
    clauses: list[str] = []
    params: dict[str, Any] = {}

    if predicate.match is not None:
        source = "advocates_fts JOIN advocates a ON a.id = advocates_fts.rowid"
        clauses.append("advocates_fts MATCH :match")
        params["match"] = predicate.match.render()

    if predicate.tags:
        names = [f"tag_{i}" for i in range(len(predicate.tags))]
        placeholders = ", ".join(f":{name}" for name in names)
        clauses.append(
            "EXISTS (SELECT 1 FROM json_each(a.specialties) AS s "
            f"WHERE s.value IN ({placeholders}))"
        )
        params.update(zip(names, predicate.tags))

    where = "WHERE " + " AND ".join(clauses) if clauses else ""
    return _CompiledPredicate(source=source, where=where, params=params)


class AdvocateRepository:
    """
    Advocate store backed by SQLite.

    Each call opens its own session from the factory, so a page fetch and a
    count fetch may run concurrently.

    Example:
        >>> repo = AdvocateRepository(SessionLocal)
        >>> predicate = build_predicate("anxi", None)
        >>> rows = await repo.fetch_page(predicate, predicate.order, 10, 0)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def fetch_page(
        self,
        predicate: Predicate,
        order: Order,
        limit: int,
        offset: int,
    ) -> list[dict[str, Any]]:
        compiled = _compile_predicate(predicate)
        if order == Order.RELEVANCE:
            if predicate.match is None:
                raise ValueError("Relevance order requires a text match")
            columns = f"{_COLUMNS}, {_RELEVANCE}"
            order_by = "ORDER BY relevance DESC, a.id"
        else:
            columns = _COLUMNS
            order_by = "ORDER BY a.id"

        stmt = text(f"""
            SELECT {columns}
            FROM {compiled.source}
            {compiled.where}
            {order_by}
            LIMIT :limit OFFSET :offset
        """)
        params = {**compiled.params, "limit": limit, "offset": offset}
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt, params)
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as exc:
            logger.error("Page query failed (%s): %s", predicate.strategy.value, exc)
            raise RetrievalFailure() from exc

    async def fetch_count(self, predicate: Predicate) -> int:
        compiled = _compile_predicate(predicate)
        stmt = text(f"""
            SELECT COUNT(*) AS count
            FROM {compiled.source}
            {compiled.where}
        """)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt, compiled.params)
                return result.scalar_one()
        except SQLAlchemyError as exc:
            logger.error("Count query failed (%s): %s", predicate.strategy.value, exc)
            raise RetrievalFailure() from exc

    async def fetch_by_id(self, advocate_id: int) -> Advocate | None:
        try:
            async with self._session_factory() as session:
                return await session.get(Advocate, advocate_id)
        except SQLAlchemyError as exc:
            logger.error("Lookup of advocate %s failed: %s", advocate_id, exc)
            raise RetrievalFailure("Failed to fetch advocate") from exc
