"""
Retrieval capability consumed by the advocate service.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from advocate_directory.services.query_builder import Order, Predicate


@runtime_checkable
class AdvocateStore(Protocol):
    """Contract for advocate storage backends."""

    async def fetch_page(
        self,
        predicate: Predicate,
        order: Order,
        limit: int,
        offset: int,
    ) -> Sequence[Mapping[str, Any]]:
        """Return one page of raw rows matching the predicate."""
        ...

    async def fetch_count(self, predicate: Predicate) -> int:
        """Return how many rows match the predicate, ignoring pagination."""
        ...

    async def fetch_by_id(self, advocate_id: int) -> Any | None:
        """Return a single advocate row, or None."""
        ...
