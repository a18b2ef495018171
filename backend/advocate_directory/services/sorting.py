from typing import Any, Callable

from advocate_directory.schemas.advocate import AdvocateResponse, SortField, SortOrder

_SORT_KEYS: dict[SortField, Callable[[AdvocateResponse], Any]] = {
    SortField.NAME: lambda a: a.last_name.casefold(),
    SortField.EXPERIENCE: lambda a: a.years_of_experience,
    SortField.CITY: lambda a: a.city.casefold(),
}


def apply_secondary_sort(
    records: list[AdvocateResponse],
    sort_by: SortField | None,
    sort_order: SortOrder | None,
) -> list[AdvocateResponse]:
    """Reorder the records of the current page only.

    Relevance (or no sort field) keeps the order the store returned. The
    sort is stable, so records with equal keys keep that order as well.
    """
    if sort_by is None or sort_by == SortField.RELEVANCE:
        return list(records)
    return sorted(
        records,
        key=_SORT_KEYS[sort_by],
        reverse=sort_order == SortOrder.DESC,
    )
