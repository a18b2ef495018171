from fastapi import APIRouter, Depends, HTTPException, Query

from advocate_directory.dependencies import get_advocate_service
from advocate_directory.schemas.advocate import (
    AdvocateResponse,
    SearchAdvocatesRequest,
    SearchAdvocatesResponse,
    SortField,
    SortOrder,
)
from advocate_directory.services.advocate_service import AdvocateService
from advocate_directory.services.errors import RetrievalFailure
from advocate_directory.services.pagination import parse_optional_int

router = APIRouter(
    prefix="/advocates",
    tags=["advocates"],
)


def _split_specialties(values: list[str] | None) -> list[str]:
    # Accepts "A,B" as well as repeated ?specialties=A&specialties=B
    if not values:
        return []
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


@router.get("", response_model=SearchAdvocatesResponse)
async def search_advocates(
    search: str | None = Query(None, description="Full-text search term"),
    specialties: list[str] | None = Query(None, description="Comma-separated specialties"),
    # Pagination is parsed leniently: bad values fall back to defaults instead of a 4xx
    page: str | None = Query(None),
    limit: str | None = Query(None),
    sort_by: SortField = Query(SortField.RELEVANCE, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    service: AdvocateService = Depends(get_advocate_service),
):
    request = SearchAdvocatesRequest(
        search=search,
        specialties=_split_specialties(specialties),
        page=parse_optional_int(page),
        limit=parse_optional_int(limit),
        sort_by=sort_by,
        sort_order=sort_order,
    )
    try:
        return await service.search_advocates(request)
    except RetrievalFailure as exc:
        raise HTTPException(status_code=500, detail=exc.message) from exc


@router.get("/specialty/{specialty}", response_model=SearchAdvocatesResponse)
async def get_advocates_by_specialty(
    specialty: str,
    page: str | None = Query(None),
    limit: str | None = Query(None),
    service: AdvocateService = Depends(get_advocate_service),
):
    try:
        return await service.get_advocates_by_specialty(
            specialty,
            page=parse_optional_int(page),
            limit=parse_optional_int(limit),
        )
    except RetrievalFailure as exc:
        raise HTTPException(status_code=500, detail="Failed to fetch advocates by specialty") from exc


@router.get("/{advocate_id}", response_model=AdvocateResponse)
async def get_advocate(
    advocate_id: str,
    service: AdvocateService = Depends(get_advocate_service),
):
    parsed_id = parse_optional_int(advocate_id)
    if parsed_id is None:
        raise HTTPException(status_code=404, detail="Invalid advocate ID")
    try:
        advocate = await service.get_advocate_by_id(parsed_id)
    except RetrievalFailure as exc:
        raise HTTPException(status_code=500, detail=exc.message) from exc
    if advocate is None:
        raise HTTPException(status_code=404, detail="Advocate not found")
    return advocate
