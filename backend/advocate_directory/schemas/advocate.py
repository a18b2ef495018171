from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SortField(str, Enum):
    RELEVANCE = "relevance"
    NAME = "name"
    EXPERIENCE = "experience"
    CITY = "city"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchAdvocatesRequest(BaseModel):
    search: str | None = None
    specialties: list[str] | None = None
    page: int | None = None
    limit: int | None = None
    sort_by: SortField = SortField.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC


class AdvocateResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: list[str] = []
    years_of_experience: int = Field(ge=0)
    phone_number: int
    created_at: str | None = None


class PaginationInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total_count: int
    total_pages: int


class SearchAdvocatesResponse(BaseModel):
    data: list[AdvocateResponse]
    pagination: PaginationInfo
