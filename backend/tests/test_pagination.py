from advocate_directory.config import Settings
from advocate_directory.schemas.advocate import AdvocateResponse
from advocate_directory.services.pagination import (
    PageWindow,
    assemble_response,
    parse_optional_int,
    total_pages,
    validate_pagination,
)


class TestValidatePagination:
    def test_defaults(self):
        assert validate_pagination(None, None) == PageWindow(page=1, limit=50, offset=0)

    def test_offset(self):
        assert validate_pagination(3, 20) == PageWindow(page=3, limit=20, offset=40)

    def test_page_below_one_becomes_one(self):
        assert validate_pagination(-4, 10).page == 1
        assert validate_pagination(0, 10).page == 1

    def test_limit_is_clamped(self):
        assert validate_pagination(1, 1000).limit == 100
        assert validate_pagination(1, -5).limit == 1
        assert validate_pagination(1, 0).limit == 50

    def test_bounds_come_from_settings(self):
        custom = Settings(default_limit=10, max_limit=25)
        assert validate_pagination(None, None, custom).limit == 10
        assert validate_pagination(2, 500, custom) == PageWindow(page=2, limit=25, offset=25)


class TestParseOptionalInt:
    def test_parses_numbers(self):
        assert parse_optional_int("7") == 7
        assert parse_optional_int(" 12 ") == 12
        assert parse_optional_int(3) == 3

    def test_junk_becomes_none(self):
        assert parse_optional_int("abc") is None
        assert parse_optional_int("1.5") is None
        assert parse_optional_int("") is None
        assert parse_optional_int(None) is None


class TestAssembleResponse:
    def test_total_pages_rounds_up(self):
        assert total_pages(125, 50) == 3
        assert total_pages(100, 50) == 2
        assert total_pages(0, 50) == 0

    def test_assemble(self):
        record = AdvocateResponse(
            id=1, first_name="A", last_name="B", city="C", degree="MD",
            specialties=[], years_of_experience=1, phone_number=1,
        )
        response = assemble_response([record], page=2, limit=50, total_count=125)
        assert response.data == [record]
        assert response.pagination.page == 2
        assert response.pagination.total_count == 125
        assert response.pagination.total_pages == 3
        dumped = response.model_dump(by_alias=True)
        assert dumped["pagination"] == {"page": 2, "limit": 50, "totalCount": 125, "totalPages": 3}
