from advocate_directory.schemas.advocate import AdvocateResponse, SortField, SortOrder
from advocate_directory.services.sorting import apply_secondary_sort


def _advocate(id_, last_name, city, years):
    return AdvocateResponse(
        id=id_, first_name="X", last_name=last_name, city=city, degree="MD",
        specialties=[], years_of_experience=years, phone_number=1,
    )


PAGE = [
    _advocate(1, "smith", "Denver", 10),
    _advocate(2, "Adams", "austin", 3),
    _advocate(3, "Brown", "Chicago", 10),
]


def _ids(records):
    return [r.id for r in records]


class TestSecondarySort:
    def test_relevance_keeps_order(self):
        assert _ids(apply_secondary_sort(PAGE, SortField.RELEVANCE, SortOrder.ASC)) == [1, 2, 3]
        assert _ids(apply_secondary_sort(PAGE, None, None)) == [1, 2, 3]

    def test_name_sorts_by_last_name_ignoring_case(self):
        assert _ids(apply_secondary_sort(PAGE, SortField.NAME, SortOrder.ASC)) == [2, 3, 1]
        assert _ids(apply_secondary_sort(PAGE, SortField.NAME, SortOrder.DESC)) == [1, 3, 2]

    def test_experience_sorts_numerically(self):
        assert _ids(apply_secondary_sort(PAGE, SortField.EXPERIENCE, SortOrder.ASC)) == [2, 1, 3]

    def test_equal_keys_keep_retrieval_order(self):
        assert _ids(apply_secondary_sort(PAGE, SortField.EXPERIENCE, SortOrder.DESC)) == [1, 3, 2]

    def test_city(self):
        assert _ids(apply_secondary_sort(PAGE, SortField.CITY, SortOrder.ASC)) == [2, 3, 1]

    def test_input_is_not_mutated(self):
        apply_secondary_sort(PAGE, SortField.NAME, SortOrder.ASC)
        assert _ids(PAGE) == [1, 2, 3]
