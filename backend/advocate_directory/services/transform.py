"""
Row normalization.

Raw SQL rows come back as snake_case mappings (ranked rows carry an extra
``relevance`` column), other adapters hand over camelCase mappings, and
lookups by id return ORM instances. All of them become the same ``AdvocateResponse``.
"""
import json
from collections.abc import Mapping
from typing import Any

from advocate_directory.schemas.advocate import AdvocateResponse

# canonical field -> accepted source names, in lookup order
_FIELD_SOURCES: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "first_name": ("first_name", "firstName"),
    "last_name": ("last_name", "lastName"),
    "city": ("city",),
    "degree": ("degree",),
    "specialties": ("specialties", "payload"),
    "years_of_experience": ("years_of_experience", "yearsOfExperience"),
    "phone_number": ("phone_number", "phoneNumber"),
    "created_at": ("created_at", "createdAt"),
}


def _lookup(row: Any, names: tuple[str, ...]) -> Any:
    for name in names:
        if isinstance(row, Mapping):
            value = row.get(name)
        else:
            value = getattr(row, name, None)
        if value is not None:
            return value
    return None


def decode_specialties(value: Any) -> list[str]:
    """Turn the stored specialty blob into a list; missing means empty."""
    if value is None:
        return []
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        if not value.strip():
            return []
        value = json.loads(value)
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


def transform_advocate(row: Any) -> AdvocateResponse:
    values = {field: _lookup(row, names) for field, names in _FIELD_SOURCES.items()}
    values["specialties"] = decode_specialties(values["specialties"])
    created_at = values["created_at"]
    if created_at is not None and not isinstance(created_at, str):
        values["created_at"] = created_at.isoformat()
    return AdvocateResponse(**values)
