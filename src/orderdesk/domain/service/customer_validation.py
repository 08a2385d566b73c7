"""Customer validation rule set.

Which fields are mandatory depends only on the person type, so the rules
are a table rather than branching code: a new person type needs a new
entry here and nothing else.

A field is satisfied when its string value is non-empty. Whitespace is not
trimmed, a value of ``"  "`` counts as filled in.
"""

from __future__ import annotations

from orderdesk.domain.model.customer import CustomerProfile, PersonType

SHARED_REQUIRED_FIELDS: tuple[str, ...] = (
    "person_type",
    "zip_code",
    "address",
    "number",
    "state",
    "city",
    "neighborhood",
    "telephone",
    "email",
    "name",
)

REQUIRED_FIELDS_BY_PERSON_TYPE: dict[PersonType, tuple[str, ...]] = {
    PersonType.INDIVIDUAL: ("cpf", "date_of_birth", "government_id", "gender"),
    PersonType.BUSINESS: ("cnpj", "company_name", "business_name"),
}


def required_fields(person_type: PersonType | None) -> tuple[str, ...]:
    """Shared fields followed by those of *person_type* (if one is chosen)."""
    if person_type is None:
        return SHARED_REQUIRED_FIELDS
    return SHARED_REQUIRED_FIELDS + REQUIRED_FIELDS_BY_PERSON_TYPE[person_type]


def missing_fields(profile: CustomerProfile) -> list[str]:
    return [
        name
        for name in required_fields(profile.person_type)
        if profile.value_of(name) == ""
    ]


def is_complete(profile: CustomerProfile) -> bool:
    return not missing_fields(profile)
