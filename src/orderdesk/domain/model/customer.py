"""Customer profile attached to every order.

A profile is either an individual or a business. Both variants live in the
same record; switching ``person_type`` keeps the other variant's values
around, they are just ignored by validation and export.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from orderdesk.domain.exceptions import UnknownCustomerFieldError, ValidationError


class PersonType(Enum):
    INDIVIDUAL = "individual"
    BUSINESS = "business"


@dataclass(frozen=True)
class CustomerProfile:
    person_type: PersonType | None = None

    # Shared
    name: str = ""
    telephone: str = ""
    zip_code: str = ""
    address: str = ""
    number: str = ""
    complement: str = ""
    state: str = ""
    city: str = ""
    neighborhood: str = ""
    reference_point: str = ""
    email: str = ""

    # Individual
    cpf: str = ""
    government_id: str = ""
    date_of_birth: str = ""
    gender: str = ""

    # Business
    cnpj: str = ""
    company_name: str = ""
    business_name: str = ""

    @staticmethod
    def field_names() -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(CustomerProfile))

    def value_of(self, field_name: str) -> str:
        """String view of a field; an unset person type reads as ``""``."""
        if field_name not in self.field_names():
            raise UnknownCustomerFieldError(f"Unknown customer field: '{field_name}'")
        if field_name == "person_type":
            return self.person_type.value if self.person_type else ""
        return getattr(self, field_name)

    def with_field(self, field_name: str, value: str) -> CustomerProfile:
        """Return a copy with one field replaced.

        ``person_type`` accepts the enum values as text; an empty string
        clears it.
        """
        if field_name not in self.field_names():
            raise UnknownCustomerFieldError(f"Unknown customer field: '{field_name}'")
        if field_name == "person_type":
            return dataclasses.replace(self, person_type=_parse_person_type(value))
        return dataclasses.replace(self, **{field_name: value})

    @property
    def full_address(self) -> str:
        street = ", ".join(p for p in (self.address, self.number) if p)
        if street and self.complement:
            street = f"{street} - {self.complement}"
        city = "/".join(p for p in (self.city, self.state) if p)
        parts = [p for p in (street, self.neighborhood, city, self.zip_code) if p]
        return ", ".join(parts)


def _parse_person_type(value: str | PersonType) -> PersonType | None:
    if isinstance(value, PersonType):
        return value
    if value == "":
        return None
    try:
        return PersonType(value.lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in PersonType)
        raise ValidationError(
            f"Unknown person type '{value}', expected one of: {allowed}"
        ) from exc
