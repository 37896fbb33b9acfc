"""
Form fields - The fixed set of fields collected by the registration form.
"""

from enum import Enum


class FieldName(str, Enum):
    """
    Fields of the registration form.

    Values are the wire names used by the rendering layer and as keys of
    the stored record. The str mixin lets members compare equal to them.
    """

    FIRSTNAME = "firstname"
    LASTNAME = "lastname"
    BIRTH_DATE = "birthDate"
    CITY = "city"
    EMAIL = "email"
    ZIP_CODE = "zipCode"


# Fields that carry a validation rule (city has none)
VALIDATED_FIELDS: tuple[FieldName, ...] = (
    FieldName.FIRSTNAME,
    FieldName.LASTNAME,
    FieldName.EMAIL,
    FieldName.BIRTH_DATE,
    FieldName.ZIP_CODE,
)


def empty_user_data() -> dict[str, str]:
    """Return a UserData map with every field set to the empty string."""
    return {field.value: "" for field in FieldName}


def empty_user_data_errors() -> dict[str, str]:
    """Return a UserDataErrors map with no errors for every validated field."""
    return {field.value: "" for field in VALIDATED_FIELDS}


def parse_field_name(name: str) -> FieldName | None:
    """Resolve a wire name to its FieldName, or None if it is not a form field."""
    try:
        return FieldName(name)
    except ValueError:
        return None
