"""
Field validators - Pure validation rules for the registration form.

Each rule maps a raw field value to an error message, where the empty
string means the value is valid. Rules are stateless and independent:
no rule looks at another field.

Rules
=====

- firstname / lastname: Latin letters (Latin-1 accents included),
  hyphen and space, at least one character
- email: letters, dots and hyphens, "@", letters, ".", 2-4 lowercase letters
- zipCode: digits only, exactly 5 of them (first failing check wins)
- birthDate: ISO date of a person at least 18 years old today
- city: no rule

Dispatch goes through a FieldName -> rule lookup table rather than branching on
the field name.
"""

import re
from collections.abc import Callable, Mapping
from datetime import date
from functools import partial

from .exceptions import MissingDateError, MissingParameterError, UnknownFieldError
from .fields import FieldName

MINIMUM_AGE = 18

NAME_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ\- ]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z.\-]+@[a-zA-Z]+\.[a-z]{2,4}")
_DIGITS_PATTERN = re.compile(r"[0-9]*")

ZIP_CODE_LENGTH = 5

INVALID_FIRSTNAME = "invalid first name"
INVALID_LASTNAME = "invalid last name"
INVALID_EMAIL = "invalid email"
ZIP_CODE_HAS_LETTERS = "zip code must not contain letters"
ZIP_CODE_TOO_SHORT = "zip code must contain at least 5 digits"
ZIP_CODE_TOO_LONG = "zip code must contain at most 5 digits"
UNDERAGE = "must be at least 18 years old"

Rule = Callable[[str], str]


def _to_date(birth_date: str | date) -> date:
    if isinstance(birth_date, date):
        return birth_date
    return date.fromisoformat(birth_date)


def calculate_age(birth_date: str | date | None, today: date | None = None) -> int:
    """
    Compute age in whole years as of today.

    One year is subtracted from the naive year difference when the
    birthday has not yet occurred this year.

    Args:
        birth_date: ISO date string (YYYY-MM-DD) or date
        today: Reference date, defaults to date.today()

    Returns:
        Age in completed years

    Raises:
        MissingDateError: If birth_date is None or empty
        ValueError: If birth_date is not an ISO calendar date
    """
    if not birth_date:
        raise MissingDateError()

    born = _to_date(birth_date)
    today = today or date.today()
    birthday_pending = (today.month, today.day) < (born.month, born.day)
    return today.year - born.year - (1 if birthday_pending else 0)


def is_adult(birth_date: str | date | None, today: date | None = None) -> bool:
    """Return True if the person born on birth_date is at least 18 today."""
    return calculate_age(birth_date, today) >= MINIMUM_AGE


def validate_name(value: str, message: str) -> str:
    return "" if NAME_PATTERN.fullmatch(value) else message


def validate_email(value: str) -> str:
    return "" if EMAIL_PATTERN.fullmatch(value) else INVALID_EMAIL


def validate_zip_code(value: str) -> str:
    """
    Validate a zip code.

    Checks run in order and the first failure wins: non-digit
    characters, then too few digits, then too many.
    """
    if not _DIGITS_PATTERN.fullmatch(value):
        return ZIP_CODE_HAS_LETTERS
    if len(value) < ZIP_CODE_LENGTH:
        return ZIP_CODE_TOO_SHORT
    if len(value) > ZIP_CODE_LENGTH:
        return ZIP_CODE_TOO_LONG
    return ""


def validate_birth_date(value: str, today: date | None = None) -> str:
    """
    Validate a birth date.

    A fresh form starts with an empty birth date, so empty and
    unparseable values are reported as underage instead of reaching
    calculate_age's contract checks.
    """
    if not value:
        return UNDERAGE
    try:
        adult = is_adult(value, today)
    except ValueError:
        return UNDERAGE
    return "" if adult else UNDERAGE


def validate_city(value: str) -> str:
    """City has no rule."""
    return ""


def _rules(today: date) -> dict[FieldName, Rule]:
    return {
        FieldName.FIRSTNAME: partial(validate_name, message=INVALID_FIRSTNAME),
        FieldName.LASTNAME: partial(validate_name, message=INVALID_LASTNAME),
        FieldName.EMAIL: validate_email,
        FieldName.ZIP_CODE: validate_zip_code,
        FieldName.BIRTH_DATE: partial(validate_birth_date, today=today),
        FieldName.CITY: validate_city,
    }


def validate(field: FieldName | str, value: str, today: date | None = None) -> str:
    """
    Validate one field's raw value.

    Args:
        field: FieldName or its wire name
        value: Raw value as typed by the user
        today: Reference date for age rules, defaults to date.today()

    Returns:
        Error message, or "" if the value is valid

    Raises:
        UnknownFieldError: If field is not one of the form's fields
    """
    try:
        field_name = FieldName(field)
    except ValueError:
        raise UnknownFieldError(field) from None
    return _rules(today or date.today())[field_name](value)


def is_valid(errors: Mapping[str, str]) -> bool:
    """Return True if every error message in the map is empty."""
    return all(not error for error in errors.values())


def is_complete(values: Mapping[str, str] | None) -> bool:
    """
    Return True if every form field has a non-empty value.

    Raises:
        MissingParameterError: If values is None
    """
    if values is None:
        raise MissingParameterError("values")
    return all(values.get(field.value, "") != "" for field in FieldName)
