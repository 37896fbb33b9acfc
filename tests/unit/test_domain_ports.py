"""
Unit tests for domain ports, fields and exceptions.

Tests verify:
- Port interfaces are properly defined
- Field enumeration and empty-map factories
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import json
import subprocess
from enum import Enum

import pytest

from src.domain.exceptions import (
    FormContractError,
    MissingDateError,
    MissingParameterError,
    RegistrationFormError,
    UnknownFieldError,
)
from src.domain.fields import (
    VALIDATED_FIELDS,
    FieldName,
    empty_user_data,
    empty_user_data_errors,
    parse_field_name,
)
from src.domain.ports import Notifier, SubmitOutcome, UserStore


class TestSubmitOutcomeEnum:
    """Tests for SubmitOutcome enum."""

    def test_submit_outcome_is_enum(self) -> None:
        """SubmitOutcome is an Enum class."""
        assert issubclass(SubmitOutcome, Enum)

    def test_values(self) -> None:
        """SubmitOutcome has success and rejected values."""
        assert SubmitOutcome.SUCCESS.value == "success"
        assert SubmitOutcome.REJECTED.value == "rejected"

    def test_json_serializable(self) -> None:
        """str mixin allows direct JSON serialization."""
        assert json.dumps(SubmitOutcome.SUCCESS) == '"success"'


class TestFieldName:
    """Tests for the FieldName enumeration."""

    def test_wire_names(self) -> None:
        """Members carry the form's wire names."""
        assert [f.value for f in FieldName] == [
            "firstname",
            "lastname",
            "birthDate",
            "city",
            "email",
            "zipCode",
        ]

    def test_string_comparison(self) -> None:
        """Members compare equal to their wire names."""
        assert FieldName.ZIP_CODE == "zipCode"
        assert FieldName.BIRTH_DATE == "birthDate"

    def test_validated_fields_exclude_city(self) -> None:
        """Every field except city has a rule."""
        assert FieldName.CITY not in VALIDATED_FIELDS
        assert set(VALIDATED_FIELDS) == set(FieldName) - {FieldName.CITY}

    def test_empty_user_data_has_all_keys(self) -> None:
        """UserData always has all six keys."""
        assert empty_user_data() == {f.value: "" for f in FieldName}

    def test_empty_user_data_errors(self) -> None:
        """UserDataErrors has one empty slot per validated field."""
        assert empty_user_data_errors() == {f.value: "" for f in VALIDATED_FIELDS}

    def test_factories_return_fresh_maps(self) -> None:
        """Each call returns a new dict."""
        assert empty_user_data() is not empty_user_data()

    def test_parse_field_name(self) -> None:
        """Wire names resolve, unknown names give None."""
        assert parse_field_name("email") is FieldName.EMAIL
        assert parse_field_name(FieldName.CITY) is FieldName.CITY
        assert parse_field_name("password") is None
        assert parse_field_name("Email") is None


class TestUserStoreProtocol:
    """Tests for UserStore protocol."""

    def test_user_store_defines_methods(self) -> None:
        """UserStore defines save_user and load_user."""
        assert hasattr(UserStore, "save_user")
        assert hasattr(UserStore, "load_user")

    def test_structural_implementation(self) -> None:
        """Any class with matching methods satisfies the port."""

        class MemoryStore:
            def __init__(self) -> None:
                self.record: dict[str, str] | None = None

            def save_user(self, record: dict[str, str]) -> None:
                self.record = record

            def load_user(self) -> dict[str, str] | None:
                return self.record

        store = MemoryStore()
        store.save_user({"firstname": "Marie"})
        assert store.load_user() == {"firstname": "Marie"}


class TestNotifierProtocol:
    """Tests for Notifier protocol."""

    def test_notifier_has_notify_method(self) -> None:
        """Notifier defines notify."""
        assert hasattr(Notifier, "notify")


class TestDomainExceptions:
    """Tests for domain exceptions."""

    def test_base_is_exception(self) -> None:
        """RegistrationFormError inherits from Exception."""
        assert issubclass(RegistrationFormError, Exception)

    @pytest.mark.parametrize(
        "exc", [MissingDateError, UnknownFieldError, MissingParameterError]
    )
    def test_contract_errors(self, exc: type) -> None:
        """Precondition violations share the FormContractError base."""
        assert issubclass(exc, FormContractError)
        assert issubclass(exc, RegistrationFormError)

    def test_missing_date_message(self) -> None:
        """MissingDateError carries a fixed message."""
        assert str(MissingDateError()) == "missing required date"

    def test_unknown_field_contains_name(self) -> None:
        """UnknownFieldError names the field."""
        with pytest.raises(UnknownFieldError) as exc_info:
            raise UnknownFieldError("password")
        assert "password" in str(exc_info.value)


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "from fastapi",
            "import fastapi",
            "from pydantic",
            "import pydantic",
            "from psycopg",
            "import psycopg",
        ],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        """Domain layer has no framework imports."""
        result = subprocess.run(
            ["grep", "-r", pattern, "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"Framework import found: {result.stdout}"
