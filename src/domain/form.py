"""
Form model - State holder and submit logic for the registration form.

The FormModel owns a FormState and is the only writer of it. Every edit
writes the value and then immediately re-validates the same field, so
values and errors never drift apart.

Form Lifecycle
==============

Per field (independent of other fields):
    Empty -> (edit) -> Invalid <-> (edit) <-> Valid

Form level:
    Pristine -> (submit, invalid) -> RejectedVisible
    RejectedVisible -> (edit)* -> (submit, valid) -> Pristine

errors_visible separates "an error exists" (always tracked) from "an
error is shown" (only after a rejected submit), so a user is not shown
errors before they have tried to submit. A successful submit persists
the values and resets the whole state, flag included.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from . import validators
from .fields import FieldName, empty_user_data, empty_user_data_errors, parse_field_name
from .ports import Notifier, SubmitOutcome, UserStore

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "user registered successfully"
REJECTION_MESSAGE = "fields are not valid"


@dataclass
class FormState:
    """Current values, current errors and error visibility of one form."""

    values: dict[str, str] = field(default_factory=empty_user_data)
    errors: dict[str, str] = field(default_factory=empty_user_data_errors)
    errors_visible: bool = False


@dataclass
class FormModel:
    """
    Domain service for a single in-progress registration form.

    Mediates field edits, tracks per-field errors and decides whether
    the form may be submitted.
    """

    store: UserStore
    notifier: Notifier
    clock: Callable[[], date] = date.today
    state: FormState = field(default_factory=FormState)

    @property
    def values(self) -> dict[str, str]:
        return dict(self.state.values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self.state.errors)

    @property
    def errors_visible(self) -> bool:
        return self.state.errors_visible

    def set_field(self, name: FieldName | str, value: str) -> None:
        """
        Update one field and re-validate it.

        Names outside the form's fields are ignored and leave the state
        untouched. City has no rule, so only its value is written.

        Args:
            name: FieldName or its wire name
            value: Raw value as typed by the user
        """
        field_name = parse_field_name(name)
        if field_name is None:
            logger.debug("Ignoring update for unknown field %r", name)
            return

        self.state.values[field_name.value] = value
        if field_name.value in self.state.errors:
            self.state.errors[field_name.value] = validators.validate(
                field_name, value, self.clock()
            )

    def is_complete(self) -> bool:
        """Return True if every field has a value (enables the submit action)."""
        return validators.is_complete(self.state.values)

    def is_valid(self) -> bool:
        """Return True if no field currently has an error."""
        return validators.is_valid(self.state.errors)

    def visible_errors(self) -> dict[str, str]:
        """Return the errors as they should be shown: blank until a rejected submit."""
        if self.state.errors_visible:
            return self.errors
        return empty_user_data_errors()

    def submit(self) -> SubmitOutcome:
        """
        Attempt to finalize the form.

        On success the values are handed to the store, a confirmation is
        sent and the form is reset. On rejection errors become visible and
        values/errors are left as they are.

        Returns:
            SubmitOutcome.SUCCESS or SubmitOutcome.REJECTED
        """
        if not self.is_valid():
            self.state.errors_visible = True
            self.notifier.notify(REJECTION_MESSAGE)
            logger.info(
                "Submit rejected: %d invalid field(s)",
                sum(1 for error in self.state.errors.values() if error),
            )
            return SubmitOutcome.REJECTED

        self.store.save_user(self.values)
        self.notifier.notify(SUCCESS_MESSAGE)
        self.reset()
        logger.info("Submit succeeded, form reset")
        return SubmitOutcome.SUCCESS

    def reset(self) -> None:
        """Return the form to its pristine state."""
        self.state = FormState()
