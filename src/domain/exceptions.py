"""
Domain exceptions - Semantic error types for the registration form.

Field validation failures are not exceptions: they are carried as
message strings in the form's error map. The exceptions below signal
contract violations by a caller of the domain layer.
"""


class RegistrationFormError(Exception):
    """Base class for registration form domain errors."""

    pass


class FormContractError(RegistrationFormError):
    """A domain function was called in a way its contract forbids."""

    pass


class MissingDateError(FormContractError):
    """Age calculation was requested without a birth date."""

    def __init__(self) -> None:
        super().__init__("missing required date")


class UnknownFieldError(FormContractError):
    """Validation was requested for a field that is not part of the form."""

    pass


class MissingParameterError(FormContractError):
    """A required argument was None."""

    pass
