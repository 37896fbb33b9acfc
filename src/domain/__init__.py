"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation rules and form-state engine of the
registration form. It defines its own port interfaces for persistence and
notifications, ensuring true hexagonal architecture decoupling.
"""

from .exceptions import (
    FormContractError,
    MissingDateError,
    MissingParameterError,
    RegistrationFormError,
    UnknownFieldError,
)
from .fields import FieldName
from .form import FormModel, FormState
from .ports import Notifier, SubmitOutcome, UserStore

__all__ = [
    "FieldName",
    "FormContractError",
    "FormModel",
    "FormState",
    "MissingDateError",
    "MissingParameterError",
    "Notifier",
    "RegistrationFormError",
    "SubmitOutcome",
    "UnknownFieldError",
    "UserStore",
]
