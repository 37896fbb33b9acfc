"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names match the form's wire names (camelCase where the form uses it).
"""

from pydantic import BaseModel, Field


class FieldUpdateRequest(BaseModel):
    """Request model for a single field edit."""

    value: str = Field(..., description="Raw value as typed by the user")


class UserData(BaseModel):
    """Values of every form field; unset fields are empty strings."""

    firstname: str = ""
    lastname: str = ""
    birthDate: str = Field(default="", description="ISO date (YYYY-MM-DD)")
    city: str = ""
    email: str = ""
    zipCode: str = ""


class UserDataErrors(BaseModel):
    """Error message per validated field; empty string means no error."""

    firstname: str = ""
    lastname: str = ""
    email: str = ""
    birthDate: str = ""
    zipCode: str = ""


class FormResponse(BaseModel):
    """Response model describing the current form."""

    values: UserData
    errors: UserDataErrors = Field(
        ..., description="Errors to display; blank until a submit has been rejected"
    )
    errors_visible: bool
    complete: bool = Field(..., description="True when every field has a value")


class SubmitResponse(BaseModel):
    """Response model for a successful submit."""

    outcome: str
    message: str
    form: FormResponse


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
