"""
API v1 routes.

Defines REST endpoints that render and drive the registration form.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_form, get_user_store
from src.api.models import (
    ErrorResponse,
    FieldUpdateRequest,
    FormResponse,
    SubmitResponse,
    UserData,
    UserDataErrors,
)
from src.domain.fields import FieldName
from src.domain.form import REJECTION_MESSAGE, SUCCESS_MESSAGE, FormModel
from src.domain.ports import SubmitOutcome, UserStore

router = APIRouter(tags=["v1"])


def _form_response(form: FormModel) -> FormResponse:
    return FormResponse(
        values=UserData(**form.values),
        errors=UserDataErrors(**form.visible_errors()),
        errors_visible=form.errors_visible,
        complete=form.is_complete(),
    )


@router.get(
    "/form",
    response_model=FormResponse,
    summary="Get the current form",
    description="Return field values, displayable errors and whether the form can be submitted.",
)
async def get_form_state(form: FormModel = Depends(get_form)) -> FormResponse:
    """Return the current form."""
    return _form_response(form)


@router.put(
    "/form/fields/{field_name}",
    response_model=FormResponse,
    responses={422: {"description": "Unknown field name or malformed body"}},
    summary="Update a form field",
    description="Set one field's raw value. The field is re-validated immediately; "
    "its error is only displayed once a submit has been rejected.",
)
async def update_field(
    field_name: FieldName,
    request_data: FieldUpdateRequest,
    form: FormModel = Depends(get_form),
) -> FormResponse:
    """
    Update a single field.

    - **field_name**: one of firstname, lastname, birthDate, city, email, zipCode
    - **value**: raw value
    """
    form.set_field(field_name, request_data.value)
    return _form_response(form)


@router.post(
    "/form/submit",
    response_model=SubmitResponse,
    responses={
        409: {"model": ErrorResponse, "description": "Form is incomplete"},
        422: {"model": ErrorResponse, "description": "Fields are not valid"},
    },
    summary="Submit the form",
    description="Persist the user and reset the form when every field is valid. "
    "Otherwise field errors become visible on the form.",
)
async def submit_form(form: FormModel = Depends(get_form)) -> SubmitResponse:
    """
    Submit the form.

    Mirrors a submit button that stays disabled until every field has a value.
    """
    if not form.is_complete():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="form is incomplete",
        )

    outcome = form.submit()

    if outcome == SubmitOutcome.REJECTED:
        raise HTTPException(
            status_code=422,
            detail=REJECTION_MESSAGE,
        )

    return SubmitResponse(
        outcome=outcome.value,
        message=SUCCESS_MESSAGE,
        form=_form_response(form),
    )


@router.get(
    "/user",
    response_model=UserData,
    responses={404: {"model": ErrorResponse, "description": "No user registered"}},
    summary="Get the registered user",
    description="Return the last successfully submitted record.",
)
async def get_user(store: UserStore = Depends(get_user_store)) -> UserData:
    """Return the stored user record."""
    record = store.load_user()
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="no user registered",
        )
    return UserData(**record)
