from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

from contact_form.errors import ValidationFailed

NAME_MIN_LEN = 2
NAME_MAX_LEN = 100
MESSAGE_MIN_LEN = 10
MESSAGE_MAX_LEN = 1000
COMPANY_MAX_LEN = 100
PHONE_MAX_LEN = 20


class ContactSubmission(BaseModel):
    """
        A single contact form submission, never persisted.
        unknown fields sent by the browser are dropped, strings are trimmed before length checks
    """
    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr
    message: str = Field(..., min_length=MESSAGE_MIN_LEN, max_length=MESSAGE_MAX_LEN)
    company: str | None = Field(default=None, max_length=COMPANY_MAX_LEN)
    phone: str | None = Field(default=None, max_length=PHONE_MAX_LEN)
    honeypot: str | None = Field(default=None)

    model_config = ConfigDict(title="Contact Submission", extra="ignore", str_strip_whitespace=True)

    @field_validator("email", mode="before")
    @classmethod
    def reject_display_name(cls, value: Any) -> Any:
        # "Name <addr>" would otherwise be reduced to the bare address
        if isinstance(value, str) and ('<' in value or '>' in value):
            raise ValueError("value is not a valid email address: display names are not accepted")
        return value

    @field_validator("email")
    @classmethod
    def lower_case_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("honeypot", mode="before")
    @classmethod
    def honeypot_as_text(cls, value: Any) -> str | None:
        # the trap field must never show up in validation details
        return None if value is None else str(value)


class ErrorDetail(BaseModel):
    field: str
    message: str


class ContactResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: list[ErrorDetail] | None = None


def parse_submission(payload: Any) -> ContactSubmission:
    """
    **parse_submission**
        validates a decoded JSON body, every violated rule is reported

    :param payload: decoded request body
    :return: the validated submission
    :raises ValidationFailed: with one {field, message} entry per error
    """
    try:
        return ContactSubmission.model_validate(payload)
    except ValidationError as e:
        details = [dict(field=".".join(str(part) for part in error['loc']) or "body", message=error['msg'])
                   for error in e.errors()]
        raise ValidationFailed(details=details) from e
