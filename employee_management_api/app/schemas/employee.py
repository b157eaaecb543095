"""
Pydantic schemas for employee records.

The profile fields mirror the employee form of the web client: name,
gender, department, designation, e‑mail, contact number and salary.
A password is accepted on create and update but is write‑only; it is
hashed before it reaches a store and ``EmployeeRead`` never exposes
it.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# Ids are stored as SQLite INTEGER, a signed 64-bit value.
MAX_EMPLOYEE_ID = 2**63 - 1

# Fields persisted by a store, i.e. everything except ``id`` and ``password``.
PROFILE_FIELDS = ("name", "gender", "department", "designation", "email", "contact", "salary")


class EmployeeBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100, examples=["Alice"])
    gender: Literal["MALE", "FEMALE", "OTHER"] = Field(..., examples=["FEMALE"])
    department: str = Field(..., min_length=1, max_length=100, examples=["Engineering"])
    designation: str = Field(..., min_length=1, max_length=100, examples=["Developer"])
    email: EmailStr = Field(..., examples=["alice@example.com"])
    contact: str = Field(
        ...,
        pattern=r"^\+?\d{7,15}$",
        description="Phone number, 7 to 15 digits with an optional leading +",
        examples=["+15551234567"],
    )
    salary: float = Field(..., ge=0, allow_inf_nan=False, examples=[55000])

    @field_validator("gender", mode="before")
    @classmethod
    def normalise_gender(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("contact", mode="before")
    @classmethod
    def normalise_contact(cls, v):
        # Accept "555-123 4567" style input; only digits and a leading + are stored.
        if isinstance(v, str):
            return v.strip().replace(" ", "").replace("-", "")
        return v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()

    def profile(self) -> dict:
        """Return the persisted profile fields as a plain dict."""
        return self.model_dump(include=set(PROFILE_FIELDS))


class EmployeeCreate(EmployeeBase):
    """Schema for adding an employee.

    ``id`` may be left at ``0`` (or omitted) to let the store assign
    one.  A positive id is used as is if no employee already has it.
    """

    id: Optional[int] = Field(
        0,
        ge=0,
        le=MAX_EMPLOYEE_ID,
        description="0 or omitted to let the store assign an id",
    )
    password: str = Field(..., min_length=6, examples=["s3cret!"])


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing an employee's fields.

    Every profile field is overwritten.  ``password`` is optional:
    when omitted the stored password is kept.
    """

    id: Optional[int] = Field(None, ge=1, le=MAX_EMPLOYEE_ID)
    password: Optional[str] = Field(None, min_length=6)


class EmployeeRead(EmployeeBase):
    """Schema for reading an employee; never includes the password."""

    model_config = ConfigDict(str_strip_whitespace=True, from_attributes=True)

    id: int
