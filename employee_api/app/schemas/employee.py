"""
Pydantic schemas for employee records.

Attributes use snake_case in Python and camelCase on the wire
(``firstName``, ``lastName``); both spellings are accepted on input.
``Employee`` is immutable: an update builds a new record with
``model_copy`` rather than mutating the stored one.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class EmployeeBase(BaseModel):
    first_name: str = Field(..., alias="firstName", examples=["Rodrigo"])
    last_name: str = Field(..., alias="lastName", examples=["Rodrigo1"])
    email: str = Field(..., examples=["rodrigo1@gmail.com"])

    model_config = {
        "populate_by_name": True,
    }


class EmployeeCreate(EmployeeBase):
    """Payload for creating an employee.

    An ``id`` sent by the client is ignored; the store assigns one.
    """


class EmployeeUpdate(BaseModel):
    """Payload for changing an existing employee.

    Fields left out keep their stored value; read the sent ones with
    ``model_dump(exclude_unset=True)``.  An explicit ``null`` is
    rejected because every column is NOT NULL.
    """

    first_name: Optional[str] = Field(None, alias="firstName", examples=["Rodrigo"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Rodrigo2"])
    email: Optional[str] = Field(None, examples=["rodrigo2@gmail.com"])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class Employee(EmployeeBase):
    """A stored employee.

    ``id`` is ``0`` until the record has been saved.
    """

    id: int = Field(0, examples=[1])

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "from_attributes": True,
    }
