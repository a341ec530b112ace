"""
Pydantic models for user data.

``UserCreate`` is the full payload accepted by ``POST`` and ``PUT``;
``UserPartialUpdate`` is the ``PATCH`` payload where every field is
optional; ``UserRead`` is what the API returns.  Field constraints are
checked here, before a request reaches the service layer.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, StrictInt, field_validator
from pydantic_core import PydanticCustomError


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise PydanticCustomError("string_blank", "must not be blank")
    return value


class UserBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    email: EmailStr = Field(..., examples=["alice@example.com"])
    # Strict: JSON booleans, floats and numeric strings are rejected.
    age: StrictInt = Field(..., examples=[25])


class UserCreate(UserBase):
    """Schema for creating or fully replacing a user.

    All three fields are required.  ``name`` must contain at least one
    non-whitespace character and ``age`` must be positive.
    """

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _not_blank(v)

    @field_validator("age")
    @classmethod
    def validate_age(cls, v):
        if v < 1:
            raise PydanticCustomError("age_not_positive", "must be greater than 0")
        return v


class UserPartialUpdate(BaseModel):
    """Schema for partially updating a user.

    All fields are optional; only provided values will be applied.  An
    explicit ``null`` counts as not provided.
    """

    name: Optional[str] = Field(None, examples=["Alice Smith"])
    email: Optional[EmailStr] = Field(None, examples=["alice.smith@example.com"])
    age: Optional[StrictInt] = Field(None, examples=[26])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _not_blank(v)

    @field_validator("age")
    @classmethod
    def validate_age(cls, v):
        if v is not None and v < 1:
            raise PydanticCustomError("age_not_positive", "must be greater than 0")
        return v

    def changes(self) -> dict:
        """Return the supplied fields as a dict, dropping nulls."""
        return self.model_dump(exclude_none=True)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str
    age: int

    model_config = {
        "from_attributes": True,
    }
