"""Contact request models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ContactCreate(BaseModel):
    """Request model for creating a contact."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, alias="firstName", description="First name")
    last_name: str = Field(..., min_length=1, alias="lastName", description="Last name")
    email: EmailStr = Field(..., description="Contact email address")
    phone: str = Field(..., min_length=10, description="Phone number, at least 10 digits")
    address: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")
    city: Optional[str] = None
    country: Optional[str] = None
    message: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return str(v).lower()


class ContactUpdate(BaseModel):
    """Request model for updating a contact; every field is optional."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: Optional[str] = Field(None, min_length=1, alias="firstName")
    last_name: Optional[str] = Field(None, min_length=1, alias="lastName")
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=10)
    address: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")
    city: Optional[str] = None
    country: Optional[str] = None
    message: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return str(v).lower() if v is not None else v
