# app/models/customers.py

from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.forms import ValidationResult, validate_form

CUSTOMER_FIELD_MESSAGES = {
    "name": "Please enter a name.",
    "email": "Please enter a valid email address.",
    "imageUrl": "Please enter a profile image URL.",
}


class CustomerForm(BaseModel):
    """Fields submitted by the create / edit customer forms."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: EmailStr
    image_url: str = Field(alias="imageUrl", min_length=1)


def validate_customer_form(raw: Mapping[str, Optional[str]]) -> ValidationResult:
    return validate_form(CustomerForm, raw, CUSTOMER_FIELD_MESSAGES)


class CustomerRecord(BaseModel):
    name: str
    email: str
    image_url: str


class CustomerOut(BaseModel):
    id: str
    name: str
    email: str
    image_url: str

    model_config = ConfigDict(from_attributes=True)


class CustomerListResponse(BaseModel):
    items: List[CustomerOut]
    total: int
