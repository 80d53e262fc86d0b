# app/models/invoices.py

from decimal import Decimal
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.forms import ValidationResult, validate_form

InvoiceStatus = Literal["pending", "paid"]

# largest amount whose cents still fit a signed 32-bit INTEGER column
MAX_AMOUNT = Decimal("21474836.47")

INVOICE_FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceForm(BaseModel):
    """Fields submitted by the create / edit invoice forms."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT, decimal_places=2, allow_inf_nan=False)
    status: InvoiceStatus


def validate_invoice_form(raw: Mapping[str, Optional[str]]) -> ValidationResult:
    return validate_form(InvoiceForm, raw, INVOICE_FIELD_MESSAGES)


class InvoiceRecord(BaseModel):
    """Values written to the invoices table (amount in cents)."""

    customer_id: str
    amount: int
    status: InvoiceStatus
    date: str


class InvoiceOut(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    amount: int
    status: str
    date: str

    model_config = ConfigDict(from_attributes=True)


class InvoiceListResponse(BaseModel):
    items: List[InvoiceOut]
    total: int
