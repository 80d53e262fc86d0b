# app/api/invoices.py

from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from app.api.dependencies import get_invoice_actions, get_invoice_store, get_view_cache
from app.api.responses import to_response
from app.core.cache import ViewCache
from app.core.config import get_settings
from app.db.store import InvoiceStore
from app.models.invoices import InvoiceListResponse, InvoiceOut
from app.services.actions import InvoiceActions

INVOICES_PATH = get_settings().invoices_path

router = APIRouter(prefix=INVOICES_PATH, tags=["invoices"])


@router.get("", response_model=InvoiceListResponse)
def list_invoices(
    store: InvoiceStore = Depends(get_invoice_store),
    cache: ViewCache = Depends(get_view_cache),
) -> InvoiceListResponse:
    """
    All invoices with their customer's name, newest first. Served from the
    view cache until an invoice action marks it stale.
    """

    def load() -> InvoiceListResponse:
        items = [InvoiceOut(**row) for row in store.list_all()]
        return InvoiceListResponse(items=items, total=len(items))

    return cache.get_or_load(INVOICES_PATH, load)


@router.post("/create", response_model=None)
def create_invoice(
    customer_id: Optional[str] = Form(None, alias="customerId"),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    actions: InvoiceActions = Depends(get_invoice_actions),
) -> Response:
    form = {"customerId": customer_id, "amount": amount, "status": status}
    return to_response(actions.create(None, form))


@router.post("/{invoice_id}/edit", response_model=None)
def update_invoice(
    invoice_id: str,
    customer_id: Optional[str] = Form(None, alias="customerId"),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    actions: InvoiceActions = Depends(get_invoice_actions),
) -> Response:
    form = {"customerId": customer_id, "amount": amount, "status": status}
    return to_response(actions.update(invoice_id, None, form))


@router.post("/{invoice_id}/delete", response_model=None)
def delete_invoice(
    invoice_id: str,
    actions: InvoiceActions = Depends(get_invoice_actions),
) -> Response:
    return to_response(actions.delete(invoice_id))
