# app/api/customers.py

from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from app.api.dependencies import get_customer_actions, get_customer_store, get_view_cache
from app.api.responses import to_response
from app.core.cache import ViewCache
from app.core.config import get_settings
from app.db.store import CustomerStore
from app.models.customers import CustomerListResponse, CustomerOut
from app.services.actions import CustomerActions

CUSTOMERS_PATH = get_settings().customers_path

router = APIRouter(prefix=CUSTOMERS_PATH, tags=["customers"])


@router.get("", response_model=CustomerListResponse)
def list_customers(
    store: CustomerStore = Depends(get_customer_store),
    cache: ViewCache = Depends(get_view_cache),
) -> CustomerListResponse:
    """
    Return all customers ordered by name.
    """

    def load() -> CustomerListResponse:
        items = [CustomerOut(**row) for row in store.list_all()]
        return CustomerListResponse(items=items, total=len(items))

    return cache.get_or_load(CUSTOMERS_PATH, load)


@router.post("/create", response_model=None)
def create_customer(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    actions: CustomerActions = Depends(get_customer_actions),
) -> Response:
    form = {"name": name, "email": email, "imageUrl": image_url}
    return to_response(actions.create(None, form))


@router.post("/{customer_id}/edit", response_model=None)
def update_customer(
    customer_id: str,
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    actions: CustomerActions = Depends(get_customer_actions),
) -> Response:
    form = {"name": name, "email": email, "imageUrl": image_url}
    return to_response(actions.update(customer_id, None, form))


@router.post("/{customer_id}/delete", response_model=None)
def delete_customer(
    customer_id: str,
    actions: CustomerActions = Depends(get_customer_actions),
) -> Response:
    return to_response(actions.delete(customer_id))
