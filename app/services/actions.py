# app/services/actions.py
"""
Create / update / delete actions for invoices and customers.

Every action follows the same path: validate the submitted fields, derive
the stored values, write through the store, then mark the entity's list view
stale and redirect to it. Validation and storage failures stop the action and
come back as an ActionState; nothing is invalidated in that case.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel

from app.core.cache import ViewCache
from app.core.exceptions import PersistenceError
from app.db.store import InvoiceStore, TableStore
from app.models.customers import CustomerForm, CustomerRecord, validate_customer_form
from app.models.forms import Invalid, ValidationResult
from app.models.invoices import InvoiceForm, InvoiceRecord, validate_invoice_form
from app.services.results import ActionResult, ActionState, Redirect

logger = logging.getLogger(__name__)

RawForm = Mapping[str, Optional[str]]


def new_id() -> str:
    return str(uuid.uuid4())


def utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def to_minor_units(amount: Decimal) -> int:
    """45.00 -> 4500. Sub-cent input is rounded half up."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class EntityActions(ABC):
    entity: str = ""

    def __init__(
        self,
        store: TableStore,
        cache: ViewCache,
        list_path: str,
        id_factory: Callable[[], str] = new_id,
    ):
        self.store = store
        self.cache = cache
        self.list_path = list_path
        self.id_factory = id_factory

    @abstractmethod
    def validate(self, form: RawForm) -> ValidationResult:
        ...

    @abstractmethod
    def to_values(self, record: BaseModel, creating: bool) -> Dict[str, Any]:
        ...

    def create(self, prev_state: Optional[ActionState], form: RawForm) -> ActionResult:
        result = self.validate(form)
        if isinstance(result, Invalid):
            return ActionState(
                error=result.errors,
                message=f"Missing Fields. Failed to Create {self.entity}.",
            )

        record_id = self.id_factory()
        values = self.to_values(result.record, creating=True)

        try:
            self.store.insert(record_id, values)
        except PersistenceError:
            logger.exception("Failed to create %s", self.entity.lower())
            return ActionState(message=f"Database Error : Failed To Create {self.entity}.")

        logger.info("Created %s %s", self.entity.lower(), record_id)
        self.cache.revalidate_path(self.list_path)
        return Redirect(self.list_path)

    def update(
        self,
        record_id: str,
        prev_state: Optional[ActionState],
        form: RawForm,
    ) -> ActionResult:
        result = self.validate(form)
        if isinstance(result, Invalid):
            return ActionState(
                error=result.errors,
                message=f"Missing Fields. Failed to Update {self.entity}.",
            )

        values = self.to_values(result.record, creating=False)

        try:
            self.store.update(record_id, values)
        except PersistenceError:
            logger.exception("Failed to update %s %s", self.entity.lower(), record_id)
            return ActionState(message=f"Database Error: Failed to Update {self.entity}.")

        logger.info("Updated %s %s", self.entity.lower(), record_id)
        self.cache.revalidate_path(self.list_path)
        return Redirect(self.list_path)

    def delete(self, record_id: str) -> ActionState:
        try:
            deleted = self.store.delete(record_id)
        except PersistenceError:
            logger.exception("Failed to delete %s %s", self.entity.lower(), record_id)
            return ActionState(message=f"Database Error: Failed to Delete {self.entity}.")

        # zero rows matched is reported the same as a real delete
        logger.info("Deleted %s %s (%s row(s))", self.entity.lower(), record_id, deleted)
        self.cache.revalidate_path(self.list_path)
        return ActionState(message=f"Deleted {self.entity}.")


class InvoiceActions(EntityActions):
    entity = "Invoice"

    def __init__(
        self,
        store: InvoiceStore,
        cache: ViewCache,
        list_path: str,
        id_factory: Callable[[], str] = new_id,
        today: Callable[[], str] = utc_today,
    ):
        super().__init__(store, cache, list_path, id_factory)
        self.today = today

    def validate(self, form: RawForm) -> ValidationResult:
        return validate_invoice_form(form)

    def to_values(self, record: InvoiceForm, creating: bool) -> Dict[str, Any]:
        values = {
            "customer_id": record.customer_id,
            "amount": to_minor_units(record.amount),
            "status": record.status,
        }
        if not creating:
            # issue date is fixed at creation
            return values
        return InvoiceRecord(date=self.today(), **values).model_dump()


class CustomerActions(EntityActions):
    entity = "Customer"

    def validate(self, form: RawForm) -> ValidationResult:
        return validate_customer_form(form)

    def to_values(self, record: CustomerForm, creating: bool) -> Dict[str, Any]:
        return CustomerRecord(
            name=record.name,
            email=str(record.email),
            image_url=record.image_url,
        ).model_dump()
