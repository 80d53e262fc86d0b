# app/db/store.py
"""
Parameterized INSERT / UPDATE / DELETE against the invoices and customers
tables.

Each store wraps an injected Engine; every statement runs in its own
transaction (``engine.begin()``). Any SQLAlchemy failure is re-raised as
PersistenceError so the action layer never sees driver exceptions.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import PersistenceError
from app.db.schema import customers, invoices

logger = logging.getLogger(__name__)


class TableStore:
    table: Table
    # columns an update may touch; id is never among them
    mutable_columns: tuple = ()

    def __init__(self, engine: Engine):
        self.engine = engine

    def insert(self, record_id: str, values: Dict[str, Any]) -> None:
        stmt = insert(self.table).values(id=record_id, **values)
        self._execute(stmt, "insert")

    def update(self, record_id: str, values: Dict[str, Any]) -> int:
        set_ = {col: values[col] for col in self.mutable_columns}
        stmt = (
            update(self.table)
            .where(self.table.c.id == record_id)
            .values(**set_)
        )
        return self._execute(stmt, "update")

    def delete(self, record_id: str) -> int:
        """Delete by id. Returns the number of rows removed (0 is not an error)."""
        stmt = delete(self.table).where(self.table.c.id == record_id)
        return self._execute(stmt, "delete")

    def _execute(self, stmt, op: str) -> int:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"{op} on {self.table.name} failed"
            ) from exc

        logger.debug("%s on %s: %s row(s)", op, self.table.name, result.rowcount)
        return result.rowcount


class InvoiceStore(TableStore):
    table = invoices
    mutable_columns = ("customer_id", "amount", "status")

    def list_all(self) -> List[Dict[str, Any]]:
        stmt = (
            select(
                invoices.c.id,
                invoices.c.customer_id,
                customers.c.name.label("customer_name"),
                invoices.c.amount,
                invoices.c.status,
                invoices.c.date,
            )
            .select_from(invoices.join(customers))
            .order_by(invoices.c.date.desc(), invoices.c.id)
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("select on invoices failed") from exc
        return [dict(row) for row in rows]


class CustomerStore(TableStore):
    table = customers
    mutable_columns = ("name", "email", "image_url")

    def list_all(self) -> List[Dict[str, Any]]:
        stmt = (
            select(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
            )
            .order_by(customers.c.name)
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("select on customers failed") from exc
        return [dict(row) for row in rows]
