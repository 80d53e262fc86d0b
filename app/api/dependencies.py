# app/api/dependencies.py
"""
Dependency providers for the routers.

Everything an action needs (engine, view cache, stores) is built here and
injected with ``Depends`` so tests can swap any piece through
``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.core.cache import ViewCache
from app.core.config import Settings, get_settings
from app.db.engine import get_engine
from app.db.store import CustomerStore, InvoiceStore
from app.services.actions import CustomerActions, InvoiceActions
from app.services.auth import CredentialsProvider, IdentityProvider


def get_db_engine() -> Engine:
    return get_engine()


@lru_cache
def get_view_cache() -> ViewCache:
    return ViewCache()


def get_invoice_store(engine: Engine = Depends(get_db_engine)) -> InvoiceStore:
    return InvoiceStore(engine)


def get_customer_store(engine: Engine = Depends(get_db_engine)) -> CustomerStore:
    return CustomerStore(engine)


def get_invoice_actions(
    store: InvoiceStore = Depends(get_invoice_store),
    cache: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
) -> InvoiceActions:
    return InvoiceActions(store, cache, settings.invoices_path)


def get_customer_actions(
    store: CustomerStore = Depends(get_customer_store),
    cache: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
) -> CustomerActions:
    return CustomerActions(store, cache, settings.customers_path)


def get_identity_provider(
    engine: Engine = Depends(get_db_engine),
) -> IdentityProvider:
    return CredentialsProvider(engine)
