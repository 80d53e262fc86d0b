# app/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    ForeignKey, CheckConstraint, Text
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("image_url", Text, nullable=False),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("customer_id", String(36), ForeignKey("customers.id"), nullable=False),
    # minor units (cents)
    Column("amount", Integer, nullable=False),
    Column("status", String(16), nullable=False),
    # ISO date, YYYY-MM-DD
    Column("date", String(10), nullable=False),
    CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
    CheckConstraint(
        "status IN ('pending', 'paid')", name="ck_invoices_status_known"
    ),
)

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False, unique=True),
    # bcrypt hash
    Column("password", Text, nullable=False),
)
