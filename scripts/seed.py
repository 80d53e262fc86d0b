# scripts/seed.py
"""
Fill an initialized database with a few customers, invoices and one user
to sign in with.

    python -m scripts.init_db
    python -m scripts.seed
"""

import logging
import os

from sqlalchemy import delete, insert

from app.core.security import hash_password
from app.db.engine import get_engine
from app.db.schema import customers, invoices, users

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

SEED_PASSWORD = os.environ.get("DASHBOARD_SEED_PASSWORD", "123456")

USERS = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
    },
]

CUSTOMERS = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
]

INVOICES = [
    {
        "id": "0b6e7a0e-5b4c-4a4e-9f0e-0d6f4b8b0a01",
        "customer_id": CUSTOMERS[0]["id"],
        "amount": 15795,
        "status": "pending",
        "date": "2022-12-06",
    },
    {
        "id": "0b6e7a0e-5b4c-4a4e-9f0e-0d6f4b8b0a02",
        "customer_id": CUSTOMERS[1]["id"],
        "amount": 20348,
        "status": "pending",
        "date": "2022-11-14",
    },
    {
        "id": "0b6e7a0e-5b4c-4a4e-9f0e-0d6f4b8b0a03",
        "customer_id": CUSTOMERS[2]["id"],
        "amount": 3040,
        "status": "paid",
        "date": "2022-10-29",
    },
    {
        "id": "0b6e7a0e-5b4c-4a4e-9f0e-0d6f4b8b0a04",
        "customer_id": CUSTOMERS[0]["id"],
        "amount": 44800,
        "status": "paid",
        "date": "2023-09-10",
    },
]


def main():
    engine = get_engine()
    with engine.begin() as conn:
        # Rebuild from scratch (deterministic)
        conn.execute(delete(invoices))
        conn.execute(delete(customers))
        conn.execute(delete(users))

        conn.execute(
            insert(users),
            [{**u, "password": hash_password(SEED_PASSWORD)} for u in USERS],
        )
        conn.execute(insert(customers), CUSTOMERS)
        conn.execute(insert(invoices), INVOICES)

    logger.info("Seeded users:      %s", len(USERS))
    logger.info("Seeded customers:  %s", len(CUSTOMERS))
    logger.info("Seeded invoices:   %s", len(INVOICES))


if __name__ == "__main__":
    main()
