# app/services/auth.py
"""
Sign-in action plus the credentials-backed identity provider.

``authenticate`` only knows the provider through ``sign_in``. A failed sign
in with type ``CredentialsSignin`` becomes "Invalid credentials."; any other
AuthError becomes a generic message; anything that is not an AuthError is
left to propagate.
"""

import logging
from typing import Mapping, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import AuthError, CredentialsSignin
from app.core.security import verify_password
from app.db.schema import users
from app.models.users import Credentials, UserOut
from app.services.results import ActionResult, ActionState, Redirect

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    def sign_in(self, credentials: Mapping[str, Optional[str]]) -> UserOut:
        ...


class CredentialsProvider:
    """Email + password sign in against the users table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def sign_in(self, credentials: Mapping[str, Optional[str]]) -> UserOut:
        try:
            parsed = Credentials.model_validate(dict(credentials))
        except ValidationError as exc:
            raise CredentialsSignin("Malformed credentials") from exc

        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    select(users).where(users.c.email == str(parsed.email))
                ).mappings().first()
        except SQLAlchemyError as exc:
            raise AuthError("Failed to fetch user", type="CallbackRouteError") from exc

        if row is None or not verify_password(parsed.password, row["password"]):
            raise CredentialsSignin("Invalid email or password")

        return UserOut(id=row["id"], name=row["name"], email=row["email"])


def authenticate(
    provider: IdentityProvider,
    prev_state: Optional[ActionState],
    form: Mapping[str, Optional[str]],
    redirect_to: str = "/dashboard",
) -> ActionResult:
    try:
        user = provider.sign_in(form)
    except AuthError as error:
        if error.type == "CredentialsSignin":
            logger.info("Rejected sign in: %s", error)
            return ActionState(message="Invalid credentials.")
        logger.warning("Sign in failed (%s): %s", error.type, error)
        return ActionState(message="Something went wrong.")

    logger.info("User %s signed in", user.id)
    return Redirect(redirect_to)
