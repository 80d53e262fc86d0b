# app/core/exceptions.py
"""
Exceptions raised below the action layer.

Validation failures are not exceptions: the form schemas return an
``Invalid`` result instead (see app/models/forms.py).
"""

from typing import Optional


class DashboardError(Exception):
    """Base class for errors raised by the dashboard backend."""


class PersistenceError(DashboardError):
    """A storage statement failed. The SQLAlchemy error is chained."""


class AuthError(DashboardError):
    """Failure reported by an identity provider.

    ``type`` names the failure kind; only ``CredentialsSignin`` is mapped
    to a specific user-facing message.
    """

    type = "AuthError"

    def __init__(self, message: str = "", type: Optional[str] = None):
        super().__init__(message)
        if type is not None:
            self.type = type


class CredentialsSignin(AuthError):
    type = "CredentialsSignin"
